"""
Result wrappers returned by simpletimer.time().

TimeResult carries the callable's return value and the elapsed duration.
VoidTimeResult carries only the duration: it has no function_result
attribute at all, so reading one is an error rather than a None.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .units import SECONDS, Duration, Number, Unit
from .view import TimeView

T = TypeVar("T")


class _DurationAccessors:
    """Unit conversion helpers shared by both result shapes."""

    duration: Duration

    def get_duration(self, unit: Unit = SECONDS) -> Duration:
        """
        Cast the elapsed duration into unit.

        Integer units truncate: 1.3 s read as INT_SECONDS is 1.
        """
        return self.duration.to(unit)

    def get_duration_count(self, unit: Unit = SECONDS) -> Number:
        """Return the numeric count after casting into unit."""
        return self.get_duration(unit).count()

    def get_duration_view(self, unit: Unit = SECONDS) -> TimeView:
        """Return a TimeView over the duration cast into unit."""
        return TimeView(self.get_duration(unit))


@dataclass(frozen=True)
class TimeResult(_DurationAccessors, Generic[T]):
    """Return value of a timed callable plus the time it took."""

    function_result: T
    duration: Duration

    def to_dict(self) -> dict:
        return {"function_result": self.function_result, "duration_s": self.duration.seconds}


@dataclass(frozen=True)
class VoidTimeResult(_DurationAccessors):
    """Elapsed time of a callable that returns nothing."""

    duration: Duration

    def to_dict(self) -> dict:
        return {"duration_s": self.duration.seconds}
