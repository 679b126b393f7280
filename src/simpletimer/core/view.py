"""
TimeView: a read-only window over a duration already expressed in one unit.

The view never rescales. It only changes the numeric representation the
caller receives.
"""

import numbers
from dataclasses import dataclass

from ..errors import InvalidRepresentationError
from .units import Duration, Number


def _is_numeric_rep(rep) -> bool:
    """Return True for numeric classes usable as a conversion target."""
    return (
        isinstance(rep, type)
        and issubclass(rep, numbers.Real)
        and rep is not bool
    )


@dataclass(frozen=True)
class TimeView:
    """
    Present a Duration and convert its count on request.

    Example:
        view = result.get_duration_view(MILLISECONDS)
        view.as_(float)   # 750.12...
        view.as_(int)     # 750
    """

    duration: Duration

    def count(self) -> Number:
        """Return the raw stored count without narrowing."""
        return self.duration.count()

    def as_(self, rep):
        """
        Return the count converted to rep.

        Args:
            rep: A numeric type (int, float, numpy scalar types, ...) or
                Duration itself, in which case the wrapped duration is
                returned unchanged.

        Integer reps truncate toward zero. Magnitude is not checked: asking
        for picoseconds of a months-long interval is the caller's problem.

        Raises:
            InvalidRepresentationError: if rep is neither numeric nor Duration
        """
        if rep is Duration:
            return self.duration
        if not _is_numeric_rep(rep):
            raise InvalidRepresentationError(
                f"cannot represent a duration as {rep!r}; "
                "use a numeric type or Duration"
            )
        return rep(self.duration.count())

    def unwrap(self) -> Duration:
        """Return the wrapped Duration."""
        return self.duration

    def __float__(self) -> float:
        return float(self.duration)
