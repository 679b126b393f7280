"""
Duration unit ladder and the Duration value type.

Each Unit carries its length as an exact seconds-per-unit ratio (num/den),
so converting a count between units is a single multiply and divide by
integers and never truncates on its own. Truncation only happens when the
target unit's storage type (rep) is int.
"""

from dataclasses import dataclass
from typing import Union

from ..errors import UnknownUnitError

Number = Union[int, float]


@dataclass(frozen=True)
class Unit:
    """
    A named duration unit: num/den seconds per unit, stored as rep.

    Units are tags. They only exist as conversion targets and carry no
    state beyond their ratio and storage policy.
    """

    name: str
    symbol: str
    num: int
    den: int = 1
    rep: type = float

    def from_seconds(self, seconds: Number) -> Number:
        """Return the count of this unit in the given number of seconds."""
        return self.rep(seconds * self.den / self.num)

    def to_seconds(self, count: Number) -> float:
        """Return the number of seconds covered by count of this unit."""
        return count * self.num / self.den

    @property
    def is_integral(self) -> bool:
        return self.rep is int


PICOSECONDS = Unit("picoseconds", "ps", 1, 1_000_000_000_000)
NANOSECONDS = Unit("nanoseconds", "ns", 1, 1_000_000_000)
MICROSECONDS = Unit("microseconds", "us", 1, 1_000_000)
MILLISECONDS = Unit("milliseconds", "ms", 1, 1_000)
SECONDS = Unit("seconds", "s", 1)
MINUTES = Unit("minutes", "min", 60)
HOURS = Unit("hours", "h", 3_600)
DAYS = Unit("days", "d", 86_400)
WEEKS = Unit("weeks", "wk", 604_800)
# Mean Gregorian year: 365.2425 days.
YEARS = Unit("years", "yr", 31_556_952)
DECADES = Unit("decades", "dec", 315_569_520)
CENTURIES = Unit("centuries", "cent", 3_155_695_200)
MILLENNIA = Unit("millennia", "mill", 31_556_952_000)

LADDER = (
    PICOSECONDS,
    NANOSECONDS,
    MICROSECONDS,
    MILLISECONDS,
    SECONDS,
    MINUTES,
    HOURS,
    DAYS,
    WEEKS,
    YEARS,
    DECADES,
    CENTURIES,
    MILLENNIA,
)

INT_NANOSECONDS = Unit("int_nanoseconds", "ns", 1, 1_000_000_000, rep=int)
INT_MICROSECONDS = Unit("int_microseconds", "us", 1, 1_000_000, rep=int)
INT_MILLISECONDS = Unit("int_milliseconds", "ms", 1, 1_000, rep=int)
INT_SECONDS = Unit("int_seconds", "s", 1, rep=int)
INT_MINUTES = Unit("int_minutes", "min", 60, rep=int)
INT_HOURS = Unit("int_hours", "h", 3_600, rep=int)

INTEGER_UNITS = (
    INT_NANOSECONDS,
    INT_MICROSECONDS,
    INT_MILLISECONDS,
    INT_SECONDS,
    INT_MINUTES,
    INT_HOURS,
)


def unit_by_name(name: str) -> Unit:
    """
    Look up a unit by name or symbol.

    Symbols resolve to the fractional unit; integer units are only
    reachable by their full name (e.g. "int_seconds").

    Raises:
        UnknownUnitError: if nothing matches
    """
    key = name.strip().lower()
    for unit in LADDER:
        if key in (unit.name, unit.symbol):
            return unit
    for unit in INTEGER_UNITS:
        if key == unit.name:
            return unit
    raise UnknownUnitError(name)


@dataclass(frozen=True)
class Duration:
    """A count of one unit. Immutable once built."""

    value: Number
    unit: Unit = SECONDS

    def count(self) -> Number:
        """Return the raw stored count without narrowing."""
        return self.value

    def to(self, unit: Unit) -> "Duration":
        """
        Cast this duration into another unit.

        The count is rescaled through seconds and then stored with the
        target unit's rep, so integer units truncate toward zero.
        """
        if unit == self.unit:
            return self
        seconds = self.unit.to_seconds(self.value)
        return Duration(unit.from_seconds(seconds), unit)

    @property
    def seconds(self) -> float:
        """Return this duration as fractional seconds."""
        return self.unit.to_seconds(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.symbol}"
