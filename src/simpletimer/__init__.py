"""
simpletimer - time one call, keep its result, read the duration in any unit.

  - time(fn)             : run a zero-argument callable and measure it
  - TimeResult           : function_result + duration (value-returning fn)
  - VoidTimeResult       : duration only (fn returning None)
  - TimeView             : as_(rep) / count() over a converted duration
  - Duration, Unit       : the unit ladder, picoseconds through millennia
  - print_result()       : print a one-line colored report to stdout

Instants come from time.perf_counter, or from MPI.Wtime when the
SIMPLETIMER_USE_EXTERNAL_WALL_CLOCK environment variable is set.
"""

from .core.units import (
    Duration,
    Unit,
    LADDER,
    INTEGER_UNITS,
    unit_by_name,
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
    INT_NANOSECONDS,
    INT_MICROSECONDS,
    INT_MILLISECONDS,
    INT_SECONDS,
    INT_MINUTES,
    INT_HOURS,
)
from .core.view import TimeView
from .core.result import TimeResult, VoidTimeResult
from .core.clock import SteadyClock, ExternalWallClock, mpi_wall_clock, active_clock
from .core.timer import time

from .config import TimerConfig, load_config
from .errors import (
    SimpleTimerError,
    InvalidRepresentationError,
    UnknownUnitError,
    ConfigError,
    ClockUnavailableError,
    TimerStateError,
)

from .output.formatter import print_result, print_unit_table, format_duration, separator

__all__ = [
    "time",
    "TimeResult",
    "VoidTimeResult",
    "TimeView",
    "Duration",
    "Unit",
    "LADDER",
    "INTEGER_UNITS",
    "unit_by_name",
    "PICOSECONDS",
    "NANOSECONDS",
    "MICROSECONDS",
    "MILLISECONDS",
    "SECONDS",
    "MINUTES",
    "HOURS",
    "DAYS",
    "WEEKS",
    "YEARS",
    "DECADES",
    "CENTURIES",
    "MILLENNIA",
    "INT_NANOSECONDS",
    "INT_MICROSECONDS",
    "INT_MILLISECONDS",
    "INT_SECONDS",
    "INT_MINUTES",
    "INT_HOURS",
    "SteadyClock",
    "ExternalWallClock",
    "mpi_wall_clock",
    "active_clock",
    "TimerConfig",
    "load_config",
    "SimpleTimerError",
    "InvalidRepresentationError",
    "UnknownUnitError",
    "ConfigError",
    "ClockUnavailableError",
    "TimerStateError",
    "print_result",
    "print_unit_table",
    "format_duration",
    "separator",
]
