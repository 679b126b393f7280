"""Duration model, clock sources and the timing entry point."""
from .units import Duration, Unit, LADDER, INTEGER_UNITS, unit_by_name
from .view import TimeView
from .result import TimeResult, VoidTimeResult
from .clock import SteadyClock, ExternalWallClock, mpi_wall_clock, active_clock
from .timer import time
