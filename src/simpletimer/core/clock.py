"""
Clock sources for the scoped timer.

Two sources exist:
  - SteadyClock        : time.perf_counter, monotonic and unaffected by
                         wall-clock adjustments (the default)
  - ExternalWallClock  : any zero-argument function returning float
                         seconds; mpi_wall_clock() builds one on MPI.Wtime

The active source is chosen once, when this module is imported, from
simpletimer.config. It does not change per call.
"""

import time
from typing import Callable

from ..config import TimerConfig, load_config
from ..errors import ClockUnavailableError


class SteadyClock:
    """Monotonic clock backed by time.perf_counter."""

    name = "steady"

    def now(self) -> float:
        """Return the current instant in float seconds."""
        return time.perf_counter()


class ExternalWallClock:
    """
    Adapter for an externally supplied wall-clock function.

    The function takes no arguments and returns seconds since an arbitrary
    fixed epoch as a float, non-decreasing within one process. No barrier
    is taken before reading it, so instants from different processes may
    be skewed.
    """

    def __init__(self, wtime: Callable[[], float], name: str = "external"):
        self._wtime = wtime
        self.name = name

    def now(self) -> float:
        """Return the current instant in float seconds."""
        return float(self._wtime())


def mpi_wall_clock() -> ExternalWallClock:
    """
    Return an ExternalWallClock reading MPI.Wtime.

    Raises:
        ClockUnavailableError: if mpi4py cannot be imported
    """
    try:
        from mpi4py import MPI
    except ImportError as exc:
        raise ClockUnavailableError(
            "the external wall clock needs mpi4py (pip install simpletimer[mpi])"
        ) from exc
    return ExternalWallClock(MPI.Wtime, name="mpi")


def select_clock(config: TimerConfig):
    """Return the clock source the given configuration asks for."""
    if config.use_external_wall_clock:
        return mpi_wall_clock()
    return SteadyClock()


_ACTIVE = select_clock(load_config())


def active_clock():
    """Return the clock source selected for this process."""
    return _ACTIVE
