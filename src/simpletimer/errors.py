"""
Exception hierarchy for simpletimer.

Every error raised by the library itself derives from SimpleTimerError.
Failures raised by a timed callable are never wrapped and do not appear here.
"""


class SimpleTimerError(Exception):
    """Base class for all simpletimer errors."""


class InvalidRepresentationError(SimpleTimerError, TypeError):
    """A TimeView was asked to convert into a non-numeric representation."""


class UnknownUnitError(SimpleTimerError, KeyError):
    """No unit in the ladder matches the requested name or symbol."""


class ConfigError(SimpleTimerError, ValueError):
    """A configuration value could not be parsed."""


class ClockUnavailableError(SimpleTimerError, RuntimeError):
    """The external wall clock was requested but cannot be loaded."""


class TimerStateError(SimpleTimerError, RuntimeError):
    """A scoped timer was fired more than once."""
