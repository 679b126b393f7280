"""
The time() entry point and the scoped timer behind it.

_ScopedTimer is private to this module: time() is the only code that
builds one, always immediately around the timed call, so the slot it
writes into is guaranteed to outlive it.
"""

import inspect
from typing import Any, Callable, Optional, TypeVar, Union, overload

from ..errors import TimerStateError
from . import clock as _clock
from .result import TimeResult, VoidTimeResult
from .units import SECONDS, Duration

T = TypeVar("T")

_NONE_ANNOTATIONS = (None, type(None), "None")


class _DurationSlot:
    """Storage the scoped timer writes its measurement into."""

    __slots__ = ("duration",)

    def __init__(self):
        self.duration: Optional[Duration] = None


class _ScopedTimer:
    """
    Stopwatch bracketing one block: armed on construction, fired on exit.

    Firing happens on every exit path, including exceptions, and never
    suppresses the exception. The slot then holds the time up to the
    failure.
    """

    __slots__ = ("_slot", "_clock", "_start", "_fired")

    def __init__(self, slot: _DurationSlot, clock=None):
        self._slot = slot
        self._clock = clock or _clock.active_clock()
        self._fired = False
        self._start = self._clock.now()

    def __enter__(self) -> "_ScopedTimer":
        return self

    def __exit__(self, *_) -> None:
        end = self._clock.now()
        if self._fired:
            raise TimerStateError("scoped timer already fired")
        self._fired = True
        self._slot.duration = Duration(end - self._start, SECONDS)


def _declared_return(fn: Callable) -> Any:
    """Return fn's return annotation, or Signature.empty if it has none."""
    try:
        return inspect.signature(fn).return_annotation
    except (TypeError, ValueError):
        # Some builtins expose no signature.
        return inspect.Signature.empty


def _is_void(declared: Any) -> bool:
    """Return True only for an explicit "-> None" declaration."""
    return declared is not inspect.Signature.empty and declared in _NONE_ANNOTATIONS


@overload
def time(fn: Callable[[], None]) -> VoidTimeResult: ...


@overload
def time(fn: Callable[[], T]) -> TimeResult[T]: ...


def time(fn: Callable[[], Any]) -> Union[TimeResult, VoidTimeResult]:
    """
    Call fn once and measure how long it took.

    fn must take no arguments; bind arguments first with a lambda or
    functools.partial.

    The result shape follows fn's declared return type: a "-> None"
    callable gives a VoidTimeResult. Anything else, including unannotated
    callables such as lambdas, gives a TimeResult whose function_result
    may be None. The returned value never changes the shape.

    If fn raises, the exception propagates unchanged and no result is
    returned.

    Example:
        result = time(lambda: load_rows(path))
        result.function_result
        result.get_duration_view(MILLISECONDS).as_(float)
    """
    if not callable(fn):
        raise TypeError(f"time() expects a zero-argument callable, got {fn!r}")

    void = _is_void(_declared_return(fn))
    slot = _DurationSlot()
    with _ScopedTimer(slot):
        value = fn()

    if void:
        return VoidTimeResult(duration=slot.duration)
    return TimeResult(function_result=value, duration=slot.duration)
