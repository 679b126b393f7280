"""
Minimalist console renderer for timing results.

All formatting decisions are centralized here.
Color output uses ANSI codes via colorama for Windows compatibility.
Console width is detected dynamically from the terminal.
"""

import shutil
from typing import Iterable, Union

import colorama

from ..core.result import TimeResult, VoidTimeResult
from ..core.units import (
    MICROSECONDS,
    MILLISECONDS,
    NANOSECONDS,
    SECONDS,
    Duration,
    Unit,
)

colorama.init(autoreset=True)

AnyResult = Union[TimeResult, VoidTimeResult]


class _Color:
    """ANSI color constants."""

    RESET   = colorama.Style.RESET_ALL
    DIM     = colorama.Style.DIM
    CYAN    = colorama.Fore.CYAN
    GREEN   = colorama.Fore.GREEN
    YELLOW  = colorama.Fore.YELLOW
    RED     = colorama.Fore.RED
    WHITE   = colorama.Fore.WHITE


def _console_width() -> int:
    """Return current terminal width, with a sensible fallback."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


def separator(char: str = "-") -> str:
    """Return a separator line sized to the current terminal width."""
    return char * _console_width()


_THRESHOLD_FAST_S   = 0.001     # under 1 ms   -> green
_THRESHOLD_MEDIUM_S = 0.010     # under 10 ms  -> yellow
                                # 10 ms and above -> red

# Largest first; the first unit giving a count of at least 1 wins.
_HUMAN_UNITS = (SECONDS, MILLISECONDS, MICROSECONDS, NANOSECONDS)


def _color_for_duration(seconds: float) -> str:
    """Return the appropriate color code based on how slow the measurement is."""
    if seconds < _THRESHOLD_FAST_S:
        return _Color.GREEN
    if seconds < _THRESHOLD_MEDIUM_S:
        return _Color.YELLOW
    return _Color.RED


def best_unit(duration: Duration) -> tuple[float, str]:
    """
    Return the duration in the most readable unit.

    Selects the largest unit, up to seconds, that keeps the value at or
    above 1.0. Anything below a nanosecond is still shown in nanoseconds.
    """
    seconds = duration.seconds
    for unit in _HUMAN_UNITS:
        value = unit.from_seconds(seconds)
        if abs(value) >= 1.0:
            return round(value, 6 if unit is SECONDS else 3), unit.symbol
    return round(NANOSECONDS.from_seconds(seconds), 3), NANOSECONDS.symbol


def format_duration(duration: Duration) -> str:
    """Return a human-readable string such as '750.123 ms'."""
    value, symbol = best_unit(duration)
    return f"{value} {symbol}"


def _format_result_line(label: str, result: AnyResult) -> str:
    """Render a single result as a compact colored one-line string."""
    value, symbol = best_unit(result.duration)
    raw_duration = f"{value:>12} {symbol}"
    colored_duration = (
        f"{_color_for_duration(result.duration.seconds)}{raw_duration}{_Color.RESET}"
    )

    name_str = f"{_Color.CYAN}{label:<40}{_Color.RESET}"

    fields = result.to_dict()
    returned_str = ""
    if "function_result" in fields:
        returned_str = f"  {_Color.DIM}[returned {fields['function_result']!r}]{_Color.RESET}"

    return f"  {name_str} {colored_duration}{returned_str}"


def print_result(label: str, result: AnyResult) -> None:
    """Print a single timing result to stdout immediately."""
    print(_format_result_line(label, result))


def print_unit_table(result: AnyResult, units: Iterable[Unit]) -> None:
    """
    Print the duration once per unit, each read through a TimeView.

    Integer-storage units show their truncated count.
    """
    for unit in units:
        view = result.get_duration_view(unit)
        count = view.as_(unit.rep)
        suffix = f" {_Color.DIM}(truncated){_Color.RESET}" if unit.is_integral else ""
        print(f"    {_Color.WHITE}{count}{_Color.RESET} {unit.name}{suffix}")
