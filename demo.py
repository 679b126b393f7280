"""
simpletimer demo script.

Run this directly to see every way of reading a measurement:
    python demo.py
"""

import functools
import random
import time as systime

import simpletimer
from simpletimer import (
    LADDER,
    INTEGER_UNITS,
    MICROSECONDS,
    MILLISECONDS,
    DECADES,
    CENTURIES,
    MILLENNIA,
    print_result,
    print_unit_table,
    separator,
)


# --- tasks -------------------------------------------------------------------

def do_long_task() -> None:
    """Sleep for a fixed 750 ms."""
    systime.sleep(0.75)


def do_long_task_with_param(seconds: float) -> None:
    """Sleep for the given number of seconds."""
    systime.sleep(seconds)


def do_long_task_with_return() -> int:
    """Sleep for one second, then return a random number."""
    systime.sleep(1.0)
    return random.randint(1, 100)


def do_long_task_with_return_and_param(seconds: float) -> int:
    """Sleep for the given number of seconds, then return a random number."""
    systime.sleep(seconds)
    return random.randint(1, 100)


# --- run everything ----------------------------------------------------------

def _section(title):
    """Print a terminal-wide rule followed by a section title."""
    print(f"\n{separator()}")
    print(f"  {title}")


def main():
    """Time all four task shapes once, then print the result many ways."""
    param = 0.75

    void_result = simpletimer.time(do_long_task)
    void_curried_result = simpletimer.time(functools.partial(do_long_task_with_param, param))
    return_result = simpletimer.time(do_long_task_with_return)
    return_curried_result = simpletimer.time(lambda: do_long_task_with_return_and_param(param))

    _section("[1] direct fractional seconds")
    print_result("void, no param", void_result)
    print_result("void, curried param", void_curried_result)
    print_result("return, no param", return_result)
    print_result("return, curried param", return_curried_result)

    _section("[2] full-precision units (no truncation)")
    print_unit_table(return_curried_result, LADDER)

    _section("[3] integer units (truncates fractions)")
    print_unit_table(return_curried_result, INTEGER_UNITS)

    _section("[4] capture in a fine unit, display in another")
    us = return_curried_result.get_duration_view(MICROSECONDS).as_(float)
    ms = return_curried_result.get_duration_view(MILLISECONDS).as_(float)
    print(f"    {us / 1_000_000} seconds (from us)")
    print(f"    {ms / 1_000} seconds (from ms)")
    print(f"    {ms} milliseconds")
    print(f"    {us / 1_000} milliseconds (from us)")

    _section("[5] extreme units (for long-running jobs)")
    print_unit_table(return_curried_result, (DECADES, CENTURIES, MILLENNIA))


if __name__ == "__main__":
    main()
