"""Process-wide configuration, read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

ENV_USE_EXTERNAL_WALL_CLOCK = "SIMPLETIMER_USE_EXTERNAL_WALL_CLOCK"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class TimerConfig:
    """
    Settings fixed for the lifetime of the process.

    use_external_wall_clock: draw every instant from the external (MPI)
        wall clock instead of the steady monotonic clock.
    """

    use_external_wall_clock: bool = False


def _parse_flag(name: str, raw: Optional[str]) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name}={raw!r} is not a boolean flag")


def load_config(environ: Optional[Mapping[str, str]] = None) -> TimerConfig:
    """
    Build a TimerConfig from environment variables.

    Args:
        environ: Mapping to read from; defaults to os.environ

    Raises:
        ConfigError: if a flag holds an unrecognised value
    """
    env = os.environ if environ is None else environ
    return TimerConfig(
        use_external_wall_clock=_parse_flag(
            ENV_USE_EXTERNAL_WALL_CLOCK, env.get(ENV_USE_EXTERNAL_WALL_CLOCK)
        ),
    )
