"""Environment-driven settings for bar chart rendering.

Settings are read from environment variables so the CLI can be tuned without
flags (e.g. `BARCHART_BAR_SET=three_levels`).
"""

from __future__ import annotations

import os
from collections.abc import Collection
from dataclasses import dataclass

from cellgrid.symbols import BAR_SETS

from .formatters import FORMATTERS

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUTHY = frozenset({"1", "true", "t", "yes", "y", "on"})


def _env_raw(name: str) -> str | None:
    """Return the stripped value of `name`, or None when unset or blank."""

    value = (os.getenv(name) or "").strip()
    return value or None


def _env_bool(name: str, *, default: bool) -> bool:
    """Read a flag variable; anything outside the truthy spellings is False."""

    value = _env_raw(name)
    if value is None:
        return default
    return value.lower() in _TRUTHY


def _env_int(name: str, *, default: int) -> int:
    """Read an integer variable.

    Raises:
        ValueError: When the value is set but not an integer.
    """

    value = _env_raw(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name}={value!r} is not an integer.") from None


def _env_choice(name: str, *, default: str, choices: Collection[str]) -> str:
    """Parse an environment variable restricted to a set of names.

    Raises:
        ValueError: When the value is not one of `choices`.
    """

    value = _env_raw(name)
    if value is None:
        return default
    if value not in choices:
        raise ValueError(f"{name}={value!r} is not one of {sorted(choices)}.")
    return value


@dataclass(frozen=True, slots=True)
class BarChartSettings:
    """Rendering defaults resolved from the environment.

    Args:
        bar_set: Registry name of the default glyph set.
        value_format: Registry name of the default value formatter.
        log_level: Logging level name for the CLI.
        color: Whether terminal output uses colors.
        width: Fixed output width; 0 uses the terminal width.
        height: Fixed output height; 0 uses the terminal height.
    """

    bar_set: str = "nine_levels"
    value_format: str = "decimal"
    log_level: str = "WARNING"
    color: bool = True
    width: int = 0
    height: int = 0


def load_settings() -> BarChartSettings:
    """Read BarChartSettings from `BARCHART_*` environment variables.

    Raises:
        ValueError: When a variable holds an unsupported value.
    """

    return BarChartSettings(
        bar_set=_env_choice("BARCHART_BAR_SET", default="nine_levels", choices=set(BAR_SETS)),
        value_format=_env_choice("BARCHART_VALUE_FORMAT", default="decimal", choices=set(FORMATTERS)),
        log_level=_env_choice("BARCHART_LOG_LEVEL", default="WARNING", choices=_LOG_LEVELS),
        color=_env_bool("BARCHART_COLOR", default=True),
        width=max(_env_int("BARCHART_WIDTH", default=0), 0),
        height=max(_env_int("BARCHART_HEIGHT", default=0), 0),
    )
