"""Value formatters used for the labels printed on bars.

A formatter is a strategy object with one method, `format(value) -> str`.
Named formatters can be referenced from YAML definitions and snapshots by
their `key`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable


@runtime_checkable
class ValueFormatter(Protocol):
    """Maps a raw series value to the text shown on its bar."""

    @property
    def key(self) -> str: ...

    def format(self, value: int) -> str: ...


@dataclass(frozen=True, slots=True)
class DecimalFormatter:
    """Plain decimal digits (`1234` -> `"1234"`)."""

    key: str = "decimal"

    def format(self, value: int) -> str:
        return str(value)


@dataclass(frozen=True, slots=True)
class ThousandsFormatter:
    """Decimal digits with thousands separators (`1234` -> `"1,234"`)."""

    key: str = "thousands"

    def format(self, value: int) -> str:
        return f"{value:,}"


_COMPACT_SUFFIXES: Final = (
    ("q", 10**15),
    ("T", 10**12),
    ("B", 10**9),
    ("M", 10**6),
    ("K", 10**3),
)


@dataclass(frozen=True, slots=True)
class CompactFormatter:
    """Magnitude-suffixed values for narrow bars (`7670000` -> `"7.7M"`).

    Args:
        precision: Maximum number of decimals kept before the suffix.
    """

    precision: int = 1
    key: str = "compact"

    def format(self, value: int) -> str:
        for suffix, scale in _COMPACT_SUFFIXES:
            if abs(value) >= scale:
                text = f"{value / scale:.{self.precision}f}"
                if "." in text:
                    text = text.rstrip("0").rstrip(".")
                return f"{text}{suffix}"
        return str(value)


@dataclass(frozen=True, slots=True)
class OffsetFormatter:
    """Decimal digits of the value shifted by a constant.

    Args:
        offset: Amount added to every value before formatting.
    """

    offset: int = 0
    key: str = "offset"

    def format(self, value: int) -> str:
        return str(value + self.offset)


@dataclass(frozen=True, slots=True)
class FunctionFormatter:
    """Adapts a plain callable to the ValueFormatter protocol.

    Function formatters cannot be written to snapshots or YAML.
    """

    func: Callable[[int], str]
    key: str = "custom"

    def format(self, value: int) -> str:
        return self.func(value)


DEFAULT_FORMATTER: Final = DecimalFormatter()

FORMATTERS: Final[dict[str, ValueFormatter]] = {
    "decimal": DEFAULT_FORMATTER,
    "thousands": ThousandsFormatter(),
    "compact": CompactFormatter(),
    "offset": OffsetFormatter(),
}


def formatter_from_name(name: str, *, offset: int | None = None, precision: int | None = None) -> ValueFormatter:
    """Return a registered formatter by name.

    Args:
        name: Registry key (`decimal`, `thousands`, `compact`, `offset`).
        offset: Offset used by the `offset` formatter.
        precision: Precision used by the `compact` formatter.

    Returns:
        The matching ValueFormatter.

    Raises:
        ValueError: When the name is not registered.
    """

    if name == "offset" and offset is not None:
        return OffsetFormatter(offset=offset)
    if name == "compact" and precision is not None:
        return CompactFormatter(precision=precision)
    try:
        return FORMATTERS[name]
    except KeyError:
        raise ValueError(f"Unknown value formatter: {name!r}. Expected one of {sorted(FORMATTERS)}.") from None
