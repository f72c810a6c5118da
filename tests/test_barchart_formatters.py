"""Tests for bar value formatters."""

from __future__ import annotations

import pytest

from barchart.formatters import (
    CompactFormatter,
    DecimalFormatter,
    FunctionFormatter,
    OffsetFormatter,
    ThousandsFormatter,
    formatter_from_name,
)

pytestmark = pytest.mark.unit


def test_decimal_and_thousands_formatters() -> None:
    """Format plain digits, with and without separators."""

    assert DecimalFormatter().format(1234567) == "1234567"
    assert ThousandsFormatter().format(1234567) == "1,234,567"


def test_compact_formatter_uses_magnitude_suffixes() -> None:
    """Scale large values to K/M/B suffixes and trim trailing zeros."""

    assert CompactFormatter().format(999) == "999"
    assert CompactFormatter().format(1500) == "1.5K"
    assert CompactFormatter().format(2000) == "2K"
    assert CompactFormatter().format(7_670_000) == "7.7M"
    assert CompactFormatter(precision=2).format(7_670_000) == "7.67M"
    assert CompactFormatter(precision=0).format(3_000_000_000) == "3B"


def test_offset_and_function_formatters() -> None:
    """Shift values by a constant or delegate to a callable."""

    assert OffsetFormatter(offset=20).format(9) == "29"
    assert FunctionFormatter(func=lambda value: f"<{value}>").format(3) == "<3>"


def test_formatter_from_name_resolves_registry_entries() -> None:
    """Look up named formatters and apply optional parameters."""

    assert formatter_from_name("decimal") == DecimalFormatter()
    assert formatter_from_name("offset", offset=5) == OffsetFormatter(offset=5)
    assert formatter_from_name("compact", precision=3) == CompactFormatter(precision=3)

    with pytest.raises(ValueError, match="Unknown value formatter"):
        formatter_from_name("roman")
