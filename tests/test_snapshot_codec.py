"""Tests for BarChartConfig snapshot encoding/decoding."""

from __future__ import annotations

import json

import pytest

from barchart.builder import config_from_groups
from barchart.demo import demo_chart_definitions
from barchart.formatters import CompactFormatter
from barchart.snapshot_codec import decode_bar_chart_config, encode_bar_chart_config, encode_style
from barchart.validator import ChartConfigError
from cellgrid.block import Borders
from cellgrid.style import Color, Modifier, Style
from cellgrid.symbols import BarSet

pytestmark = pytest.mark.unit


def test_demo_config_survives_a_json_snapshot() -> None:
    """A config with styles, a block and an offset formatter decodes unchanged."""

    config = demo_chart_definitions()[0].config
    payload = json.loads(json.dumps(encode_bar_chart_config(config)))

    assert payload["version"] == "bar_chart_config_v1"
    assert payload["value_formatter"] == {"kind": "offset", "offset": 20}
    assert payload["block"]["borders"] == "all"
    assert decode_bar_chart_config(payload) == config


def test_encode_style_uses_names() -> None:
    """Styles are stored by color and modifier names; empty styles are empty."""

    style = Style(fg=Color.green).with_modifier(Modifier.BOLD)

    assert encode_style(style) == {"fg": "green", "modifiers": ["bold"]}
    assert encode_style(Style()) == {}


def test_function_formatters_cannot_be_encoded() -> None:
    """Callables have no serializable form."""

    config = config_from_groups([[1]], value_formatter=lambda value: str(value))

    with pytest.raises(ValueError, match="cannot be encoded"):
        encode_bar_chart_config(config)


def test_decode_accepts_series_major_data() -> None:
    """`series` payloads are zipped into groups like the builder does."""

    config = decode_bar_chart_config(
        {
            "series": [[9, 12], [6, 11]],
            "bar_set": "three_levels",
            "value_formatter": {"kind": "compact", "precision": 2},
            "block": {"title": "T", "borders": ["top", "left"]},
        }
    )

    assert config.groups == ((9, 6), (12, 11))
    assert config.value_formatter == CompactFormatter(precision=2)
    assert config.block is not None
    assert config.block.borders == Borders.TOP | Borders.LEFT


def test_decode_rejects_ambiguous_or_invalid_payloads() -> None:
    """Malformed payloads raise ValueError naming the problem."""

    with pytest.raises(ValueError, match="either 'groups' or 'series'"):
        decode_bar_chart_config({"groups": [[1]], "series": [[1]]})
    with pytest.raises(ValueError, match="Unknown color"):
        decode_bar_chart_config({"groups": [[1]], "bar_styles": [{"fg": "chartreuse"}]})
    with pytest.raises(ValueError, match="bar_width must be an integer"):
        decode_bar_chart_config({"groups": [[1]], "bar_width": "wide"})
    with pytest.raises(ChartConfigError):
        decode_bar_chart_config({"series": [[1, 2], [3]]})


def test_decode_custom_bar_set_needs_nine_glyphs() -> None:
    """A list bar set maps empty-to-full glyphs in order."""

    glyphs = [" ", ".", ".", ":", ":", "+", "+", "*", "#"]
    config = decode_bar_chart_config({"groups": [[1]], "bar_set": glyphs})

    assert config.bar_set == BarSet(
        empty=" ",
        one_eighth=".",
        one_quarter=".",
        three_eighths=":",
        half=":",
        five_eighths="+",
        three_quarters="+",
        seven_eighths="*",
        full="#",
    )
    assert encode_bar_chart_config(config)["bar_set"] == glyphs

    with pytest.raises(ValueError, match="needs 9 glyphs"):
        decode_bar_chart_config({"groups": [[1]], "bar_set": glyphs[:8]})
