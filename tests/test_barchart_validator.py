"""Tests for BarChartConfig validation."""

from __future__ import annotations

import pytest

from barchart.schema import DEFAULT_STYLE, BarChartConfig
from barchart.validator import ChartConfigError, validate_bar_chart_config, validate_series
from cellgrid.style import Color, Style

pytestmark = pytest.mark.unit


def test_valid_config_has_no_errors_or_warnings() -> None:
    """A consistent config validates cleanly."""

    config = BarChartConfig(
        groups=((1, 2), (3, 4)),
        labels=("a", "b"),
        bar_styles=(Style(fg=Color.green), Style(fg=Color.yellow)),
    )
    result = validate_bar_chart_config(config)

    assert result.is_valid is True
    assert result.errors == ()
    assert result.warnings == ()


def test_uneven_groups_built_directly_are_rejected() -> None:
    """Configs constructed without the builder are still checked for arity."""

    result = validate_bar_chart_config(BarChartConfig(groups=((1, 2), (3,))))

    assert result.is_valid is False
    assert any("groups[1] has 1 values" in error for error in result.errors)


def test_bool_values_and_negative_settings_are_rejected() -> None:
    """Bools are not counts; gaps and max must be non-negative."""

    result = validate_bar_chart_config(
        BarChartConfig(groups=((True,),), group_gap=-1, max_value=-5)
    )

    errors = " ".join(result.errors)
    assert "groups[0][0] must be a non-negative int" in errors
    assert "group_gap must be an int >= 0" in errors
    assert "max_value must be None or an int >= 0" in errors


def test_extra_labels_produce_a_warning() -> None:
    """Labels beyond the group count are reported but not fatal."""

    result = validate_bar_chart_config(BarChartConfig(groups=((1,),), labels=("a", "b")))

    assert result.is_valid is True
    assert any("extra labels are never drawn" in warning for warning in result.warnings)


def test_raise_for_errors_carries_every_error() -> None:
    """ChartConfigError exposes the full error list."""

    result = validate_bar_chart_config(BarChartConfig(groups=((1,),), bar_width=0, bar_gap=-1))

    with pytest.raises(ChartConfigError) as excinfo:
        result.raise_for_errors()

    assert len(excinfo.value.errors) == 2
    assert isinstance(excinfo.value, ValueError)


def test_validate_series_accepts_empty_input() -> None:
    """No series is a valid (empty) chart."""

    assert validate_series([]).is_valid is True


def test_style_lookups_fall_back_to_default() -> None:
    """Out-of-range series indexes return the default style sentinel."""

    config = BarChartConfig(groups=((1, 2),), bar_styles=(Style(fg=Color.red),))

    assert config.bar_style_for(0) == Style(fg=Color.red)
    assert config.bar_style_for(1) is DEFAULT_STYLE
    assert config.value_style_for(0) is DEFAULT_STYLE
    assert config.label_for(0) is None
