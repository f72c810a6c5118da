"""Grouped bar charts painted into character-cell buffers.

Charts are driven by `BarChartConfig` objects built through
`BarChartBuilder` (or the validating factories) and drawn by `BarChart`.
This package contains the schema, validation, formatting, rendering and
serialization utilities for those configs.
"""

from .builder import BarChartBuilder, build_bar_chart_config, config_from_groups
from .render import BarChart, RenderOutcome
from .schema import BarChartConfig
from .validator import ChartConfigError, ValidationResult, validate_bar_chart_config

__all__ = [
    "BarChart",
    "BarChartBuilder",
    "BarChartConfig",
    "ChartConfigError",
    "RenderOutcome",
    "ValidationResult",
    "build_bar_chart_config",
    "config_from_groups",
    "validate_bar_chart_config",
]
