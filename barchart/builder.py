"""Builders and validating factories for BarChartConfig values.

`BarChartBuilder` offers fluent, chained construction: each setter returns a
new builder and nothing is checked until `build()`. Series are collected
whole and zipped into per-group tuples at build time, so a series with the
wrong length is rejected instead of being silently truncated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from cellgrid.block import Block
from cellgrid.style import Style
from cellgrid.symbols import BarSet

from .formatters import FunctionFormatter, ValueFormatter
from .schema import BarChartConfig
from .validator import ChartConfigError, validate_bar_chart_config, validate_series

logger = logging.getLogger(__name__)


def _as_formatter(formatter: ValueFormatter | Callable[[int], str]) -> ValueFormatter:
    """Wrap plain callables so every config holds a ValueFormatter."""

    if isinstance(formatter, ValueFormatter):
        return formatter
    return FunctionFormatter(func=formatter)


@dataclass(frozen=True, slots=True)
class BarChartBuilder:
    """Immutable fluent builder for a BarChartConfig.

    Args:
        series: Series collected so far, one tuple of values per series.
        options: Every non-data setting, held in a BarChartConfig without groups.
    """

    series: tuple[tuple[int, ...], ...] = ()
    options: BarChartConfig = BarChartConfig()

    def add_series(self, values: Iterable[int]) -> BarChartBuilder:
        """Append one series; its i-th value belongs to group i.

        The first series fixes the number of groups. Later series must
        supply exactly that many values or `build()` fails.
        """

        return replace(self, series=(*self.series, tuple(values)))

    def labels(self, labels: Iterable[str]) -> BarChartBuilder:
        return self._set(labels=tuple(labels))

    def bar_styles(self, styles: Iterable[Style]) -> BarChartBuilder:
        return self._set(bar_styles=tuple(styles))

    def value_styles(self, styles: Iterable[Style]) -> BarChartBuilder:
        return self._set(value_styles=tuple(styles))

    def label_style(self, style: Style) -> BarChartBuilder:
        return self._set(label_style=style)

    def style(self, style: Style) -> BarChartBuilder:
        return self._set(style=style)

    def bar_width(self, width: int) -> BarChartBuilder:
        return self._set(bar_width=width)

    def bar_gap(self, gap: int) -> BarChartBuilder:
        return self._set(bar_gap=gap)

    def group_gap(self, gap: int) -> BarChartBuilder:
        return self._set(group_gap=gap)

    def bar_set(self, bar_set: BarSet) -> BarChartBuilder:
        return self._set(bar_set=bar_set)

    def value_formatter(self, formatter: ValueFormatter | Callable[[int], str]) -> BarChartBuilder:
        """Set the value formatter; plain callables are wrapped automatically."""

        return self._set(value_formatter=_as_formatter(formatter))

    def max_value(self, max_value: int | None) -> BarChartBuilder:
        """Fix the scale reference; None restores auto-scaling."""

        return self._set(max_value=max_value)

    def block(self, block: Block | None) -> BarChartBuilder:
        return self._set(block=block)

    def _set(self, **changes: Any) -> BarChartBuilder:
        return replace(self, options=replace(self.options, **changes))

    def build(self) -> BarChartConfig:
        """Validate the collected settings and return the config.

        Returns:
            BarChartConfig with the series zipped into per-group tuples.

        Raises:
            ChartConfigError: When series lengths differ or any setting is invalid.
        """

        validate_series(self.series).raise_for_errors()
        groups = tuple(zip(*self.series))
        return _finalize(replace(self.options, groups=groups))


def _finalize(config: BarChartConfig) -> BarChartConfig:
    """Validate a config, logging warnings and raising on errors."""

    result = validate_bar_chart_config(config)
    for warning in result.warnings:
        logger.warning("Bar chart config: %s", warning)
    result.raise_for_errors()
    return config


def _normalize_options(options: dict[str, Any]) -> dict[str, Any]:
    """Coerce sequence options to tuples and callables to formatters."""

    normalized = dict(options)
    for name in ("labels", "bar_styles", "value_styles"):
        if name in normalized:
            normalized[name] = tuple(normalized[name])
    if "value_formatter" in normalized:
        normalized["value_formatter"] = _as_formatter(normalized["value_formatter"])
    if "groups" in normalized:
        raise TypeError("Pass data through `series` or `groups`, not as an option.")
    return normalized


def build_bar_chart_config(*, series: Sequence[Sequence[int]], **options: Any) -> BarChartConfig:
    """Build a config from every series at once.

    Args:
        series: One sequence of values per series, all the same length.
        **options: Any other BarChartConfig field (labels, bar_width, ...).

    Returns:
        Validated BarChartConfig.

    Raises:
        ChartConfigError: When series lengths differ or any option is invalid.
    """

    validate_series(series).raise_for_errors()
    groups = tuple(zip(*(tuple(values) for values in series)))
    return _finalize(BarChartConfig(groups=groups, **_normalize_options(options)))


def config_from_groups(groups: Sequence[Sequence[int]], **options: Any) -> BarChartConfig:
    """Build a config from per-group tuples (one value per series each).

    Args:
        groups: One sequence of values per category.
        **options: Any other BarChartConfig field.

    Returns:
        Validated BarChartConfig.

    Raises:
        ChartConfigError: When group arities differ or any option is invalid.
    """

    return _finalize(BarChartConfig(groups=tuple(tuple(group) for group in groups), **_normalize_options(options)))


__all__ = [
    "BarChartBuilder",
    "ChartConfigError",
    "build_bar_chart_config",
    "config_from_groups",
]
