"""Schema types for grouped bar chart configuration.

A `BarChartConfig` is an immutable description of what to draw. It is built
through `barchart.builder` (which validates it) and consumed by
`barchart.render.BarChart`; nothing in it changes during a render.
"""

from __future__ import annotations

from dataclasses import dataclass

from cellgrid.block import Block
from cellgrid.style import Style
from cellgrid.symbols import NINE_LEVELS, BarSet

from .formatters import DEFAULT_FORMATTER, ValueFormatter

DEFAULT_STYLE = Style()


@dataclass(frozen=True, slots=True)
class BarChartConfig:
    """Declarative definition of a grouped bar chart.

    Args:
        groups: One tuple per category with one value per series; order is
            left-to-right render order.
        labels: Category labels matched to groups by position; may be shorter
            than `groups`.
        bar_styles: Bar glyph style per series index.
        value_styles: Value label style per series index.
        label_style: Style of category labels.
        style: Base style patched over the whole chart area.
        bar_width: Columns per bar.
        bar_gap: Columns between bars of the same group.
        group_gap: Columns between groups.
        bar_set: Glyphs for 0/8 through 8/8 fill.
        value_formatter: Formats values printed on the bars.
        max_value: Fixed scale reference; None scales to the largest value.
        block: Optional bordered wrapper drawn around the chart.
    """

    groups: tuple[tuple[int, ...], ...] = ()
    labels: tuple[str, ...] = ()
    bar_styles: tuple[Style, ...] = ()
    value_styles: tuple[Style, ...] = ()
    label_style: Style = DEFAULT_STYLE
    style: Style = DEFAULT_STYLE
    bar_width: int = 1
    bar_gap: int = 1
    group_gap: int = 1
    bar_set: BarSet = NINE_LEVELS
    value_formatter: ValueFormatter = DEFAULT_FORMATTER
    max_value: int | None = None
    block: Block | None = None

    @property
    def group_count(self) -> int:
        return len(self.groups)

    @property
    def series_count(self) -> int:
        """Number of series, taken from the first group (0 without data)."""

        return len(self.groups[0]) if self.groups else 0

    def bar_style_for(self, series_index: int) -> Style:
        """Return the bar style of a series, or `DEFAULT_STYLE` when unset."""

        return _style_at(self.bar_styles, series_index)

    def value_style_for(self, series_index: int) -> Style:
        """Return the value label style of a series, or `DEFAULT_STYLE` when unset."""

        return _style_at(self.value_styles, series_index)

    def label_for(self, group_index: int) -> str | None:
        """Return the category label of a group, or None when it has none."""

        if 0 <= group_index < len(self.labels):
            return self.labels[group_index]
        return None


def _style_at(styles: tuple[Style, ...], index: int) -> Style:
    if 0 <= index < len(styles):
        return styles[index]
    return DEFAULT_STYLE
