"""Paint a BarChartConfig into a cell Buffer.

Rendering is a pure function of the config and the target area: the base
style and optional block are applied first, then bars are painted row by row
from the bottom data row upwards, and finally value labels and category
labels are overlaid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from rich.cells import cell_len

from barlayout.layout import (
    BarLayout,
    SkipReason,
    bar_column,
    centered_offset,
    glyph_level,
    group_span,
    next_remaining,
    resolve_bar_layout,
)
from cellgrid.buffer import Buffer
from cellgrid.geometry import Rect, Size

from .schema import BarChartConfig

logger = logging.getLogger(__name__)

RenderStatus = Literal["rendered", "skipped"]


@dataclass(frozen=True, slots=True)
class RenderOutcome:
    """What a render call did.

    Args:
        status: `rendered` when bars were painted, `skipped` for degenerate input.
        chart_area: Area left for the chart after the block took its share.
        visible_groups: Groups that fit the width.
        max_value: Scale reference used for the heights.
        reason: Why the render was skipped, or None.
    """

    status: RenderStatus
    chart_area: Rect
    visible_groups: int = 0
    max_value: int = 0
    reason: SkipReason | None = None


@dataclass(frozen=True, slots=True)
class BarChart:
    """Grouped bar chart widget.

    Args:
        config: Validated chart configuration.
    """

    config: BarChartConfig

    def render(self, area: Rect, buf: Buffer) -> RenderOutcome:
        """Render the chart into `buf`, writing only inside `area`.

        Args:
            area: Target area, including the block when one is configured.
                Parts outside the buffer are clipped away first.
            buf: Caller-owned output buffer.

        Returns:
            RenderOutcome describing whether anything was painted.
        """

        config = self.config
        area = buf.area.intersection(area)
        buf.set_style(area, config.style)

        chart_area = area
        if config.block is not None:
            chart_area = config.block.inner(area)
            config.block.render(area, buf)

        layout = resolve_bar_layout(
            groups=config.groups,
            width=chart_area.width,
            height=chart_area.height,
            bar_width=config.bar_width,
            bar_gap=config.bar_gap,
            group_gap=config.group_gap,
            fixed_max=config.max_value,
        )
        if not layout.is_drawable:
            logger.debug("Bar chart not drawn in %s: %s.", chart_area, layout.skip_reason)
            return RenderOutcome(
                status="skipped",
                chart_area=chart_area,
                visible_groups=layout.visible_groups,
                max_value=layout.max_value,
                reason=layout.skip_reason,
            )

        self._render_bars(chart_area, buf, layout)
        self._render_values(chart_area, buf, layout)
        self._render_labels(chart_area, buf, layout)
        return RenderOutcome(
            status="rendered",
            chart_area=chart_area,
            visible_groups=layout.visible_groups,
            max_value=layout.max_value,
        )

    def _column(self, layout: BarLayout, group_index: int, series_index: int) -> int:
        config = self.config
        return bar_column(
            group_index=group_index,
            series_index=series_index,
            series_per_group=layout.series_per_group,
            bar_width=config.bar_width,
            bar_gap=config.bar_gap,
            group_gap=config.group_gap,
        )

    def _render_bars(self, area: Rect, buf: Buffer, layout: BarLayout) -> None:
        """Paint bar glyphs from the bottom data row up to the top of `area`."""

        config = self.config
        remaining = [list(group) for group in layout.heights]
        for row in reversed(range(layout.data_rows)):
            y = area.top + row
            for group_index, group in enumerate(remaining):
                for series_index, height in enumerate(group):
                    symbol = config.bar_set.glyph_for(glyph_level(height))
                    style = config.bar_style_for(series_index)
                    x = area.left + self._column(layout, group_index, series_index)
                    for dx in range(config.bar_width):
                        buf.get(x + dx, y).set_symbol(symbol).set_style(style)
                    group[series_index] = next_remaining(height)

    def _render_values(self, area: Rect, buf: Buffer, layout: BarLayout) -> None:
        """Print formatted values over each bar's base, right to left.

        Series `i` prints `i` rows above the bottom data row so that the
        labels of one group do not overwrite each other.
        """

        config = self.config
        visible = config.groups[: layout.visible_groups]
        for group_index in reversed(range(len(visible))):
            group = visible[group_index]
            for series_index in reversed(range(len(group))):
                value = group[series_index]
                if value == 0:
                    continue
                y = area.bottom - 2 - series_index
                if y < area.top:
                    continue
                text = config.value_formatter.format(value)
                x = (
                    area.left
                    + self._column(layout, group_index, series_index)
                    + centered_offset(config.bar_width, cell_len(text))
                )
                if x >= area.right:
                    continue
                buf.set_stringn(x, y, text, area.right - x, config.value_style_for(series_index))

    def _render_labels(self, area: Rect, buf: Buffer, layout: BarLayout) -> None:
        """Center each visible group's label under the group on the bottom row."""

        config = self.config
        span = group_span(
            series_per_group=layout.series_per_group,
            bar_width=config.bar_width,
            bar_gap=config.bar_gap,
        )
        for group_index in range(layout.visible_groups):
            label = config.label_for(group_index)
            if label is None:
                continue
            x = area.left + self._column(layout, group_index, 0) + centered_offset(span, cell_len(label))
            buf.set_stringn(x, area.bottom - 1, label, span, config.label_style)

    def size_hint(self, area: Rect) -> Size:
        """Return the minimum area the chart wants for a proposed `area`.

        With a block, the height leaves room for the block plus one chart
        row; without one the proposed area is returned unchanged.
        """

        block = self.config.block
        if block is None:
            return Size(width=area.width, height=area.height)
        block_size = block.size_hint(Rect())
        return Size(
            width=max(area.width, block_size.width),
            height=max(area.height, block_size.height + 1),
        )
