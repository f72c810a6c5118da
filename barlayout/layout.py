"""Layout resolution for grouped bar charts.

The chart area is split into data rows and one reserved label row at the
bottom. Every bar height is expressed in eighths of a cell so that a single
row can show a partial block glyph.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Literal

logger = logging.getLogger(__name__)

MIN_CHART_HEIGHT: Final = 2
EIGHTHS_PER_ROW: Final = 8
LABEL_ROWS: Final = 1

SkipReason = Literal["area_too_short", "no_data", "area_too_narrow"]


@dataclass(frozen=True, slots=True)
class BarLayout:
    """Resolved geometry for one render call.

    Args:
        visible_groups: Number of whole groups that fit the width.
        series_per_group: Bars per group.
        max_value: Scale reference used for the heights.
        data_rows: Rows available to bars (area height minus the label row).
        heights: Eighths-of-cell height per visible group and series.
        skip_reason: Why nothing should be painted, or None when the chart renders.
    """

    visible_groups: int
    series_per_group: int
    max_value: int
    data_rows: int
    heights: tuple[tuple[int, ...], ...] = ()
    skip_reason: SkipReason | None = None

    @property
    def is_drawable(self) -> bool:
        return self.skip_reason is None


def resolve_max(groups: Sequence[Sequence[int]], *, fixed_max: int | None = None) -> int:
    """Return the scale reference for a chart.

    Args:
        groups: Per-group series values.
        fixed_max: Caller-supplied maximum; wins when not None.

    Returns:
        `fixed_max`, or the largest value across all groups (0 for no data).
    """

    if fixed_max is not None:
        return fixed_max
    return max((max(group, default=0) for group in groups), default=0)


def group_stride(*, bar_width: int, bar_gap: int, group_gap: int, series_per_group: int) -> int:
    """Return the columns consumed by one group plus its trailing gaps."""

    return (bar_width + bar_gap) * series_per_group + group_gap


def visible_group_count(
    *,
    available_width: int,
    bar_width: int,
    bar_gap: int,
    group_gap: int,
    series_per_group: int,
    group_count: int,
) -> int:
    """Return how many whole groups fit into `available_width` columns.

    The trailing bar gap and group gap of the last group do not need to fit,
    so both are credited back before the floor division. A group that would
    only partially fit is dropped rather than clipped.

    Args:
        available_width: Width of the chart area in columns.
        bar_width: Columns per bar.
        bar_gap: Columns between bars of a group.
        group_gap: Columns between groups.
        series_per_group: Bars per group.
        group_count: Groups available in the data.

    Returns:
        The visible group count, between 0 and `group_count`.
    """

    stride = group_stride(
        bar_width=bar_width,
        bar_gap=bar_gap,
        group_gap=group_gap,
        series_per_group=series_per_group,
    )
    if stride <= 0:
        return 0
    fitting = (available_width + group_gap + bar_gap) // stride
    return max(min(fitting, group_count), 0)


def scale_to_eighths(value: int, *, max_value: int, available_rows: int) -> int:
    """Convert a value to a bar height in eighths of a cell.

    `available_rows` is the full area height; one row is reserved for
    labels. The divisor is floored at 1 and the result is truncated.

    Args:
        value: Raw series value.
        max_value: Scale reference (value that reaches full height).
        available_rows: Height of the chart area in rows.

    Returns:
        Height in eighths; `(available_rows - 1) * 8` when `value == max_value`.
    """

    data_rows = max(available_rows - LABEL_ROWS, 0)
    return value * data_rows * EIGHTHS_PER_ROW // max(max_value, 1)


def glyph_level(remaining_eighths: int) -> int:
    """Clamp a remaining height to a glyph index between 0 and 8."""

    return min(max(remaining_eighths, 0), EIGHTHS_PER_ROW)


def next_remaining(remaining_eighths: int) -> int:
    """Return the height left for the row above after painting one row."""

    return max(remaining_eighths - EIGHTHS_PER_ROW, 0)


def row_levels(height_eighths: int, *, rows: int) -> tuple[int, ...]:
    """Return the glyph level painted on each row of one bar, bottom first.

    Args:
        height_eighths: Bar height in eighths.
        rows: Number of data rows.

    Returns:
        One glyph level (0..8) per row, starting with the bottom row.
    """

    levels: list[int] = []
    remaining = height_eighths
    for _ in range(rows):
        levels.append(glyph_level(remaining))
        remaining = next_remaining(remaining)
    return tuple(levels)


def bar_column(
    *,
    group_index: int,
    series_index: int,
    series_per_group: int,
    bar_width: int,
    bar_gap: int,
    group_gap: int,
) -> int:
    """Return the column offset (from the area's left edge) of a bar.

    Bars are numbered across all groups; every bar advances by
    `bar_width + bar_gap` and every group boundary adds `group_gap`.
    """

    bar_index = group_index * series_per_group + series_index
    return bar_index * (bar_width + bar_gap) + group_index * group_gap


def group_span(*, series_per_group: int, bar_width: int, bar_gap: int) -> int:
    """Return the width of a group's bars and inner gaps (label width)."""

    if series_per_group <= 0:
        return 0
    return series_per_group * bar_width + (series_per_group - 1) * bar_gap


def centered_offset(span: int, text_width: int) -> int:
    """Return the left padding that centers `text_width` within `span`.

    Text wider than the span starts at the span's left edge.
    """

    return max(span - text_width, 0) >> 1


def resolve_bar_layout(
    *,
    groups: Sequence[Sequence[int]],
    width: int,
    height: int,
    bar_width: int,
    bar_gap: int,
    group_gap: int,
    fixed_max: int | None = None,
) -> BarLayout:
    """Resolve visible groups and scaled heights for a chart area.

    Args:
        groups: Per-group series values; all groups share one arity.
        width: Chart area width in columns.
        height: Chart area height in rows.
        bar_width: Columns per bar.
        bar_gap: Columns between bars of a group.
        group_gap: Columns between groups.
        fixed_max: Optional fixed scale reference.

    Returns:
        BarLayout; `skip_reason` is set when nothing should be painted.
    """

    series_per_group = len(groups[0]) if groups else 0
    data_rows = max(height - LABEL_ROWS, 0)

    if height < MIN_CHART_HEIGHT:
        logger.debug("Bar layout skipped: height %s is below %s rows.", height, MIN_CHART_HEIGHT)
        return BarLayout(
            visible_groups=0,
            series_per_group=series_per_group,
            max_value=0,
            data_rows=data_rows,
            skip_reason="area_too_short",
        )
    if not groups:
        logger.debug("Bar layout skipped: no data.")
        return BarLayout(visible_groups=0, series_per_group=0, max_value=0, data_rows=data_rows, skip_reason="no_data")

    max_value = resolve_max(groups, fixed_max=fixed_max)
    visible = visible_group_count(
        available_width=width,
        bar_width=bar_width,
        bar_gap=bar_gap,
        group_gap=group_gap,
        series_per_group=series_per_group,
        group_count=len(groups),
    )
    if visible == 0:
        logger.debug("Bar layout skipped: width %s fits no group.", width)
        return BarLayout(
            visible_groups=0,
            series_per_group=series_per_group,
            max_value=max_value,
            data_rows=data_rows,
            skip_reason="area_too_narrow",
        )

    heights = tuple(
        tuple(scale_to_eighths(value, max_value=max_value, available_rows=height) for value in group)
        for group in groups[:visible]
    )
    logger.debug(
        "Bar layout resolved: %s/%s groups visible, max=%s, rows=%s.",
        visible,
        len(groups),
        max_value,
        data_rows,
    )
    return BarLayout(
        visible_groups=visible,
        series_per_group=series_per_group,
        max_value=max_value,
        data_rows=data_rows,
        heights=heights,
    )
