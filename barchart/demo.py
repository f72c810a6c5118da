"""Demo charts and screen composition for the terminal CLI.

The demo screen is split into an upper half holding a three-series chart and
a lower half whose left column holds a two-series chart.
"""

from __future__ import annotations

from collections.abc import Sequence

from cellgrid.block import Block, Borders
from cellgrid.buffer import Buffer
from cellgrid.geometry import Rect
from cellgrid.style import Color, Style
from cellgrid.symbols import NINE_LEVELS, BarSet

from .builder import BarChartBuilder
from .definitions import ChartDefinition
from .formatters import DEFAULT_FORMATTER, OffsetFormatter, ValueFormatter
from .render import BarChart, RenderOutcome

SCREEN_MARGIN = 2

TEMPERATURE_SERIES: tuple[tuple[int, ...], ...] = (
    (9, 12, 5, 8),
    (6, 11, 4, 5),
)
TEMPERATURE_LABELS = ("30°C", "50°C", "60°C", "80°C")
SERIES_STYLES = (Style().with_fg(Color.green), Style().with_fg(Color.yellow))
VALUE_STYLES = (
    Style(fg=Color.black).with_bg(Color.green),
    Style(fg=Color.black).with_bg(Color.yellow),
)


def demo_chart_definitions(
    *,
    bar_set: BarSet = NINE_LEVELS,
    value_formatter: ValueFormatter = DEFAULT_FORMATTER,
) -> tuple[ChartDefinition, ChartDefinition]:
    """Return the two demo charts.

    Args:
        bar_set: Glyph set used by both charts.
        value_formatter: Formatter of the second chart (the first always
            shows values offset by 20).

    Returns:
        The `Data1` and `Data2` chart definitions.
    """

    data, data2 = TEMPERATURE_SERIES
    first = (
        BarChartBuilder()
        .block(Block(title="Data1", borders=Borders.ALL))
        .add_series(data)
        .add_series(data2)
        .add_series(data2)
        .bar_width(9)
        .bar_styles(SERIES_STYLES)
        .labels(TEMPERATURE_LABELS)
        .value_formatter(OffsetFormatter(offset=20))
        .value_styles(VALUE_STYLES)
        .bar_set(bar_set)
        .build()
    )
    second = (
        BarChartBuilder()
        .block(Block(title="Data2", borders=Borders.ALL))
        .add_series(data)
        .add_series(data2)
        .bar_width(5)
        .group_gap(3)
        .bar_styles(SERIES_STYLES)
        .value_styles(VALUE_STYLES)
        .value_formatter(value_formatter)
        .bar_set(bar_set)
        .build()
    )
    return ChartDefinition(title="Data1", config=first), ChartDefinition(title="Data2", config=second)


def demo_areas(screen: Rect) -> tuple[Rect, Rect]:
    """Return the areas of the two demo charts inside `screen`."""

    top, bottom = screen.inner(SCREEN_MARGIN).split_rows(2)
    bottom_left, _ = bottom.split_columns(2)
    return top, bottom_left


def stacked_areas(screen: Rect, count: int) -> tuple[Rect, ...]:
    """Return `count` equal-height rows inside the screen margin."""

    if count == 0:
        return ()
    return screen.inner(SCREEN_MARGIN).split_rows(count)


def compose_screen(
    definitions: Sequence[ChartDefinition],
    screen: Rect,
    *,
    areas: Sequence[Rect] | None = None,
) -> tuple[Buffer, tuple[RenderOutcome, ...]]:
    """Render charts into a fresh buffer covering `screen`.

    Args:
        definitions: Charts to draw.
        screen: Full screen area.
        areas: One area per chart; defaults to stacked rows.

    Returns:
        The filled buffer and one RenderOutcome per chart.

    Raises:
        ValueError: When `areas` does not match `definitions` in length.
    """

    targets = tuple(areas) if areas is not None else stacked_areas(screen, len(definitions))
    if len(targets) != len(definitions):
        raise ValueError(f"Got {len(targets)} areas for {len(definitions)} charts.")
    buf = Buffer.empty(screen)
    outcomes = tuple(
        BarChart(definition.config).render(area, buf) for definition, area in zip(definitions, targets)
    )
    return buf, outcomes
