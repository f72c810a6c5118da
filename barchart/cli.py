"""Command-line entry point that paints bar charts to the terminal.

Without `--definitions` the two demo charts are drawn; otherwise every chart
of the YAML file is stacked vertically. The screen is rendered once and the
command exits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from rich.console import Console

from cellgrid.console import print_buffer
from cellgrid.geometry import Rect
from cellgrid.symbols import BAR_SETS

from .definitions import ChartDefinitionError, load_chart_definitions
from .demo import compose_screen, demo_areas, demo_chart_definitions
from .formatters import formatter_from_name
from .settings import load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the render command."""

    parser = argparse.ArgumentParser(description="Render grouped bar charts to the terminal.")
    parser.add_argument("--definitions", default=None, help="Path to a YAML chart definitions file.")
    parser.add_argument("--width", type=int, default=None, help="Screen width in cells (default: terminal width).")
    parser.add_argument("--height", type=int, default=None, help="Screen height in cells (default: terminal height).")
    parser.add_argument(
        "--bar-set",
        choices=sorted(BAR_SETS),
        default=None,
        help="Glyph set used for bar heights (default: BARCHART_BAR_SET or nine_levels).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    return parser


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """Render the charts and print them.

    Args:
        argv: Command-line arguments (defaults to `sys.argv[1:]`).
        console: Console to print to (defaults to a stdout Console).

    Returns:
        Process exit code: 0 on success, 2 on invalid input.
    """

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"[render_barchart] ERROR: {exc}", file=sys.stderr)
        return 2

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if console is None:
        console = Console(no_color=args.no_color or not settings.color, highlight=False)

    width = args.width or settings.width or console.size.width
    height = args.height or settings.height or console.size.height
    if width <= 0 or height <= 0:
        print(f"[render_barchart] ERROR: screen size must be positive, got {width}x{height}.", file=sys.stderr)
        return 2
    screen = Rect(x=0, y=0, width=width, height=height)
    bar_set = BAR_SETS[args.bar_set or settings.bar_set]

    if args.definitions:
        try:
            definitions = load_chart_definitions(args.definitions)
        except ChartDefinitionError as exc:
            print(f"[render_barchart] ERROR: {exc}", file=sys.stderr)
            return 2
        if args.bar_set:
            definitions = tuple(
                replace(definition, config=replace(definition.config, bar_set=bar_set)) for definition in definitions
            )
        buf, outcomes = compose_screen(definitions, screen)
    else:
        definitions = demo_chart_definitions(
            bar_set=bar_set,
            value_formatter=formatter_from_name(settings.value_format),
        )
        buf, outcomes = compose_screen(definitions, screen, areas=demo_areas(screen))

    for definition, outcome in zip(definitions, outcomes):
        if outcome.status == "skipped":
            logger.info("Chart %r not drawn: %s.", definition.title, outcome.reason)

    print_buffer(console, buf)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
