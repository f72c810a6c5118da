"""Bridge from a cell Buffer to `rich` terminal output."""

from __future__ import annotations

from rich.cells import cell_len
from rich.console import Console
from rich.style import Style as RichStyle
from rich.text import Text

from .buffer import Buffer
from .style import Color, Modifier, Style

_MODIFIER_ATTRIBUTES: tuple[tuple[Modifier, str], ...] = (
    (Modifier.BOLD, "bold"),
    (Modifier.DIM, "dim"),
    (Modifier.ITALIC, "italic"),
    (Modifier.UNDERLINED, "underline"),
    (Modifier.REVERSED, "reverse"),
    (Modifier.CROSSED_OUT, "strike"),
)


def style_to_rich(style: Style) -> RichStyle | None:
    """Convert a cell Style to a rich Style.

    Args:
        style: Cell style to convert.

    Returns:
        A rich Style, or None when the style sets nothing.
    """

    active = style.modifiers()
    attributes = {name: True for modifier, name in _MODIFIER_ATTRIBUTES if modifier in active}
    if style.fg is None and style.bg is None and not attributes:
        return None
    return RichStyle(
        color=_color_name(style.fg),
        bgcolor=_color_name(style.bg),
        **attributes,
    )


def _color_name(color: Color | None) -> str | None:
    return None if color is None else color.value


def buffer_to_text(buf: Buffer) -> Text:
    """Convert a buffer to rich Text, one line per row.

    Consecutive cells sharing a style are emitted as a single span.
    """

    text = Text(no_wrap=True, overflow="crop")
    rows = buf.lines()
    for row_index, y in enumerate(range(buf.area.top, buf.area.bottom)):
        if row_index:
            text.append("\n")
        run: list[str] = []
        run_style: Style | None = None
        x = buf.area.left
        for symbol in rows[row_index]:
            cell_style = buf.get(x, y).style
            if run and cell_style != run_style:
                text.append("".join(run), style=style_to_rich(run_style or Style()))
                run = []
            run.append(symbol)
            run_style = cell_style
            x += max(cell_len(symbol), 1)
        if run:
            text.append("".join(run), style=style_to_rich(run_style or Style()))
    return text


def print_buffer(console: Console, buf: Buffer) -> None:
    """Print a buffer to a rich Console without soft wrapping."""

    console.print(buffer_to_text(buf), soft_wrap=True)
