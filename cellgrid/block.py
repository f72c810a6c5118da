"""Bordered, titled container drawn around another widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag

from rich.cells import cell_len

from .buffer import Buffer
from .geometry import Rect, Size
from .style import Style


class Borders(Flag):
    """Which sides of a block carry a border."""

    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True, slots=True)
class LineSet:
    """Glyphs for drawing a border."""

    vertical: str
    horizontal: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


class BorderType(Enum):
    """Border line families."""

    plain = LineSet("│", "─", "┌", "┐", "└", "┘")
    rounded = LineSet("│", "─", "╭", "╮", "╰", "╯")
    double = LineSet("║", "═", "╔", "╗", "╚", "╝")
    thick = LineSet("┃", "━", "┏", "┓", "┗", "┛")


@dataclass(frozen=True, slots=True)
class Block:
    """A border and optional title that reserve space around inner content.

    Args:
        title: Text written on the top row, after the left border.
        borders: Sides that carry a border.
        border_type: Line family used for the border.
        border_style: Style of the border glyphs.
        title_style: Style of the title text.
        style: Base style patched over the whole block area.
    """

    title: str | None = None
    borders: Borders = Borders.NONE
    border_type: BorderType = BorderType.plain
    border_style: Style = field(default_factory=Style)
    title_style: Style = field(default_factory=Style)
    style: Style = field(default_factory=Style)

    def _reserved(self) -> tuple[int, int, int, int]:
        """Return the cells reserved on the (left, top, right, bottom) sides."""

        left = 1 if Borders.LEFT in self.borders else 0
        top = 1 if Borders.TOP in self.borders or self.title else 0
        right = 1 if Borders.RIGHT in self.borders else 0
        bottom = 1 if Borders.BOTTOM in self.borders else 0
        return left, top, right, bottom

    def inner(self, area: Rect) -> Rect:
        """Return the drawable region left after borders and title.

        Args:
            area: Full area allotted to the block.

        Returns:
            The inner Rect; its width/height never go below zero.
        """

        left, top, right, bottom = self._reserved()
        x = min(area.x + left, area.right)
        y = min(area.y + top, area.bottom)
        width = max(area.width - left - right, 0)
        height = max(area.height - top - bottom, 0)
        return Rect(x=x, y=y, width=width, height=height)

    def size_hint(self, area: Rect) -> Size:
        """Return the minimum size the block needs, grown to `area`."""

        left, top, right, bottom = self._reserved()
        title_width = cell_len(self.title) if self.title else 0
        return Size(
            width=max(area.width, left + right + title_width),
            height=max(area.height, top + bottom),
        )

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the border and title into `buf`, clipped to its area."""

        area = buf.area.intersection(area)
        if area.is_empty():
            return
        buf.set_style(area, self.style)
        lines = self.border_type.value
        last_x = area.right - 1
        last_y = area.bottom - 1

        if Borders.LEFT in self.borders:
            for y in range(area.top, area.bottom):
                buf.get(area.left, y).set_symbol(lines.vertical).set_style(self.border_style)
        if Borders.RIGHT in self.borders:
            for y in range(area.top, area.bottom):
                buf.get(last_x, y).set_symbol(lines.vertical).set_style(self.border_style)
        if Borders.TOP in self.borders:
            for x in range(area.left, area.right):
                buf.get(x, area.top).set_symbol(lines.horizontal).set_style(self.border_style)
        if Borders.BOTTOM in self.borders:
            for x in range(area.left, area.right):
                buf.get(x, last_y).set_symbol(lines.horizontal).set_style(self.border_style)

        corners = (
            (Borders.TOP | Borders.LEFT, area.left, area.top, lines.top_left),
            (Borders.TOP | Borders.RIGHT, last_x, area.top, lines.top_right),
            (Borders.BOTTOM | Borders.LEFT, area.left, last_y, lines.bottom_left),
            (Borders.BOTTOM | Borders.RIGHT, last_x, last_y, lines.bottom_right),
        )
        for sides, x, y, symbol in corners:
            if sides in self.borders:
                buf.get(x, y).set_symbol(symbol).set_style(self.border_style)

        if self.title:
            left, _, right, _ = self._reserved()
            buf.set_stringn(
                area.left + left,
                area.top,
                self.title,
                area.width - left - right,
                self.title_style,
            )
