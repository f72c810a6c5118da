"""A mutable grid of styled character cells.

Widgets render into a `Buffer` owned by the caller. Every write is clipped to
the buffer's area, so widgets never need to bounds-check their own output
beyond choosing start coordinates.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.cells import cell_len

from .geometry import Rect
from .style import Style


@dataclass(slots=True)
class Cell:
    """One grid position holding a single display glyph and its style.

    Args:
        symbol: Glyph displayed in the cell.
        style: Attributes applied to the glyph.
    """

    symbol: str = " "
    style: Style = field(default_factory=Style)

    def set_symbol(self, symbol: str) -> Cell:
        self.symbol = symbol
        return self

    def set_style(self, style: Style) -> Cell:
        """Patch `style` over the cell's current style."""

        self.style = self.style.patch(style)
        return self

    def reset(self) -> None:
        self.symbol = " "
        self.style = Style()


@dataclass(slots=True)
class Buffer:
    """Cells for a rectangular area, stored row-major.

    Args:
        area: Region of the screen covered by the buffer.
        content: `area.width * area.height` cells, row by row.
    """

    area: Rect
    content: list[Cell]

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        """Return a buffer of blank, unstyled cells."""

        return cls.filled(area, Cell())

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        """Return a buffer where every cell is a copy of `cell`."""

        size = max(area.area, 0)
        return cls(area=area, content=[Cell(symbol=cell.symbol, style=cell.style) for _ in range(size)])

    @classmethod
    def with_lines(cls, lines: Sequence[str]) -> Buffer:
        """Build an unstyled buffer whose rows display `lines`.

        The buffer is as wide as the widest line; shorter lines are padded
        with blanks. Mostly useful for writing expected output in tests.
        """

        width = max((cell_len(line) for line in lines), default=0)
        buf = cls.empty(Rect(x=0, y=0, width=width, height=len(lines)))
        for y, line in enumerate(lines):
            buf.set_string(0, y, line, Style())
        return buf

    def index_of(self, x: int, y: int) -> int:
        """Return the offset of `(x, y)` in `content`.

        Raises:
            IndexError: When the position is outside the buffer area.
        """

        if not self.area.contains(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside the buffer area {self.area}.")
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at `(x, y)`; raises IndexError outside the area."""

        return self.content[self.index_of(x, y)]

    def set_string(self, x: int, y: int, string: str, style: Style) -> tuple[int, int]:
        """Write `string` starting at `(x, y)`, clipped at the right edge."""

        return self.set_stringn(x, y, string, self.area.right - x, style)

    def set_stringn(self, x: int, y: int, string: str, max_width: int, style: Style) -> tuple[int, int]:
        """Write at most `max_width` columns of `string` starting at `(x, y)`.

        Glyphs are laid out by display width: wide glyphs take two columns
        (the cell they cover is reset), zero-width glyphs are dropped, and a
        glyph that would not fit entirely is not written.

        Args:
            x: Start column.
            y: Row.
            string: Text to write.
            max_width: Maximum number of columns to fill.
            style: Style patched over every written cell.

        Returns:
            The position just after the last written glyph.
        """

        if not self.area.contains(x, y):
            return x, y

        remaining = min(self.area.right - x, max_width)
        for char in string:
            width = cell_len(char)
            if width == 0:
                continue
            if width > remaining:
                break
            self.get(x, y).set_symbol(char).set_style(style)
            for offset in range(1, width):
                self.get(x + offset, y).reset()
            x += width
            remaining -= width
        return x, y

    def set_style(self, area: Rect, style: Style) -> None:
        """Patch `style` over every cell of `area` that lies in the buffer."""

        target = self.area.intersection(area)
        for y in range(target.top, target.bottom):
            for x in range(target.left, target.right):
                self.get(x, y).set_style(style)

    def lines(self) -> list[str]:
        """Return the displayed text of each row.

        Cells hidden behind a wide glyph are skipped.
        """

        rows: list[str] = []
        for y in range(self.area.top, self.area.bottom):
            parts: list[str] = []
            hidden = 0
            for x in range(self.area.left, self.area.right):
                if hidden:
                    hidden -= 1
                    continue
                symbol = self.get(x, y).symbol
                parts.append(symbol)
                hidden = max(cell_len(symbol) - 1, 0)
            rows.append("".join(parts))
        return rows
