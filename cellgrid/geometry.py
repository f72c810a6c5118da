"""Rectangles and sizes in character-cell coordinates.

Coordinates grow rightwards (x) and downwards (y). `right` and `bottom` are
exclusive bounds, so a `Rect(x=0, y=0, width=3, height=2)` covers columns
0..2 and rows 0..1.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair returned by size negotiation.

    Args:
        width: Width in cells.
        height: Height in cells.
    """

    width: int = 0
    height: int = 0


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle of cells.

    Args:
        x: Left column.
        y: Top row.
        width: Number of columns.
        height: Number of rows.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        """Return True when the rectangle covers no cells."""

        return self.width <= 0 or self.height <= 0

    def contains(self, x: int, y: int) -> bool:
        """Return True when `(x, y)` lies inside the rectangle."""

        return self.left <= x < self.right and self.top <= y < self.bottom

    def inner(self, margin: int) -> Rect:
        """Shrink the rectangle by `margin` cells on every side.

        Args:
            margin: Cells removed from each edge.

        Returns:
            The shrunken Rect, or an empty Rect at the same origin when the
            margin does not fit.
        """

        if self.width < 2 * margin or self.height < 2 * margin:
            return Rect(x=self.x, y=self.y, width=0, height=0)
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=self.width - 2 * margin,
            height=self.height - 2 * margin,
        )

    def intersection(self, other: Rect) -> Rect:
        """Return the overlap between two rectangles (empty when disjoint)."""

        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x=x1, y=y1, width=max(x2 - x1, 0), height=max(y2 - y1, 0))

    def split_rows(self, parts: int) -> tuple[Rect, ...]:
        """Split into `parts` stacked rectangles of (nearly) equal height.

        The last part absorbs any remainder rows.
        """

        return tuple(
            Rect(x=self.x, y=self.y + offset, width=self.width, height=length)
            for offset, length in _equal_spans(self.height, parts)
        )

    def split_columns(self, parts: int) -> tuple[Rect, ...]:
        """Split into `parts` side-by-side rectangles of (nearly) equal width.

        The last part absorbs any remainder columns.
        """

        return tuple(
            Rect(x=self.x + offset, y=self.y, width=length, height=self.height)
            for offset, length in _equal_spans(self.width, parts)
        )


def _equal_spans(total: int, parts: int) -> list[tuple[int, int]]:
    """Return `(offset, length)` pairs that tile `total` into `parts` spans."""

    if parts < 1:
        raise ValueError(f"parts must be >= 1, got {parts}.")
    base = total // parts
    spans = [(idx * base, base) for idx in range(parts)]
    last_offset, _ = spans[-1]
    spans[-1] = (last_offset, total - last_offset)
    return spans
