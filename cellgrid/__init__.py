"""Character-cell grid primitives used by the chart widgets.

This package owns the drawing surface (a `Buffer` of `Cell`s addressed by a
`Rect`), the text attributes applied to cells, the glyph sets used for
sub-cell bar heights, and the bordered `Block` wrapper. It knows nothing
about charts.
"""

from .block import Block, BorderType, Borders
from .buffer import Buffer, Cell
from .geometry import Rect, Size
from .style import Color, Modifier, Style
from .symbols import BAR_SETS, NINE_LEVELS, THREE_LEVELS, BarSet

__all__ = [
    "BAR_SETS",
    "NINE_LEVELS",
    "THREE_LEVELS",
    "BarSet",
    "Block",
    "BorderType",
    "Borders",
    "Buffer",
    "Cell",
    "Color",
    "Modifier",
    "Rect",
    "Size",
    "Style",
]
