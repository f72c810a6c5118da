"""Glyph sets for drawing bars with eighth-of-a-cell resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

FULL: Final = "█"
SEVEN_EIGHTHS: Final = "▇"
THREE_QUARTERS: Final = "▆"
FIVE_EIGHTHS: Final = "▅"
HALF: Final = "▄"
THREE_EIGHTHS: Final = "▃"
ONE_QUARTER: Final = "▂"
ONE_EIGHTH: Final = "▁"
EMPTY: Final = " "


@dataclass(frozen=True, slots=True)
class BarSet:
    """Nine glyphs representing 0/8 through 8/8 of a filled cell.

    Args:
        full: Glyph for a completely filled cell (8/8).
        seven_eighths: Glyph for 7/8.
        three_quarters: Glyph for 6/8.
        five_eighths: Glyph for 5/8.
        half: Glyph for 4/8.
        three_eighths: Glyph for 3/8.
        one_quarter: Glyph for 2/8.
        one_eighth: Glyph for 1/8.
        empty: Glyph for an empty cell (0/8).
    """

    full: str = FULL
    seven_eighths: str = SEVEN_EIGHTHS
    three_quarters: str = THREE_QUARTERS
    five_eighths: str = FIVE_EIGHTHS
    half: str = HALF
    three_eighths: str = THREE_EIGHTHS
    one_quarter: str = ONE_QUARTER
    one_eighth: str = ONE_EIGHTH
    empty: str = EMPTY

    def levels(self) -> tuple[str, ...]:
        """Return the glyphs ordered from empty (index 0) to full (index 8)."""

        return (
            self.empty,
            self.one_eighth,
            self.one_quarter,
            self.three_eighths,
            self.half,
            self.five_eighths,
            self.three_quarters,
            self.seven_eighths,
            self.full,
        )

    def glyph_for(self, level: int) -> str:
        """Return the glyph for a fill level in eighths.

        Levels below 0 map to `empty` and levels of 8 or more map to `full`.
        """

        return self.levels()[min(max(level, 0), 8)]


NINE_LEVELS: Final = BarSet()

THREE_LEVELS: Final = BarSet(
    full=FULL,
    seven_eighths=FULL,
    three_quarters=HALF,
    five_eighths=HALF,
    half=HALF,
    three_eighths=HALF,
    one_quarter=HALF,
    one_eighth=EMPTY,
    empty=EMPTY,
)

BAR_SETS: Final[dict[str, BarSet]] = {
    "nine_levels": NINE_LEVELS,
    "three_levels": THREE_LEVELS,
}


def bar_set_name(bar_set: BarSet) -> str | None:
    """Return the registry name for a bar set, or None for custom sets."""

    for name, candidate in BAR_SETS.items():
        if candidate == bar_set:
            return name
    return None
