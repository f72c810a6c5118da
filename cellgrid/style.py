"""Text attributes applied to grid cells.

A `Style` is an opaque bag of foreground, background and modifier settings.
Unset fields (`None` colors, empty modifiers) leave the underlying cell
unchanged when the style is patched over it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, Flag, auto


class Color(str, Enum):
    """Named terminal colors (values match `rich` color names)."""

    reset = "default"
    black = "black"
    red = "red"
    green = "green"
    yellow = "yellow"
    blue = "blue"
    magenta = "magenta"
    cyan = "cyan"
    gray = "bright_black"
    white = "white"
    light_red = "bright_red"
    light_green = "bright_green"
    light_yellow = "bright_yellow"
    light_blue = "bright_blue"
    light_magenta = "bright_magenta"
    light_cyan = "bright_cyan"


class Modifier(Flag):
    """Text decorations that can be combined with `|`."""

    NONE = 0
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    REVERSED = auto()
    CROSSED_OUT = auto()


@dataclass(frozen=True, slots=True)
class Style:
    """Foreground/background/modifier settings for a cell.

    Args:
        fg: Foreground color, or None to keep the cell's color.
        bg: Background color, or None to keep the cell's color.
        add_modifier: Modifiers switched on by this style.
        sub_modifier: Modifiers switched off by this style.
    """

    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = Modifier.NONE
    sub_modifier: Modifier = Modifier.NONE

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def with_modifier(self, modifier: Modifier) -> Style:
        """Return a copy that switches `modifier` on."""

        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def without_modifier(self, modifier: Modifier) -> Style:
        """Return a copy that switches `modifier` off."""

        return replace(
            self,
            add_modifier=self.add_modifier & ~modifier,
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: Style) -> Style:
        """Overlay `other` on this style.

        Colors set on `other` win; modifiers are combined so that `other`'s
        additions and removals take precedence.

        Args:
            other: Style applied on top of this one.

        Returns:
            The combined Style.
        """

        add = (self.add_modifier & ~other.sub_modifier) | other.add_modifier
        sub = (self.sub_modifier & ~other.add_modifier) | other.sub_modifier
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=add,
            sub_modifier=sub,
        )

    def modifiers(self) -> Modifier:
        """Return the effective set of active modifiers."""

        return self.add_modifier & ~self.sub_modifier
