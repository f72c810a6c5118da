"""Tests for the cell buffer, styles and glyph sets."""

from __future__ import annotations

import pytest

from cellgrid.buffer import Buffer
from cellgrid.geometry import Rect
from cellgrid.style import Color, Modifier, Style
from cellgrid.symbols import NINE_LEVELS, THREE_LEVELS, BarSet, bar_set_name

pytestmark = pytest.mark.unit


def test_set_string_clips_at_right_edge(make_buffer) -> None:
    """Stop writing at the buffer edge and report the end position."""

    buf = make_buffer(5, 1)
    end = buf.set_string(3, 0, "abcd", Style())

    assert buf.lines() == ["   ab"]
    assert end == (5, 0)


def test_set_stringn_respects_max_width(make_buffer) -> None:
    """Write at most `max_width` columns."""

    buf = make_buffer(8, 1)
    buf.set_stringn(0, 0, "hello", 3, Style())

    assert buf.lines() == ["hel     "]


def test_writes_starting_outside_the_area_are_ignored(make_buffer) -> None:
    """Leave the buffer untouched when the start position is outside it."""

    buf = make_buffer(4, 2)
    buf.set_string(7, 0, "x", Style(fg=Color.red))
    buf.set_string(0, 5, "x", Style(fg=Color.red))

    assert buf == Buffer.empty(Rect(x=0, y=0, width=4, height=2))


def test_wide_glyphs_take_two_columns_and_never_split(make_buffer) -> None:
    """Lay out double-width glyphs by display width and drop ones that do not fit."""

    buf = make_buffer(5, 1)
    end = buf.set_string(0, 0, "日本語", Style())

    assert buf.lines() == ["日本 "]
    assert buf.get(1, 0).symbol == " "
    assert end == (4, 0)


def test_set_style_patches_only_the_intersection(make_buffer) -> None:
    """Patch styles inside the target area and keep earlier attributes."""

    buf = make_buffer(4, 1)
    buf.set_style(Rect(x=1, y=0, width=10, height=1), Style(fg=Color.red))
    buf.set_style(Rect(x=2, y=0, width=1, height=1), Style(bg=Color.blue))

    assert buf.get(0, 0).style == Style()
    assert buf.get(1, 0).style == Style(fg=Color.red)
    assert buf.get(2, 0).style == Style(fg=Color.red, bg=Color.blue)
    assert buf.get(3, 0).style == Style(fg=Color.red)


def test_get_outside_area_raises_index_error(make_buffer) -> None:
    """Point reads outside the area are programming errors."""

    buf = make_buffer(2, 2)
    with pytest.raises(IndexError):
        buf.get(2, 0)


def test_with_lines_pads_short_rows() -> None:
    """Size the buffer by the widest line and pad the rest with blanks."""

    buf = Buffer.with_lines(["ab", "c"])

    assert buf.area == Rect(x=0, y=0, width=2, height=2)
    assert buf.lines() == ["ab", "c "]


def test_style_patch_overlays_colors_and_modifiers() -> None:
    """Colors set on the overlay win; modifier removals cancel additions."""

    base = Style(fg=Color.red).with_modifier(Modifier.BOLD)

    patched = base.patch(Style(bg=Color.blue))
    assert patched.fg == Color.red
    assert patched.bg == Color.blue
    assert Modifier.BOLD in patched.modifiers()

    cleared = base.patch(Style().without_modifier(Modifier.BOLD))
    assert Modifier.BOLD not in cleared.modifiers()


def test_style_helpers_return_updated_copies() -> None:
    """Fluent helpers set one attribute and leave the original untouched."""

    base = Style()
    styled = base.with_fg(Color.red).with_bg(Color.blue)

    assert styled == Style(fg=Color.red, bg=Color.blue)
    assert base == Style()


def test_bar_set_glyph_for_clamps_levels() -> None:
    """Map levels to glyphs, clamping below 0 and above 8."""

    assert NINE_LEVELS.glyph_for(-3) == " "
    assert NINE_LEVELS.glyph_for(0) == " "
    assert NINE_LEVELS.glyph_for(3) == "▃"
    assert NINE_LEVELS.glyph_for(8) == "█"
    assert NINE_LEVELS.glyph_for(12) == "█"
    assert THREE_LEVELS.glyph_for(1) == " "
    assert THREE_LEVELS.glyph_for(4) == "▄"
    assert THREE_LEVELS.glyph_for(7) == "█"


def test_bar_set_name_resolves_registered_sets_only() -> None:
    """Return registry names for built-in sets and None for custom ones."""

    assert bar_set_name(NINE_LEVELS) == "nine_levels"
    assert bar_set_name(THREE_LEVELS) == "three_levels"
    assert bar_set_name(BarSet(full="#")) is None
