"""Protocols implemented by anything that paints into a Buffer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .buffer import Buffer
from .geometry import Rect, Size


@runtime_checkable
class Widget(Protocol):
    """Paints itself into `buf`, writing only inside `area`."""

    def render(self, area: Rect, buf: Buffer) -> object: ...


@runtime_checkable
class SizeHint(Protocol):
    """Reports the minimum area a widget wants, given a proposed area."""

    def size_hint(self, area: Rect) -> Size: ...
