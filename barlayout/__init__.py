"""Pure layout math for grouped bar charts.

This package contains deterministic computations that turn series values and
an available area into visible-group counts, eighths-of-cell heights and
column offsets. It must not touch buffers, styles or any I/O.
"""

from .layout import BarLayout, SkipReason, resolve_bar_layout

__all__ = ["BarLayout", "SkipReason", "resolve_bar_layout"]
