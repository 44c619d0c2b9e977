"""Styling that affects layout: insets, borders, bounds, alignment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from ansi_frame.layout.axis import HorizontalAlignment, VerticalAlignment
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.widgets.dimension import Dimension


class BorderStyle(Enum):
    """Border decoration. Every visible border is exactly one cell wide."""
    NONE = "none"
    SQUARE = "square"
    ROUNDED = "rounded"
    DOUBLE = "double"
    HEAVY = "heavy"
    ASCII = "ascii"

    @property
    def width(self) -> int:
        return 0 if self is BorderStyle.NONE else 1

    @property
    def insets(self) -> EdgeInsets:
        return EdgeInsets.all(self.width)


@dataclass(frozen=True)
class Style:
    """
    Layout-affecting style for a widget.

    Attributes:
        padding: Space between border and content (inside the box).
        margin: Space outside the box, offsetting it among siblings.
        border: Border decoration; adds one cell per side when set.
        min_width / max_width / min_height / max_height: Bounds on the
            widget's size. Cells bounds are content sizes; percent bounds
            resolve against the parent's available space.
    """
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    margin: EdgeInsets = field(default_factory=EdgeInsets)
    border: BorderStyle = BorderStyle.NONE
    min_width: Dimension = Dimension.UNSET
    max_width: Dimension = Dimension.UNSET
    min_height: Dimension = Dimension.UNSET
    max_height: Dimension = Dimension.UNSET

    @property
    def border_insets(self) -> EdgeInsets:
        return self.border.insets


@dataclass(frozen=True)
class Alignment:
    """Two-dimensional alignment inside a box (used by Stack)."""
    horizontal: HorizontalAlignment = HorizontalAlignment.START
    vertical: VerticalAlignment = VerticalAlignment.TOP

    TOP_LEFT: ClassVar["Alignment"]
    TOP_CENTER: ClassVar["Alignment"]
    TOP_RIGHT: ClassVar["Alignment"]
    CENTER_LEFT: ClassVar["Alignment"]
    CENTER: ClassVar["Alignment"]
    CENTER_RIGHT: ClassVar["Alignment"]
    BOTTOM_LEFT: ClassVar["Alignment"]
    BOTTOM_CENTER: ClassVar["Alignment"]
    BOTTOM_RIGHT: ClassVar["Alignment"]


_H = HorizontalAlignment
_V = VerticalAlignment
Alignment.TOP_LEFT = Alignment(_H.START, _V.TOP)
Alignment.TOP_CENTER = Alignment(_H.CENTER, _V.TOP)
Alignment.TOP_RIGHT = Alignment(_H.END, _V.TOP)
Alignment.CENTER_LEFT = Alignment(_H.START, _V.CENTER)
Alignment.CENTER = Alignment(_H.CENTER, _V.CENTER)
Alignment.CENTER_RIGHT = Alignment(_H.END, _V.CENTER)
Alignment.BOTTOM_LEFT = Alignment(_H.START, _V.BOTTOM)
Alignment.BOTTOM_CENTER = Alignment(_H.CENTER, _V.BOTTOM)
Alignment.BOTTOM_RIGHT = Alignment(_H.END, _V.BOTTOM)
