"""Axis and alignment enums used by layout nodes."""

from enum import Enum


class Axis(Enum):
    """Layout direction of a linear container."""
    HORIZONTAL = "horizontal"   # Row
    VERTICAL = "vertical"       # Column

    @property
    def cross(self) -> "Axis":
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


class MainAxisAlignment(Enum):
    """Distribution of slack along the main axis."""
    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class CrossAxisAlignment(Enum):
    """Placement of children across the main axis."""
    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class HorizontalAlignment(Enum):
    START = "start"
    CENTER = "center"
    END = "end"


class VerticalAlignment(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class DockEdge(Enum):
    """Edges a docked widget can attach to."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


DEFAULT_DOCK_ORDER = (DockEdge.TOP, DockEdge.BOTTOM, DockEdge.LEFT, DockEdge.RIGHT)
