"""Constraint-based layout resolver."""

from ansi_frame.layout.axis import (
    Axis,
    CrossAxisAlignment,
    DockEdge,
    HorizontalAlignment,
    MainAxisAlignment,
    VerticalAlignment,
)
from ansi_frame.layout.box_model import BoxModel, EdgeInsets
from ansi_frame.layout.box_node import BoxNode
from ansi_frame.layout.distribute import distribute
from ansi_frame.layout.dock_node import DockNode
from ansi_frame.layout.linear_node import ColumnNode, LinearNode, RowNode
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.stack_node import StackChild, StackNode
from ansi_frame.layout.types import (
    UNBOUNDED,
    ComputedLayout,
    Constraints,
    PositionedChild,
    Rect,
    is_bounded,
)
from ansi_frame.layout.wrappers import FlexNode, PercentConstraintWrapper, PercentNode

__all__ = [
    # Geometry
    "UNBOUNDED",
    "is_bounded",
    "Rect",
    "EdgeInsets",
    "Constraints",
    "BoxModel",
    "ComputedLayout",
    "PositionedChild",
    # Enums
    "Axis",
    "MainAxisAlignment",
    "CrossAxisAlignment",
    "HorizontalAlignment",
    "VerticalAlignment",
    "DockEdge",
    # Nodes
    "LayoutNode",
    "BoxNode",
    "LinearNode",
    "RowNode",
    "ColumnNode",
    "FlexNode",
    "PercentNode",
    "PercentConstraintWrapper",
    "StackChild",
    "StackNode",
    "DockNode",
    "distribute",
]
