"""Edge docking layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ansi_frame.layout.axis import DEFAULT_DOCK_ORDER, Axis, DockEdge
from ansi_frame.layout.box_model import BoxModel, EdgeInsets
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.types import (
    ComputedLayout,
    Constraints,
    PositionedChild,
    Rect,
    is_bounded,
)
from ansi_frame.layout.wrappers import PercentNode


@dataclass
class DockNode(LayoutNode):
    """
    Docks children to the edges of the content box; the body gets the rest.

    Edges are processed in ``dock_order`` (Top, Bottom, Left, Right by
    default). Each docked child consumes a slice of the remaining rect along
    its edge's axis; several children on one edge stack outward-in. The
    body is laid out last with tight constraints equal to what is left.

    The node always fills its max constraints; an unbounded axis falls back
    to its min.
    """
    top: list[LayoutNode] = field(default_factory=list)
    bottom: list[LayoutNode] = field(default_factory=list)
    left: list[LayoutNode] = field(default_factory=list)
    right: list[LayoutNode] = field(default_factory=list)
    body: Optional[LayoutNode] = None
    dock_order: Sequence[DockEdge] = DEFAULT_DOCK_ORDER
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    border: EdgeInsets = field(default_factory=EdgeInsets)
    margin: EdgeInsets = field(default_factory=EdgeInsets)
    min_width: Optional[int] = None
    max_width: Optional[int] = None
    min_height: Optional[int] = None
    max_height: Optional[int] = None

    def edge_children(self, edge: DockEdge) -> list[LayoutNode]:
        return {
            DockEdge.TOP: self.top,
            DockEdge.BOTTOM: self.bottom,
            DockEdge.LEFT: self.left,
            DockEdge.RIGHT: self.right,
        }[edge]

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        effective = constraints.with_node_constraints(
            self.min_width, self.max_width, self.min_height, self.max_height
        )
        insets = self.padding + self.border
        content = effective.deflate(insets)
        width = content.max_width if is_bounded(content.max_width) else content.min_width
        height = content.max_height if is_bounded(content.max_height) else content.min_height

        remaining = Rect(0, 0, width, height)
        positioned = []
        for edge in self.dock_order or DEFAULT_DOCK_ORDER:
            for child in self.edge_children(edge):
                positioned.append(self._dock(child, edge, remaining, width, height))

        if self.body is not None:
            layout = self.body.compute_layout(
                Constraints.tight(remaining.width, remaining.height)
            )
            positioned.append(PositionedChild(
                remaining.x + layout.box.margin.left,
                remaining.y + layout.box.margin.top,
                layout,
            ))

        bw, bh = effective.constrain(width + insets.horizontal, height + insets.vertical)
        return ComputedLayout(
            BoxModel(bw, bh, self.padding, self.border, self.margin), positioned
        )

    @staticmethod
    def _dock(
        child: LayoutNode,
        edge: DockEdge,
        remaining: Rect,
        full_width: int,
        full_height: int,
    ) -> PositionedChild:
        """Lay out one docked child and shrink ``remaining`` in place."""
        vertical_edge = edge in (DockEdge.TOP, DockEdge.BOTTOM)
        if vertical_edge:
            child_constraints = Constraints(remaining.width, remaining.width, 0, remaining.height)
        else:
            child_constraints = Constraints(0, remaining.width, remaining.height, remaining.height)

        # Percentages resolve against the container, not the shrunk remainder.
        node = child
        while isinstance(node, PercentNode):
            if node.axis is Axis.VERTICAL:
                size = min(node.resolve(full_height) or 0, remaining.height)
                child_constraints = Constraints(
                    child_constraints.min_width, child_constraints.max_width, size, size
                )
            else:
                size = min(node.resolve(full_width) or 0, remaining.width)
                child_constraints = Constraints(
                    size, size, child_constraints.min_height, child_constraints.max_height
                )
            node = node.child

        layout = node.compute_layout(child_constraints)
        box = layout.box
        mw, mh = box.margin_box_width, box.margin_box_height

        if edge is DockEdge.TOP:
            x, y = remaining.x, remaining.y
            remaining.y += mh
            remaining.height = max(0, remaining.height - mh)
        elif edge is DockEdge.BOTTOM:
            x, y = remaining.x, remaining.y + remaining.height - mh
            remaining.height = max(0, remaining.height - mh)
        elif edge is DockEdge.LEFT:
            x, y = remaining.x, remaining.y
            remaining.x += mw
            remaining.width = max(0, remaining.width - mw)
        else:
            x, y = remaining.x + remaining.width - mw, remaining.y
            remaining.width = max(0, remaining.width - mw)

        return PositionedChild(x + box.margin.left, y + box.margin.top, layout)
