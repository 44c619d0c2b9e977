"""Row and Column layout.

One axis-agnostic implementation (``LinearNode``) works in terms of a main
axis and a cross axis; ``RowNode`` and ``ColumnNode`` fix the axis.

Sizing runs in two passes:

1. Fixed-class children (cells, auto, anything not wrapped in a main-axis
   FlexNode) are measured against the content span minus spacing. Main-axis
   PercentNodes resolve against the container's own content span.
2. Whatever main-axis space remains is split across FlexNode children by
   weight with largest-remainder rounding, so the split sums exactly to the
   remaining space.

Children are never shrunk to fit; the container clamps its own size at its
constraint boundary and leaves overflow to the painter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ansi_frame.layout.axis import Axis, CrossAxisAlignment, MainAxisAlignment
from ansi_frame.layout.box_model import BoxModel, EdgeInsets
from ansi_frame.layout.distribute import distribute
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.types import (
    ComputedLayout,
    Constraints,
    PositionedChild,
    is_bounded,
)
from ansi_frame.layout.wrappers import FlexNode, PercentNode

logger = logging.getLogger(__name__)


@dataclass
class LinearNode(LayoutNode):
    """Lays out children along a single axis."""
    axis: Axis = Axis.HORIZONTAL
    children: list[LayoutNode] = field(default_factory=list)
    spacing: int = 0
    main_align: MainAxisAlignment = MainAxisAlignment.START
    cross_align: CrossAxisAlignment = CrossAxisAlignment.START
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    border: EdgeInsets = field(default_factory=EdgeInsets)
    margin: EdgeInsets = field(default_factory=EdgeInsets)
    min_width: Optional[int] = None
    max_width: Optional[int] = None
    min_height: Optional[int] = None
    max_height: Optional[int] = None
    expand_width: bool = False
    expand_height: bool = False
    preserve_width: bool = False
    preserve_height: bool = False

    # --- axis helpers ---

    def _main(self, w: int, h: int) -> int:
        return w if self.axis is Axis.HORIZONTAL else h

    def _cross(self, w: int, h: int) -> int:
        return h if self.axis is Axis.HORIZONTAL else w

    def _size(self, main: int, cross: int) -> tuple[int, int]:
        return (main, cross) if self.axis is Axis.HORIZONTAL else (cross, main)

    def _constraints(self, main_min: int, main_max: int, cross_min: int, cross_max: int) -> Constraints:
        if self.axis is Axis.HORIZONTAL:
            return Constraints(main_min, main_max, cross_min, cross_max)
        return Constraints(cross_min, cross_max, main_min, main_max)

    def _is_flex(self, child: LayoutNode) -> bool:
        return isinstance(child, FlexNode)

    def _unwrap(self, child: LayoutNode) -> LayoutNode:
        """Strip a main-axis wrapper so a re-layout keeps the allocated size."""
        if isinstance(child, FlexNode):
            return child.child
        if isinstance(child, PercentNode) and child.axis is self.axis:
            return child.child
        return child

    def _preserves_cross(self, child: LayoutNode) -> bool:
        if self.axis is Axis.HORIZONTAL:
            return child.preserves_height()
        return child.preserves_width()

    @property
    def _expand_main(self) -> bool:
        return self.expand_width if self.axis is Axis.HORIZONTAL else self.expand_height

    @property
    def _expand_cross(self) -> bool:
        return self.expand_height if self.axis is Axis.HORIZONTAL else self.expand_width

    def _total_spacing(self) -> int:
        return max(0, self.spacing) * max(0, len(self.children) - 1)

    # --- layout ---

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        effective = constraints.with_node_constraints(
            self.min_width, self.max_width, self.min_height, self.max_height
        )
        insets = self.padding + self.border
        content = effective.deflate(insets)
        main_min = self._main(content.min_width, content.min_height)
        main_max = self._main(content.max_width, content.max_height)
        cross_min = self._cross(content.min_width, content.min_height)
        cross_max = self._cross(content.max_width, content.max_height)
        bounded_main = is_bounded(main_max)
        total_spacing = self._total_spacing()

        n = len(self.children)
        layouts: list[Optional[ComputedLayout]] = [None] * n
        flex_indices: list[int] = []
        consumed = 0

        # Pass 1: fixed-class and percent children.
        fixed_max = max(0, main_max - total_spacing) if bounded_main else main_max
        for i, child in enumerate(self.children):
            if self._is_flex(child):
                flex_indices.append(i)
                continue
            if isinstance(child, PercentNode) and child.axis is self.axis:
                child_constraints = self._constraints(0, main_max, 0, cross_max)
            else:
                child_constraints = self._constraints(0, fixed_max, 0, cross_max)
            layout = child.compute_layout(child_constraints)
            layouts[i] = layout
            consumed += self._main(layout.box.margin_box_width, layout.box.margin_box_height)

        # Container main size.
        if bounded_main and (flex_indices or self._expand_main):
            container_main = main_max
        else:
            container_main = max(main_min, min(main_max, consumed + total_spacing))

        # Pass 2: flex children share what is left.
        if flex_indices:
            remaining = 0
            if bounded_main:
                remaining = max(0, container_main - consumed - total_spacing)
            else:
                logger.debug("flex children in an unbounded axis collapse to 0")
            weights = [self.children[i].flex_value for i in flex_indices]  # type: ignore[attr-defined]
            for i, share in zip(flex_indices, distribute(remaining, weights)):
                child = self.children[i]
                margin = child.margin
                border_main = max(0, share - self._main(margin.horizontal, margin.vertical))
                child_constraints = self._constraints(border_main, border_main, 0, cross_max)
                layouts[i] = self._unwrap(child).compute_layout(child_constraints)

        done: list[ComputedLayout] = [layout for layout in layouts if layout is not None]

        # Container cross size.
        max_cross = max(
            (self._cross(l.box.margin_box_width, l.box.margin_box_height) for l in done),
            default=0,
        )
        if self._expand_cross and is_bounded(cross_max):
            container_cross = cross_max
        else:
            container_cross = max(cross_min, min(cross_max, max_cross))

        positioned = self._position(done, container_main, container_cross)

        width, height = self._size(container_main, container_cross)
        width, height = effective.constrain(
            width + insets.horizontal, height + insets.vertical
        )
        return ComputedLayout(
            BoxModel(width, height, self.padding, self.border, self.margin),
            positioned,
        )

    def _main_positions(self, sizes: list[int], container_main: int) -> list[int]:
        n = len(sizes)
        spacing = max(0, self.spacing)
        slack = container_main - sum(sizes) - self._total_spacing()
        align = self.main_align if slack > 0 else MainAxisAlignment.START

        lead = 0
        gaps = [spacing] * max(0, n - 1)
        if align is MainAxisAlignment.CENTER:
            lead = slack // 2
        elif align is MainAxisAlignment.END:
            lead = slack
        elif align is MainAxisAlignment.SPACE_BETWEEN and n > 1:
            gaps = [
                spacing + (slack * (i + 1) // (n - 1)) - (slack * i // (n - 1))
                for i in range(n - 1)
            ]
        elif align is MainAxisAlignment.SPACE_AROUND and n > 0:
            # Half a unit at each end, a full unit between children.
            edges = [slack * (2 * i + 1) // (2 * n) for i in range(n)]
            lead = edges[0]
            gaps = [spacing + edges[i + 1] - edges[i] for i in range(n - 1)]
        elif align is MainAxisAlignment.SPACE_EVENLY and n > 0:
            edges = [slack * (i + 1) // (n + 1) for i in range(n)]
            lead = edges[0]
            gaps = [spacing + edges[i + 1] - edges[i] for i in range(n - 1)]

        positions = []
        pos = lead
        for i, size in enumerate(sizes):
            positions.append(pos)
            pos += size + (gaps[i] if i < len(gaps) else 0)
        return positions

    def _position(
        self,
        layouts: list[ComputedLayout],
        container_main: int,
        container_cross: int,
    ) -> list[PositionedChild]:
        sizes = [self._main(l.box.margin_box_width, l.box.margin_box_height) for l in layouts]
        main_positions = self._main_positions(sizes, container_main)

        positioned = []
        for i, layout in enumerate(layouts):
            child = self.children[i]
            box = layout.box
            align = self.cross_align
            if align is CrossAxisAlignment.STRETCH and self._preserves_cross(child):
                align = CrossAxisAlignment.START

            child_cross = self._cross(box.margin_box_width, box.margin_box_height)
            if align is CrossAxisAlignment.STRETCH:
                margin_cross = self._cross(box.margin.horizontal, box.margin.vertical)
                available = max(0, container_cross - margin_cross)
                main_size = self._main(box.width, box.height)
                layout = self._unwrap(child).compute_layout(
                    self._constraints(main_size, main_size, available, available)
                )
                box = layout.box
                cross_pos = 0
            elif align is CrossAxisAlignment.CENTER:
                cross_pos = (container_cross - child_cross) // 2
            elif align is CrossAxisAlignment.END:
                cross_pos = container_cross - child_cross
            else:
                cross_pos = 0

            x, y = self._size(main_positions[i], cross_pos)
            positioned.append(PositionedChild(x + box.margin.left, y + box.margin.top, layout))
        return positioned

    def preserves_width(self) -> bool:
        return self.preserve_width

    def preserves_height(self) -> bool:
        return self.preserve_height


@dataclass
class RowNode(LinearNode):
    """Horizontal linear layout."""
    axis: Axis = Axis.HORIZONTAL


@dataclass
class ColumnNode(LinearNode):
    """Vertical linear layout."""
    axis: Axis = Axis.VERTICAL
