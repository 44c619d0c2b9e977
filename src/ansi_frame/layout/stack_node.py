"""Overlay layout: aligned and edge-positioned children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ansi_frame.layout.axis import HorizontalAlignment, VerticalAlignment
from ansi_frame.layout.box_model import BoxModel, EdgeInsets
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.types import (
    ComputedLayout,
    Constraints,
    PositionedChild,
    is_bounded,
)


@dataclass
class StackChild:
    """
    A child of a StackNode.

    A child with any of the offsets set is *positioned*: it is placed by its
    offsets from the stack's border edges instead of by the stack's
    alignment. Offsets may be negative.
    """
    node: LayoutNode
    top: Optional[int] = None
    right: Optional[int] = None
    bottom: Optional[int] = None
    left: Optional[int] = None

    @property
    def is_positioned(self) -> bool:
        return any(v is not None for v in (self.top, self.right, self.bottom, self.left))


@dataclass
class StackNode(LayoutNode):
    """
    Overlays children in declaration order; later children paint on top.

    Without a tight constraint the stack sizes itself to the bounding box
    of its largest non-positioned child.

    Non-positioned children align inside the content box. Positioned
    children take their offsets from the border box, so they can overlap
    the border and padding.
    """
    children: list[StackChild] = field(default_factory=list)
    h_align: HorizontalAlignment = HorizontalAlignment.START
    v_align: VerticalAlignment = VerticalAlignment.TOP
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

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        effective = constraints.with_node_constraints(
            self.min_width, self.max_width, self.min_height, self.max_height
        )
        insets = self.padding + self.border
        content = effective.deflate(insets)
        loose = Constraints.loose(content.max_width, content.max_height)

        layouts: list[Optional[ComputedLayout]] = [None] * len(self.children)
        natural_w = natural_h = 0
        for i, child in enumerate(self.children):
            if child.is_positioned:
                continue
            layout = child.node.compute_layout(loose)
            layouts[i] = layout
            natural_w = max(natural_w, layout.box.margin_box_width)
            natural_h = max(natural_h, layout.box.margin_box_height)

        width, height = effective.constrain(
            natural_w + insets.horizontal, natural_h + insets.vertical
        )
        if self.expand_width and is_bounded(effective.max_width):
            width = effective.max_width
        if self.expand_height and is_bounded(effective.max_height):
            height = effective.max_height

        content_w = max(0, width - insets.horizontal)
        content_h = max(0, height - insets.vertical)

        origin_x, origin_y = insets.left, insets.top
        positioned = []
        for i, child in enumerate(self.children):
            if child.is_positioned:
                # Offsets and sizes are measured from the border box.
                layout = child.node.compute_layout(
                    self._positioned_constraints(child, width, height)
                )
                x, y = self._positioned_origin(child, layout.box, width, height)
                x, y = x - origin_x, y - origin_y
            else:
                layout = layouts[i]  # type: ignore[assignment]
                x, y = self._aligned_origin(layout.box, content_w, content_h)
            positioned.append(PositionedChild(x, y, layout))

        return ComputedLayout(
            BoxModel(width, height, self.padding, self.border, self.margin),
            positioned,
        )

    @staticmethod
    def _positioned_constraints(child: StackChild, width: int, height: int) -> Constraints:
        min_w, max_w = 0, width
        min_h, max_h = 0, height
        if child.left is not None and child.right is not None:
            min_w = max_w = max(0, width - child.left - child.right)
        if child.top is not None and child.bottom is not None:
            min_h = max_h = max(0, height - child.top - child.bottom)
        return Constraints(min_w, max_w, min_h, max_h)

    @staticmethod
    def _positioned_origin(child: StackChild, box: BoxModel, width: int, height: int) -> tuple[int, int]:
        x = y = 0
        if child.left is not None:
            x = child.left
        elif child.right is not None:
            x = width - box.margin_box_width - child.right
        if child.top is not None:
            y = child.top
        elif child.bottom is not None:
            y = height - box.margin_box_height - child.bottom
        return x + box.margin.left, y + box.margin.top

    def _aligned_origin(self, box: BoxModel, width: int, height: int) -> tuple[int, int]:
        x = y = 0
        if self.h_align is HorizontalAlignment.CENTER:
            x = (width - box.margin_box_width) // 2
        elif self.h_align is HorizontalAlignment.END:
            x = width - box.margin_box_width
        if self.v_align is VerticalAlignment.CENTER:
            y = (height - box.margin_box_height) // 2
        elif self.v_align is VerticalAlignment.BOTTOM:
            y = height - box.margin_box_height
        return x + box.margin.left, y + box.margin.top

    def preserves_width(self) -> bool:
        return self.preserve_width

    def preserves_height(self) -> bool:
        return self.preserve_height
