"""Leaf layout node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from ansi_frame.layout.box_model import BoxModel, EdgeInsets
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.types import ComputedLayout, Constraints, is_bounded

MeasureFunc = Callable[[Constraints], tuple[int, int]]


@dataclass
class BoxNode(LayoutNode):
    """
    Leaf node with a fixed size or a measure callback.

    When ``measure`` is set it receives content-box constraints and returns
    the content size; padding and border are added back before the result
    is clamped into the effective constraints. Without a callback the box
    uses ``width`` x ``height`` as its border-box size.

    Attributes:
        expand_width: Fill the max width when it is bounded.
        expand_height: Fill the max height when it is bounded.
        preserve_width: Keep natural width when a parent stretches.
        preserve_height: Keep natural height when a parent stretches.
    """
    width: int = 0
    height: int = 0
    min_width: Optional[int] = None
    max_width: Optional[int] = None
    min_height: Optional[int] = None
    max_height: Optional[int] = None
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    border: EdgeInsets = field(default_factory=EdgeInsets)
    margin: EdgeInsets = field(default_factory=EdgeInsets)
    measure: Optional[MeasureFunc] = None
    expand_width: bool = False
    expand_height: bool = False
    preserve_width: bool = False
    preserve_height: bool = False

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        effective = constraints.with_node_constraints(
            self.min_width, self.max_width, self.min_height, self.max_height
        )
        insets = self.padding + self.border

        if self.measure is not None:
            content_w, content_h = self.measure(effective.deflate(insets))
            width = max(0, content_w) + insets.horizontal
            height = max(0, content_h) + insets.vertical
        else:
            width, height = self.width, self.height

        if self.expand_width and is_bounded(effective.max_width):
            width = effective.max_width
        if self.expand_height and is_bounded(effective.max_height):
            height = effective.max_height

        width, height = effective.constrain(width, height)
        return ComputedLayout(
            BoxModel(width, height, self.padding, self.border, self.margin)
        )

    def preserves_width(self) -> bool:
        return self.preserve_width

    def preserves_height(self) -> bool:
        return self.preserve_height
