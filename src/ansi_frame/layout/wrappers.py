"""Decorating nodes: flex weight, percentage size, percentage bounds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ansi_frame.layout.axis import Axis
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.types import ComputedLayout, Constraints, is_bounded


@dataclass
class FlexNode(LayoutNode):
    """
    Marks a child of a Row/Column as flexible on the main axis.

    The wrapper is transparent: it contributes no box of its own, so the
    parent's output children line up index-for-index with its inputs.
    Outside a linear container the weight is ignored.
    """
    child: LayoutNode
    flex: float = 1.0

    @property
    def flex_value(self) -> float:
        """Weight, defaulting to 1 when unset or non-positive."""
        return self.flex if self.flex > 0 else 1.0

    @property
    def margin(self) -> EdgeInsets:  # type: ignore[override]
        return self.child.margin

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        return self.child.compute_layout(constraints)

    def preserves_width(self) -> bool:
        return self.child.preserves_width()

    def preserves_height(self) -> bool:
        return self.child.preserves_height()


@dataclass
class PercentNode(LayoutNode):
    """
    Sizes a child to a percentage of the available max on one axis.

    The percentage yields the child's border-box size. With no bounded max
    to resolve against, the child keeps its natural size.
    """
    child: LayoutNode
    percent: float
    axis: Axis

    @property
    def margin(self) -> EdgeInsets:  # type: ignore[override]
        return self.child.margin

    def resolve(self, available: int) -> Optional[int]:
        """Cells for this percentage of ``available``, or None if unbounded."""
        if not is_bounded(available):
            return None
        return max(0, math.floor(available * self.percent / 100))

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        if self.axis is Axis.HORIZONTAL:
            size = self.resolve(constraints.max_width)
            if size is None:
                return self.child.compute_layout(constraints)
            tight = Constraints(size, size, constraints.min_height, constraints.max_height)
        else:
            size = self.resolve(constraints.max_height)
            if size is None:
                return self.child.compute_layout(constraints)
            tight = Constraints(constraints.min_width, constraints.max_width, size, size)
        return self.child.compute_layout(tight)

    def preserves_width(self) -> bool:
        return self.axis is Axis.HORIZONTAL or self.child.preserves_width()

    def preserves_height(self) -> bool:
        return self.axis is Axis.VERTICAL or self.child.preserves_height()


@dataclass
class PercentConstraintWrapper(LayoutNode):
    """
    Applies percentage min/max bounds resolved against the incoming max.

    Each bound is a percentage (or None) of the parent's max on that axis
    and limits the child's border box.
    """
    child: LayoutNode
    min_width: Optional[float] = None
    max_width: Optional[float] = None
    min_height: Optional[float] = None
    max_height: Optional[float] = None

    @property
    def margin(self) -> EdgeInsets:  # type: ignore[override]
        return self.child.margin

    @staticmethod
    def _resolve(percent: Optional[float], available: int) -> Optional[int]:
        if percent is None or not is_bounded(available):
            return None
        return max(0, math.floor(available * percent / 100))

    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        bounded = constraints.with_node_constraints(
            self._resolve(self.min_width, constraints.max_width),
            self._resolve(self.max_width, constraints.max_width),
            self._resolve(self.min_height, constraints.max_height),
            self._resolve(self.max_height, constraints.max_height),
        )
        return self.child.compute_layout(bounded)

    def preserves_width(self) -> bool:
        return self.child.preserves_width()

    def preserves_height(self) -> bool:
        return self.child.preserves_height()
