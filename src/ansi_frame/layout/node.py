"""Layout node interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.layout.types import ComputedLayout, Constraints


class LayoutNode(ABC):
    """
    A node in the layout tree.

    Nodes are rebuilt from widgets every frame and hold no state between
    frames. ``compute_layout`` receives border-box constraints and returns
    the node's box together with its positioned children.
    """

    margin: EdgeInsets = EdgeInsets()

    @abstractmethod
    def compute_layout(self, constraints: Constraints) -> ComputedLayout:
        """Size this node within constraints and position its children."""

    def preserves_width(self) -> bool:
        """True if the node keeps its content-fit width when stretched."""
        return False

    def preserves_height(self) -> bool:
        """True if the node keeps its content-fit height when stretched."""
        return False
