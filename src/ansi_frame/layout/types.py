"""Geometry primitives shared by the layout resolver."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ansi_frame.layout.box_model import BoxModel, EdgeInsets

# Sentinel max for an axis with no upper bound.
UNBOUNDED = sys.maxsize


def is_bounded(value: int) -> bool:
    """Whether a max constraint is a real bound rather than UNBOUNDED."""
    return value < UNBOUNDED


def _shrink(value: int, amount: int) -> int:
    if not is_bounded(value):
        return value
    return max(0, value - amount)


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Return True if the point (x, y) lies inside this rectangle."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersect(self, other: Rect) -> Rect:
        """Overlap of two rects; an empty rect at self's origin if disjoint."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= x or bottom <= y:
            return Rect(self.x, self.y, 0, 0)
        return Rect(x, y, right - x, bottom - y)

    def offset(self, dx: int, dy: int) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


@dataclass(frozen=True)
class Constraints:
    """
    Min/max window for a node's border-box size.

    Constraints normalize on construction: negative bounds clamp to 0 and
    a min above its max is clamped down to the max, so a Constraints value
    is always satisfiable.
    """
    min_width: int = 0
    max_width: int = UNBOUNDED
    min_height: int = 0
    max_height: int = UNBOUNDED

    def __post_init__(self) -> None:
        max_w = max(0, self.max_width)
        max_h = max(0, self.max_height)
        object.__setattr__(self, "max_width", max_w)
        object.__setattr__(self, "max_height", max_h)
        object.__setattr__(self, "min_width", min(max(0, self.min_width), max_w))
        object.__setattr__(self, "min_height", min(max(0, self.min_height), max_h))

    @classmethod
    def tight(cls, width: int, height: int) -> Constraints:
        """Exactly width x height."""
        return cls(width, width, height, height)

    @classmethod
    def loose(cls, max_width: int, max_height: int) -> Constraints:
        """Anything from 0x0 up to max_width x max_height."""
        return cls(0, max_width, 0, max_height)

    @classmethod
    def tight_width(cls, width: int, max_height: int = UNBOUNDED) -> Constraints:
        return cls(width, width, 0, max_height)

    @classmethod
    def tight_height(cls, max_width: int, height: int) -> Constraints:
        return cls(0, max_width, height, height)

    @classmethod
    def unbounded(cls) -> Constraints:
        """No limits; used for measuring natural size."""
        return cls()

    def is_tight_width(self) -> bool:
        return self.min_width == self.max_width

    def is_tight_height(self) -> bool:
        return self.min_height == self.max_height

    def is_tight(self) -> bool:
        return self.is_tight_width() and self.is_tight_height()

    def constrain(self, width: int, height: int) -> tuple[int, int]:
        """Clamp a size into this window."""
        w = max(self.min_width, min(self.max_width, width))
        h = max(self.min_height, min(self.max_height, height))
        return w, h

    def with_node_constraints(
        self,
        min_width: Optional[int] = None,
        max_width: Optional[int] = None,
        min_height: Optional[int] = None,
        max_height: Optional[int] = None,
    ) -> Constraints:
        """
        Intersect with a node's own bounds (None means no bound).

        The parent's window wins: a node minimum above the parent maximum
        ends up clamped at the parent boundary, and a parent minimum above
        the node maximum raises the maximum to it. A tight parent size
        therefore overrides the node's own fixed size.
        """
        lo_w, hi_w = self.min_width, self.max_width
        lo_h, hi_h = self.min_height, self.max_height
        if max_width is not None:
            hi_w = min(hi_w, max_width)
        if max_height is not None:
            hi_h = min(hi_h, max_height)
        if min_width is not None:
            lo_w = min(max(lo_w, min_width), self.max_width)
        if min_height is not None:
            lo_h = min(max(lo_h, min_height), self.max_height)
        # Min wins on conflict.
        return Constraints(lo_w, max(lo_w, hi_w), lo_h, max(lo_h, hi_h))

    def deflate(self, insets: EdgeInsets) -> Constraints:
        """Border-box constraints to content-box constraints."""
        h, v = insets.horizontal, insets.vertical
        return Constraints(
            max(0, self.min_width - h),
            _shrink(self.max_width, h),
            max(0, self.min_height - v),
            _shrink(self.max_height, v),
        )


@dataclass
class PositionedChild:
    """
    A child layout with its position.

    ``x`` and ``y`` locate the child's border box relative to the parent's
    content origin (inside padding and border). Child margins are already
    folded in.
    """
    x: int
    y: int
    layout: ComputedLayout

    @property
    def rect(self) -> Rect:
        box = self.layout.box
        return Rect(self.x, self.y, box.width, box.height)

    @property
    def margin_rect(self) -> Rect:
        box = self.layout.box
        return Rect(
            self.x - box.margin.left,
            self.y - box.margin.top,
            box.margin_box_width,
            box.margin_box_height,
        )


@dataclass
class ComputedLayout:
    """Result of laying out one node: its box plus positioned children."""
    box: BoxModel
    children: list[PositionedChild] = field(default_factory=list)

    def walk(self, x: int = 0, y: int = 0) -> Iterator[tuple[Rect, ComputedLayout]]:
        """Yield absolute border-box rects depth-first, parents before children."""
        yield Rect(x, y, self.box.width, self.box.height), self
        cx, cy = self.box.content_origin
        for child in self.children:
            yield from child.layout.walk(x + cx + child.x, y + cy + child.y)


__all__ = [
    "UNBOUNDED",
    "is_bounded",
    "Rect",
    "EdgeInsets",
    "Constraints",
    "BoxModel",
    "PositionedChild",
    "ComputedLayout",
]
