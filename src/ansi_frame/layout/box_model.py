"""Box model with border-box semantics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EdgeInsets:
    """Spacing around the four edges of a box. Negative values clamp to 0."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            object.__setattr__(self, name, max(0, getattr(self, name)))

    @classmethod
    def all(cls, value: int) -> EdgeInsets:
        return cls(value, value, value, value)

    @classmethod
    def xy(cls, horizontal: int, vertical: int) -> EdgeInsets:
        return cls(vertical, horizontal, vertical, horizontal)

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom

    def __add__(self, other: EdgeInsets) -> EdgeInsets:
        return EdgeInsets(
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
            self.left + other.left,
        )


@dataclass(frozen=True)
class BoxModel:
    """
    Computed box for one node.

    ``width`` and ``height`` are the border-box size (content + padding +
    border). Margin is outside the box and only affects placement.
    """
    width: int = 0
    height: int = 0
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    border: EdgeInsets = field(default_factory=EdgeInsets)
    margin: EdgeInsets = field(default_factory=EdgeInsets)

    @property
    def insets(self) -> EdgeInsets:
        """Padding plus border."""
        return self.padding + self.border

    @property
    def content_width(self) -> int:
        return max(0, self.width - self.insets.horizontal)

    @property
    def content_height(self) -> int:
        return max(0, self.height - self.insets.vertical)

    @property
    def margin_box_width(self) -> int:
        return self.width + self.margin.horizontal

    @property
    def margin_box_height(self) -> int:
        return self.height + self.margin.vertical

    @property
    def content_origin(self) -> tuple[int, int]:
        """Offset of the content area from the border-box origin."""
        return self.border.left + self.padding.left, self.border.top + self.padding.top
