"""Per-frame layout cache and read-only layout metrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ansi_frame.layout.box_model import BoxModel
from ansi_frame.layout.types import ComputedLayout, Rect

_EMPTY = Rect(0, 0, 0, 0)


def _clamp_index(index: int, count: int) -> int:
    return max(0, min(index, count - 1))


@dataclass
class LayoutMetrics:
    """
    Queries over one computed layout.

    Child rects are relative to the parent's content origin. Indices clamp
    into ``[0, child_count)``; a layout with no children yields empty rects.
    """
    layout: ComputedLayout

    @property
    def box(self) -> BoxModel:
        return self.layout.box

    @property
    def child_count(self) -> int:
        return len(self.layout.children)

    def child_layout(self, index: int) -> Optional[ComputedLayout]:
        if not self.layout.children:
            return None
        return self.layout.children[_clamp_index(index, self.child_count)].layout

    def child_bounds(self, index: int) -> Rect:
        """Border-box rect of child ``index``."""
        if not self.layout.children:
            return _EMPTY
        return self.layout.children[_clamp_index(index, self.child_count)].rect

    def child_margin_bounds(self, index: int) -> Rect:
        """Margin-box rect of child ``index``."""
        if not self.layout.children:
            return _EMPTY
        return self.layout.children[_clamp_index(index, self.child_count)].margin_rect


@dataclass
class CacheEntry:
    layout: ComputedLayout
    rect: Rect  # absolute border box


class LayoutCache:
    """
    Layouts from the current frame, keyed by widget path (``"0.1.2"``).

    Cleared at the start of every frame; nothing here persists across
    layout passes.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def clear(self) -> None:
        self._entries.clear()

    def store(self, path: str, layout: ComputedLayout, rect: Rect) -> None:
        self._entries[path] = CacheEntry(layout, rect)

    def get(self, path: str) -> Optional[CacheEntry]:
        return self._entries.get(path)

    def metrics(self, path: str) -> Optional[LayoutMetrics]:
        entry = self._entries.get(path)
        return LayoutMetrics(entry.layout) if entry else None

    def rect(self, path: str) -> Optional[Rect]:
        entry = self._entries.get(path)
        return entry.rect if entry else None

    def child_rect(self, path: str, index: int) -> Rect:
        """Last-known absolute rect of a child, index clamped; empty if unknown."""
        entry = self._entries.get(path)
        if entry is None or not entry.layout.children:
            return _EMPTY
        i = _clamp_index(index, len(entry.layout.children))
        child = entry.layout.children[i]
        cx, cy = entry.layout.box.content_origin
        return child.rect.offset(entry.rect.x + cx, entry.rect.y + cy)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: str) -> bool:
        return path in self._entries
