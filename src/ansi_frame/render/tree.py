"""Render tree: every widget paired with its computed layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ansi_frame.layout.types import ComputedLayout, Constraints, Rect
from ansi_frame.render.cache import LayoutCache, LayoutMetrics
from ansi_frame.widgets.base import BuildContext, BuildSession, Widget
from ansi_frame.widgets.convert import layout_node_for

logger = logging.getLogger(__name__)


@dataclass
class RenderTree:
    """
    A built widget, its layout, and its absolute border-box rect.

    Children appear in paint order: later children paint over earlier ones.
    """
    widget: Widget
    path: str
    layout: ComputedLayout
    rect: Rect
    children: list[RenderTree] = field(default_factory=list)

    def walk(self) -> Iterator[RenderTree]:
        """Depth-first, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, path: str) -> Optional[RenderTree]:
        for node in self.walk():
            if node.path == path:
                return node
        return None

    def widget_at(self, x: int, y: int) -> Optional[RenderTree]:
        """Topmost (last painted) node containing the point."""
        if not self.rect.contains(x, y):
            return None
        for child in reversed(self.children):
            hit = child.widget_at(x, y)
            if hit is not None:
                return hit
        return self


def build_render_tree(
    widget: Widget,
    constraints: Constraints,
    session: Optional[BuildSession] = None,
    cache: Optional[LayoutCache] = None,
) -> RenderTree:
    """
    Build, lay out and pair a widget tree.

    Args:
        widget: Root widget.
        constraints: Constraints for the root's border box (usually tight
            to the terminal size).
        session: Build session; a fresh one on the process tracker if None.
        cache: Optional per-frame cache that receives every node's layout.

    Returns:
        The root RenderTree.
    """
    ctx = BuildContext(session or BuildSession()).for_widget(widget)
    node = layout_node_for(widget, ctx)
    layout = node.compute_layout(constraints)
    margin = layout.box.margin
    return _pair(ctx.resolve(widget), ctx, layout, margin.left, margin.top, cache)


def _pair(
    built: Widget,
    ctx: BuildContext,
    layout: ComputedLayout,
    x: int,
    y: int,
    cache: Optional[LayoutCache],
) -> RenderTree:
    rect = Rect(x, y, layout.box.width, layout.box.height)
    if cache is not None:
        cache.store(ctx.auto_id, layout, rect)
    built.on_layout(ctx, LayoutMetrics(layout))

    tree = RenderTree(built, ctx.auto_id, layout, rect)
    widgets = built.child_widgets()
    if len(widgets) != len(layout.children):
        logger.debug(
            "%s at %s: %d widgets vs %d layouts",
            type(built).__name__, ctx.auto_id, len(widgets), len(layout.children),
        )
    cx, cy = layout.box.content_origin
    for i, (child, positioned) in enumerate(zip(widgets, layout.children)):
        child_ctx = ctx.push_child(i).for_widget(child)
        tree.children.append(_pair(
            child_ctx.resolve(child),
            child_ctx,
            positioned.layout,
            x + cx + positioned.x,
            y + cy + positioned.y,
            cache,
        ))
    return tree
