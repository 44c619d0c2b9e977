"""Dock container."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ansi_frame.layout.axis import DEFAULT_DOCK_ORDER, DockEdge
from ansi_frame.layout.dock_node import DockNode
from ansi_frame.widgets.base import BaseWidget, BuildContext, Widget
from ansi_frame.widgets.convert import dimension_set_to_min_max, insets_of, sized_child


class Dock(BaseWidget):
    """
    Attaches widgets to the edges and fills the middle with ``body``.

    Children are listed (and laid out) edge by edge in ``dock_order``,
    then the body.
    """

    def __init__(
        self,
        *,
        top: Optional[Iterable[Widget]] = None,
        bottom: Optional[Iterable[Widget]] = None,
        left: Optional[Iterable[Widget]] = None,
        right: Optional[Iterable[Widget]] = None,
        body: Optional[Widget] = None,
        dock_order: Sequence[DockEdge] = DEFAULT_DOCK_ORDER,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.edges: dict[DockEdge, list[Widget]] = {
            DockEdge.TOP: list(top or []),
            DockEdge.BOTTOM: list(bottom or []),
            DockEdge.LEFT: list(left or []),
            DockEdge.RIGHT: list(right or []),
        }
        self.body = body
        # Edges left out of a custom order are never laid out.
        self.dock_order = tuple(dict.fromkeys(dock_order)) or DEFAULT_DOCK_ORDER

    def child_widgets(self) -> list[Widget]:
        children = [w for edge in self.dock_order for w in self.edges[edge]]
        if self.body is not None:
            children.append(self.body)
        return children

    def build_layout_node(self, ctx: BuildContext) -> DockNode:
        nodes: dict[DockEdge, list] = {edge: [] for edge in DockEdge}
        index = 0
        for edge in self.dock_order:
            for widget in self.edges[edge]:
                nodes[edge].append(sized_child(widget, ctx.push_child(index)))
                index += 1
        body = None
        if self.body is not None:
            body = sized_child(self.body, ctx.push_child(index))

        dims = self.dimensions()
        padding, border = insets_of(self.style)
        min_w, max_w, min_h, max_h = dimension_set_to_min_max(dims, padding + border)
        return DockNode(
            top=nodes[DockEdge.TOP],
            bottom=nodes[DockEdge.BOTTOM],
            left=nodes[DockEdge.LEFT],
            right=nodes[DockEdge.RIGHT],
            body=body,
            dock_order=self.dock_order,
            padding=padding,
            border=border,
            margin=self.style.margin,
            min_width=min_w,
            max_width=max_w,
            min_height=min_h,
            max_height=max_h,
        )
