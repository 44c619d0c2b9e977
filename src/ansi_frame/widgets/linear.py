"""Row and Column containers."""

from __future__ import annotations

from typing import Iterable, Optional

from ansi_frame.layout.axis import Axis, CrossAxisAlignment, MainAxisAlignment
from ansi_frame.layout.linear_node import ColumnNode, LinearNode, RowNode
from ansi_frame.widgets.base import BaseWidget, BuildContext, Widget
from ansi_frame.widgets.convert import dimension_set_to_min_max, insets_of, linear_child


class _Linear(BaseWidget):
    """Shared implementation of Row and Column."""

    axis: Axis
    node_class: type[LinearNode]

    def __init__(
        self,
        children: Optional[Iterable[Widget]] = None,
        *,
        spacing: int = 0,
        main_align: MainAxisAlignment = MainAxisAlignment.START,
        cross_align: CrossAxisAlignment = CrossAxisAlignment.STRETCH,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.children = list(children or [])
        self.spacing = max(0, spacing)
        self.main_align = main_align
        self.cross_align = cross_align

    def child_widgets(self) -> list[Widget]:
        return list(self.children)

    def build_layout_node(self, ctx: BuildContext) -> LinearNode:
        dims = self.dimensions()
        padding, border = insets_of(self.style)
        min_w, max_w, min_h, max_h = dimension_set_to_min_max(dims, padding + border)
        return self.node_class(
            children=[
                linear_child(child, ctx.push_child(i), self.axis)
                for i, child in enumerate(self.children)
            ],
            spacing=self.spacing,
            main_align=self.main_align,
            cross_align=self.cross_align,
            padding=padding,
            border=border,
            margin=self.style.margin,
            min_width=min_w,
            max_width=max_w,
            min_height=min_h,
            max_height=max_h,
            expand_width=dims.width.is_flex,
            expand_height=dims.height.is_flex,
            preserve_width=dims.width.is_auto,
            preserve_height=dims.height.is_auto,
        )


class Row(_Linear):
    """Lays children out left to right."""
    axis = Axis.HORIZONTAL
    node_class = RowNode


class Column(_Linear):
    """Lays children out top to bottom."""
    axis = Axis.VERTICAL
    node_class = ColumnNode
