"""Stack and Positioned."""

from __future__ import annotations

from typing import Iterable, Optional

from ansi_frame.layout.stack_node import StackChild, StackNode
from ansi_frame.widgets.base import BaseWidget, BuildContext, Widget
from ansi_frame.widgets.convert import dimension_set_to_min_max, insets_of, sized_child
from ansi_frame.widgets.style import Alignment


class Positioned(BaseWidget):
    """
    Places its child by edge offsets inside a Stack.

    With both offsets on an axis set, the child's size on that axis is the
    stack size minus both offsets. Outside a Stack it is transparent.
    """

    def __init__(
        self,
        child: Widget,
        *,
        top: Optional[int] = None,
        right: Optional[int] = None,
        bottom: Optional[int] = None,
        left: Optional[int] = None,
    ) -> None:
        super().__init__(key=getattr(child, "key", None))
        self.child = child
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    def build(self, ctx: BuildContext) -> Widget:
        return self.child


class Stack(BaseWidget):
    """Overlays children; later children paint over earlier ones."""

    def __init__(
        self,
        children: Optional[Iterable[Widget]] = None,
        *,
        alignment: Alignment = Alignment.TOP_LEFT,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.children = list(children or [])
        self.alignment = alignment

    def child_widgets(self) -> list[Widget]:
        return list(self.children)

    def build_layout_node(self, ctx: BuildContext) -> StackNode:
        stack_children = []
        for i, child in enumerate(self.children):
            child_ctx = ctx.push_child(i)
            node = sized_child(child, child_ctx)
            # A component may build into a Positioned; look along its chain.
            positioned = next(
                (w for w in child_ctx.resolve_chain(child) if isinstance(w, Positioned)),
                None,
            )
            if positioned is None:
                stack_children.append(StackChild(node))
            else:
                stack_children.append(StackChild(
                    node,
                    top=positioned.top,
                    right=positioned.right,
                    bottom=positioned.bottom,
                    left=positioned.left,
                ))

        dims = self.dimensions()
        padding, border = insets_of(self.style)
        min_w, max_w, min_h, max_h = dimension_set_to_min_max(dims, padding + border)
        return StackNode(
            children=stack_children,
            h_align=self.alignment.horizontal,
            v_align=self.alignment.vertical,
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
