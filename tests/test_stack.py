"""Tests for StackNode."""

from ansi_frame.layout.axis import HorizontalAlignment, VerticalAlignment
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.layout.box_node import BoxNode
from ansi_frame.layout.stack_node import StackChild, StackNode
from ansi_frame.layout.types import Constraints


def box(w: int, h: int) -> BoxNode:
    return BoxNode(width=w, height=h)


class TestAlignedChildren:
    """Non-positioned children follow the stack's alignment."""

    def test_bottom_right_is_flush(self) -> None:
        stack = StackNode(
            h_align=HorizontalAlignment.END,
            v_align=VerticalAlignment.BOTTOM,
            children=[StackChild(box(4, 2))],
        )
        layout = stack.compute_layout(Constraints.tight(20, 10))
        child = layout.children[0]
        assert (child.x, child.y) == (16, 8)
        assert child.x + child.layout.box.width == 20

    def test_center(self) -> None:
        stack = StackNode(
            h_align=HorizontalAlignment.CENTER,
            v_align=VerticalAlignment.CENTER,
            children=[StackChild(box(4, 3))],
        )
        layout = stack.compute_layout(Constraints.tight(20, 10))
        assert (layout.children[0].x, layout.children[0].y) == (8, 3)

    def test_auto_size_is_bounding_box(self) -> None:
        stack = StackNode(children=[StackChild(box(5, 2)), StackChild(box(3, 6))])
        layout = stack.compute_layout(Constraints.loose(50, 50))
        assert (layout.box.width, layout.box.height) == (5, 6)

    def test_positioned_children_do_not_size_the_stack(self) -> None:
        stack = StackNode(children=[
            StackChild(box(5, 2)),
            StackChild(box(30, 30), top=0, left=0),
        ])
        layout = stack.compute_layout(Constraints.loose(50, 50))
        assert (layout.box.width, layout.box.height) == (5, 2)

    def test_children_keep_declaration_order(self) -> None:
        stack = StackNode(children=[
            StackChild(box(1, 1)),
            StackChild(box(2, 2), left=1),
            StackChild(box(3, 3)),
        ])
        layout = stack.compute_layout(Constraints.tight(10, 10))
        assert [c.layout.box.width for c in layout.children] == [1, 2, 3]


class TestPositionedChildren:
    """Children with offsets are placed from the border edges."""

    def test_left_and_right_define_width(self) -> None:
        stack = StackNode(children=[StackChild(box(1, 1), left=2, right=2)])
        layout = stack.compute_layout(Constraints.tight(20, 10))
        child = layout.children[0]
        assert child.x == 2
        assert child.layout.box.width == 16

    def test_top_and_bottom_define_height(self) -> None:
        stack = StackNode(children=[StackChild(box(1, 1), top=1, bottom=3)])
        layout = stack.compute_layout(Constraints.tight(20, 10))
        assert layout.children[0].layout.box.height == 6

    def test_right_only_anchors_natural_size(self) -> None:
        stack = StackNode(children=[StackChild(box(4, 1), right=1)])
        layout = stack.compute_layout(Constraints.tight(20, 10))
        child = layout.children[0]
        assert child.x == 15
        assert child.layout.box.width == 4

    def test_bottom_only(self) -> None:
        stack = StackNode(children=[StackChild(box(4, 2), bottom=0)])
        layout = stack.compute_layout(Constraints.tight(20, 10))
        assert layout.children[0].y == 8

    def test_negative_offsets_overflow(self) -> None:
        stack = StackNode(children=[StackChild(box(4, 2), top=-1, left=-3)])
        layout = stack.compute_layout(Constraints.tight(20, 10))
        assert (layout.children[0].x, layout.children[0].y) == (-3, -1)

    def test_offsets_wider_than_stack_clamp_to_zero(self) -> None:
        stack = StackNode(children=[StackChild(box(4, 2), left=15, right=10)])
        layout = stack.compute_layout(Constraints.tight(20, 10))
        assert layout.children[0].layout.box.width == 0

    def test_offsets_are_relative_to_border_box(self) -> None:
        stack = StackNode(
            padding=EdgeInsets.all(1),
            children=[StackChild(box(1, 1), left=0, right=0, top=2)],
        )
        layout = stack.compute_layout(Constraints.tight(20, 10))
        child = layout.children[0]
        assert child.layout.box.width == 20
        assert layout.box.content_origin == (1, 1)
        assert (child.x, child.y) == (-1, 1)

    def test_aligned_children_stay_in_content_box(self) -> None:
        stack = StackNode(
            padding=EdgeInsets.all(1),
            h_align=HorizontalAlignment.END,
            children=[StackChild(box(4, 2))],
        )
        layout = stack.compute_layout(Constraints.tight(20, 10))
        assert (layout.children[0].x, layout.children[0].y) == (14, 0)
