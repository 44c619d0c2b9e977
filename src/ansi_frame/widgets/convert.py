"""Turning widgets into layout nodes."""

from __future__ import annotations

from typing import Optional

from ansi_frame.layout.axis import Axis
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.layout.box_node import BoxNode
from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.wrappers import FlexNode, PercentConstraintWrapper, PercentNode
from ansi_frame.widgets.base import BuildContext, Widget
from ansi_frame.widgets.dimension import Dimension, DimensionSet
from ansi_frame.widgets.style import Style

Bounds = tuple[Optional[int], Optional[int], Optional[int], Optional[int]]


def insets_of(style: Style) -> tuple[EdgeInsets, EdgeInsets]:
    """(padding, border) insets for a style."""
    return style.padding, style.border_insets


def _cells(d: Dimension) -> Optional[int]:
    return d.cells_value if d.is_cells else None


def _fixed(value: int, lo: Optional[int], hi: Optional[int]) -> int:
    if lo is not None and hi is not None and hi < lo:
        return lo
    if lo is not None:
        value = max(value, lo)
    if hi is not None:
        value = min(value, hi)
    return value


def dimension_set_to_min_max(dims: DimensionSet, insets: EdgeInsets) -> Bounds:
    """
    Border-box (min_width, max_width, min_height, max_height) for a widget.

    Cells sizes and cells bounds are content sizes, so padding and border
    are added. A Cells width or height pins min and max together; other
    kinds leave the axis to the parent (None).
    """
    min_w, max_w = _cells(dims.min_width), _cells(dims.max_width)
    min_h, max_h = _cells(dims.min_height), _cells(dims.max_height)
    if dims.width.is_cells:
        min_w = max_w = _fixed(dims.width.cells_value, min_w, max_w)
    if dims.height.is_cells:
        min_h = max_h = _fixed(dims.height.cells_value, min_h, max_h)

    def grow(value: Optional[int], inset: int) -> Optional[int]:
        return None if value is None else value + inset

    return (
        grow(min_w, insets.horizontal),
        grow(max_w, insets.horizontal),
        grow(min_h, insets.vertical),
        grow(max_h, insets.vertical),
    )


def wrap_percent_bounds(node: LayoutNode, dims: DimensionSet) -> LayoutNode:
    """Apply percentage min/max bounds, if any, around node."""
    if not dims.has_percent_bounds():
        return node

    def pct(d: Dimension) -> Optional[float]:
        return d.value if d.is_percent else None

    return PercentConstraintWrapper(
        node,
        pct(dims.min_width),
        pct(dims.max_width),
        pct(dims.min_height),
        pct(dims.max_height),
    )


def fallback_node(widget: Widget, ctx: BuildContext) -> BoxNode:
    """Generic box for widgets that contribute no layout node of their own."""
    dims = widget.dimensions()
    style = widget.style
    padding, border = insets_of(style)
    min_w, max_w, min_h, max_h = dimension_set_to_min_max(dims, padding + border)
    return BoxNode(
        min_width=min_w,
        max_width=max_w,
        min_height=min_h,
        max_height=max_h,
        padding=padding,
        border=border,
        margin=style.margin,
        measure=lambda constraints: widget.measure(ctx, constraints),
        expand_width=dims.width.is_flex,
        expand_height=dims.height.is_flex,
        preserve_width=dims.width.is_auto,
        preserve_height=dims.height.is_auto,
    )


def layout_node_for(widget: Widget, ctx: BuildContext) -> LayoutNode:
    """Resolve widget's build chain and return its layout node."""
    ctx = ctx.for_widget(widget)
    built = ctx.resolve(widget)
    node = built.build_layout_node(ctx)
    if node is None:
        node = fallback_node(built, ctx)
    return wrap_percent_bounds(node, built.dimensions())


def _percent(node: LayoutNode, dim: Dimension, axis: Axis) -> LayoutNode:
    if dim.is_percent:
        return PercentNode(node, dim.value, axis)
    return node


def linear_child(widget: Widget, ctx: BuildContext, axis: Axis) -> LayoutNode:
    """Node for a Row/Column child, wrapped for its main/cross dimensions."""
    node = layout_node_for(widget, ctx)
    dims = ctx.resolve(widget).dimensions()
    main, cross = (dims.width, dims.height) if axis is Axis.HORIZONTAL else (dims.height, dims.width)
    node = _percent(node, cross, axis.cross)
    if main.is_flex:
        return FlexNode(node, main.value)
    return _percent(node, main, axis)


def sized_child(widget: Widget, ctx: BuildContext) -> LayoutNode:
    """Node for a Stack/Dock child: percentages on both axes."""
    node = layout_node_for(widget, ctx)
    dims = ctx.resolve(widget).dimensions()
    node = _percent(node, dims.height, Axis.VERTICAL)
    return _percent(node, dims.width, Axis.HORIZONTAL)
