"""Render tree, layout cache and frame loop."""

from ansi_frame.render.app import App
from ansi_frame.render.cache import LayoutCache, LayoutMetrics
from ansi_frame.render.tree import RenderTree, build_render_tree

__all__ = [
    "App",
    "LayoutCache",
    "LayoutMetrics",
    "RenderTree",
    "build_render_tree",
]
