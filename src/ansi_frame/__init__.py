"""
ansi-frame: declarative terminal UI core

Reactive widgets and a constraint-based layout resolver for terminal UIs.

Quick Start:
    >>> import ansi_frame as af
    >>> ui = af.Row([
    ...     af.Label("menu", width=af.cells(10)),
    ...     af.Label("body", width=af.flex(1)),
    ... ])
    >>> tree = af.build_render_tree(ui, af.Constraints.tight(80, 24))
    >>> [child.rect.width for child in tree.children]
    [10, 70]

Features:
    - Signals that track which widget read them and trigger rebuilds
    - Coalesced render requests, safe to issue from any thread
    - Row/Column layout with cells, auto, flex and percent sizing
    - Edge docking, overlays and absolute positioning
    - Padding, borders and margins with border-box semantics
    - JSON layout descriptions and a CLI for inspecting resolved layouts
"""

__version__ = "0.1.0"

# Reactive state
from ansi_frame.reactive.signal import AnySignal, Signal, is_valid
from ansi_frame.reactive.state import StateStore
from ansi_frame.reactive.tracker import BuildTracker, get_tracker, set_tracker

# Layout
from ansi_frame.layout.axis import (
    CrossAxisAlignment,
    DockEdge,
    HorizontalAlignment,
    MainAxisAlignment,
    VerticalAlignment,
)
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.layout.types import Constraints, Rect

# Widgets
from ansi_frame.widgets import (
    AUTO,
    Alignment,
    BaseWidget,
    BorderStyle,
    BuildContext,
    Column,
    Component,
    Dimension,
    Dock,
    Label,
    Positioned,
    Row,
    Spacer,
    Stack,
    Style,
    Widget,
    cells,
    flex,
    percent,
)

# Rendering
from ansi_frame.render.app import App
from ansi_frame.render.tree import RenderTree, build_render_tree

# Configuration
from ansi_frame.config import FrameConfig

__all__ = [
    # Version
    "__version__",
    # Reactive
    "Signal",
    "AnySignal",
    "is_valid",
    "StateStore",
    "BuildTracker",
    "get_tracker",
    "set_tracker",
    # Layout
    "Constraints",
    "Rect",
    "EdgeInsets",
    "MainAxisAlignment",
    "CrossAxisAlignment",
    "HorizontalAlignment",
    "VerticalAlignment",
    "DockEdge",
    # Widgets
    "Widget",
    "BaseWidget",
    "BuildContext",
    "Component",
    "Dimension",
    "AUTO",
    "cells",
    "flex",
    "percent",
    "Style",
    "BorderStyle",
    "Alignment",
    "Row",
    "Column",
    "Stack",
    "Positioned",
    "Dock",
    "Spacer",
    "Label",
    # Rendering
    "App",
    "RenderTree",
    "build_render_tree",
    # Configuration
    "FrameConfig",
]
