"""Widgets and the capabilities they expose to layout."""

from ansi_frame.widgets.base import BaseWidget, BuildContext, BuildSession, Widget
from ansi_frame.widgets.component import Component
from ansi_frame.widgets.dimension import (
    AUTO,
    UNSET,
    Dimension,
    DimensionKind,
    DimensionSet,
    cells,
    flex,
    percent,
)
from ansi_frame.widgets.dock import Dock
from ansi_frame.widgets.label import Label
from ansi_frame.widgets.linear import Column, Row
from ansi_frame.widgets.spacer import Spacer
from ansi_frame.widgets.stack import Positioned, Stack
from ansi_frame.widgets.style import Alignment, BorderStyle, Style

__all__ = [
    # Base
    "Widget",
    "BaseWidget",
    "BuildContext",
    "BuildSession",
    "Component",
    # Sizing and style
    "Dimension",
    "DimensionKind",
    "DimensionSet",
    "AUTO",
    "UNSET",
    "cells",
    "flex",
    "percent",
    "Style",
    "BorderStyle",
    "Alignment",
    # Widgets
    "Row",
    "Column",
    "Stack",
    "Positioned",
    "Dock",
    "Spacer",
    "Label",
]
