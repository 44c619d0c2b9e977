"""Widget trees from plain data (JSON layout descriptions).

A description is a mapping with a ``type`` and type-specific keys::

    {
      "type": "column",
      "spacing": 1,
      "children": [
        {"type": "label", "text": "header", "height": 1},
        {"type": "row", "height": "1fr", "children": [
          {"type": "box", "width": "30%"},
          {"type": "box", "width": "1fr", "border": "rounded"}
        ]}
      ]
    }

Common keys: ``width``, ``height`` (see ``Dimension.parse``), ``padding``,
``margin`` (int, ``[v, h]`` or ``[top, right, bottom, left]``), ``border``,
``min_width``/``max_width``/``min_height``/``max_height``, ``key``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Mapping, Union

from ansi_frame.layout.axis import DEFAULT_DOCK_ORDER, CrossAxisAlignment, DockEdge, MainAxisAlignment
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.widgets.base import BaseWidget
from ansi_frame.widgets.dimension import Dimension
from ansi_frame.widgets.dock import Dock
from ansi_frame.widgets.label import Label
from ansi_frame.widgets.linear import Column, Row
from ansi_frame.widgets.spacer import Spacer
from ansi_frame.widgets.stack import Positioned, Stack
from ansi_frame.widgets.style import Alignment, BorderStyle, Style

Description = Mapping[str, Any]

_ALIGNMENTS = {
    "top-left": Alignment.TOP_LEFT,
    "top-center": Alignment.TOP_CENTER,
    "top-right": Alignment.TOP_RIGHT,
    "center-left": Alignment.CENTER_LEFT,
    "center": Alignment.CENTER,
    "center-right": Alignment.CENTER_RIGHT,
    "bottom-left": Alignment.BOTTOM_LEFT,
    "bottom-center": Alignment.BOTTOM_CENTER,
    "bottom-right": Alignment.BOTTOM_RIGHT,
}

_OFFSETS = ("top", "right", "bottom", "left")


def _enum(enum_type: Any, value: Any, field_name: str) -> Any:
    try:
        return enum_type(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in enum_type)
        raise ValueError(f"Invalid {field_name} {value!r} (expected one of: {choices})") from None


def parse_insets(value: Union[int, list[int], None]) -> EdgeInsets:
    """Insets from an int, ``[vertical, horizontal]`` or ``[top, right, bottom, left]``."""
    if value is None:
        return EdgeInsets()
    if isinstance(value, int) and not isinstance(value, bool):
        return EdgeInsets.all(value)
    if isinstance(value, list) and all(isinstance(v, int) for v in value):
        if len(value) == 2:
            return EdgeInsets.xy(value[1], value[0])
        if len(value) == 4:
            return EdgeInsets(*value)
    raise ValueError(f"Invalid insets: {value!r}")


def _style(desc: Description) -> Style:
    return Style(
        padding=parse_insets(desc.get("padding")),
        margin=parse_insets(desc.get("margin")),
        border=_enum(BorderStyle, desc.get("border", "none"), "border"),
        min_width=Dimension.parse(desc.get("min_width")),
        max_width=Dimension.parse(desc.get("max_width")),
        min_height=Dimension.parse(desc.get("min_height")),
        max_height=Dimension.parse(desc.get("max_height")),
    )


def _common(desc: Description) -> dict[str, Any]:
    return {
        "width": Dimension.parse(desc.get("width")),
        "height": Dimension.parse(desc.get("height")),
        "style": _style(desc),
        "key": desc.get("key"),
    }


def _children(desc: Description, key: str = "children") -> list[BaseWidget]:
    items = desc.get(key, [])
    if not isinstance(items, list):
        raise ValueError(f"'{key}' must be a list")
    return [build_widget(item) for item in items]


def _linear(cls: type) -> Callable[[Description], BaseWidget]:
    def make(desc: Description) -> BaseWidget:
        return cls(
            _children(desc),
            spacing=int(desc.get("spacing", 0)),
            main_align=_enum(MainAxisAlignment, desc.get("main_align", "start"), "main_align"),
            cross_align=_enum(CrossAxisAlignment, desc.get("cross_align", "stretch"), "cross_align"),
            **_common(desc),
        )
    return make


def _stack(desc: Description) -> BaseWidget:
    children: list[BaseWidget] = []
    for item in desc.get("children", []):
        child = build_widget(item)
        offsets = {name: item[name] for name in _OFFSETS if name in item}
        if offsets:
            child = Positioned(child, **{k: int(v) for k, v in offsets.items()})
        children.append(child)
    alignment = str(desc.get("alignment", "top-left")).lower()
    if alignment not in _ALIGNMENTS:
        raise ValueError(f"Invalid alignment {alignment!r}")
    return Stack(children, alignment=_ALIGNMENTS[alignment], **_common(desc))


def _dock(desc: Description) -> BaseWidget:
    order = [_enum(DockEdge, e, "dock edge") for e in desc.get("dock_order", [])]
    body = desc.get("body")
    return Dock(
        top=_children(desc, "top"),
        bottom=_children(desc, "bottom"),
        left=_children(desc, "left"),
        right=_children(desc, "right"),
        body=build_widget(body) if body is not None else None,
        dock_order=order or DEFAULT_DOCK_ORDER,
        **_common(desc),
    )


def _label(desc: Description) -> BaseWidget:
    return Label(str(desc.get("text", "")), wrap=bool(desc.get("wrap", False)), **_common(desc))


_BUILDERS: dict[str, Callable[[Description], BaseWidget]] = {
    "row": _linear(Row),
    "column": _linear(Column),
    "stack": _stack,
    "dock": _dock,
    "label": _label,
    "spacer": lambda desc: Spacer(**_common(desc)),
    "box": lambda desc: BaseWidget(**_common(desc)),
}


def build_widget(desc: Description) -> BaseWidget:
    """
    Build a widget tree from a description.

    Raises:
        ValueError: If the description is malformed.
    """
    if not isinstance(desc, Mapping):
        raise ValueError(f"Widget description must be an object, got {type(desc).__name__}")
    kind = str(desc.get("type", "")).lower()
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise ValueError(f"Unknown widget type {kind!r} (expected one of: {', '.join(_BUILDERS)})")
    return builder(desc)


def load_layout(path: Union[str, Path]) -> BaseWidget:
    """Read a JSON layout description from path."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON: {e}") from e
    return build_widget(data)
