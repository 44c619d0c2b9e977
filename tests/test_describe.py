"""Tests for building widget trees from JSON descriptions."""

import json
from pathlib import Path

import pytest

from ansi_frame.layout.axis import CrossAxisAlignment, DockEdge, MainAxisAlignment
from ansi_frame.layout.box_model import EdgeInsets
from ansi_frame.describe import build_widget, load_layout, parse_insets
from ansi_frame.widgets.base import BaseWidget
from ansi_frame.widgets.dimension import cells, flex, percent
from ansi_frame.widgets.dock import Dock
from ansi_frame.widgets.label import Label
from ansi_frame.widgets.linear import Column, Row
from ansi_frame.widgets.spacer import Spacer
from ansi_frame.widgets.stack import Positioned, Stack
from ansi_frame.widgets.style import Alignment, BorderStyle


class TestParseInsets:
    """Tests for parse_insets."""

    def test_forms(self) -> None:
        assert parse_insets(None) == EdgeInsets()
        assert parse_insets(2) == EdgeInsets.all(2)
        assert parse_insets([1, 3]) == EdgeInsets(top=1, right=3, bottom=1, left=3)
        assert parse_insets([1, 2, 3, 4]) == EdgeInsets(1, 2, 3, 4)

    @pytest.mark.parametrize("bad", [[1, 2, 3], "2", True, [1, "x"]])
    def test_rejects(self, bad) -> None:
        with pytest.raises(ValueError):
            parse_insets(bad)


class TestBuildWidget:
    """Tests for build_widget."""

    def test_row_with_options(self) -> None:
        row = build_widget({
            "type": "row",
            "spacing": 2,
            "main_align": "space-between",
            "cross_align": "center",
            "width": "1fr",
            "padding": 1,
            "border": "double",
            "children": [{"type": "box", "width": 4}, {"type": "spacer"}],
        })
        assert isinstance(row, Row)
        assert row.spacing == 2
        assert row.main_align is MainAxisAlignment.SPACE_BETWEEN
        assert row.cross_align is CrossAxisAlignment.CENTER
        assert row.width == flex(1)
        assert row.style.padding == EdgeInsets.all(1)
        assert row.style.border is BorderStyle.DOUBLE
        assert type(row.children[0]) is BaseWidget
        assert row.children[0].width == cells(4)
        assert isinstance(row.children[1], Spacer)

    def test_label_and_bounds(self) -> None:
        label = build_widget({
            "type": "label",
            "text": "hi",
            "wrap": True,
            "max_width": "50%",
            "key": "greeting",
        })
        assert isinstance(label, Label)
        assert label.text == "hi"
        assert label.wrap is True
        assert label.style.max_width == percent(50)
        assert label.key == "greeting"

    def test_stack_offsets_make_positioned(self) -> None:
        stack = build_widget({
            "type": "stack",
            "alignment": "bottom-right",
            "children": [
                {"type": "box"},
                {"type": "label", "text": "x", "top": 1, "left": -2},
            ],
        })
        assert isinstance(stack, Stack)
        assert stack.alignment == Alignment.BOTTOM_RIGHT
        assert not isinstance(stack.children[0], Positioned)
        positioned = stack.children[1]
        assert isinstance(positioned, Positioned)
        assert (positioned.top, positioned.left, positioned.right) == (1, -2, None)

    def test_dock(self) -> None:
        dock = build_widget({
            "type": "dock",
            "top": [{"type": "label", "text": "title"}],
            "left": [{"type": "box", "width": 10}],
            "body": {"type": "column"},
            "dock_order": ["left", "top"],
        })
        assert isinstance(dock, Dock)
        assert dock.dock_order == (DockEdge.LEFT, DockEdge.TOP)
        assert isinstance(dock.body, Column)
        assert [type(w).__name__ for w in dock.child_widgets()] == ["BaseWidget", "Label", "Column"]

    @pytest.mark.parametrize("desc", [
        {"type": "window"},
        {},
        [],
        {"type": "row", "children": {"type": "box"}},
        {"type": "row", "main_align": "sideways"},
        {"type": "box", "width": "wide"},
        {"type": "box", "border": "dotted"},
        {"type": "stack", "alignment": "middle"},
        {"type": "dock", "dock_order": ["north"]},
    ])
    def test_malformed(self, desc) -> None:
        with pytest.raises(ValueError):
            build_widget(desc)


class TestLoadLayout:
    """Tests for load_layout."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ui.json"
        path.write_text(json.dumps({"type": "column", "children": [{"type": "label"}]}), encoding="utf-8")
        column = load_layout(path)
        assert isinstance(column, Column)
        assert isinstance(column.children[0], Label)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "ui.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ValueError, match="invalid JSON"):
            load_layout(path)
