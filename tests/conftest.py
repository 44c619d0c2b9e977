"""Pytest configuration: every test gets a fresh process-wide tracker."""

from typing import Callable, Iterator

import pytest

from ansi_frame.layout.types import Constraints
from ansi_frame.reactive.state import StateStore
from ansi_frame.reactive.tracker import BuildTracker, set_tracker
from ansi_frame.render.tree import RenderTree, build_render_tree
from ansi_frame.widgets.base import BuildContext, BuildSession, Widget


@pytest.fixture(autouse=True)
def tracker() -> Iterator[BuildTracker]:
    """Install an isolated tracker (registry + scheduler) for the test."""
    fresh = BuildTracker()
    previous = set_tracker(fresh)
    yield fresh
    set_tracker(previous)


@pytest.fixture
def session(tracker: BuildTracker) -> BuildSession:
    return BuildSession(tracker, StateStore())


@pytest.fixture
def ctx(session: BuildSession) -> BuildContext:
    return BuildContext(session)


@pytest.fixture
def render(tracker: BuildTracker) -> Callable[[Widget, int, int], RenderTree]:
    """Lay out a widget tree in a width x height viewport."""
    def _render(widget: Widget, width: int, height: int) -> RenderTree:
        session = BuildSession(tracker, StateStore())
        return build_render_tree(widget, Constraints.tight(width, height), session)
    return _render
