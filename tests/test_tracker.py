"""Tests for build tracking, the node registry, scheduling and state."""

import threading

from ansi_frame.reactive.scheduler import RenderScheduler
from ansi_frame.reactive.state import StateStore
from ansi_frame.reactive.tracker import BuildTracker, NodeRegistry, get_tracker, set_tracker


class TestNodeRegistry:
    """Tests for NodeRegistry."""

    def test_node_for_is_stable_per_path(self) -> None:
        registry = NodeRegistry()
        a = registry.node_for("0.1")
        assert registry.node_for("0.1") is a
        assert registry.node_for("0.2") is not a
        assert registry.get(a.id) is a
        assert len(registry) == 2

    def test_ids_are_unique(self) -> None:
        registry = NodeRegistry()
        ids = {registry.node_for(str(i)).id for i in range(50)}
        assert len(ids) == 50

    def test_mark_dirty_ignores_unknown_ids(self) -> None:
        registry = NodeRegistry()
        node = registry.node_for("0")
        assert registry.mark_dirty([node.id, -1]) == 1
        assert registry.dirty_nodes() == [node]
        registry.clear_dirty()
        assert registry.dirty_nodes() == []

    def test_sweep_unmounts_missing_paths(self) -> None:
        registry = NodeRegistry()
        keep = registry.node_for("0")
        gone = registry.node_for("0.0")
        removed = registry.sweep(["0"])
        assert removed == [gone]
        assert "0" in registry
        assert "0.0" not in registry
        assert registry.get(gone.id) is None
        assert registry.get(keep.id) is keep


class TestBuildTracker:
    """Tests for BuildTracker."""

    def test_current_is_none_outside_build(self) -> None:
        assert BuildTracker().current is None

    def test_nested_builds_restore_parent(self) -> None:
        tracker = BuildTracker()
        parent = tracker.registry.node_for("0")
        child = tracker.registry.node_for("0.0")
        with tracker.building(parent):
            assert tracker.current is parent
            with tracker.building(child):
                assert tracker.current is child
            assert tracker.current is parent
        assert tracker.current is None

    def test_current_restored_after_error(self) -> None:
        tracker = BuildTracker()
        node = tracker.registry.node_for("0")
        try:
            with tracker.building(node):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert tracker.current is None

    def test_other_threads_do_not_see_current(self) -> None:
        tracker = BuildTracker()
        node = tracker.registry.node_for("0")
        seen = []
        with tracker.building(node):
            worker = threading.Thread(target=lambda: seen.append(tracker.current))
            worker.start()
            worker.join()
        assert seen == [None]

    def test_notify_requests_render_only_for_known_nodes(self) -> None:
        tracker = BuildTracker()
        tracker.notify([12345678])
        assert not tracker.scheduler.pending
        node = tracker.registry.node_for("0")
        tracker.notify([node.id])
        assert tracker.scheduler.pending

    def test_set_tracker_returns_previous(self, tracker: BuildTracker) -> None:
        other = BuildTracker()
        assert set_tracker(other) is tracker
        assert get_tracker() is other
        set_tracker(tracker)


class TestRenderScheduler:
    """Tests for RenderScheduler."""

    def test_requests_coalesce(self) -> None:
        scheduler = RenderScheduler()
        for _ in range(5):
            scheduler.request()
        assert scheduler.coalesced == 4
        assert scheduler.take()
        assert not scheduler.take()

    def test_wait_times_out(self) -> None:
        assert not RenderScheduler().wait(timeout=0.01)

    def test_wait_wakes_on_request_from_thread(self) -> None:
        scheduler = RenderScheduler()
        timer = threading.Timer(0.01, scheduler.request)
        timer.start()
        try:
            assert scheduler.wait(timeout=5)
        finally:
            timer.cancel()
        assert not scheduler.pending


class TestStateStore:
    """Tests for StateStore."""

    def test_factory_runs_once(self) -> None:
        store = StateStore()
        calls = []

        def factory() -> list:
            calls.append(1)
            return []

        first = store.get_or_create("w", factory)
        assert store.get_or_create("w", factory) is first
        assert calls == [1]
        assert "w" in store
        assert len(store) == 1

    def test_clear(self) -> None:
        store = StateStore()
        store.get_or_create("a", dict)
        store.get_or_create("b", dict)
        store.clear("a")
        assert store.get("a") is None
        assert len(store) == 1
        store.clear()
        assert len(store) == 0
