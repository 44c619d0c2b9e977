"""Tests for reactive cells."""

import threading
from typing import Iterable, Iterator

import pytest

from ansi_frame.reactive.signal import AnySignal, Signal, is_valid
from ansi_frame.reactive.tracker import BuildTracker, set_tracker


class CountingTracker(BuildTracker):
    """Tracker that records every notification it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.notifications: list[set[int]] = []

    def notify(self, node_ids: Iterable[int]) -> None:
        self.notifications.append(set(node_ids))
        super().notify(node_ids)


@pytest.fixture
def counting() -> Iterator[CountingTracker]:
    tracker = CountingTracker()
    previous = set_tracker(tracker)
    yield tracker
    set_tracker(previous)


def subscribe(tracker: BuildTracker, cell: Signal, path: str = "0"):
    node = tracker.registry.node_for(path)
    with tracker.building(node):
        cell.get()
    return node


class TestSignal:
    """Tests for the equality-checked cell."""

    def test_get_and_set(self) -> None:
        cell = Signal(1)
        cell.set(2)
        assert cell.get() == 2
        assert cell.peek() == 2

    def test_equal_value_does_not_notify(self, counting: CountingTracker) -> None:
        cell = Signal(5)
        subscribe(counting, cell)
        cell.set(5)
        assert counting.notifications == []

    def test_change_notifies_subscribers(self, counting: CountingTracker) -> None:
        cell = Signal("a")
        node = subscribe(counting, cell)
        cell.set("b")
        assert counting.notifications == [{node.id}]
        assert node.dirty
        assert counting.scheduler.pending

    def test_no_subscribers_means_no_notification(self, counting: CountingTracker) -> None:
        cell = Signal(0)
        cell.set(1)
        assert counting.notifications == []
        assert not counting.scheduler.pending

    def test_update_applies_function(self) -> None:
        cell = Signal(10)
        cell.update(lambda n: n + 5)
        assert cell.peek() == 15

    def test_update_to_equal_value_is_silent(self, counting: CountingTracker) -> None:
        cell = Signal(3)
        subscribe(counting, cell)
        cell.update(lambda n: n)
        assert counting.notifications == []

    def test_repr(self) -> None:
        assert repr(Signal(3)) == "Signal(3)"
        assert repr(Signal()) == "Signal('<unset>')"


class TestAnySignal:
    """Tests for the always-notify cell."""

    def test_equal_value_still_notifies(self, counting: CountingTracker) -> None:
        items: list[int] = []
        cell = AnySignal(items)
        subscribe(counting, cell)
        items.append(1)
        cell.set(items)
        cell.set(items)
        assert len(counting.notifications) == 2


class TestValidity:
    """Tests for unset cells."""

    def test_unset_cell_is_invalid(self) -> None:
        cell: Signal[int] = Signal()
        assert not cell.is_valid()
        assert not is_valid(cell)
        assert cell.get() is None
        assert cell.peek() is None

    def test_first_set_makes_valid(self) -> None:
        cell: Signal[int] = Signal()
        cell.set(0)
        assert is_valid(cell)
        assert cell.get() == 0

    def test_none_cell_is_invalid(self) -> None:
        assert not is_valid(None)

    def test_update_on_unset_sees_none(self) -> None:
        cell: Signal[int] = Signal()
        cell.update(lambda n: 1 if n is None else n + 1)
        assert cell.peek() == 1


class TestSubscriptions:
    """Tests for dependency tracking."""

    def test_peek_does_not_subscribe(self, tracker: BuildTracker) -> None:
        cell = Signal(1)
        node = tracker.registry.node_for("0")
        with tracker.building(node):
            cell.peek()
        assert cell.subscriber_count == 0

    def test_get_outside_build_does_not_subscribe(self) -> None:
        cell = Signal(1)
        cell.get()
        assert cell.subscriber_count == 0

    def test_rebuild_releases_stale_subscriptions(self, tracker: BuildTracker) -> None:
        first, second = Signal(1), Signal(2)
        node = subscribe(tracker, first)
        assert first.subscribers() == frozenset({node.id})
        assert node.tracked == [first]

        with tracker.building(node):
            second.get()
        assert first.subscriber_count == 0
        assert node.tracked == [second]
        assert second.subscribers() == frozenset({node.id})

    def test_unsubscribe(self, tracker: BuildTracker) -> None:
        cell = Signal(1)
        node = subscribe(tracker, cell)
        cell.unsubscribe(node.id)
        cell.unsubscribe(node.id)
        assert cell.subscriber_count == 0

    def test_read_from_other_thread_does_not_subscribe(self, tracker: BuildTracker) -> None:
        cell = Signal(1)
        seen: list[int] = []
        node = tracker.registry.node_for("0")
        with tracker.building(node):
            worker = threading.Thread(target=lambda: seen.append(cell.get()))
            worker.start()
            worker.join()
        assert seen == [1]
        assert cell.subscriber_count == 0

    def test_unmounted_node_is_not_marked(self, counting: CountingTracker) -> None:
        cell = Signal(1)
        node = subscribe(counting, cell)
        counting.registry.sweep([])
        cell.set(2)
        assert counting.notifications == []
        assert not node.dirty


class TestConcurrency:
    """Tests for concurrent writers."""

    def test_concurrent_updates_are_not_lost(self) -> None:
        cell = Signal(0)

        def work() -> None:
            for _ in range(1000):
                cell.update(lambda n: n + 1)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert cell.peek() == 8000

    def test_concurrent_writes_coalesce(self, counting: CountingTracker) -> None:
        cell = Signal(0)
        subscribe(counting, cell)

        def work() -> None:
            for _ in range(100):
                cell.update(lambda n: n + 1)

        threads = [threading.Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert counting.scheduler.take()
        assert not counting.scheduler.take()
        assert counting.scheduler.coalesced == 399

    def test_notify_can_reenter_cell_from_another_thread(self) -> None:
        cell = Signal(0)

        class ReenteringTracker(BuildTracker):
            """Reads and writes the cell from a worker while a notify is running."""

            def __init__(self) -> None:
                super().__init__()
                self.snapshots: list[set[int]] = []
                self.worker_finished = False

            def notify(self, node_ids: Iterable[int]) -> None:
                ids = set(node_ids)
                self.snapshots.append(ids)
                if len(self.snapshots) == 1:
                    worker = threading.Thread(target=self._reenter)
                    worker.start()
                    worker.join(timeout=5)
                    self.worker_finished = not worker.is_alive()
                super().notify(ids)

            def _reenter(self) -> None:
                late = self.registry.node_for("late")
                with self.building(late):
                    cell.get()
                cell.set(cell.peek() + 1)

        reentering = ReenteringTracker()
        previous = set_tracker(reentering)
        try:
            first = subscribe(reentering, cell)
            cell.set(1)
        finally:
            set_tracker(previous)

        late = reentering.registry.node_for("late")
        assert reentering.worker_finished
        assert reentering.snapshots == [{first.id}, {first.id, late.id}]
        assert cell.peek() == 2
        assert cell.subscriber_count == 2
