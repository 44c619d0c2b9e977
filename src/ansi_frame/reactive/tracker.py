"""Build tracking: which widget node is being built right now.

Reactive cells store subscribers as plain integer node ids. The
``NodeRegistry`` owned by the frame loop maps those ids back to
``NodeHandle`` objects; the ``BuildTracker`` holds the process-wide
"current node" pointer that ``Signal.get`` consults.
"""

from __future__ import annotations

import itertools
import logging
import threading
import weakref
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from ansi_frame.reactive.scheduler import RenderScheduler

if TYPE_CHECKING:
    from ansi_frame.reactive.signal import Signal

logger = logging.getLogger(__name__)

# itertools.count is safe to advance from several threads.
_node_ids = itertools.count(1)


class NodeHandle:
    """Identity of one mounted widget instance."""

    def __init__(self, path: str) -> None:
        self.id = next(_node_ids)
        self.path = path
        self.dirty = False
        self._signals: weakref.WeakSet[Signal] = weakref.WeakSet()

    def track(self, signal: Signal) -> None:
        self._signals.add(signal)

    @property
    def tracked(self) -> list[Signal]:
        return list(self._signals)

    def release(self) -> None:
        """Drop every subscription made by this node's last build."""
        for signal in list(self._signals):
            signal.unsubscribe(self.id)
        self._signals.clear()

    def __repr__(self) -> str:
        return f"NodeHandle(id={self.id}, path={self.path!r}, dirty={self.dirty})"


class NodeRegistry:
    """Maps widget paths and node ids to handles across frames."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_path: dict[str, NodeHandle] = {}
        self._by_id: dict[int, NodeHandle] = {}

    def node_for(self, path: str) -> NodeHandle:
        """Return the handle mounted at path, creating it on first sight."""
        with self._lock:
            node = self._by_path.get(path)
            if node is None:
                node = NodeHandle(path)
                self._by_path[path] = node
                self._by_id[node.id] = node
            return node

    def get(self, node_id: int) -> Optional[NodeHandle]:
        with self._lock:
            return self._by_id.get(node_id)

    def mark_dirty(self, node_ids: Iterable[int]) -> int:
        """Flag nodes dirty. Unknown ids (already unmounted) are ignored."""
        count = 0
        with self._lock:
            for node_id in node_ids:
                node = self._by_id.get(node_id)
                if node is not None:
                    node.dirty = True
                    count += 1
        return count

    def dirty_nodes(self) -> list[NodeHandle]:
        with self._lock:
            return [node for node in self._by_path.values() if node.dirty]

    def clear_dirty(self) -> None:
        with self._lock:
            for node in self._by_path.values():
                node.dirty = False

    def sweep(self, mounted: Iterable[str]) -> list[NodeHandle]:
        """Unmount every node whose path was not built this frame."""
        keep = set(mounted)
        with self._lock:
            gone = [node for path, node in self._by_path.items() if path not in keep]
            for node in gone:
                del self._by_path[node.path]
                del self._by_id[node.id]
        for node in gone:
            node.release()
        if gone:
            logger.debug("unmounted %d node(s)", len(gone))
        return gone

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_path)

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._by_path


class BuildTracker:
    """
    Records the node currently being built.

    Only the thread that entered ``building`` sees the current node, so a
    cell read from a worker thread mid-build never subscribes the node.
    """

    def __init__(
        self,
        registry: Optional[NodeRegistry] = None,
        scheduler: Optional[RenderScheduler] = None,
    ) -> None:
        self.registry = registry or NodeRegistry()
        self.scheduler = scheduler or RenderScheduler()
        self._current: Optional[NodeHandle] = None
        self._owner: Optional[int] = None

    @property
    def current(self) -> Optional[NodeHandle]:
        if self._owner != threading.get_ident():
            return None
        return self._current

    @contextmanager
    def building(self, node: NodeHandle) -> Iterator[NodeHandle]:
        """Make node current for the duration of its build.

        Subscriptions from the node's previous build are released first so
        only the cells read by this build stay subscribed.
        """
        node.release()
        previous, previous_owner = self._current, self._owner
        self._current, self._owner = node, threading.get_ident()
        try:
            yield node
        finally:
            self._current, self._owner = previous, previous_owner

    def notify(self, node_ids: Iterable[int]) -> None:
        """Mark nodes dirty and request a coalesced re-render."""
        marked = self.registry.mark_dirty(node_ids)
        if marked:
            self.scheduler.request()


_tracker = BuildTracker()
_tracker_lock = threading.Lock()


def get_tracker() -> BuildTracker:
    """The process-wide tracker consulted by reactive cells."""
    return _tracker


def set_tracker(tracker: BuildTracker) -> BuildTracker:
    """Install tracker process-wide and return the previous one."""
    global _tracker
    with _tracker_lock:
        previous, _tracker = _tracker, tracker
    return previous
