"""Reactive cells.

A cell owns a value and the ids of the widget nodes that read it during
their last build. Writing a new value marks those nodes dirty and asks for
a coalesced re-render.

Quick Start:
    >>> count = Signal(0)
    >>> count.get()          # subscribes the widget being built, if any
    0
    >>> count.update(lambda n: n + 1)
    >>> count.peek()         # never subscribes
    1
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from ansi_frame.reactive.tracker import get_tracker

T = TypeVar("T")

_UNSET: Any = object()


class Signal(Generic[T]):
    """
    Equality-checked reactive cell.

    Setting a value equal to the current one does nothing. Subscribers are
    only touched under the cell's lock; notification runs after the lock is
    released, against a snapshot of the subscriber set.

    A cell created without a value is invalid until its first ``set``;
    reading an invalid cell returns None.
    """

    def __init__(self, value: T = _UNSET) -> None:
        self._value = value
        self._lock = threading.RLock()
        self._subscribers: set[int] = set()

    def is_valid(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> Optional[T]:
        """Return the value, subscribing the node currently being built."""
        node = get_tracker().current
        with self._lock:
            if node is not None:
                self._subscribers.add(node.id)
            value = self._value
        if node is not None:
            node.track(self)
        return None if value is _UNSET else value

    def peek(self) -> Optional[T]:
        """Return the value without subscribing."""
        with self._lock:
            value = self._value
        return None if value is _UNSET else value

    def set(self, value: T) -> None:
        with self._lock:
            if self.is_valid() and not self._should_notify(self._value, value):
                return
            self._value = value
            snapshot = set(self._subscribers)
        self._notify(snapshot)

    def update(self, fn: Callable[[Optional[T]], T]) -> None:
        """Replace the value with ``fn(value)``; ``fn`` runs under the lock."""
        with self._lock:
            current = self._value if self.is_valid() else None
            value = fn(current)
            if self.is_valid() and not self._should_notify(self._value, value):
                return
            self._value = value
            snapshot = set(self._subscribers)
        self._notify(snapshot)

    def unsubscribe(self, node_id: int) -> None:
        with self._lock:
            self._subscribers.discard(node_id)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribers(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._subscribers)

    def _should_notify(self, old: T, new: T) -> bool:
        return old != new

    def _notify(self, node_ids: set[int]) -> None:
        if node_ids:
            get_tracker().notify(node_ids)

    def __repr__(self) -> str:
        value = self._value if self.is_valid() else "<unset>"
        return f"{type(self).__name__}({value!r})"


class AnySignal(Signal[T]):
    """Reactive cell that notifies on every write, equal or not.

    Use for values without meaningful equality (mutable containers updated
    in place, objects compared by identity).
    """

    def _should_notify(self, old: T, new: T) -> bool:
        return True


def is_valid(cell: Optional[Signal[Any]]) -> bool:
    """True if cell exists and holds a value."""
    return cell is not None and cell.is_valid()
