"""Widget state that survives wholesale rebuilds."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional, TypeVar

S = TypeVar("S")


class StateStore:
    """
    Holds per-widget state keyed by widget id.

    Widgets are recreated every frame; anything that must persist (a
    counter's Signal, a selection index) lives here and is fetched again on
    each build.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._states: dict[str, Any] = {}

    def get_or_create(self, key: str, factory: Callable[[], S]) -> S:
        """Return state for key, creating it with factory on first use."""
        with self._lock:
            if key not in self._states:
                self._states[key] = factory()
            return self._states[key]

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._states.get(key)

    def clear(self, key: Optional[str] = None) -> None:
        """Forget state for key, or all state when key is None."""
        with self._lock:
            if key is None:
                self._states.clear()
            else:
                self._states.pop(key, None)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._states

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)
