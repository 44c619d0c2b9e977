"""Coalesced render requests."""

from __future__ import annotations

import logging
import queue
from typing import Optional

logger = logging.getLogger(__name__)


class RenderScheduler:
    """
    Single-slot render request channel.

    ``request`` never blocks: if a request is already pending the new one is
    dropped, so any number of writes between two frames cost one re-render.
    Safe to call from any thread.
    """

    def __init__(self) -> None:
        self._slot: queue.Queue[None] = queue.Queue(maxsize=1)
        self.coalesced = 0

    def request(self) -> None:
        """Ask for a re-render."""
        try:
            self._slot.put_nowait(None)
        except queue.Full:
            self.coalesced += 1
            logger.debug("render request coalesced (%d so far)", self.coalesced)

    @property
    def pending(self) -> bool:
        return not self._slot.empty()

    def take(self) -> bool:
        """Consume a pending request without waiting. Returns True if one was pending."""
        try:
            self._slot.get_nowait()
        except queue.Empty:
            return False
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until a request arrives or timeout expires. Returns True on a request."""
        try:
            self._slot.get(timeout=timeout)
        except queue.Empty:
            return False
        return True
