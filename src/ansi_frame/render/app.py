"""Frame loop."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from ansi_frame.config import FrameConfig
from ansi_frame.layout.types import Constraints
from ansi_frame.reactive.scheduler import RenderScheduler
from ansi_frame.reactive.state import StateStore
from ansi_frame.reactive.tracker import BuildTracker, NodeRegistry, set_tracker
from ansi_frame.render.cache import LayoutCache
from ansi_frame.render.tree import RenderTree, build_render_tree
from ansi_frame.terminal import Terminal
from ansi_frame.widgets.base import BuildSession, Widget

logger = logging.getLogger(__name__)

PaintFunc = Callable[[RenderTree], None]


class App:
    """
    Owns the reactive plumbing and runs build -> layout -> paint.

    Every frame rebuilds the whole widget tree and resolves layout from
    scratch. Frames run only when a render has been requested (a cell
    write, a resize, or the first frame), at most ``config.fps`` per second.
    Painting is delegated to ``paint``.

    Creating an App installs its tracker process-wide; ``close`` (or leaving
    the ``with`` block) restores the previous one.
    """

    def __init__(
        self,
        root: Widget,
        *,
        size: Optional[tuple[int, int]] = None,
        config: Optional[FrameConfig] = None,
        paint: Optional[PaintFunc] = None,
    ) -> None:
        self.root = root
        self.config = config or FrameConfig.from_env()
        self.paint = paint
        self.scheduler = RenderScheduler()
        self.registry = NodeRegistry()
        self.tracker = BuildTracker(self.registry, self.scheduler)
        self.state = StateStore()
        self.cache = LayoutCache()
        if size is None:
            term = Terminal.size()
            size = (term.cols, term.rows)
        self.width, self.height = (max(0, v) for v in size)
        self.frames = 0
        self.last_tree: Optional[RenderTree] = None
        self._stop = threading.Event()
        self._previous_tracker = set_tracker(self.tracker)

    def close(self) -> None:
        self.stop()
        set_tracker(self._previous_tracker)

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def needs_render(self) -> bool:
        return self.frames == 0 or self.scheduler.pending

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = max(0, width), max(0, height)
        self.scheduler.request()

    def render_frame(self) -> RenderTree:
        """Run one full build/layout/paint pass."""
        started = time.perf_counter()
        self.scheduler.take()
        self.cache.clear()

        session = BuildSession(self.tracker, self.state)
        tree = build_render_tree(
            self.root,
            Constraints.tight(self.width, self.height),
            session,
            self.cache,
        )
        self.registry.sweep(session.mounted)

        self.frames += 1
        self.last_tree = tree
        if self.paint is not None:
            self.paint(tree)
        logger.debug(
            "frame %d: %d nodes in %.2fms",
            self.frames, len(session.mounted), (time.perf_counter() - started) * 1000,
        )
        return tree

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Render frames until ``stop`` is called or ``max_frames`` is reached.

        Returns:
            Number of frames rendered by this call.
        """
        self._stop.clear()
        if self.frames == 0:
            self.scheduler.request()
        interval = self.config.frame_interval
        rendered = 0
        while not self._stop.is_set():
            if max_frames is not None and rendered >= max_frames:
                break
            if not self.scheduler.wait(timeout=interval):
                continue
            if self._stop.is_set():
                break
            started = time.monotonic()
            self.render_frame()
            rendered += 1
            remaining = interval - (time.monotonic() - started)
            if remaining > 0:
                self._stop.wait(remaining)
        return rendered

    def stop(self) -> None:
        """Ask ``run`` to return; safe from any thread."""
        self._stop.set()
