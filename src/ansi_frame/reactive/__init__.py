"""Dependency-tracked reactive values."""

from ansi_frame.reactive.scheduler import RenderScheduler
from ansi_frame.reactive.signal import AnySignal, Signal, is_valid
from ansi_frame.reactive.state import StateStore
from ansi_frame.reactive.tracker import (
    BuildTracker,
    NodeHandle,
    NodeRegistry,
    get_tracker,
    set_tracker,
)

__all__ = [
    "Signal",
    "AnySignal",
    "is_valid",
    "BuildTracker",
    "NodeHandle",
    "NodeRegistry",
    "RenderScheduler",
    "StateStore",
    "get_tracker",
    "set_tracker",
]
