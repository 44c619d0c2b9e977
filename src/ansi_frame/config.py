"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_FPS = "ANSI_FRAME_FPS"
ENV_DEBUG = "ANSI_FRAME_DEBUG"
ENV_LOG_FILE = "ANSI_FRAME_LOG_FILE"

DEFAULT_FPS = 60
DEFAULT_LOG_FILE = "ansi_frame.log"

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def bool_env(name: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """True unless the variable is unset or one of ``0/false/no/off``."""
    source = os.environ if env is None else env
    value = source.get(name)
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class FrameConfig:
    """
    Frame loop settings.

    Attributes:
        fps: Upper bound on frames per second.
        debug: Write debug logs to ``log_file``.
        log_file: Log destination; the terminal is owned by the UI.
    """
    fps: int = DEFAULT_FPS
    debug: bool = False
    log_file: str = DEFAULT_LOG_FILE

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.fps

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> FrameConfig:
        """Build a config from ``ANSI_FRAME_*`` variables; bad values fall back to defaults."""
        source = os.environ if env is None else env
        fps = DEFAULT_FPS
        if raw := source.get(ENV_FPS):
            try:
                fps = int(raw)
            except ValueError:
                logger.warning("ignoring %s=%r: not an integer", ENV_FPS, raw)
            else:
                if fps <= 0:
                    logger.warning("ignoring %s=%r: must be positive", ENV_FPS, raw)
                    fps = DEFAULT_FPS
        return cls(
            fps=fps,
            debug=bool_env(ENV_DEBUG, source),
            log_file=source.get(ENV_LOG_FILE) or DEFAULT_LOG_FILE,
        )
