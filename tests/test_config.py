"""Tests for environment configuration, logging setup and terminal queries."""

import logging
import os
from pathlib import Path

import pytest

from ansi_frame.config import DEFAULT_FPS, DEFAULT_LOG_FILE, FrameConfig, bool_env
from ansi_frame.log import PACKAGE_LOGGER, configure_logging
from ansi_frame.terminal import Terminal, TerminalSize


@pytest.fixture(autouse=True)
def reset_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if getattr(handler, "_ansi_frame", False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestBoolEnv:
    """Tests for bool_env."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on", "debug"])
    def test_truthy(self, value: str) -> None:
        assert bool_env("FLAG", {"FLAG": value})

    @pytest.mark.parametrize("value", ["", "0", "false", "No", " off "])
    def test_falsy(self, value: str) -> None:
        assert not bool_env("FLAG", {"FLAG": value})

    def test_unset(self) -> None:
        assert not bool_env("FLAG", {})


class TestFrameConfig:
    """Tests for FrameConfig."""

    def test_defaults(self) -> None:
        config = FrameConfig.from_env({})
        assert config == FrameConfig()
        assert config.fps == DEFAULT_FPS
        assert config.log_file == DEFAULT_LOG_FILE
        assert config.debug is False

    def test_reads_variables(self) -> None:
        config = FrameConfig.from_env({
            "ANSI_FRAME_FPS": "30",
            "ANSI_FRAME_DEBUG": "1",
            "ANSI_FRAME_LOG_FILE": "/tmp/frames.log",
        })
        assert config.fps == 30
        assert config.debug is True
        assert config.log_file == "/tmp/frames.log"
        assert config.frame_interval == pytest.approx(1 / 30)

    @pytest.mark.parametrize("raw", ["fast", "0", "-5"])
    def test_bad_fps_falls_back(self, raw: str, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="ansi_frame.config"):
            config = FrameConfig.from_env({"ANSI_FRAME_FPS": raw})
        assert config.fps == DEFAULT_FPS
        assert "ANSI_FRAME_FPS" in caplog.text

    def test_reads_os_environ(self, monkeypatch) -> None:
        monkeypatch.setenv("ANSI_FRAME_FPS", "12")
        assert FrameConfig.from_env().fps == 12


class TestConfigureLogging:
    """Tests for configure_logging."""

    def _ours(self, logger: logging.Logger) -> list[logging.Handler]:
        return [h for h in logger.handlers if getattr(h, "_ansi_frame", False)]

    def test_quiet_by_default(self) -> None:
        logger = configure_logging(FrameConfig())
        handlers = self._ours(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_debug_writes_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "frame.log"
        logger = configure_logging(FrameConfig(debug=True, log_file=str(log_file)))
        logging.getLogger("ansi_frame.render.app").debug("frame %d", 7)
        for handler in self._ours(logger):
            handler.flush()
        assert "frame 7" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        configure_logging(FrameConfig(debug=True, log_file=str(tmp_path / "a.log")))
        logger = configure_logging(FrameConfig())
        handlers = self._ours(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)


class TestTerminal:
    """Tests for terminal size detection."""

    def test_falls_back_without_tty(self, monkeypatch) -> None:
        def no_tty():
            raise OSError("not a terminal")

        monkeypatch.setattr(os, "get_terminal_size", no_tty)
        assert Terminal.size() == TerminalSize(24, 80)

    def test_reads_terminal(self, monkeypatch) -> None:
        monkeypatch.setattr(os, "get_terminal_size", lambda: os.terminal_size((132, 50)))
        assert Terminal.size() == TerminalSize(rows=50, cols=132)
