"""Tests for logging setup."""

import logging

import pytest

from telegram_relay.infrastructure import logger as relay_logger


@pytest.fixture
def fresh_root(monkeypatch):
    """Let configure_logging run again and undo its effect on the root logger."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    monkeypatch.setattr(relay_logger, "_configured", False)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_level_from_app_config(self, fresh_root, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        relay_logger.configure_logging()
        assert fresh_root.level == logging.DEBUG

    def test_explicit_level(self, fresh_root):
        relay_logger.configure_logging("warning")
        assert fresh_root.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, fresh_root):
        relay_logger.configure_logging("chatty")
        assert fresh_root.level == logging.INFO

    def test_configures_once(self, fresh_root):
        before = len(fresh_root.handlers)
        relay_logger.configure_logging("INFO")
        relay_logger.configure_logging("DEBUG")
        assert len(fresh_root.handlers) == before + 1
        assert fresh_root.level == logging.INFO


class TestGetLogger:
    def test_named_logger(self):
        assert relay_logger.get_logger("telegram_relay.relay").name == "telegram_relay.relay"
