"""Telegram relay — forwards messages and files to per-project Telegram channels."""

__version__ = "0.1.0"

from telegram_relay.config import AppConfig, find_project_config, get_project_configs
from telegram_relay.domain import (
    ConfigError,
    ConfigNotFound,
    FileAttachment,
    OutcomeItem,
    ProjectConfig,
    RelayError,
    RelayRequest,
    UpstreamError,
    ValidationError,
)
from telegram_relay.adapters.telegram import TelegramClient
from telegram_relay.relay import RelayService

__all__ = [
    "__version__",
    "AppConfig",
    "find_project_config",
    "get_project_configs",
    "ConfigError",
    "ConfigNotFound",
    "FileAttachment",
    "OutcomeItem",
    "ProjectConfig",
    "RelayError",
    "RelayRequest",
    "UpstreamError",
    "ValidationError",
    "TelegramClient",
    "RelayService",
]
