"""Domain layer — pure Python, no framework dependencies."""

from telegram_relay.domain.errors import (
    ConfigError,
    ConfigNotFound,
    RelayError,
    UpstreamError,
    ValidationError,
)
from telegram_relay.domain.models import FileAttachment, OutcomeItem, ProjectConfig, RelayRequest

__all__ = [
    "ConfigError",
    "ConfigNotFound",
    "RelayError",
    "UpstreamError",
    "ValidationError",
    "FileAttachment",
    "OutcomeItem",
    "ProjectConfig",
    "RelayRequest",
]
