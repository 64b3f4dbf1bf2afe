"""Relay error taxonomy."""

from typing import Optional


class RelayError(Exception):
    """Base class for errors the relay knows how to classify."""

    status_code = 500


class ConfigError(RelayError):
    """Raised when TELEGRAM_CONFIGS is missing or malformed."""


class ValidationError(RelayError):
    """Raised when an inbound request breaks its preconditions."""

    status_code = 400


class ConfigNotFound(RelayError):
    """Raised when no project configuration matches the requested id."""

    status_code = 404

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project configuration not found for ID: {project_id}")


class UpstreamError(RelayError):
    """Raised when the Telegram Bot API answers with a non-2xx status."""

    def __init__(self, body: str, status: Optional[int] = None):
        self.body = body
        self.status = status
        super().__init__(f"Telegram API error: {body}")
