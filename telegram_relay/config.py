"""Configuration: process settings and per-project bot credentials."""

import json
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from telegram_relay.domain.errors import ConfigError
from telegram_relay.domain.models import ProjectConfig

load_dotenv()

PROJECT_CONFIGS_ENV = "TELEGRAM_CONFIGS"
DEFAULT_TELEGRAM_API_BASE = "https://api.telegram.org"


@dataclass
class AppConfig:
    """Process-wide settings. Project credentials are not part of it."""

    host: str = "0.0.0.0"
    port: int = 3000
    telegram_api_base: str = DEFAULT_TELEGRAM_API_BASE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            telegram_api_base=os.getenv("TELEGRAM_API_BASE", DEFAULT_TELEGRAM_API_BASE).rstrip("/"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )


# ── Project credentials (re-read on every call) ─────────────


def get_project_configs() -> List[ProjectConfig]:
    """Parse TELEGRAM_CONFIGS into ProjectConfig records. Re-read on every call."""
    raw = os.getenv(PROJECT_CONFIGS_ENV)
    if not raw:
        raise ConfigError(f"{PROJECT_CONFIGS_ENV} environment variable is not set")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse {PROJECT_CONFIGS_ENV}: {e}") from e

    if not isinstance(data, list):
        raise ConfigError(
            f"Failed to parse {PROJECT_CONFIGS_ENV}: {PROJECT_CONFIGS_ENV} must be a JSON array"
        )

    configs = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigError(f"Failed to parse {PROJECT_CONFIGS_ENV}: entry {i} must be an object")
        configs.append(ProjectConfig.from_dict(entry))
    return configs


def find_project_config(project_id: str) -> Optional[ProjectConfig]:
    """Return the first configured project whose id equals ``project_id``, or None."""
    for config in get_project_configs():
        if config.id == project_id:
            return config
    return None
