"""Port interfaces (Hexagonal Architecture)."""

from telegram_relay.ports.outbound import TelegramPort

__all__ = ["TelegramPort"]
