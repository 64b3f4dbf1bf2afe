from telegram_relay.adapters.telegram.client import TELEGRAM_API_BASE, TelegramClient

__all__ = ["TELEGRAM_API_BASE", "TelegramClient"]
