"""Telegram Bot API client using aiohttp."""

from typing import Any, Dict, Optional, Union

import aiohttp

from telegram_relay.domain.errors import UpstreamError
from telegram_relay.infrastructure.logger import get_logger

TELEGRAM_API_BASE = "https://api.telegram.org"

logger = get_logger(__name__)


class TelegramClient:
    """Async client for the two Bot API calls the relay needs.

    Credentials are passed per call because each project has its own bot.
    """

    def __init__(self, api_base: str = TELEGRAM_API_BASE):
        self.api_base = api_base.rstrip("/")

    def _method_url(self, bot_token: str, method: str) -> str:
        return f"{self.api_base}/bot{bot_token}/{method}"

    @staticmethod
    async def _read_response(resp: aiohttp.ClientResponse, method: str) -> Dict[str, Any]:
        if not 200 <= resp.status < 300:
            body = await resp.text()
            logger.warning("Telegram %s failed (HTTP %s)", method, resp.status)
            raise UpstreamError(body, status=resp.status)
        return await resp.json(content_type=None)

    async def send_message(
        self,
        bot_token: str,
        channel_id: Union[str, int],
        text: str,
    ) -> Dict[str, Any]:
        url = self._method_url(bot_token, "sendMessage")
        payload = {
            "chat_id": channel_id,
            "text": text,
            "parse_mode": "HTML",
        }
        async with aiohttp.ClientSession() as session:
            async with session.post(url, json=payload) as resp:
                return await self._read_response(resp, "sendMessage")

    async def send_document(
        self,
        bot_token: str,
        channel_id: Union[str, int],
        filename: str,
        content: bytes,
        caption: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Upload raw bytes as a document. Size limits are Telegram's to enforce."""
        url = self._method_url(bot_token, "sendDocument")
        form = aiohttp.FormData()
        form.add_field("chat_id", str(channel_id))
        form.add_field(
            "document",
            content,
            filename=filename,
            content_type="application/octet-stream",
        )
        if caption:
            form.add_field("caption", caption)

        async with aiohttp.ClientSession() as session:
            async with session.post(url, data=form) as resp:
                return await self._read_response(resp, "sendDocument")
