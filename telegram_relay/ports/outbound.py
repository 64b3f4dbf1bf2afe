"""Outbound ports — interfaces for external system adapters."""

from typing import Any, Dict, Optional, Protocol, Union, runtime_checkable

ChannelId = Union[str, int]


@runtime_checkable
class TelegramPort(Protocol):
    """Interface for delivering content to a Telegram chat."""

    async def send_message(
        self, bot_token: str, channel_id: ChannelId, text: str
    ) -> Dict[str, Any]: ...

    async def send_document(
        self,
        bot_token: str,
        channel_id: ChannelId,
        filename: str,
        content: bytes,
        caption: Optional[str] = None,
    ) -> Dict[str, Any]: ...
