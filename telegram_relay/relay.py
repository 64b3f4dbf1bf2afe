"""Relay orchestration: validate, resolve credentials, send, aggregate."""

import base64
from typing import Callable, List, Optional

from telegram_relay.config import find_project_config
from telegram_relay.domain.errors import ConfigNotFound, ValidationError
from telegram_relay.domain.models import FileAttachment, OutcomeItem, ProjectConfig, RelayRequest
from telegram_relay.infrastructure.logger import get_logger
from telegram_relay.ports.outbound import TelegramPort

logger = get_logger(__name__)

ConfigLookup = Callable[[str], Optional[ProjectConfig]]


def validate_request(request: RelayRequest) -> None:
    if not request.project_id:
        raise ValidationError("projectId is required")
    if not request.message and not request.files:
        raise ValidationError("Either message or files must be provided")


def file_caption(message: Optional[str]) -> Optional[str]:
    """Caption attached to each uploaded document.

    Documents never carry the message: with a message present it is sent on
    its own, and without one the falsy value is passed through and dropped.
    """
    return None if message else message


_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode_attachment(attachment: FileAttachment) -> bytes:
    """Decode base64 leniently: whitespace, URL-safe alphabet and missing
    padding are all accepted.
    """
    if not isinstance(attachment.content, str):
        raise TypeError("file content must be a base64 string")
    data = "".join(attachment.content.split()).translate(_URLSAFE_TO_STANDARD).rstrip("=")
    if len(data) % 4 == 1:
        # a lone trailing character cannot complete a byte
        data = data[:-1]
    return base64.b64decode(data + "=" * (-len(data) % 4))


class RelayService:
    """Delivers one RelayRequest. Holds no state between calls."""

    def __init__(self, telegram: TelegramPort, lookup: ConfigLookup = find_project_config):
        self.telegram = telegram
        self.lookup = lookup

    async def relay(self, request: RelayRequest) -> List[OutcomeItem]:
        validate_request(request)

        config = self.lookup(request.project_id)
        if config is None:
            raise ConfigNotFound(request.project_id)

        logger.info(
            "Relaying to project %s (message=%s, files=%d)",
            request.project_id,
            bool(request.message),
            len(request.files),
        )

        results: List[OutcomeItem] = []

        # Not caught here: a failed message aborts the whole request.
        if request.message:
            result = await self.telegram.send_message(
                config.bot_token, config.channel_id, request.message
            )
            results.append(OutcomeItem.for_message(result))

        for attachment in request.files:
            results.append(await self._send_file(config, attachment, request.message))

        return results

    async def _send_file(
        self,
        config: ProjectConfig,
        attachment: FileAttachment,
        message: Optional[str],
    ) -> OutcomeItem:
        try:
            content = decode_attachment(attachment)
            result = await self.telegram.send_document(
                config.bot_token,
                config.channel_id,
                attachment.filename,
                content,
                file_caption(message),
            )
            return OutcomeItem.for_file(attachment.filename, result)
        except Exception as e:
            logger.warning("File %r failed for project %s: %s", attachment.filename, config.id, e)
            return OutcomeItem.for_file_error(attachment.filename, str(e) or "Unknown error")
