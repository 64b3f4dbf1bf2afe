"""Relay API routes."""

from typing import Any, List, Optional, Union

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from telegram_relay.adapters.telegram.client import TelegramClient
from telegram_relay.config import AppConfig
from telegram_relay.domain.errors import ConfigNotFound, ValidationError
from telegram_relay.domain.models import FileAttachment, RelayRequest
from telegram_relay.infrastructure.logger import get_logger
from telegram_relay.relay import RelayService

RELAY_PATH = "/api/send-to-telegram"

logger = get_logger(__name__)

relay_router = APIRouter(tags=["Relay"])

settings = AppConfig.from_env()
relay_service = RelayService(TelegramClient(api_base=settings.telegram_api_base))


class SendRequest(BaseModel):
    # Presence checks live in validate_request; file entries are checked
    # one by one as they are sent.
    projectId: Optional[Union[str, int]] = None
    message: Optional[Union[str, int, float]] = None
    files: Optional[List[Any]] = None

    def to_domain(self) -> RelayRequest:
        return RelayRequest(
            project_id=self.projectId,
            message=self.message,
            files=[FileAttachment.from_dict(f) for f in self.files or []],
        )


def error_response(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


@relay_router.post(RELAY_PATH)
async def send_to_telegram(req: SendRequest):
    try:
        results = await relay_service.relay(req.to_domain())
    except (ValidationError, ConfigNotFound) as e:
        return error_response(e.status_code, str(e))
    except Exception as e:
        logger.exception("Error sending to Telegram")
        return error_response(500, "Internal server error", message=str(e) or "Unknown error")

    return {
        "success": True,
        "projectId": req.projectId,
        "results": [item.to_dict() for item in results],
    }


@relay_router.api_route(
    RELAY_PATH,
    methods=["GET", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
async def method_not_allowed():
    return error_response(405, "Method not allowed")


@relay_router.get("/health")
async def health():
    return {"status": "ok"}
