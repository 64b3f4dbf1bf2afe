"""Self-hosted runner for the Telegram relay."""

import uvicorn

from telegram_relay.adapters.web.server import app
from telegram_relay.adapters.web.routes import settings

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
