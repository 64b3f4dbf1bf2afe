# Serverless entry point - exposes the ASGI app for runtimes that load api/*.py
# All routes, including /api/send-to-telegram, are defined in telegram_relay/adapters/web/routes.py

from telegram_relay.adapters.web.server import app  # noqa: F401
