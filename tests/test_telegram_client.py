"""Unit tests for TelegramClient."""

import pytest
from unittest.mock import patch

import aiohttp

from telegram_relay.adapters.telegram.client import TelegramClient, TELEGRAM_API_BASE
from telegram_relay.domain.errors import UpstreamError


def _mock_aiohttp_session(responses, calls):
    """Return a class that replaces aiohttp.ClientSession.

    responses: list of (status, body) tuples consumed by successive post() calls;
    body is a dict for JSON replies or a str for error text.
    calls: list that receives (url, kwargs) for every post().
    """
    call_idx = 0

    class FakeResponse:
        def __init__(self, status, body):
            self.status = status
            self._body = body

        async def json(self, content_type="application/json"):
            return self._body

        async def text(self):
            return self._body if isinstance(self._body, str) else str(self._body)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def post(self, url, **kwargs):
            nonlocal call_idx
            calls.append((url, kwargs))
            status, body = responses[call_idx]
            call_idx += 1
            return FakeResponse(status, body)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


def _form_fields(form: aiohttp.FormData):
    """Map field name -> (value, filename) for a FormData instance."""
    fields = {}
    for type_options, _headers, value in form._fields:
        fields[type_options["name"]] = (value, type_options.get("filename"))
    return fields


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_posts_html_json_body(self):
        calls = []
        session = _mock_aiohttp_session([(200, {"ok": True, "result": {"message_id": 7}})], calls)
        client = TelegramClient()
        with patch("telegram_relay.adapters.telegram.client.aiohttp.ClientSession", session):
            result = await client.send_message("T0KEN", "@channel", "<b>hi</b>")

        assert result == {"ok": True, "result": {"message_id": 7}}
        url, kwargs = calls[0]
        assert url == f"{TELEGRAM_API_BASE}/botT0KEN/sendMessage"
        assert kwargs["json"] == {"chat_id": "@channel", "text": "<b>hi</b>", "parse_mode": "HTML"}

    @pytest.mark.asyncio
    async def test_non_2xx_raises_with_body(self):
        calls = []
        session = _mock_aiohttp_session([(400, '{"ok":false,"description":"chat not found"}')], calls)
        client = TelegramClient()
        with patch("telegram_relay.adapters.telegram.client.aiohttp.ClientSession", session):
            with pytest.raises(UpstreamError) as exc_info:
                await client.send_message("T", "C", "hi")

        assert exc_info.value.status == 400
        assert "chat not found" in exc_info.value.body
        assert str(exc_info.value).startswith("Telegram API error: ")

    @pytest.mark.asyncio
    async def test_custom_api_base(self):
        calls = []
        session = _mock_aiohttp_session([(200, {"ok": True})], calls)
        client = TelegramClient(api_base="http://localhost:8081/")
        with patch("telegram_relay.adapters.telegram.client.aiohttp.ClientSession", session):
            await client.send_message("T", "C", "hi")
        assert calls[0][0] == "http://localhost:8081/botT/sendMessage"


class TestSendDocument:
    @pytest.mark.asyncio
    async def test_multipart_fields(self):
        calls = []
        session = _mock_aiohttp_session([(200, {"ok": True, "result": {"message_id": 8}})], calls)
        client = TelegramClient()
        with patch("telegram_relay.adapters.telegram.client.aiohttp.ClientSession", session):
            result = await client.send_document("T", -100123, "report.pdf", b"%PDF-1.4", caption="weekly")

        assert result["result"]["message_id"] == 8
        url, kwargs = calls[0]
        assert url == f"{TELEGRAM_API_BASE}/botT/sendDocument"
        fields = _form_fields(kwargs["data"])
        assert fields["chat_id"] == ("-100123", None)
        assert fields["document"] == (b"%PDF-1.4", "report.pdf")
        assert fields["caption"] == ("weekly", None)

    @pytest.mark.asyncio
    async def test_caption_omitted_when_empty(self):
        calls = []
        session = _mock_aiohttp_session([(200, {"ok": True}), (200, {"ok": True})], calls)
        client = TelegramClient()
        with patch("telegram_relay.adapters.telegram.client.aiohttp.ClientSession", session):
            await client.send_document("T", "C", "a.txt", b"a")
            await client.send_document("T", "C", "b.txt", b"b", caption="")

        for _url, kwargs in calls:
            assert "caption" not in _form_fields(kwargs["data"])

    @pytest.mark.asyncio
    async def test_payload_too_large(self):
        calls = []
        session = _mock_aiohttp_session([(413, "Request Entity Too Large")], calls)
        client = TelegramClient()
        with patch("telegram_relay.adapters.telegram.client.aiohttp.ClientSession", session):
            with pytest.raises(UpstreamError) as exc_info:
                await client.send_document("T", "C", "big.bin", b"x")

        assert exc_info.value.status == 413
        assert str(exc_info.value) == "Telegram API error: Request Entity Too Large"
