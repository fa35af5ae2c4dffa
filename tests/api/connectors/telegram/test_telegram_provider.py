"""Testes do TelegramProvider (envio, persistência e updates inbound)."""

from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig
from api.connectors.telegram import NO_CHAT_ID_ERROR, TelegramProvider
from app.constants.messaging import MessageDirection, MessageStatus, MessageType, ProviderType
from app.infra.stores import MemoryMessageStore
from app.protocols.models import MessageContent, MessageMetadata, OrderNotificationParams
from app.services.content_factories import TelegramMessageFactory
from config.settings import TelegramSettings
from utils.errors import MessageStoreError

SETTINGS = TelegramSettings(bot_token="123456:ABC-def", default_chat_id="987654321")
SEND_URL = "https://api.telegram.org/bot123456:ABC-def/sendMessage"


class _FailingStore(MemoryMessageStore):
    async def save_message(self, message) -> None:
        raise MessageStoreError("Firestore indisponível")


def _client(handler) -> HttpClient:
    return HttpClient(HttpClientConfig(), transport=httpx.MockTransport(handler))


def _sent(message_id: int = 4242):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": message_id}})

    return handler, requests


class TestResolveChatId:
    def test_matching_default_chat(self) -> None:
        provider = TelegramProvider(SETTINGS)
        assert provider.resolve_chat_id("+987 654 321") == "987654321"

    def test_unknown_recipient_falls_back_to_default(self) -> None:
        provider = TelegramProvider(SETTINGS)
        assert provider.resolve_chat_id("5511999999999") == "987654321"

    def test_without_default_returns_none(self) -> None:
        provider = TelegramProvider(TelegramSettings(bot_token="123456:ABC-def"))
        assert provider.resolve_chat_id("5511999999999") is None


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_order_notification_end_to_end(self) -> None:
        handler, requests = _sent(4242)
        store = MemoryMessageStore()
        provider = TelegramProvider(SETTINGS, message_store=store, http_client=_client(handler))
        content = TelegramMessageFactory().create_order_notification(
            OrderNotificationParams(
                order_number="1001",
                customer_name="Ana <VIP>",
                items=("Coffee", "Bagel"),
                total=12.5,
                delivery_date=date(2024, 3, 5),
            )
        )

        result = await provider.send_message("987654321", content)

        assert result.success is True
        assert result.message_id == "4242"
        assert result.status_code == 200

        assert str(requests[0].url) == SEND_URL
        body = json.loads(requests[0].content)
        assert body["chat_id"] == "987654321"
        assert body["parse_mode"] == "HTML"
        assert "<b>🛍️ New Order #1001</b>" in body["text"]
        assert "Ana &lt;VIP&gt;" in body["text"]
        assert "• Coffee" in body["text"]
        assert "$12.50" in body["text"]
        assert "3/5/2024" in body["text"]

        stored = await store.get_messages(ProviderType.TELEGRAM, "987654321")
        assert len(stored) == 1
        assert stored[0].direction == MessageDirection.OUTBOUND
        assert stored[0].status == MessageStatus.SENT
        assert stored[0].platform_message_id == "4242"
        assert stored[0].platform_user_id == "bot"
        assert stored[0].metadata["templateName"] == "order_notification"

    @pytest.mark.asyncio
    async def test_template_content_joins_parameters(self) -> None:
        handler, requests = _sent()
        provider = TelegramProvider(SETTINGS, http_client=_client(handler))
        content = MessageContent(
            body="ignored",
            type=MessageType.TEMPLATE,
            metadata=MessageMetadata(template_name="t", parameters=("linha 1", "linha 2")),
        )

        await provider.send_message("987654321", content)

        assert json.loads(requests[0].content)["text"] == "linha 1\nlinha 2"

    @pytest.mark.asyncio
    async def test_persistence_failure_does_not_fail_send(self) -> None:
        handler, _ = _sent(7)
        provider = TelegramProvider(
            SETTINGS, message_store=_FailingStore(), http_client=_client(handler)
        )

        result = await provider.send_message(
            "987654321", MessageContent(body="oi", type=MessageType.TEXT)
        )

        assert result.success is True
        assert result.message_id == "7"

    @pytest.mark.asyncio
    async def test_missing_chat_id_is_structured_400(self) -> None:
        handler, requests = _sent()
        provider = TelegramProvider(
            TelegramSettings(bot_token="123456:ABC-def"), http_client=_client(handler)
        )

        result = await provider.send_message(
            "5511999999999", MessageContent(body="oi", type=MessageType.TEXT)
        )

        assert result.success is False
        assert result.status_code == 400
        assert result.error == NO_CHAT_ID_ERROR
        assert requests == []

    @pytest.mark.asyncio
    async def test_api_error_uses_description(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400, json={"ok": False, "description": "Bad Request: chat not found"}
            )

        provider = TelegramProvider(SETTINGS, http_client=_client(handler))
        result = await provider.send_message(
            "987654321", MessageContent(body="oi", type=MessageType.TEXT)
        )

        assert result.success is False
        assert result.status_code == 400
        assert result.error == "Bad Request: chat not found"

    @pytest.mark.asyncio
    async def test_media_content_is_unsupported(self) -> None:
        handler, requests = _sent()
        provider = TelegramProvider(SETTINGS, http_client=_client(handler))

        result = await provider.send_message(
            "987654321", MessageContent(body="x", type=MessageType.MEDIA)
        )

        assert result.success is False
        assert result.status_code == 400
        assert requests == []


class TestHandleIncomingMessage:
    @pytest.mark.asyncio
    async def test_message_update_is_persisted_as_inbound(self) -> None:
        store = MemoryMessageStore()
        provider = TelegramProvider(SETTINGS, message_store=store)
        update = {
            "update_id": 10,
            "message": {
                "message_id": 55,
                "from": {"id": 111, "is_bot": False},
                "chat": {"id": 987654321, "type": "private"},
                "date": 1_700_000_000,
                "text": "/start",
            },
        }

        message = await provider.handle_incoming_message(update)

        assert message is not None
        assert message.direction == MessageDirection.INBOUND
        assert message.status == MessageStatus.DELIVERED
        assert message.platform_chat_id == "987654321"
        assert message.platform_user_id == "111"
        assert message.platform_message_id == "55"
        assert message.content == "/start"
        assert message.metadata["edited"] is False
        assert await store.get_messages(ProviderType.TELEGRAM, "987654321") == [message]

    @pytest.mark.asyncio
    async def test_edited_message_is_flagged(self) -> None:
        provider = TelegramProvider(SETTINGS)
        update = {
            "update_id": 11,
            "edited_message": {
                "message_id": 56,
                "chat": {"id": -100200, "type": "group"},
                "caption": "foto",
            },
        }

        message = await provider.handle_incoming_message(update)

        assert message is not None
        assert message.platform_chat_id == "-100200"
        assert message.content == "foto"
        assert message.metadata["edited"] is True

    @pytest.mark.asyncio
    async def test_non_message_update_returns_none(self) -> None:
        provider = TelegramProvider(SETTINGS)
        assert await provider.handle_incoming_message({"update_id": 12, "poll": {}}) is None
