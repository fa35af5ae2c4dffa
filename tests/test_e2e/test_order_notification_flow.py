"""Fluxo completo: MessageService -> /api/messaging -> TelegramProvider -> Bot API.

O endpoint roda in-process via httpx.ASGITransport e a Bot API é simulada
com httpx.MockTransport.
"""

from __future__ import annotations

import json
from datetime import date

import httpx
import pytest
from fastapi import FastAPI

from api.connectors.http_base import HttpClient, HttpClientConfig
from api.routes import create_api_router
from api.routes.messaging import router as messaging_router
from app.bootstrap import dependencies
from app.constants.messaging import MessageDirection, ProviderType
from app.infra.stores import MemoryMessageStore
from app.protocols.models import OrderNotificationParams
from app.services.message_service import MessageService
from config.settings import MessagingSettings, TelegramSettings

API_URL = "http://testserver/api/messaging"
SETTINGS = MessagingSettings(
    telegram=TelegramSettings(bot_token="123456:ABC-def", default_chat_id="987654321")
)
PARAMS = OrderNotificationParams(
    order_number="1001",
    customer_name="Ana",
    items=("Coffee", "Bagel"),
    total=12.5,
    delivery_date=date(2024, 3, 5),
)


class _BotApi:
    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(
                self.status_code,
                json={"ok": False, "description": "Forbidden: bot was blocked by the user"},
            )
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 4242}})


@pytest.fixture
def store(monkeypatch) -> MemoryMessageStore:
    store = MemoryMessageStore()
    monkeypatch.setattr(messaging_router, "get_messaging_settings", lambda: SETTINGS)
    monkeypatch.setattr(dependencies, "get_message_store", lambda: store)
    return store


def _install_bot_api(monkeypatch, bot_api: _BotApi) -> None:
    client = HttpClient(HttpClientConfig(), transport=httpx.MockTransport(bot_api))
    monkeypatch.setattr(dependencies, "create_http_client", lambda: client)


def _service() -> MessageService:
    app = FastAPI()
    app.include_router(create_api_router())
    client = HttpClient(HttpClientConfig(), transport=httpx.ASGITransport(app=app))
    return MessageService(API_URL, http_client=client)


@pytest.mark.asyncio
async def test_order_notification_reaches_bot_api(monkeypatch, store: MemoryMessageStore) -> None:
    bot_api = _BotApi()
    _install_bot_api(monkeypatch, bot_api)

    result = await _service().send_order_notification(
        "987654321", PARAMS, provider_type=ProviderType.TELEGRAM
    )

    assert result.success is True
    assert result.message_id == "4242"
    assert result.message_id.isdigit()

    sent = json.loads(bot_api.requests[0].content)
    assert sent["chat_id"] == "987654321"
    assert "1001" in sent["text"]

    stored = await store.get_messages(ProviderType.TELEGRAM, "987654321")
    assert len(stored) == 1
    assert stored[0].direction == MessageDirection.OUTBOUND
    assert stored[0].platform_message_id == "4242"


@pytest.mark.asyncio
async def test_upstream_rejection_surfaces_provider_status(
    monkeypatch, store: MemoryMessageStore
) -> None:
    _install_bot_api(monkeypatch, _BotApi(status_code=403))

    result = await _service().send_order_notification(
        "987654321", PARAMS, provider_type=ProviderType.TELEGRAM
    )

    assert result.success is False
    assert result.status_code == 403
    assert "blocked" in (result.error or "")
    assert await store.get_messages(ProviderType.TELEGRAM, "987654321") == []
