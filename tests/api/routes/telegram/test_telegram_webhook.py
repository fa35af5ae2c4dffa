"""Testes do webhook inbound do Telegram."""

from __future__ import annotations

import json

import pytest
from starlette.requests import Request

from api.connectors.telegram import TelegramProvider
from api.routes.telegram import webhook
from api.routes.telegram.webhook import is_secret_valid, receive_update
from app.constants.messaging import ProviderType
from app.infra.stores import MemoryMessageStore
from config.settings import TelegramSettings

UPDATE = {
    "update_id": 1,
    "message": {
        "message_id": 9,
        "from": {"id": 5},
        "chat": {"id": 42, "type": "private"},
        "date": 1_700_000_000,
        "text": "olá",
    },
}


def _build_request(body: bytes, secret: str | None = None) -> Request:
    headers = [(b"content-type", b"application/json")]
    if secret is not None:
        headers.append((b"x-telegram-bot-api-secret-token", secret.encode()))
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook/telegram",
        "raw_path": b"/webhook/telegram",
        "query_string": b"",
        "headers": headers,
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def store(monkeypatch) -> MemoryMessageStore:
    store = MemoryMessageStore()
    settings = TelegramSettings(bot_token="1:abc", webhook_secret="s3cret")
    monkeypatch.setattr(webhook, "get_telegram_settings", lambda: settings)
    monkeypatch.setattr(
        webhook,
        "create_telegram_provider",
        lambda: TelegramProvider(settings, message_store=store),
    )
    return store


@pytest.mark.asyncio
async def test_valid_update_is_persisted(store: MemoryMessageStore) -> None:
    response = await receive_update(_build_request(json.dumps(UPDATE).encode(), "s3cret"))

    assert response["status"] == "received"
    assert response["handled"] is True
    messages = await store.get_messages(ProviderType.TELEGRAM, "42")
    assert [m.content for m in messages] == ["olá"]


@pytest.mark.asyncio
async def test_wrong_secret_is_forbidden(store: MemoryMessageStore) -> None:
    response = await receive_update(_build_request(json.dumps(UPDATE).encode(), "nope"))

    assert response.status_code == 403
    assert await store.get_messages(ProviderType.TELEGRAM, "42") == []


@pytest.mark.asyncio
async def test_invalid_json_is_rejected(store: MemoryMessageStore) -> None:
    response = await receive_update(_build_request(b"{oops", "s3cret"))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_non_message_update_is_acknowledged(store: MemoryMessageStore) -> None:
    body = json.dumps({"update_id": 2, "callback_query": {"id": "x"}}).encode()
    response = await receive_update(_build_request(body, "s3cret"))
    assert response["handled"] is False


def test_secret_is_optional_when_not_configured() -> None:
    assert is_secret_valid(None, "") is True
    assert is_secret_valid(None, "expected") is False
    assert is_secret_valid("expected", "expected") is True
