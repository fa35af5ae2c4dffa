"""Testes do MemoryMessageStore."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app.constants.messaging import MessageDirection, MessageStatus, ProviderType
from app.infra.stores import MemoryMessageStore
from app.protocols.models import Message

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def _message(
    index: int,
    *,
    chat_id: str = "42",
    platform: ProviderType = ProviderType.TELEGRAM,
    direction: MessageDirection = MessageDirection.OUTBOUND,
) -> Message:
    created = BASE_TIME + timedelta(minutes=index)
    return Message(
        id=f"msg-{index}",
        platform=platform,
        direction=direction,
        status=MessageStatus.SENT,
        platform_chat_id=chat_id,
        content=f"conteúdo {index}",
        created_at=created,
        updated_at=created,
    )


class TestGetMessages:
    @pytest.mark.asyncio
    async def test_newest_first_with_limit_and_offset(self) -> None:
        store = MemoryMessageStore()
        for i in range(5):
            await store.save_message(_message(i))

        page = await store.get_messages(ProviderType.TELEGRAM, "42", limit=2, offset=1)

        assert [m.id for m in page] == ["msg-3", "msg-2"]

    @pytest.mark.asyncio
    async def test_filters_platform_chat_and_direction(self) -> None:
        store = MemoryMessageStore()
        await store.save_message(_message(1))
        await store.save_message(_message(2, direction=MessageDirection.INBOUND))
        await store.save_message(_message(3, chat_id="other"))
        await store.save_message(_message(4, platform=ProviderType.WHATSAPP))

        inbound = await store.get_messages(
            ProviderType.TELEGRAM, "42", direction=MessageDirection.INBOUND
        )
        everything = await store.get_messages(ProviderType.TELEGRAM, "42")

        assert [m.id for m in inbound] == ["msg-2"]
        assert [m.id for m in everything] == ["msg-2", "msg-1"]


class TestSubscriptions:
    @pytest.mark.asyncio
    async def test_callback_receives_new_messages_for_chat(self) -> None:
        store = MemoryMessageStore()
        received: list[Message] = []
        await store.subscribe_to_messages(ProviderType.TELEGRAM, "42", received.append)

        await store.save_message(_message(1))
        await store.save_message(_message(2, chat_id="other"))

        assert [m.id for m in received] == ["msg-1"]

    @pytest.mark.asyncio
    async def test_duplicate_subscribe_reuses_channel(self) -> None:
        store = MemoryMessageStore()
        first: list[Message] = []
        second: list[Message] = []

        await store.subscribe_to_messages(ProviderType.TELEGRAM, "42", first.append)
        await store.subscribe_to_messages(ProviderType.TELEGRAM, "42", second.append)
        await store.save_message(_message(1))

        assert store.subscription_count() == 1
        assert len(first) == 1
        assert second == []

    @pytest.mark.asyncio
    async def test_unsubscribe_is_idempotent(self) -> None:
        store = MemoryMessageStore()
        received: list[Message] = []
        unsubscribe = await store.subscribe_to_messages(
            ProviderType.TELEGRAM, "42", received.append
        )

        unsubscribe()
        unsubscribe()
        await store.save_message(_message(1))

        assert store.subscription_count() == 0
        assert received == []

    @pytest.mark.asyncio
    async def test_resubscribe_after_unsubscribe(self) -> None:
        store = MemoryMessageStore()
        unsubscribe = await store.subscribe_to_messages(ProviderType.TELEGRAM, "42", lambda m: None)
        unsubscribe()

        received: list[Message] = []
        await store.subscribe_to_messages(ProviderType.TELEGRAM, "42", received.append)
        await store.save_message(_message(1))

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_stale_handle_keeps_newer_subscription(self) -> None:
        store = MemoryMessageStore()
        old_unsubscribe = await store.subscribe_to_messages(
            ProviderType.TELEGRAM, "42", lambda m: None
        )
        old_unsubscribe()

        received: list[Message] = []
        await store.subscribe_to_messages(ProviderType.TELEGRAM, "42", received.append)
        old_unsubscribe()
        await store.save_message(_message(1))

        assert store.subscription_count() == 1
        assert [m.id for m in received] == ["msg-1"]
