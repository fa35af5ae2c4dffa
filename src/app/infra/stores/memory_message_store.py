"""Message store em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.message_store import MessageStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.constants.messaging import MessageDirection, ProviderType
    from app.protocols.models import Message

logger = logging.getLogger(__name__)


def subscription_key(platform: str, chat_id: str) -> str:
    """Chave de canal `platform:chat_id`."""
    return f"{platform}:{chat_id}"


@dataclass(eq=False)
class _Subscription:
    callback: Callable[[Message], None]


class MemoryMessageStore(MessageStoreProtocol):
    """Store de mensagens em memória com fan-out síncrono no insert."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._subscriptions: dict[str, _Subscription] = {}

    async def save_message(self, message: Message) -> None:
        self._messages.append(message)
        subscription = self._subscriptions.get(
            subscription_key(message.platform, message.platform_chat_id)
        )
        if subscription is not None:
            subscription.callback(message)

    async def get_messages(
        self,
        platform: ProviderType,
        chat_id: str,
        *,
        limit: int = 50,
        offset: int = 0,
        direction: MessageDirection | None = None,
    ) -> Sequence[Message]:
        matches = [
            m
            for m in self._messages
            if m.platform == platform
            and m.platform_chat_id == chat_id
            and (direction is None or m.direction == direction)
        ]
        matches.sort(key=lambda m: m.created_at, reverse=True)
        return matches[offset : offset + limit]

    async def subscribe_to_messages(
        self,
        platform: ProviderType,
        chat_id: str,
        callback: Callable[[Message], None],
    ) -> Callable[[], None]:
        key = subscription_key(platform, chat_id)
        subscription = self._subscriptions.get(key)
        if subscription is None:
            subscription = _Subscription(callback)
            self._subscriptions[key] = subscription
            logger.debug("message_subscription_created", extra={"channel": key})

        def unsubscribe() -> None:
            # Handle antigo não derruba uma assinatura recriada na mesma chave
            if self._subscriptions.get(key) is subscription:
                del self._subscriptions[key]
                logger.debug("message_subscription_removed", extra={"channel": key})

        return unsubscribe

    def subscription_count(self) -> int:
        return len(self._subscriptions)
