"""Firestore Message Store — histórico de mensagens com tempo real.

Estrutura no Firestore:
    messages/{message_id}

Campos seguem Message.to_record() (snake_case). Consultas filtram por
platform + platform_chat_id e ordenam por created_at decrescente, o que
exige índice composto (configurar no console).

Tempo real via `on_snapshot`: o callback do SDK roda em thread própria,
por isso o registro de assinaturas é protegido por lock e a entrega ao
callback do chamador é reagendada no event loop da assinatura.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.infra.stores.memory_message_store import subscription_key
from app.protocols.message_store import MessageStoreProtocol
from app.protocols.models import Message
from utils.errors import MessageStoreError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from google.cloud.firestore import Client as FirestoreClient

    from app.constants.messaging import MessageDirection, ProviderType

logger = logging.getLogger(__name__)

MESSAGES_COLLECTION = "messages"


@dataclass
class _Subscription:
    watch: Any
    initial_snapshot_seen: bool = field(default=False)


class FirestoreMessageStore(MessageStoreProtocol):
    """Store de mensagens usando Firestore.

    Características:
        - Append-only (documento por mensagem, id = Message.id)
        - Uma assinatura viva por (platform, chat_id)
        - Snapshot inicial do listener é descartado; só inserts novos
          (mudanças ADDED) chegam ao callback

    Args:
        firestore_client: Cliente Firestore
        collection: Nome da coleção de mensagens
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = MESSAGES_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection
        self._subscriptions: dict[str, _Subscription] = {}
        self._lock = threading.Lock()

    async def save_message(self, message: Message) -> None:
        """Persiste mensagem (asyncio.to_thread: SDK sem async nativo)."""
        await asyncio.to_thread(self._save_message_sync, message)

    def _save_message_sync(self, message: Message) -> None:
        try:
            self._db.collection(self._collection).document(message.id).set(
                message.to_record()
            )
        except Exception as e:
            logger.error(
                "message_store_save_error",
                extra={"error_type": type(e).__name__, "platform": str(message.platform)},
            )
            raise MessageStoreError(f"Erro ao persistir mensagem: {e}") from e
        logger.debug(
            "message_store_saved",
            extra={"platform": str(message.platform), "direction": str(message.direction)},
        )

    async def get_messages(
        self,
        platform: ProviderType,
        chat_id: str,
        *,
        limit: int = 50,
        offset: int = 0,
        direction: MessageDirection | None = None,
    ) -> Sequence[Message]:
        return await asyncio.to_thread(
            self._get_messages_sync, platform, chat_id, limit, offset, direction
        )

    def _get_messages_sync(
        self,
        platform: str,
        chat_id: str,
        limit: int,
        offset: int,
        direction: str | None,
    ) -> list[Message]:
        try:
            query = self._chat_query(platform, chat_id)
            if direction is not None:
                query = _where(query, "direction", str(direction))
            query = query.order_by("created_at", direction="DESCENDING")
            if offset:
                query = query.offset(offset)
            docs = query.limit(limit).stream()
            messages = [Message.from_record(doc.to_dict()) for doc in docs]
        except Exception as e:
            logger.error(
                "message_store_query_error",
                extra={"error_type": type(e).__name__, "platform": str(platform)},
            )
            raise MessageStoreError(f"Erro ao consultar mensagens: {e}") from e
        logger.debug(
            "message_store_queried",
            extra={"platform": str(platform), "count": len(messages)},
        )
        return messages

    def _chat_query(self, platform: str, chat_id: str) -> Any:
        query = _where(self._db.collection(self._collection), "platform", str(platform))
        return _where(query, "platform_chat_id", chat_id)

    async def subscribe_to_messages(
        self,
        platform: ProviderType,
        chat_id: str,
        callback: Callable[[Message], None],
    ) -> Callable[[], None]:
        key = subscription_key(platform, chat_id)

        with self._lock:
            existing = self._subscriptions.get(key)
            if existing is not None:
                return self._unsubscriber(key, existing)
            subscription = _Subscription(watch=None)
            self._subscriptions[key] = subscription

        loop = asyncio.get_running_loop()

        def on_snapshot(_docs: Any, changes: Any, _read_time: Any) -> None:
            with self._lock:
                if self._subscriptions.get(key) is not subscription:
                    return
                if not subscription.initial_snapshot_seen:
                    subscription.initial_snapshot_seen = True
                    return
            for change in changes:
                if getattr(change.type, "name", "") != "ADDED":
                    continue
                message = Message.from_record(change.document.to_dict())
                loop.call_soon_threadsafe(callback, message)

        try:
            watch = self._chat_query(platform, chat_id).on_snapshot(on_snapshot)
        except Exception as e:
            with self._lock:
                if self._subscriptions.get(key) is subscription:
                    del self._subscriptions[key]
            raise MessageStoreError(f"Erro ao assinar mensagens: {e}") from e

        with self._lock:
            subscription.watch = watch
            still_registered = self._subscriptions.get(key) is subscription
        if not still_registered:
            watch.unsubscribe()
        logger.info("message_subscription_created", extra={"channel": key})
        return self._unsubscriber(key, subscription)

    def _unsubscriber(self, key: str, subscription: _Subscription) -> Callable[[], None]:
        def unsubscribe() -> None:
            self._unsubscribe(key, subscription)

        return unsubscribe

    def _unsubscribe(self, key: str, subscription: _Subscription) -> None:
        with self._lock:
            # Só remove a assinatura capturada pelo handle
            if self._subscriptions.get(key) is not subscription:
                return
            del self._subscriptions[key]
        if subscription.watch is not None:
            subscription.watch.unsubscribe()
        logger.info("message_subscription_removed", extra={"channel": key})

    def subscription_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)


def _where(query: Any, field_path: str, value: str) -> Any:
    from google.cloud.firestore_v1.base_query import FieldFilter

    return query.where(filter=FieldFilter(field_path, "==", value))
