"""Factories de dependências — criação de implementações concretas.

Centraliza a criação de stores, token manager, providers e serviços a
partir das configurações de ambiente.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.factory import create_provider
from api.connectors.telegram.provider import TelegramProvider
from app.bootstrap.clients import create_firestore_client, create_http_client
from app.infra.stores import FirestoreMessageStore, MemoryMessageStore
from app.services.message_service import MessageService
from app.services.token_manager import TokenManager
from config.settings import get_firestore_settings, get_messaging_settings

if TYPE_CHECKING:
    from api.connectors.http_base import HttpClient
    from app.protocols.message_provider import MessageProviderProtocol
    from app.protocols.message_store import MessageStoreProtocol
    from config.settings import MessagingSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_token_manager() -> TokenManager:
    """TokenManager do processo (cache compartilhado entre providers)."""
    return TokenManager()


@lru_cache(maxsize=1)
def get_message_store() -> MessageStoreProtocol:
    """Obtém store de mensagens (singleton) conforme MESSAGE_STORE_BACKEND."""
    backend = get_messaging_settings().store_backend
    if backend == "firestore":
        settings = get_firestore_settings()
        store: MessageStoreProtocol = FirestoreMessageStore(
            create_firestore_client(),
            collection=settings.collection_messages,
        )
    else:
        store = MemoryMessageStore()
    logger.info("message_store_created", extra={"backend": backend})
    return store


def create_message_provider(
    provider_type: str,
    settings: MessagingSettings | None = None,
    http_client: HttpClient | None = None,
) -> MessageProviderProtocol:
    """Cria provider concreto com token manager e store do processo.

    Raises:
        UnsupportedProviderTypeError: Tipo desconhecido ou sem configuração
    """
    settings = settings or get_messaging_settings()
    return create_provider(
        provider_type,
        settings.get_provider_config(provider_type),
        token_manager=get_token_manager(),
        message_store=get_message_store(),
        http_client=http_client or create_http_client(),
    )


def create_telegram_provider(
    settings: MessagingSettings | None = None,
) -> TelegramProvider:
    """Provider Telegram para o webhook inbound."""
    settings = settings or get_messaging_settings()
    return TelegramProvider(
        settings.telegram,
        message_store=get_message_store(),
        http_client=create_http_client(),
    )


def create_message_service(
    settings: MessagingSettings | None = None,
    http_client: HttpClient | None = None,
) -> MessageService:
    """MessageService apontando para o endpoint interno configurado."""
    settings = settings or get_messaging_settings()
    client = (http_client or create_http_client()).with_timeout(settings.api_timeout_seconds)
    return MessageService(settings.api_url, http_client=client)
