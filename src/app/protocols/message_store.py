"""Protocolos de domínio para o Message Store.

Persistência + fan-out em tempo real do histórico de mensagens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.constants.messaging import MessageDirection, ProviderType

    from .models import Message


class MessageStoreProtocol(ABC):
    """Contrato para armazenamento de mensagens.

    Invariantes:
        - Mensagens são append-only (sem update de status in-place)
        - No máximo uma assinatura viva por (platform, chat_id)
        - A função de unsubscribe é idempotente
    """

    @abstractmethod
    async def save_message(self, message: Message) -> None:
        """Persiste uma mensagem.

        Raises:
            MessageStoreError: Erro de persistência
        """

    @abstractmethod
    async def get_messages(
        self,
        platform: ProviderType,
        chat_id: str,
        *,
        limit: int = 50,
        offset: int = 0,
        direction: MessageDirection | None = None,
    ) -> Sequence[Message]:
        """Recupera mensagens de um chat, mais recentes primeiro.

        Raises:
            MessageStoreError: Erro de consulta
        """

    @abstractmethod
    async def subscribe_to_messages(
        self,
        platform: ProviderType,
        chat_id: str,
        callback: Callable[[Message], None],
    ) -> Callable[[], None]:
        """Registra callback para cada nova mensagem inserida no chat.

        Chamadas repetidas para o mesmo (platform, chat_id) reutilizam a
        assinatura existente.

        Returns:
            Função que remove a assinatura (no-op se já removida).
        """
