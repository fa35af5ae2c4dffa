"""Protocolos de envio por provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Message, MessageContent, MessageOptions, MessageResponse


@runtime_checkable
class MessageProviderProtocol(Protocol):
    """Contrato mínimo de um provider de mensageria.

    `send_message` nunca propaga exceções: toda falha vira um
    MessageResponse com success=False.
    """

    async def send_message(
        self,
        to: str,
        content: MessageContent,
        options: MessageOptions | None = None,
    ) -> MessageResponse: ...


@runtime_checkable
class InboundMessageHandlerProtocol(Protocol):
    """Capacidade opcional: converter um payload de webhook em Message."""

    async def handle_incoming_message(self, payload: dict[str, Any]) -> Message | None: ...
