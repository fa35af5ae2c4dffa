"""Envelope base e protocolo dos builders WhatsApp."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions


class PayloadBuilder(Protocol):
    """Builder da parte específica do tipo de mensagem."""

    def build(
        self,
        content: MessageContent,
        options: MessageOptions | None,
    ) -> dict[str, Any]: ...


def build_base_payload(to: str) -> dict[str, Any]:
    """Campos comuns a todo envio Graph API."""
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": to,
    }
