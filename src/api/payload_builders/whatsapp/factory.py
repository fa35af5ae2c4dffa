"""Factory para obter o builder correto por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import PayloadBuilder, build_base_payload
from api.payload_builders.whatsapp.template import TemplatePayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder
from app.constants.messaging import MessageType, ProviderType
from utils.errors import UnsupportedMessageTypeError

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.TEMPLATE: TemplatePayloadBuilder(),
}


def get_payload_builder(message_type: MessageType) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem ou None se não suportado."""
    return _BUILDERS.get(message_type)


def build_full_payload(
    to: str,
    content: MessageContent,
    options: MessageOptions | None = None,
) -> dict[str, Any]:
    """Constrói payload completo para a Graph API.

    Args:
        to: Telefone já validado (somente dígitos)
        content: Conteúdo da mensagem
        options: Opções de transporte

    Raises:
        UnsupportedMessageTypeError: Tipo sem builder
        InvalidTemplateError: Template sem dados obrigatórios
    """
    builder = get_payload_builder(content.type)
    if builder is None:
        raise UnsupportedMessageTypeError(ProviderType.WHATSAPP, content.type)

    payload = build_base_payload(to)
    payload.update(builder.build(content, options))
    return payload
