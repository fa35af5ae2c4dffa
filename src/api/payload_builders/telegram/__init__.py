"""Builder de payload para o método sendMessage da Telegram Bot API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.messaging import MessageType, ProviderType
from utils.errors import UnsupportedMessageTypeError

if TYPE_CHECKING:
    from app.protocols.models import MessageContent

PARSE_MODE = "HTML"


def build_full_payload(chat_id: str, content: MessageContent) -> dict[str, Any]:
    """Monta {chat_id, text, parse_mode}.

    Telegram não tem templates: um conteúdo de template é achatado em
    texto (parâmetros um por linha, ou o corpo).
    """
    if content.type == MessageType.TEXT:
        text = content.body
    elif content.type == MessageType.TEMPLATE:
        parameters = content.metadata.parameters if content.metadata else ()
        text = "\n".join(parameters) or content.body
    else:
        raise UnsupportedMessageTypeError(ProviderType.TELEGRAM, content.type)

    return {"chat_id": chat_id, "text": text, "parse_mode": PARSE_MODE}


__all__ = ["PARSE_MODE", "build_full_payload"]
