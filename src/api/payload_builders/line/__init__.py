"""Builder de payload para a LINE Messaging API (push message)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.messaging import MessageType, ProviderType
from utils.errors import UnsupportedMessageTypeError

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions

DEFAULT_ALT_TEXT = "Template Message"


def build_full_payload(
    to: str,
    content: MessageContent,
    options: MessageOptions | None = None,
) -> dict[str, Any]:
    """Monta o envelope {to, messages: [...]}.

    Templates viram um "buttons" template; cada parâmetro dos metadados
    vira uma ação do tipo message.
    """
    if content.type == MessageType.TEXT:
        message: dict[str, Any] = {"type": "text", "text": content.body}
    elif content.type == MessageType.TEMPLATE:
        parameters = content.metadata.parameters if content.metadata else ()
        template_data = options.template_data if options else None
        message = {
            "type": "template",
            "altText": content.body or DEFAULT_ALT_TEXT,
            "template": {
                "type": "buttons",
                "title": template_data.name if template_data else None,
                "text": content.body,
                "actions": [
                    {"type": "message", "label": param, "text": param}
                    for param in parameters
                ],
            },
        }
    else:
        raise UnsupportedMessageTypeError(ProviderType.LINE, content.type)

    return {"to": to, "messages": [message]}


__all__ = ["build_full_payload"]
