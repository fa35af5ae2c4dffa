"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(
        self,
        content: MessageContent,
        options: MessageOptions | None,
    ) -> dict[str, Any]:
        """Constrói payload de texto; preview_url é False por padrão."""
        preview_url = bool(options.preview_url) if options else False
        return {
            "type": "text",
            "text": {
                "preview_url": preview_url,
                "body": content.body,
            },
        }
