"""Builder para mensagens de template."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.errors import InvalidTemplateError

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions


class TemplatePayloadBuilder:
    """Builder para templates pré-registrados.

    Nome, idioma e componentes vêm de `options.template_data`. Sem eles
    o envio falha antes de sair daqui: a Graph API rejeitaria um
    template sem nome de qualquer forma.
    """

    def build(
        self,
        content: MessageContent,
        options: MessageOptions | None,
    ) -> dict[str, Any]:
        template_data = options.template_data if options else None
        if template_data is None or not template_data.name:
            raise InvalidTemplateError("Template WhatsApp exige options.template_data.name")
        if not template_data.language_code:
            raise InvalidTemplateError("Template WhatsApp exige código de idioma")

        return {"type": "template", "template": template_data.to_payload()}
