"""Provider LINE (stub).

Monta o payload real da Messaging API mas não faz chamada de rede: o
payload é logado (só tipos e contagem) e um sucesso sintético é devolvido. O token de canal é
estático (vem direto das settings), sem TokenManager.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from api.connectors.base import BaseMessageProvider
from api.payload_builders.line import build_full_payload
from app.constants.messaging import ProviderType
from app.protocols.models import MessageResponse

if TYPE_CHECKING:
    from api.connectors.http_base import HttpClient
    from app.protocols.models import MessageContent, MessageOptions
    from config.settings import LineSettings

logger = logging.getLogger(__name__)


class LineProvider(BaseMessageProvider):
    name = ProviderType.LINE

    def __init__(self, config: LineSettings, http_client: HttpClient | None = None) -> None:
        super().__init__(config, http_client)
        self.base_url = config.api_base_url

    async def send_message(
        self,
        to: str,
        content: MessageContent,
        options: MessageOptions | None = None,
    ) -> MessageResponse:
        try:
            payload = build_full_payload(to, content, options)
        except Exception as exc:
            return self.handle_error(exc)

        logger.info(
            "line_payload_built",
            extra={
                "endpoint": f"{self.base_url}/bot/message/push",
                "message_types": [m["type"] for m in payload["messages"]],
                "message_count": len(payload["messages"]),
            },
        )
        return MessageResponse(
            success=True,
            message_id=f"line_{time.time_ns() // 1_000_000}",
            status_code=200,
        )
