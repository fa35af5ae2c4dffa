"""Proxy de borda para o endpoint interno de dispatch.

Serializa MessageContent/MessageOptions para o formato de fio do
POST /api/messaging. Não carrega credenciais: o endpoint resolve o
provider e os tokens no servidor. Nunca levanta exceção.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.constants.messaging import MessageType
from app.observability.metrics import record_latency
from app.protocols.models import MessageResponse
from utils.errors import DEFAULT_USER_MESSAGE, MessagingError

from .http_base import HttpClient, HttpClientConfig, response_json

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions

logger = logging.getLogger(__name__)


def build_request_body(
    provider: str,
    to: str,
    content: MessageContent,
    options: MessageOptions | None = None,
) -> dict[str, Any]:
    """Monta o corpo {provider, to, templateName, content, options}."""
    is_template = content.type == MessageType.TEMPLATE
    metadata = content.metadata
    template_data = options.template_data if options else None
    return {
        "provider": provider,
        "to": to,
        "templateName": metadata.template_name if is_template and metadata else None,
        "content": (
            (list(metadata.parameters) if metadata else [])
            if is_template
            else content.body
        ),
        "options": {
            "previewUrl": options.preview_url if options else None,
            "language": template_data.language_code if template_data else None,
        },
    }


class ApiProvider:
    """Cliente do endpoint interno com provider fixo por instância.

    Args:
        provider: Nome do provider alvo (whatsapp, line, telegram)
        api_url: URL absoluta do POST /api/messaging
        http_client: Cliente HTTP (timeout explícito)
    """

    def __init__(
        self,
        provider: str,
        api_url: str,
        http_client: HttpClient | None = None,
    ) -> None:
        self.provider = provider
        self._api_url = api_url
        self._http_client = http_client or HttpClient(HttpClientConfig())

    async def send_message(
        self,
        to: str,
        content: MessageContent,
        options: MessageOptions | None = None,
    ) -> MessageResponse:
        started = time.perf_counter()
        body = build_request_body(self.provider, to, content, options)
        try:
            response = await self._http_client.post(
                self._api_url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except MessagingError as exc:
            logger.warning(
                "api_provider_request_failed",
                extra={"provider": self.provider, "error_type": type(exc).__name__},
            )
            return MessageResponse(
                success=False,
                error=str(exc),
                status_code=exc.status_code,
                user_message=exc.user_message,
            )
        except Exception as exc:
            logger.exception(
                "api_provider_unexpected_error",
                extra={"provider": self.provider, "error_type": type(exc).__name__},
            )
            return MessageResponse(
                success=False,
                error=str(exc) or "An unexpected error occurred",
                status_code=500,
                user_message=DEFAULT_USER_MESSAGE,
            )
        finally:
            record_latency(
                "api_provider", "send_message", (time.perf_counter() - started) * 1000
            )

        data = response_json(response)
        if not response.is_success:
            logger.warning(
                "api_provider_dispatch_failed",
                extra={"provider": self.provider, "status_code": response.status_code},
            )
            return MessageResponse(
                success=False,
                error=str(data.get("error") or "Failed to send message"),
                status_code=_status_from_body(data, response.status_code),
                user_message=data.get("userMessage") or DEFAULT_USER_MESSAGE,
            )

        message_id = data.get("messageId")
        return MessageResponse(
            success=bool(data.get("success", True)),
            message_id=str(message_id) if message_id is not None else None,
            status_code=response.status_code,
        )


def _status_from_body(data: dict[str, Any], default: int) -> int:
    status = data.get("statusCode")
    return status if isinstance(status, int) and not isinstance(status, bool) else default
