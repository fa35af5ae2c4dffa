"""Provider WhatsApp Business (Graph API).

Fluxo de envio:
1. Valida telefone e monta payload (api/payload_builders/whatsapp)
2. Obtém bearer token do TokenManager
3. POST {base}/{versão}/{phone_number_id}/messages
4. 401: limpa o token, re-deriva e tenta exatamente mais uma vez
5. Classifica a resposta em MessageResponse
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.base import BaseMessageProvider
from api.connectors.http_base import HttpClient, HttpClientConfig, response_json
from api.payload_builders.whatsapp import build_full_payload
from app.constants.messaging import ProviderType
from app.observability.metrics import record_auth_retry, record_latency, record_send_result
from app.protocols.models import MessageResponse
from app.services.token_manager import TokenManager
from utils.errors import AuthExpiredError, UpstreamError

from .meta_errors import DEFAULT_ERROR_MESSAGE, parse_meta_error
from .meta_logging import log_meta_error, log_success

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import MessageContent, MessageOptions
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)


class WhatsAppProvider(BaseMessageProvider):
    """Envio via WhatsApp Business Cloud API.

    Args:
        config: WhatsAppSettings (token, phone_number_id, base url, timeout)
        token_manager: Cache de tokens compartilhado
        http_client: Cliente HTTP (timeout do provider é aplicado por cima)
    """

    name = ProviderType.WHATSAPP

    def __init__(
        self,
        config: WhatsAppSettings,
        token_manager: TokenManager | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        client = http_client or HttpClient(HttpClientConfig())
        super().__init__(config, client.with_timeout(config.request_timeout_seconds))
        self._settings = config
        self._token_manager = token_manager or TokenManager()

    async def send_message(
        self,
        to: str,
        content: MessageContent,
        options: MessageOptions | None = None,
    ) -> MessageResponse:
        started = time.perf_counter()
        try:
            phone = self.validate_phone_number(to)
            payload = build_full_payload(phone, content, options)
            logger.debug(
                "whatsapp_payload_built",
                extra={"message_type": payload.get("type")},
            )
            result = await self._send_with_auth_retry(payload)
        except Exception as exc:
            result = self.handle_error(exc)
        record_latency(self.name, "send_message", (time.perf_counter() - started) * 1000)
        record_send_result(self.name, result.success, result.status_code)
        return result

    async def _send_with_auth_retry(self, payload: dict[str, Any]) -> MessageResponse:
        response = await self._post(payload)
        if response.status_code == 401:
            logger.warning("whatsapp_token_rejected", extra={"attempt": 1})
            self._token_manager.clear_token(self.name)
            response = await self._post(payload)
            record_auth_retry(self.name, recovered=response.status_code != 401)
            if response.status_code == 401:
                raise AuthExpiredError(self._error_message(response, "Token expirado"))
        return self._process_response(response)

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        token = await self._token_manager.get_token(self.name, self._settings)
        endpoint = self._settings.get_messages_endpoint()
        return await self._http_client.post(
            endpoint,
            json=payload,
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
        )

    def _process_response(self, response: httpx.Response) -> MessageResponse:
        data = response_json(response)
        if not response.is_success:
            raise UpstreamError(
                self._error_message(response, DEFAULT_ERROR_MESSAGE),
                status_code=response.status_code,
            )

        messages = data.get("messages") or [{}]
        message_id = messages[0].get("id")
        log_success(response.status_code, message_id)
        return MessageResponse(
            success=True,
            message_id=message_id,
            status_code=response.status_code,
        )

    @staticmethod
    def _error_message(response: httpx.Response, default: str) -> str:
        meta_error = parse_meta_error(response_json(response))
        if meta_error is None:
            return default
        log_meta_error(meta_error, response.status_code)
        return meta_error.error_message
