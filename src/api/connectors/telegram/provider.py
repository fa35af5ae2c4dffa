"""Provider Telegram (Bot API).

Particularidades:
- O destinatário é um chat id, não um telefone. Sem chat id resolvível o
  envio devolve falha estruturada (400) em vez de levantar exceção.
- Corpo enviado com parse_mode HTML.
- Envios bem-sucedidos são persistidos no MessageStore em modo
  best-effort: falha de persistência é logada e não afeta o resultado.
- Updates de webhook podem ser convertidos em Message inbound.
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.connectors.base import BaseMessageProvider
from api.connectors.http_base import HttpClient, HttpClientConfig, response_json
from api.payload_builders.telegram import build_full_payload
from app.constants.messaging import MessageDirection, MessageStatus, ProviderType
from app.observability.metrics import record_latency, record_send_result
from app.protocols.models import Message, MessageResponse
from config.logging import log_fallback
from utils.errors import UpstreamError

if TYPE_CHECKING:
    from app.protocols.message_store import MessageStoreProtocol
    from app.protocols.models import MessageContent, MessageOptions
    from config.settings import TelegramSettings

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")

NO_CHAT_ID_ERROR = (
    "No valid chat ID found. User must start a conversation with the bot first."
)
BOT_USER_ID = "bot"


class TelegramProvider(BaseMessageProvider):
    """Envio via Telegram Bot API.

    Args:
        config: TelegramSettings (bot_token, default_chat_id, timeout)
        message_store: Store para persistir mensagens (opcional)
        http_client: Cliente HTTP (timeout do provider é aplicado por cima)
    """

    name = ProviderType.TELEGRAM

    def __init__(
        self,
        config: TelegramSettings,
        message_store: MessageStoreProtocol | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        client = http_client or HttpClient(HttpClientConfig())
        super().__init__(config, client.with_timeout(config.request_timeout_seconds))
        self._settings = config
        self._message_store = message_store

    def resolve_chat_id(self, to: str) -> str | None:
        """Resolve chat id a partir do destinatário.

        Hoje só o chat padrão é conhecido: se o destinatário (somente
        dígitos) for o chat padrão, usa-o; caso contrário cai no padrão.
        """
        cleaned = _NON_DIGITS.sub("", to or "")
        default_chat_id = self._settings.default_chat_id
        if cleaned and cleaned == default_chat_id:
            return cleaned
        if default_chat_id:
            log_fallback(logger, "telegram_chat_id", reason="default_chat_id")
        return default_chat_id or None

    async def send_message(
        self,
        to: str,
        content: MessageContent,
        options: MessageOptions | None = None,
    ) -> MessageResponse:
        started = time.perf_counter()
        try:
            result = await self._send(to, content)
        except Exception as exc:
            result = self.handle_error(exc)
        record_latency(self.name, "send_message", (time.perf_counter() - started) * 1000)
        record_send_result(self.name, result.success, result.status_code)
        return result

    async def _send(self, to: str, content: MessageContent) -> MessageResponse:
        chat_id = self.resolve_chat_id(to)
        if not chat_id:
            logger.warning("telegram_chat_id_unresolved")
            return MessageResponse(
                success=False,
                error=NO_CHAT_ID_ERROR,
                status_code=400,
                user_message="The recipient has not started a conversation with the bot.",
            )

        payload = build_full_payload(chat_id, content)
        response = await self._http_client.post(
            self._settings.get_method_endpoint("sendMessage"),
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        data = response_json(response)
        if not response.is_success:
            raise UpstreamError(
                str(data.get("description") or "Telegram API error"),
                status_code=response.status_code,
            )

        raw_id = (data.get("result") or {}).get("message_id")
        message_id = str(raw_id) if raw_id is not None else None
        logger.info(
            "telegram_message_sent",
            extra={"status_code": response.status_code, "message_id": message_id},
        )
        if message_id:
            await self._store_outbound(chat_id, content, message_id)

        return MessageResponse(
            success=True,
            message_id=message_id,
            status_code=response.status_code,
        )

    async def _store_outbound(
        self,
        chat_id: str,
        content: MessageContent,
        message_id: str,
    ) -> None:
        if self._message_store is None:
            return
        now = datetime.now(UTC)
        metadata: dict[str, Any] = {"type": str(content.type), "sent_at": now.isoformat()}
        if content.metadata is not None:
            metadata.update(content.metadata.to_dict())
        message = Message(
            id=str(uuid.uuid4()),
            platform=ProviderType.TELEGRAM,
            direction=MessageDirection.OUTBOUND,
            status=MessageStatus.SENT,
            platform_message_id=message_id,
            platform_chat_id=chat_id,
            platform_user_id=BOT_USER_ID,
            content=content.body,
            metadata=metadata,
            created_at=now,
            updated_at=now,
        )
        await self._persist(message)

    async def _persist(self, message: Message) -> None:
        try:
            await self._message_store.save_message(message)  # type: ignore[union-attr]
        except Exception as exc:
            logger.error(
                "telegram_message_store_failed",
                extra={
                    "direction": str(message.direction),
                    "error_type": type(exc).__name__,
                },
            )
            log_fallback(logger, "telegram_message_store", reason="persist_failed")

    async def handle_incoming_message(self, payload: dict[str, Any]) -> Message | None:
        """Converte um update do webhook em Message inbound e persiste.

        Aceita `message` e `edited_message`; outros updates retornam None.
        """
        update = payload.get("message") or payload.get("edited_message")
        if not isinstance(update, dict):
            return None

        chat = update.get("chat") or {}
        if chat.get("id") is None:
            return None

        sender = update.get("from") or {}
        sent_at = update.get("date")
        created_at = (
            datetime.fromtimestamp(sent_at, tz=UTC)
            if isinstance(sent_at, int | float)
            else datetime.now(UTC)
        )
        message = Message(
            id=str(uuid.uuid4()),
            platform=ProviderType.TELEGRAM,
            direction=MessageDirection.INBOUND,
            status=MessageStatus.DELIVERED,
            platform_message_id=(
                str(update["message_id"]) if update.get("message_id") is not None else None
            ),
            platform_chat_id=str(chat["id"]),
            platform_user_id=str(sender["id"]) if sender.get("id") is not None else None,
            content=update.get("text") or update.get("caption") or "",
            metadata={
                "update_id": payload.get("update_id"),
                "chat_type": chat.get("type"),
                "edited": "edited_message" in payload,
            },
            created_at=created_at,
            updated_at=datetime.now(UTC),
        )
        logger.info(
            "telegram_message_received",
            extra={"update_id": payload.get("update_id"), "chat_type": chat.get("type")},
        )
        if self._message_store is not None:
            await self._persist(message)
        return message
