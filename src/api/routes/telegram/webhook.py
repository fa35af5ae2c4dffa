"""Webhook inbound do Telegram — POST /webhook/telegram.

Segurança:
- Com TELEGRAM_WEBHOOK_SECRET configurado, exige o mesmo valor no header
  X-Telegram-Bot-Api-Secret-Token (403 caso contrário)
- Updates aceitos sempre recebem 200 para evitar reentrega do Telegram
"""

from __future__ import annotations

import hmac
import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from app.bootstrap.dependencies import create_telegram_provider
from app.observability import CORRELATION_ID_HEADER, correlation_scope, get_correlation_id
from config.settings import get_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SECRET_TOKEN_HEADER = "x-telegram-bot-api-secret-token"


def is_secret_valid(received: str | None, expected: str) -> bool:
    """Compara o secret em tempo constante; sem secret configurado aceita."""
    if not expected:
        return True
    return hmac.compare_digest((received or "").encode(), expected.encode())


@router.post("/webhook/telegram", response_model=None)
async def receive_update(request: Request) -> Response | dict[str, Any]:
    """Recebe um update da Bot API e persiste a mensagem inbound."""
    with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)):
        settings = get_telegram_settings()
        if not is_secret_valid(request.headers.get(SECRET_TOKEN_HEADER), settings.webhook_secret):
            logger.warning("telegram_webhook_secret_invalid")
            return Response(
                content="Forbidden",
                media_type="text/plain",
                status_code=status.HTTP_403_FORBIDDEN,
            )

        try:
            update = await request.json()
        except ValueError:
            logger.warning("telegram_webhook_json_invalid")
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        if not isinstance(update, dict):
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        message = await create_telegram_provider().handle_incoming_message(update)
        logger.info(
            "telegram_webhook_received",
            extra={"update_id": update.get("update_id"), "handled": message is not None},
        )
        return {
            "status": "received",
            "handled": message is not None,
            "correlation_id": get_correlation_id(),
        }
