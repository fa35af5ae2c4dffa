"""Endpoint interno de dispatch — POST /api/messaging.

Fronteira onde ficam as credenciais: recebe a forma de fio produzida
pelo ApiProvider, resolve o provider concreto e envia.

Respostas:
- 400: corpo inválido, `to` vazio ou sem `content`/`templateName`
- 500: nenhum provider configurado, falha de envio ou erro residual
- 200: {success, messageId, provider, timestamp}
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.bootstrap.dependencies import create_message_provider
from app.constants.messaging import MessageType
from app.observability import CORRELATION_ID_HEADER, correlation_scope
from app.protocols.models import (
    MessageContent,
    MessageMetadata,
    MessageOptions,
    TemplateData,
)
from config.settings import get_messaging_settings
from utils.errors import DEFAULT_USER_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_ERROR = "Missing required fields"
INVALID_BODY_ERROR = "Invalid request body"
CONFIG_INCOMPLETE_ERROR = "Messaging service configuration is incomplete"


class MessagingRequestOptions(BaseModel):
    """Opções de transporte do pedido de envio."""

    model_config = ConfigDict(populate_by_name=True)

    preview_url: bool | None = Field(default=None, alias="previewUrl")
    language: str | None = None


class MessagingRequest(BaseModel):
    """Corpo do POST /api/messaging (camelCase no fio)."""

    model_config = ConfigDict(populate_by_name=True)

    provider: str = ""
    to: str = ""
    template_name: str | None = Field(default=None, alias="templateName")
    content: str | list[str] | None = None
    options: MessagingRequestOptions = Field(default_factory=MessagingRequestOptions)

    def has_required_fields(self) -> bool:
        has_content = self.content is not None and self.content != ""
        return bool(self.to) and (has_content or bool(self.template_name))


def build_message(payload: MessagingRequest) -> tuple[MessageContent, MessageOptions]:
    """Converte o pedido em MessageContent + MessageOptions.

    `templateName` torna o conteúdo um template cujos parâmetros são a
    lista `content`; com `options.language` também gera template data
    com componente `body` de parâmetros texto.
    """
    content = payload.content
    is_list = isinstance(content, list)
    body = "\n".join(content) if is_list else (content or "")

    metadata = None
    template_data = None
    if payload.template_name:
        parameters = tuple(content) if is_list else (content or "",)
        metadata = MessageMetadata(template_name=payload.template_name, parameters=parameters)
        if payload.options.language:
            body_parameters = (
                [{"type": "text", "text": text} for text in content if text] if is_list else []
            )
            template_data = TemplateData(
                name=payload.template_name,
                language_code=payload.options.language,
                components=({"type": "body", "parameters": body_parameters},),
            )

    message_content = MessageContent(
        body=body,
        type=MessageType.TEMPLATE if payload.template_name else MessageType.TEXT,
        metadata=metadata,
    )
    options = MessageOptions(
        language=payload.options.language,
        preview_url=payload.options.preview_url,
        template_data=template_data,
    )
    return message_content, options


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


def _error_response(
    error: str,
    status_code: int,
    user_message: str = DEFAULT_USER_MESSAGE,
    **extra: Any,
) -> JSONResponse:
    return JSONResponse(
        content={
            "error": error,
            "userMessage": user_message,
            "timestamp": _timestamp(),
            **extra,
        },
        status_code=status_code,
    )


@router.post("/api/messaging", response_model=None)
async def send_message(request: Request) -> JSONResponse:
    """Despacha uma mensagem pelo provider informado."""
    with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)):
        try:
            return await _dispatch(request)
        except Exception as exc:
            logger.exception(
                "messaging_api_error",
                extra={"error_type": type(exc).__name__},
            )
            return _error_response(
                str(exc) or "An unexpected error occurred",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )


async def _dispatch(request: Request) -> JSONResponse:
    try:
        payload = MessagingRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("messaging_request_invalid", extra={"error_type": type(exc).__name__})
        return _error_response(
            INVALID_BODY_ERROR,
            status.HTTP_400_BAD_REQUEST,
            "The message request could not be read.",
        )

    if not payload.has_required_fields():
        logger.warning("messaging_request_missing_fields", extra={"provider": payload.provider})
        return _error_response(
            MISSING_FIELDS_ERROR,
            status.HTTP_400_BAD_REQUEST,
            "Please provide a recipient and message content.",
        )

    settings = get_messaging_settings()
    if not settings.is_configured():
        logger.error("messaging_config_incomplete")
        return _error_response(
            CONFIG_INCOMPLETE_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Messaging is temporarily unavailable.",
        )

    provider = create_message_provider(payload.provider, settings)
    content, options = build_message(payload)
    logger.info(
        "messaging_send_requested",
        extra={
            "provider": payload.provider,
            "message_type": str(content.type),
            "template_name": payload.template_name,
        },
    )
    result = await provider.send_message(payload.to, content, options)

    if not result.success:
        return _error_response(
            result.error or "Failed to send message",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            result.user_message or DEFAULT_USER_MESSAGE,
            statusCode=result.status_code,
        )

    return JSONResponse(
        content={
            "success": True,
            "messageId": result.message_id,
            "provider": payload.provider,
            "timestamp": _timestamp(),
        },
        status_code=status.HTTP_200_OK,
    )
