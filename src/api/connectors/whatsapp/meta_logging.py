"""Helpers de logging para a Graph API (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_meta_error(meta_error: WhatsAppApiError, status_code: int) -> None:
    """Loga erro da Meta sem expor destinatário nem token."""
    logger.warning(
        "whatsapp_api_error",
        extra={
            "status_code": status_code,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "is_auth_error": meta_error.is_auth_error,
        },
    )


def log_success(status_code: int, message_id: str | None) -> None:
    logger.info(
        "whatsapp_message_sent",
        extra={"status_code": status_code, "message_id": message_id},
    )
