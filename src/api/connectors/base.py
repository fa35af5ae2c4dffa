"""Base compartilhada dos providers de mensageria.

Fornece validação de telefone e conversão uniforme de erros em
MessageResponse — nenhum provider deixa exceção escapar de send_message.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from app.protocols.models import MessageResponse
from utils.errors import DEFAULT_USER_MESSAGE, InvalidRecipientError, MessagingError

if TYPE_CHECKING:
    from app.protocols.models import MessageContent, MessageOptions

    from .http_base import HttpClient

logger = logging.getLogger(__name__)

_NON_PHONE_CHARS = re.compile(r"[^\d+]")
_VALID_PHONE = re.compile(r"\d{1,15}")


def validate_phone_number(phone: str) -> str:
    """Normaliza telefone para dígitos (formato E.164 sem '+').

    Remove tudo que não é dígito ou '+', descarta um '+' inicial e exige
    de 1 a 15 dígitos.

    Raises:
        InvalidRecipientError: Formato inválido
    """
    cleaned = _NON_PHONE_CHARS.sub("", phone or "")
    if cleaned.startswith("+"):
        cleaned = cleaned[1:]
    if not _VALID_PHONE.fullmatch(cleaned):
        raise InvalidRecipientError("Formato de telefone inválido")
    return cleaned


class BaseMessageProvider(ABC):
    """Base abstrata para providers concretos.

    Args:
        config: Settings do provider (imutáveis)
        http_client: Cliente HTTP compartilhado
    """

    name: str = "base"

    def __init__(self, config: object, http_client: HttpClient | None = None) -> None:
        self._config = config
        self._http_client = http_client

    @property
    def config(self) -> object:
        return self._config

    @abstractmethod
    async def send_message(
        self,
        to: str,
        content: MessageContent,
        options: MessageOptions | None = None,
    ) -> MessageResponse:
        """Envia mensagem e devolve sempre um MessageResponse."""

    def validate_phone_number(self, phone: str) -> str:
        return validate_phone_number(phone)

    def handle_error(self, error: Exception) -> MessageResponse:
        """Converte qualquer exceção em MessageResponse de falha."""
        status_code = getattr(error, "status_code", None) or 500
        user_message = (
            error.user_message if isinstance(error, MessagingError) else DEFAULT_USER_MESSAGE
        )
        log = logger.warning if isinstance(error, MessagingError) else logger.exception
        log(
            "provider_send_failed",
            extra={
                "provider": self.name,
                "error_type": type(error).__name__,
                "status_code": status_code,
            },
        )
        return MessageResponse(
            success=False,
            error=str(error) or "An unexpected error occurred",
            status_code=status_code,
            user_message=user_message,
        )
