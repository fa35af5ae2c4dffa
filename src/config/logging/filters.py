"""Filters de logging para injeção de contexto e redação.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: cofounder_messaging)

Redação:
- tokens de bot Telegram embutidos em URLs (/bot<token>/)
- cabeçalhos Bearer
- sequências longas de dígitos (telefones), preservando os 4 últimos
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_BOT_TOKEN_RE = re.compile(r"/bot\d+:[\w-]+")
_BEARER_RE = re.compile(r"Bearer\s+[\w.\-]+", re.IGNORECASE)
_PHONE_RE = re.compile(r"(?<!\w)\+?\d{7,11}(\d{4})\b")


def redact(text: str) -> str:
    """Remove credenciais e mascara telefones de um texto de log."""
    text = _BOT_TOKEN_RE.sub("/bot***", text)
    text = _BEARER_RE.sub("Bearer ***", text)
    return _PHONE_RE.sub(r"***\1", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class RedactionFilter(logging.Filter):
    """Aplica `redact` à mensagem final do record.

    A mensagem é formatada aqui (msg % args) para que argumentos
    posicionais, como a URL logada pelo httpx, também sejam cobertos.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
