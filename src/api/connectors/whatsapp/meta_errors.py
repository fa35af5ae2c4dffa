"""Erros e helpers de parsing para a Graph API (Meta/WhatsApp)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_ERROR_MESSAGE = "WhatsApp API error"


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado no corpo de uma resposta da Graph API."""

    error_type: str
    error_code: int
    error_message: str
    is_auth_error: bool


def is_auth_error(error_code: int, error_type: str) -> bool:
    """Código 190 (token inválido/expirado) ou OAuthException."""
    return error_code == 190 or error_type == "OAuthException"


def parse_meta_error(response_data: dict[str, Any]) -> WhatsAppApiError | None:
    """Extrai o objeto `error` do response da Meta.

    Returns:
        WhatsAppApiError se houver erro, None se sucesso
    """
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = str(error_obj.get("type", "unknown"))
    error_code = _error_code(error_obj.get("code"))
    error_message = str(error_obj.get("message") or DEFAULT_ERROR_MESSAGE)

    return WhatsAppApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=error_message,
        is_auth_error=is_auth_error(error_code, error_type),
    )


def _error_code(raw: Any) -> int:
    # Códigos não numéricos viram 0 sem perder status e mensagem
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    return 0
