"""Settings específicas de WhatsApp.

Configurações do canal WhatsApp Business via Graph API.
Cada provider tem seu próprio arquivo de settings para isolamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v21.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do provider WhatsApp.

    Attributes:
        system_user_token: Token de system user (validade longa, ~60 dias)
        phone_number_id: ID do número de telefone no Meta Business
        app_id: ID do app Facebook
        app_secret: Secret do app Facebook
        api_version: Versão da Graph API (ex: v21.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout por requisição HTTP
    """

    # Credenciais
    system_user_token: str = ""
    phone_number_id: str = ""
    app_id: str = ""
    app_secret: str = ""

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    request_timeout_seconds: float = 10.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def get_messages_endpoint(self, phone_number_id: str | None = None) -> str:
        """Retorna URL para envio de mensagens.

        Args:
            phone_number_id: ID do número. Usa self.phone_number_id se None.

        Returns:
            URL no formato: https://graph.facebook.com/v21.0/{id}/messages

        Raises:
            ValueError: Se phone_number_id não informado e não configurado.
        """
        pid = phone_number_id or self.phone_number_id
        if not pid:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{pid}/messages"

    @property
    def is_configured(self) -> bool:
        return bool(self.system_user_token and self.phone_number_id)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.system_user_token:
            errors.append("WHATSAPP_SYSTEM_USER_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        system_user_token=os.getenv("WHATSAPP_SYSTEM_USER_TOKEN", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        app_id=os.getenv("FACEBOOK_APP_ID", ""),
        app_secret=os.getenv("FACEBOOK_APP_SECRET", ""),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
