"""Settings agregadas de mensageria.

Reúne as configurações por provider e as opções do endpoint interno de
dispatch. Carregado uma vez a partir do ambiente e nunca mutado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

from config.settings.line import LineSettings, get_line_settings
from config.settings.telegram import TelegramSettings, get_telegram_settings
from config.settings.whatsapp import WhatsAppSettings, get_whatsapp_settings

MessageStoreBackend = Literal["memory", "firestore"]

DEFAULT_MESSAGING_API_URL = "http://localhost:8080/api/messaging"


@dataclass(frozen=True)
class MessagingSettings:
    """Configuração de todos os providers de mensageria.

    Attributes:
        whatsapp: Settings do WhatsApp Business
        line: Settings do LINE (stub)
        telegram: Settings do Telegram Bot API
        api_url: URL do endpoint interno POST /api/messaging
        api_timeout_seconds: Timeout do proxy de borda
        store_backend: Backend do MessageStore (memory|firestore)
    """

    whatsapp: WhatsAppSettings = field(default_factory=WhatsAppSettings)
    line: LineSettings = field(default_factory=LineSettings)
    telegram: TelegramSettings = field(default_factory=TelegramSettings)
    api_url: str = DEFAULT_MESSAGING_API_URL
    api_timeout_seconds: float = 10.0
    store_backend: MessageStoreBackend = "memory"

    def get_provider_config(
        self, provider: str
    ) -> WhatsAppSettings | LineSettings | TelegramSettings | None:
        """Retorna settings do provider, ou None se não houver (ex: kakao)."""
        configs: dict[str, WhatsAppSettings | LineSettings | TelegramSettings] = {
            "whatsapp": self.whatsapp,
            "line": self.line,
            "telegram": self.telegram,
        }
        return configs.get(provider)

    def is_configured(self) -> bool:
        """True se ao menos WhatsApp (token + phone id) ou Telegram tem credenciais."""
        return self.whatsapp.is_configured or self.telegram.is_configured

    def validate(self) -> list[str]:
        """Valida configuração mínima de mensageria."""
        errors: list[str] = []
        if not self.is_configured():
            errors.append(
                "Nenhum provider configurado "
                "(WHATSAPP_SYSTEM_USER_TOKEN/WHATSAPP_PHONE_NUMBER_ID ou TELEGRAM_BOT_TOKEN)"
            )
        if self.store_backend not in ("memory", "firestore"):
            errors.append("MESSAGE_STORE_BACKEND deve ser 'memory' ou 'firestore'")
        if self.api_timeout_seconds <= 0:
            errors.append("MESSAGING_API_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> MessagingSettings:
    return MessagingSettings(
        whatsapp=get_whatsapp_settings(),
        line=get_line_settings(),
        telegram=get_telegram_settings(),
        api_url=os.getenv("MESSAGING_API_URL", DEFAULT_MESSAGING_API_URL),
        api_timeout_seconds=float(os.getenv("MESSAGING_API_TIMEOUT_SECONDS", "10")),
        store_backend=os.getenv("MESSAGE_STORE_BACKEND", "memory").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_messaging_settings() -> MessagingSettings:
    """Retorna instância cacheada de MessagingSettings."""
    return _load_from_env()
