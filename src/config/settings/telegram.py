"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Prefixo da Bot API; o token do bot é concatenado diretamente
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org/bot"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do provider Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        default_chat_id: Chat usado quando o destinatário não resolve
        webhook_secret: Valor esperado em X-Telegram-Bot-Api-Secret-Token
        api_base_url: URL base da API (termina em /bot)
        request_timeout_seconds: Timeout por requisição HTTP
    """

    bot_token: str = ""
    default_chat_id: str | None = None
    webhook_secret: str = ""

    api_base_url: str = TELEGRAM_API_BASE_URL
    request_timeout_seconds: float = 10.0

    def get_method_endpoint(self, method: str) -> str:
        """URL de um método da Bot API (ex: sendMessage)."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url}{self.bot_token}/{method.lstrip('/')}"

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        default_chat_id=os.getenv("TELEGRAM_DEFAULT_CHAT_ID") or None,
        webhook_secret=os.getenv("TELEGRAM_WEBHOOK_SECRET", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
