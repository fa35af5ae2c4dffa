"""Settings específicas de LINE.

O provider LINE ainda é um stub: as credenciais são carregadas mas
nenhuma chamada real é feita à Messaging API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

LINE_API_BASE_URL: str = "https://api.line.me/v2"


@dataclass(frozen=True)
class LineSettings:
    """Configurações do provider LINE.

    Attributes:
        channel_access_token: Token de canal pré-emitido (sem refresh)
        channel_secret: Secret do canal
        api_base_url: URL base da Messaging API
    """

    channel_access_token: str = ""
    channel_secret: str = ""
    api_base_url: str = LINE_API_BASE_URL
    request_timeout_seconds: float = 10.0


def _load_from_env() -> LineSettings:
    return LineSettings(
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings."""
    return _load_from_env()
