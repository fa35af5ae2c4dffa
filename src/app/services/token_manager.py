"""Cache de tokens bearer por provider.

Cache em memória com TTL, sem IO de rede. Uma instância é criada pelo
composition root (app/bootstrap) e injetada nos providers que precisam.

Regras:
- Token em cache só é devolvido se expires_at > agora + BUFFER (5 min)
- WhatsApp: system user token de longa duração, cacheado por 60 dias
- LINE: channel token pré-emitido, devolvido sem cache (sem fluxo de refresh)
- Escritas (refresh, clear) são last-write-wins
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.constants.messaging import ProviderType
from utils.errors import AuthExpiredError, UnsupportedProviderError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

TOKEN_BUFFER_MS = 5 * 60 * 1000
WHATSAPP_TOKEN_VALIDITY_MS = 60 * 24 * 60 * 60 * 1000


@dataclass(frozen=True, slots=True)
class TokenCacheEntry:
    token: str
    expires_at: float  # epoch em ms


class TokenManager:
    """Gerencia tokens por provider com expiração bufferizada.

    Args:
        clock: Função que retorna o epoch em segundos (injetável em testes).
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._cache: dict[str, TokenCacheEntry] = {}

    def _now_ms(self) -> float:
        return self._clock() * 1000

    async def get_token(self, provider_name: str, config: Any) -> str:
        """Retorna token válido para o provider.

        Args:
            provider_name: Nome do provider (whatsapp, line)
            config: Settings do provider

        Returns:
            Token bearer

        Raises:
            AuthExpiredError: WhatsApp sem system user token configurado
            UnsupportedProviderError: Provider sem estratégia de token
        """
        now = self._now_ms()
        cached = self._cache.get(provider_name)
        if cached is not None and cached.expires_at > now + TOKEN_BUFFER_MS:
            return cached.token

        if provider_name == ProviderType.WHATSAPP:
            token = getattr(config, "system_user_token", "")
            if not token:
                raise AuthExpiredError("Nenhum system user token do WhatsApp disponível")
            self._cache[provider_name] = TokenCacheEntry(
                token=token,
                expires_at=now + WHATSAPP_TOKEN_VALIDITY_MS,
            )
            logger.info(
                "token_cached",
                extra={"provider": provider_name, "validity_days": 60},
            )
            return token

        if provider_name == ProviderType.LINE:
            return getattr(config, "channel_access_token", "")

        raise UnsupportedProviderError(provider_name)

    def clear_token(self, provider_name: str) -> None:
        """Remove o token do cache; o próximo get_token re-deriva."""
        if self._cache.pop(provider_name, None) is not None:
            logger.info("token_cleared", extra={"provider": provider_name})
