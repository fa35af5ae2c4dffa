"""Factory de providers de mensageria.

Conjunto fechado: whatsapp, line, telegram. Cada chamada devolve uma
instância nova; nada é buscado em registro global.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.messaging import ProviderType
from utils.errors import UnsupportedProviderTypeError

from .line.provider import LineProvider
from .telegram.provider import TelegramProvider
from .whatsapp.provider import WhatsAppProvider

if TYPE_CHECKING:
    from app.protocols.message_provider import MessageProviderProtocol
    from app.protocols.message_store import MessageStoreProtocol
    from app.services.token_manager import TokenManager

    from .http_base import HttpClient


def create_provider(
    provider_type: str,
    config: Any,
    *,
    token_manager: TokenManager | None = None,
    message_store: MessageStoreProtocol | None = None,
    http_client: HttpClient | None = None,
) -> MessageProviderProtocol:
    """Cria o provider concreto para o tipo informado.

    Args:
        provider_type: whatsapp | line | telegram
        config: Settings do provider (ver MessagingSettings.get_provider_config)
        token_manager: Cache de tokens (WhatsApp)
        message_store: Persistência de mensagens (Telegram)
        http_client: Cliente HTTP compartilhado

    Raises:
        UnsupportedProviderTypeError: Tipo fora do conjunto suportado
            (inclui kakao) ou sem configuração
    """
    if config is None:
        raise UnsupportedProviderTypeError(str(provider_type))

    if provider_type == ProviderType.WHATSAPP:
        return WhatsAppProvider(config, token_manager=token_manager, http_client=http_client)
    if provider_type == ProviderType.LINE:
        return LineProvider(config, http_client=http_client)
    if provider_type == ProviderType.TELEGRAM:
        return TelegramProvider(config, message_store=message_store, http_client=http_client)

    raise UnsupportedProviderTypeError(str(provider_type))
