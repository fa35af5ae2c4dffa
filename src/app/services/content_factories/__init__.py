"""Content factories por provider.

Registro fechado: whatsapp, line, telegram. Kakao é um tipo declarado
sem factory própria e falha explicitamente.
"""

from __future__ import annotations

from app.constants.messaging import ProviderType
from app.protocols.content_factory import MessageContentFactoryProtocol
from utils.errors import UnsupportedProviderTypeError

from .line import LineMessageFactory
from .telegram import TelegramMessageFactory
from .whatsapp import WhatsAppMessageFactory

_FACTORIES: dict[ProviderType, MessageContentFactoryProtocol] = {
    ProviderType.WHATSAPP: WhatsAppMessageFactory(),
    ProviderType.LINE: LineMessageFactory(),
    ProviderType.TELEGRAM: TelegramMessageFactory(),
}


def get_content_factory(provider_type: str) -> MessageContentFactoryProtocol:
    """Retorna a factory do provider.

    Raises:
        NotImplementedError: kakao (sem integração real)
        UnsupportedProviderTypeError: provider desconhecido
    """
    if provider_type == ProviderType.KAKAO:
        raise NotImplementedError("Kakao: content factory não implementada")
    try:
        return _FACTORIES[ProviderType(provider_type)]
    except (ValueError, KeyError) as exc:
        raise UnsupportedProviderTypeError(str(provider_type)) from exc


__all__ = [
    "LineMessageFactory",
    "TelegramMessageFactory",
    "WhatsAppMessageFactory",
    "get_content_factory",
]
