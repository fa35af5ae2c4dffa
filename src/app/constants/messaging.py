"""Enums de domínio para mensageria multi-provider."""

from __future__ import annotations

from enum import StrEnum


class ProviderType(StrEnum):
    """Plataformas de mensageria declaradas."""

    WHATSAPP = "whatsapp"
    LINE = "line"
    KAKAO = "kakao"
    TELEGRAM = "telegram"


class MessageType(StrEnum):
    """Tipos de conteúdo de mensagem."""

    TEXT = "text"
    TEMPLATE = "template"
    MEDIA = "media"
    INTERACTIVE = "interactive"
    LOCATION = "location"


class MessageDirection(StrEnum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class MessageStatus(StrEnum):
    """Status de entrega de uma mensagem persistida."""

    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"


# Idioma padrão dos templates pré-registrados
DEFAULT_TEMPLATE_LANGUAGE = "en_US"
