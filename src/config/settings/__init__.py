"""Agregador de settings do serviço de mensageria.

Re-exporta todas as settings e funções de cada módulo.
Organização por provider para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

# Provider-specific settings
from config.settings.line import LINE_API_BASE_URL, LineSettings, get_line_settings
from config.settings.messaging import (
    DEFAULT_MESSAGING_API_URL,
    MessageStoreBackend,
    MessagingSettings,
    get_messaging_settings,
)
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "DEFAULT_MESSAGING_API_URL",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "LINE_API_BASE_URL",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    # Providers
    "LineSettings",
    "MessageStoreBackend",
    "MessagingSettings",
    "TelegramSettings",
    "WhatsAppSettings",
    "get_base_settings",
    "get_firestore_settings",
    "get_line_settings",
    "get_messaging_settings",
    "get_telegram_settings",
    "get_whatsapp_settings",
]
