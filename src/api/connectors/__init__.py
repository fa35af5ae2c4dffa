"""Connectors por canal — adapters de borda para APIs de mensageria.

Estrutura:
- whatsapp/: WhatsApp Business Cloud API
- telegram/: Telegram Bot API
- line/: LINE Messaging API (stub)
- api_provider: proxy para o endpoint interno POST /api/messaging
- factory: criação de providers por tipo

Cada canal tem seu próprio connector, garantindo isolamento de falhas.
"""

from .api_provider import ApiProvider
from .base import BaseMessageProvider, validate_phone_number
from .factory import create_provider

__all__ = [
    "ApiProvider",
    "BaseMessageProvider",
    "create_provider",
    "validate_phone_number",
]
