"""Conector Telegram — Bot API (envio e webhook inbound)."""

from .provider import NO_CHAT_ID_ERROR, TelegramProvider

__all__ = ["NO_CHAT_ID_ERROR", "TelegramProvider"]
