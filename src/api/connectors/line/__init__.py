"""Conector LINE — stub da Messaging API."""

from .provider import LineProvider

__all__ = ["LineProvider"]
