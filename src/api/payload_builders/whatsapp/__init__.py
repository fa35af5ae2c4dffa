"""Builders de payload para a Graph API (WhatsApp Business)."""

from api.payload_builders.whatsapp.base import PayloadBuilder, build_base_payload
from api.payload_builders.whatsapp.factory import build_full_payload, get_payload_builder

__all__ = [
    "PayloadBuilder",
    "build_base_payload",
    "build_full_payload",
    "get_payload_builder",
]
