"""Protocolos e contratos do core de mensageria."""

from .content_factory import MessageContentFactoryProtocol
from .message_provider import InboundMessageHandlerProtocol, MessageProviderProtocol
from .message_store import MessageStoreProtocol
from .models import (
    DeliveryUpdateParams,
    Message,
    MessageContent,
    MessageMetadata,
    MessageOptions,
    MessageResponse,
    OrderNotificationParams,
    TemplateData,
)

__all__ = [
    "DeliveryUpdateParams",
    "InboundMessageHandlerProtocol",
    "Message",
    "MessageContent",
    "MessageContentFactoryProtocol",
    "MessageMetadata",
    "MessageOptions",
    "MessageProviderProtocol",
    "MessageResponse",
    "MessageStoreProtocol",
    "OrderNotificationParams",
    "TemplateData",
]
