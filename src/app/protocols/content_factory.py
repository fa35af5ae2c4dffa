"""Protocolos de construção de conteúdo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import DeliveryUpdateParams, MessageContent, OrderNotificationParams


class MessageContentFactoryProtocol(Protocol):
    """Converte um evento de domínio em conteúdo específico da plataforma.

    Implementações são puras: sem IO, determinísticas para os mesmos params.
    Capacidades declaradas mas não implementadas levantam NotImplementedError.
    """

    def create_order_notification(self, params: OrderNotificationParams) -> MessageContent: ...

    def create_delivery_update(self, params: DeliveryUpdateParams) -> MessageContent: ...
