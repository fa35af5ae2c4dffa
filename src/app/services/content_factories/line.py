"""Factory de conteúdo LINE — buttons template com lista de ações."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.messaging import MessageType
from app.protocols.models import MessageContent, MessageMetadata

from ._formatting import format_delivery_date, format_total

if TYPE_CHECKING:
    from app.protocols.models import DeliveryUpdateParams, OrderNotificationParams

ORDER_TEMPLATE_NAME = "order_notification"
ORDER_ACTIONS = ("View Order Details", "Contact Customer", "Modify Order")


class LineMessageFactory:
    """Texto do pedido no corpo; parâmetros viram botões de ação."""

    def create_order_notification(self, params: OrderNotificationParams) -> MessageContent:
        lines = [
            f"Order #{params.order_number}",
            f"Customer: {params.customer_name}",
            f"Items: {', '.join(params.items)}",
            f"Total: ${format_total(params.total)}",
            f"Notes: {params.notes}" if params.notes else "",
            f"Delivery: {format_delivery_date(params.delivery_date)}",
        ]
        return MessageContent(
            type=MessageType.TEMPLATE,
            body="\n".join(line for line in lines if line),
            metadata=MessageMetadata(
                template_name=ORDER_TEMPLATE_NAME,
                parameters=ORDER_ACTIONS,
            ),
        )

    def create_delivery_update(self, params: DeliveryUpdateParams) -> MessageContent:
        raise NotImplementedError("LINE: atualização de entrega não implementada")
