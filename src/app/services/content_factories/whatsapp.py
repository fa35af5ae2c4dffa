"""Factory de conteúdo WhatsApp — templates pré-registrados na Meta."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.messaging import MessageType
from app.protocols.models import MessageContent, MessageMetadata

from ._formatting import format_delivery_date, format_total

if TYPE_CHECKING:
    from app.protocols.models import DeliveryUpdateParams, OrderNotificationParams

ORDER_TEMPLATE_NAME = "order_success"


class WhatsAppMessageFactory:
    """Conteúdo baseado em template com parâmetros posicionais.

    A ordem dos parâmetros precisa casar com o template `order_success`
    registrado no WhatsApp Manager: cliente, pedido, quantidade de itens,
    itens, total, data de entrega.
    """

    def create_order_notification(self, params: OrderNotificationParams) -> MessageContent:
        return MessageContent(
            type=MessageType.TEMPLATE,
            body="",
            metadata=MessageMetadata(
                template_name=ORDER_TEMPLATE_NAME,
                parameters=(
                    params.customer_name or "Value Customer",
                    params.order_number or "",
                    str(len(params.items)),
                    " | ".join(params.items),
                    format_total(params.total),
                    format_delivery_date(params.delivery_date),
                ),
            ),
        )

    def create_delivery_update(self, params: DeliveryUpdateParams) -> MessageContent:
        raise NotImplementedError("WhatsApp: atualização de entrega não implementada")
