"""Factory de conteúdo Telegram — HTML formatado direto no corpo."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from app.constants.messaging import MessageType
from app.protocols.models import MessageContent, MessageMetadata

from ._formatting import format_delivery_date, format_total

if TYPE_CHECKING:
    from app.protocols.models import DeliveryUpdateParams, OrderNotificationParams

ORDER_TEMPLATE_NAME = "order_notification"


class TelegramMessageFactory:
    """Gera texto com parse_mode HTML; não há negociação de template.

    Valores vindos do pedido são escapados para não quebrar o HTML
    aceito pela Bot API (apenas <b>, <i>, <a>, <code>, <pre>).
    """

    def create_order_notification(self, params: OrderNotificationParams) -> MessageContent:
        lines = [
            f"<b>🛍️ New Order #{escape(params.order_number)}</b>",
            f"<b>👤 Customer:</b> {escape(params.customer_name)}",
            "<b>📦 Items:</b>",
            *(f"• {escape(item)}" for item in params.items),
            f"<b>💰 Total:</b> ${format_total(params.total)}",
            f"<b>📅 Delivery:</b> {format_delivery_date(params.delivery_date)}",
        ]
        if params.notes:
            lines.append(f"\n<b>📝 Notes:</b>\n{escape(params.notes)}")

        return MessageContent(
            type=MessageType.TEXT,
            body="\n".join(lines),
            metadata=MessageMetadata(template_name=ORDER_TEMPLATE_NAME),
        )

    def create_delivery_update(self, params: DeliveryUpdateParams) -> MessageContent:
        raise NotImplementedError("Telegram: atualização de entrega não implementada")
