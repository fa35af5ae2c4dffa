"""Testes das content factories (WhatsApp, LINE, Telegram)."""

from __future__ import annotations

from datetime import date

import pytest

from app.constants.messaging import MessageType
from app.protocols.models import DeliveryUpdateParams, OrderNotificationParams
from app.services.content_factories import (
    LineMessageFactory,
    TelegramMessageFactory,
    WhatsAppMessageFactory,
    get_content_factory,
)
from utils.errors import UnsupportedProviderTypeError

ORDER = OrderNotificationParams(
    order_number="1001",
    customer_name="Ana",
    items=("Coffee", "Bagel"),
    total=12.5,
    delivery_date=date(2024, 3, 5),
    notes="Leave at door",
)


class TestWhatsAppFactory:
    def test_order_template_parameters(self) -> None:
        content = WhatsAppMessageFactory().create_order_notification(ORDER)

        assert content.type == MessageType.TEMPLATE
        assert content.body == ""
        assert content.metadata is not None
        assert content.metadata.template_name == "order_success"
        assert content.metadata.parameters == (
            "Ana",
            "1001",
            "2",
            "Coffee | Bagel",
            "12.50",
            "3/5/2024",
        )

    def test_defaults_for_missing_customer_and_date(self) -> None:
        params = OrderNotificationParams(order_number="9", customer_name="", items=(), total=0)
        parameters = WhatsAppMessageFactory().create_order_notification(params).metadata.parameters

        assert parameters[0] == "Value Customer"
        assert parameters[2] == "0"
        assert parameters[5] == "To be confirmed"


class TestLineFactory:
    def test_order_body_and_actions(self) -> None:
        content = LineMessageFactory().create_order_notification(ORDER)

        assert content.type == MessageType.TEMPLATE
        assert content.body.splitlines() == [
            "Order #1001",
            "Customer: Ana",
            "Items: Coffee, Bagel",
            "Total: $12.50",
            "Notes: Leave at door",
            "Delivery: 3/5/2024",
        ]
        assert content.metadata.template_name == "order_notification"
        assert content.metadata.parameters == (
            "View Order Details",
            "Contact Customer",
            "Modify Order",
        )

    def test_notes_line_is_omitted_when_empty(self) -> None:
        params = OrderNotificationParams(order_number="2", customer_name="Bo", items=("Tea",), total=3)
        body = LineMessageFactory().create_order_notification(params).body
        assert "Notes:" not in body
        assert body.endswith("Delivery: To be confirmed")


class TestTelegramFactory:
    def test_order_html_body(self) -> None:
        content = TelegramMessageFactory().create_order_notification(ORDER)

        assert content.type == MessageType.TEXT
        assert content.metadata.template_name == "order_notification"
        lines = content.body.split("\n")
        assert lines[0] == "<b>🛍️ New Order #1001</b>"
        assert "• Coffee" in lines
        assert "• Bagel" in lines
        assert "<b>💰 Total:</b> $12.50" in lines
        assert "<b>📅 Delivery:</b> 3/5/2024" in lines
        assert content.body.endswith("<b>📝 Notes:</b>\nLeave at door")

    def test_html_is_escaped(self) -> None:
        params = OrderNotificationParams(
            order_number="<1>", customer_name="A & B", items=("<script>",), total=1
        )
        body = TelegramMessageFactory().create_order_notification(params).body
        assert "&lt;1&gt;" in body
        assert "A &amp; B" in body
        assert "<script>" not in body


class TestRegistry:
    @pytest.mark.parametrize(
        ("provider", "expected"),
        [
            ("whatsapp", WhatsAppMessageFactory),
            ("line", LineMessageFactory),
            ("telegram", TelegramMessageFactory),
        ],
    )
    def test_lookup(self, provider: str, expected: type) -> None:
        assert isinstance(get_content_factory(provider), expected)

    def test_kakao_is_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            get_content_factory("kakao")

    def test_unknown_provider(self) -> None:
        with pytest.raises(UnsupportedProviderTypeError):
            get_content_factory("sms")

    @pytest.mark.parametrize(
        "factory", [WhatsAppMessageFactory(), LineMessageFactory(), TelegramMessageFactory()]
    )
    def test_delivery_update_not_implemented(self, factory) -> None:
        with pytest.raises(NotImplementedError):
            factory.create_delivery_update(DeliveryUpdateParams(order_number="1"))
