"""Formatação compartilhada pelas content factories."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

DELIVERY_TBC = "To be confirmed"


def format_delivery_date(value: date | None) -> str:
    """Data no formato en-US (M/D/YYYY) ou 'To be confirmed'."""
    if value is None:
        return DELIVERY_TBC
    return f"{value.month}/{value.day}/{value.year}"


def format_total(total: float) -> str:
    return f"{total:.2f}"
