"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from ordertrack.application.formatting import format_currency, format_date
from ordertrack.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one row of the new-order form, as typed by the user."""

    product_name: str
    quantity: str
    unit_price: str

    @property
    def is_blank(self) -> bool:
        return not (self.product_name or "").strip()


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: str
    unit_price: str  # formatted, e.g. "₹180"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    order_number: str
    customer_name: str
    mobile_number: str
    order_status: str
    order_type: str | None
    payment_mode: str | None
    payment_status: str
    items: list[OrderLineItemDTO]
    total_quantity: str
    total: str
    advance_paid: str
    balance_due: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class DashboardDTO:
    time_range: str
    total_orders: int
    revenue: str
    balance_owed: str
    best_seller: str
    remaining_orders: int


@dataclass(frozen=True)
class ReceiptDTO:
    order_number: str
    text: str
    whatsapp_url: str
    telephone_url: str


def order_to_dto(order: Order, tz: tzinfo) -> OrderDTO:
    total_quantity = order.total_quantity
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        customer_name=order.customer_name,
        mobile_number=order.mobile_number,
        order_status=order.order_status.value,
        order_type=order.order_type.value if order.order_type else None,
        payment_mode=order.payment_mode.value if order.payment_mode else None,
        payment_status=order.payment_status.value,
        items=[
            OrderLineItemDTO(
                product_name=item.product_name,
                quantity=str(item.quantity),
                unit_price=format_currency(item.unit_price),
                line_total=format_currency(item.line_total),
            )
            for item in order.items
        ],
        total_quantity=str(total_quantity) if total_quantity else "0",
        total=format_currency(order.price),
        advance_paid=format_currency(order.advance_payment),
        balance_due=format_currency(order.remaining_amount),
        created_at=format_date(order.created_at, tz),
        updated_at=format_date(order.updated_at, tz),
    )
