"""Receipt composition and messaging / telephony handoff links.

Opening the links is left to the caller; nothing here talks to the
network.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from ordertrack.application.dto import ReceiptDTO
from ordertrack.application.formatting import format_currency
from ordertrack.application.session_context import SessionContext
from ordertrack.application.show_order import find_order
from ordertrack.domain.model.order import Order
from ordertrack.domain.repository.order_repository import OrderRepository
from ordertrack.domain.repository.shop_repository import ShopProfileRepository

logger = logging.getLogger(__name__)

RULE = "-" * 32


def compose_receipt(order: Order, shop_name: str | None = None) -> str:
    """Build the chat-formatted text receipt for *order*."""
    lines = ["*--- ORDERTRACK RECEIPT ---*"]
    if shop_name:
        lines.append(f"*{shop_name}*")
    lines += [
        f"*Order #:* {order.order_number}",
        RULE,
        f"*Customer:* {order.customer_name}",
    ]
    for item in order.items:
        lines.append(
            f"- {item.product_name} x{item.quantity} @ "
            f"{format_currency(item.unit_price)} = {format_currency(item.line_total)}"
        )
    lines += [
        RULE,
        f"*Total Bill:* {format_currency(order.price)}",
        f"*Status:* {order.order_status.value}",
        f"*Paid:* {format_currency(order.advance_payment)}",
        f"*BALANCE DUE:* {format_currency(order.remaining_amount)}",
        RULE,
        "_Thank you!_",
    ]
    return "\n".join(lines)


def whatsapp_link(mobile_number: str, message: str, country_code: str = "91") -> str:
    # Same escaping as JavaScript's encodeURIComponent.
    text = quote(message, safe="!*'()")
    return f"https://wa.me/{country_code}{mobile_number}?text={text}"


def telephone_link(mobile_number: str) -> str:
    return f"tel:{mobile_number}"


class ReceiptHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        shop_repo: ShopProfileRepository,
        country_code: str = "91",
    ) -> None:
        self._order_repo = order_repo
        self._shop_repo = shop_repo
        self._country_code = country_code

    def handle(self, context: SessionContext, reference: str) -> ReceiptDTO:
        shop_id = context.require_shop_id()
        order = find_order(self._order_repo, reference, shop_id)

        profile = self._shop_repo.get(shop_id)
        text = compose_receipt(order, profile.shop_name if profile else None)
        logger.info("[ORDER] Receipt composed for %s", order.order_number)
        return ReceiptDTO(
            order_number=order.order_number,
            text=text,
            whatsapp_url=whatsapp_link(order.mobile_number, text, self._country_code),
            telephone_url=telephone_link(order.mobile_number),
        )
