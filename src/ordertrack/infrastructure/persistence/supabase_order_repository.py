"""Supabase-backed implementation of OrderRepository.

Orders live in the ``orders`` table and their line items in
``order_items``; both carry ``shop_id`` and every query filters on it.
``remaining_amount`` and ``payment_status`` are stored as a convenience
copy for other readers and are rewritten on every write, but recomputed
from ``price`` and ``advance_payment`` when an order is read back.
"""

from __future__ import annotations

import logging
from datetime import datetime

from supabase import Client

from ordertrack.domain.exceptions import BackendError
from ordertrack.domain.model.menu import BIRYANI_MENU, Menu
from ordertrack.domain.model.order import Order, OrderItem
from ordertrack.domain.model.status import OrderStatus, OrderType, PaymentMode
from ordertrack.domain.model.value_objects import Money, Quantity, to_decimal
from ordertrack.domain.repository.order_repository import OrderRepository
from ordertrack.infrastructure.persistence.supabase_client import execute

logger = logging.getLogger(__name__)

ORDERS = "orders"
ORDER_ITEMS = "order_items"
ITEM_COLUMNS = "product_name, quantity, unit_price, line_total"


class SupabaseOrderRepository(OrderRepository):

    def __init__(self, client: Client, legacy_menu: Menu = BIRYANI_MENU) -> None:
        self._client = client
        self._legacy_menu = legacy_menu

    # --- OrderRepository interface --------------------------------------------

    def list_for_shop(
        self, shop_id: str, created_after: datetime | None = None
    ) -> list[Order]:
        query = (
            self._client.table(ORDERS)
            .select(f"*, {ORDER_ITEMS}({ITEM_COLUMNS})")
            .eq("shop_id", shop_id)
        )
        if created_after is not None:
            query = query.gte("created_at", created_after.isoformat())
        rows = execute(query.order("created_at", desc=True), "Fetching orders")
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, order_id: str, shop_id: str) -> Order | None:
        query = (
            self._client.table(ORDERS)
            .select(f"*, {ORDER_ITEMS}({ITEM_COLUMNS})")
            .eq("id", order_id)
            .eq("shop_id", shop_id)
        )
        rows = execute(query, "Fetching order")
        return self._to_domain(rows[0]) if rows else None

    def add(self, order: Order) -> str:
        rows = execute(
            self._client.table(ORDERS).insert(self._to_row(order)),
            "Creating order",
        )
        if not rows or "id" not in rows[0]:
            raise BackendError("Creating order failed: no id returned")
        order.id = str(rows[0]["id"])
        return order.id

    def add_items(self, order: Order) -> None:
        if order.id is None:
            raise BackendError("Cannot store items of an order that has no id")
        rows = [
            {
                "order_id": order.id,
                "shop_id": order.shop_id,
                "product_name": item.product_name,
                "quantity": str(item.quantity.value),
                "unit_price": str(item.unit_price.amount),
                "line_total": str(item.line_total.amount),
            }
            for item in order.items
        ]
        execute(self._client.table(ORDER_ITEMS).insert(rows), "Saving order items")

    def update(self, order: Order) -> None:
        fields = {
            "order_status": order.order_status.value,
            "payment_mode": order.payment_mode.value if order.payment_mode else None,
            "mobile_number": order.mobile_number,
            "updated_at": order.updated_at.isoformat(),
            **self._financials(order),
        }
        execute(
            self._client.table(ORDERS)
            .update(fields)
            .eq("id", order.id)
            .eq("shop_id", order.shop_id),
            "Updating order",
        )

    def delete(self, order_id: str, shop_id: str) -> None:
        execute(
            self._client.table(ORDERS)
            .delete()
            .eq("id", order_id)
            .eq("shop_id", shop_id),
            "Deleting order",
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _financials(order: Order) -> dict:
        # Numeric columns accept decimal strings, which keeps full precision.
        # Items are write-once, so price is only written on insert.
        return {
            "advance_payment": str(order.advance_payment.amount),
            "remaining_amount": str(order.remaining_amount.amount),
            "payment_status": order.payment_status.value,
        }

    def _to_row(self, order: Order) -> dict:
        row = {
            "shop_id": order.shop_id,
            "order_number": order.order_number,
            "customer_name": order.customer_name,
            "mobile_number": order.mobile_number,
            "order_status": order.order_status.value,
            "payment_mode": order.payment_mode.value if order.payment_mode else None,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "price": str(order.price.amount),
            **self._financials(order),
        }
        if order.order_type is not None:
            row["order_type"] = order.order_type.value
        return row

    def _to_domain(self, raw: dict) -> Order:
        items = [self._item_to_domain(i) for i in raw.get(ORDER_ITEMS) or []]
        if not items and raw.get("biryani_type"):
            items = [self._legacy_item(raw)]
        stored_price = None
        if not items and raw.get("price") is not None:
            logger.warning(
                "[ORDER] %s has no line items; using its stored price",
                raw.get("order_number") or raw["id"],
            )
            stored_price = Money.of(raw["price"])

        order = Order(
            id=str(raw["id"]),
            order_number=raw.get("order_number") or "",
            shop_id=raw["shop_id"],
            customer_name=raw.get("customer_name") or "",
            mobile_number=raw.get("mobile_number") or "",
            items=items,
            order_status=OrderStatus(raw.get("order_status") or OrderStatus.PENDING.value),
            payment_mode=PaymentMode(raw["payment_mode"]) if raw.get("payment_mode") else None,
            advance_payment=Money.of(raw.get("advance_payment") or 0),
            order_type=OrderType(raw["order_type"]) if raw.get("order_type") else None,
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw.get("updated_at") or raw["created_at"]),
            stored_price=stored_price,
        )
        self._check_stored_financials(order, raw)
        return order

    @staticmethod
    def _item_to_domain(raw: dict) -> OrderItem:
        quantity = Quantity(to_decimal(raw["quantity"]))
        unit_price = Money.of(raw["unit_price"])
        exact = quantity.value * unit_price.amount
        stored = raw.get("line_total")
        # A stored total that differs from qty * price was rounded by menu pricing.
        whole_units = stored is not None and to_decimal(stored) != exact
        return OrderItem(raw["product_name"], quantity, unit_price, whole_units)

    def _legacy_item(self, raw: dict) -> OrderItem:
        """Rebuild the single item of an order stored before line items existed."""
        quantity = Quantity(to_decimal(raw.get("quantity") or 1))
        menu_item = self._legacy_menu.get(raw["biryani_type"])
        if raw.get("unit_price") is not None:
            unit_price = Money.of(raw["unit_price"])
        elif menu_item is not None:
            unit_price = menu_item.price_per_unit
        else:
            unit_price = Money(to_decimal(raw.get("price") or 0) / quantity.value)
        return OrderItem(raw["biryani_type"], quantity, unit_price, whole_units=True)

    @staticmethod
    def _check_stored_financials(order: Order, raw: dict) -> None:
        stored_remaining = raw.get("remaining_amount")
        stored_status = raw.get("payment_status")
        stale = (
            stored_remaining is not None
            and to_decimal(stored_remaining) != order.remaining_amount.amount
        ) or (
            stored_status is not None and stored_status != order.payment_status.value
        )
        if stale:
            logger.warning(
                "[ORDER] Stored balance for %s is stale (stored %s/%s, computed %s/%s)",
                order.order_number,
                stored_remaining,
                stored_status,
                order.remaining_amount.amount,
                order.payment_status.value,
            )
