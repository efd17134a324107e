"""Tests for the Supabase order repository against a recording client."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest
from postgrest.exceptions import APIError

from ordertrack.domain.exceptions import BackendError
from ordertrack.domain.model.order import Order, OrderItem
from ordertrack.domain.model.status import OrderStatus, PaymentMode, PaymentStatus
from ordertrack.domain.model.value_objects import Money, Quantity
from ordertrack.infrastructure.persistence.supabase_order_repository import (
    SupabaseOrderRepository,
)
from tests.infrastructure.supabase_fakes import RecordingClient


def _row(**overrides) -> dict:
    row = {
        "id": "uuid-1",
        "order_number": "ORD000001",
        "shop_id": "shop-1",
        "customer_name": "Ravi",
        "mobile_number": "9876543210",
        "order_status": "Cooking",
        "payment_mode": "UPI",
        "advance_payment": 200,
        "price": 530,
        "remaining_amount": 330,
        "payment_status": "Partially Paid",
        "created_at": "2026-10-17T09:00:00+00:00",
        "updated_at": "2026-10-17T09:05:00.123456+00:00",
        "order_items": [
            {"product_name": "Chicken Biryani", "quantity": 1.5, "unit_price": 180, "line_total": 270},
            {"product_name": "Egg Biryani", "quantity": 2, "unit_price": 130, "line_total": 260},
        ],
    }
    row.update(overrides)
    return row


def _new_order() -> Order:
    return Order.create(
        shop_id="shop-1",
        customer_name="Ravi",
        mobile_number="9876543210",
        items=[
            OrderItem.create("Chicken Biryani", Quantity.of("1.5"), Money.of(180)),
            OrderItem.create("Egg Biryani", Quantity.of(2), Money.of(130)),
        ],
        advance_payment=Money.of(200),
        order_number="ORD000001",
    )


class TestListForShop:

    def test_query_shape(self):
        client = RecordingClient([[_row()]])
        since = datetime(2026, 10, 1, tzinfo=timezone.utc)
        SupabaseOrderRepository(client).list_for_shop("shop-1", created_after=since)

        query = client.executed[0]
        assert query.table_name == "orders"
        assert query.call("select")[0] == (
            "*, order_items(product_name, quantity, unit_price, line_total)",
        )
        assert query.filters() == [("shop_id", "shop-1")]
        assert query.call("gte")[0] == ("created_at", since.isoformat())
        assert query.call("order") == (("created_at",), {"desc": True})

    def test_row_mapping(self):
        client = RecordingClient([[_row()]])
        [order] = SupabaseOrderRepository(client).list_for_shop("shop-1")

        assert order.id == "uuid-1"
        assert order.order_status == OrderStatus.COOKING
        assert order.payment_mode == PaymentMode.UPI
        assert order.price == Money.of(530)
        assert order.remaining_amount == Money.of(330)
        assert order.payment_status == PaymentStatus.PARTIALLY_PAID
        assert order.created_at == datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc)

    def test_menu_priced_item_keeps_rounding(self):
        row = _row(
            advance_payment=0,
            remaining_amount=313,
            payment_status="Unpaid",
            order_items=[
                {"product_name": "Mutton Biryani", "quantity": 1.25, "unit_price": 250, "line_total": 313}
            ],
        )
        [order] = SupabaseOrderRepository(RecordingClient([[row]])).list_for_shop("shop-1")
        assert order.price.amount == Decimal("313")

    def test_legacy_single_item_row(self):
        row = _row(
            biryani_type="Mutton Biryani",
            quantity=1.25,
            price=313,
            advance_payment=313,
            remaining_amount=0,
            payment_status="Paid",
            order_items=[],
        )
        [order] = SupabaseOrderRepository(RecordingClient([[row]])).list_for_shop("shop-1")
        assert [i.product_name for i in order.items] == ["Mutton Biryani"]
        assert order.price.amount == Decimal("313")
        assert order.payment_status == PaymentStatus.PAID

    def test_stale_stored_balance_is_recomputed(self, caplog):
        client = RecordingClient([[_row(remaining_amount=999, payment_status="Paid")]])
        with caplog.at_level(logging.WARNING):
            [order] = SupabaseOrderRepository(client).list_for_shop("shop-1")
        assert order.remaining_amount == Money.of(330)
        assert "stale" in caplog.text


class TestStoredRowsReadBackAsIs:

    def test_order_without_items_keeps_stored_bill(self, caplog):
        client = RecordingClient([[_row(order_items=[])], []])
        repo = SupabaseOrderRepository(client)
        with caplog.at_level(logging.WARNING):
            order = repo.get_by_id("uuid-1", "shop-1")

        assert order.items == []
        assert order.price == Money.of(530)
        assert order.remaining_amount == Money.of(330)
        assert order.payment_status == PaymentStatus.PARTIALLY_PAID
        assert "no line items" in caplog.text

        order.toggle_completed()
        repo.update(order)
        (fields,), _ = client.executed[1].call("update")
        assert "price" not in fields
        assert Decimal(fields["remaining_amount"]) == 330
        assert fields["payment_status"] == "Partially Paid"

    def test_zero_quantity_item_does_not_hide_other_orders(self):
        second = _row(
            id="uuid-2",
            order_number="ORD000002",
            advance_payment=0,
            price=180,
            remaining_amount=180,
            payment_status="Unpaid",
            order_items=[
                {"product_name": "Chicken Biryani", "quantity": 1, "unit_price": 180, "line_total": 180},
                {"product_name": "Raita", "quantity": 0, "unit_price": 30, "line_total": 0},
            ],
        )
        orders = SupabaseOrderRepository(RecordingClient([[_row(), second]])).list_for_shop("shop-1")

        assert [o.order_number for o in orders] == ["ORD000001", "ORD000002"]
        assert orders[1].items[1].quantity.value == 0
        assert orders[1].price == Money.of(180)


class TestGetById:

    def test_scoped_by_shop(self):
        client = RecordingClient([[]])
        assert SupabaseOrderRepository(client).get_by_id("uuid-1", "shop-2") is None
        assert client.executed[0].filters() == [("id", "uuid-1"), ("shop_id", "shop-2")]


class TestWrites:

    def test_add_assigns_id_and_writes_derived_fields(self):
        client = RecordingClient([[{"id": "uuid-9"}]])
        order = _new_order()
        assert SupabaseOrderRepository(client).add(order) == "uuid-9"
        assert order.id == "uuid-9"

        (payload,), _ = client.executed[0].call("insert")
        assert payload["shop_id"] == "shop-1"
        assert Decimal(payload["price"]) == 530
        assert Decimal(payload["remaining_amount"]) == 330
        assert payload["payment_status"] == "Partially Paid"
        assert payload["order_status"] == "Pending"
        assert "order_type" not in payload

    def test_add_without_returned_id(self):
        with pytest.raises(BackendError, match="no id returned"):
            SupabaseOrderRepository(RecordingClient([[]])).add(_new_order())

    def test_add_items_carry_order_and_shop(self):
        client = RecordingClient()
        order = _new_order()
        order.id = "uuid-9"
        SupabaseOrderRepository(client).add_items(order)

        query = client.executed[0]
        assert query.table_name == "order_items"
        (rows,), _ = query.call("insert")
        assert [r["order_id"] for r in rows] == ["uuid-9", "uuid-9"]
        assert {r["shop_id"] for r in rows} == {"shop-1"}
        assert Decimal(rows[0]["line_total"]) == 270

    def test_update_filters_by_id_and_shop(self):
        client = RecordingClient()
        order = _new_order()
        order.id = "uuid-9"
        order.record_payment(Money.of(530), PaymentMode.CASH)
        SupabaseOrderRepository(client).update(order)

        query = client.executed[0]
        (fields,), _ = query.call("update")
        assert fields["payment_status"] == "Paid"
        assert Decimal(fields["remaining_amount"]) == 0
        assert fields["payment_mode"] == "Cash"
        assert query.filters() == [("id", "uuid-9"), ("shop_id", "shop-1")]

    def test_delete_filters_by_id_and_shop(self):
        client = RecordingClient()
        SupabaseOrderRepository(client).delete("uuid-9", "shop-1")
        query = client.executed[0]
        assert ("delete", (), {}) in query.calls
        assert query.filters() == [("id", "uuid-9"), ("shop_id", "shop-1")]


class TestErrors:

    def test_api_error_becomes_backend_error(self):
        error = APIError({"message": "permission denied", "code": "42501", "hint": None, "details": None})
        with pytest.raises(BackendError, match="permission denied"):
            SupabaseOrderRepository(RecordingClient([error])).list_for_shop("shop-1")

    def test_network_error_becomes_backend_error(self):
        with pytest.raises(BackendError, match="Deleting order failed"):
            SupabaseOrderRepository(RecordingClient([httpx.ConnectError("down")])).delete("x", "shop-1")
