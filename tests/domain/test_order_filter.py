"""Unit tests for in-memory order list filtering."""

from datetime import date, datetime, timezone

import pytz

from ordertrack.domain.model.order import Order, OrderItem
from ordertrack.domain.model.value_objects import Money, Quantity
from ordertrack.domain.service.order_filter import filter_orders

IST = pytz.timezone("Asia/Kolkata")


def _order(number: str, customer: str, mobile: str, created_at: datetime) -> Order:
    return Order(
        id=number.lower(),
        order_number=number,
        shop_id="shop-1",
        customer_name=customer,
        mobile_number=mobile,
        items=[OrderItem("Veg Biryani", Quantity.of(1), Money.of(150))],
        created_at=created_at,
        updated_at=created_at,
    )


ORDERS = [
    _order("ORD000001", "Ravi Kumar", "9876543210", datetime(2026, 10, 16, 20, 0, tzinfo=timezone.utc)),
    _order("ORD000002", "Asha Rao", "9123456789", datetime(2026, 10, 17, 6, 0, tzinfo=timezone.utc)),
]


class TestSearch:

    def test_reference_substring(self):
        result = filter_orders(ORDERS, search="01")
        assert [o.order_number for o in result] == ["ORD000001"]

    def test_reference_is_case_insensitive(self):
        assert len(filter_orders(ORDERS, search="ord")) == 2

    def test_customer_name_is_case_insensitive(self):
        result = filter_orders(ORDERS, search="ASHA")
        assert [o.order_number for o in result] == ["ORD000002"]

    def test_mobile_number(self):
        result = filter_orders(ORDERS, search="98765")
        assert [o.order_number for o in result] == ["ORD000001"]

    def test_no_match(self):
        assert filter_orders(ORDERS, search="zzz") == []

    def test_empty_search_keeps_everything_in_order(self):
        assert filter_orders(ORDERS, search="") == ORDERS


class TestDateFilter:

    def test_day_is_taken_in_shop_timezone(self):
        # 20:00 UTC on the 16th is 01:30 on the 17th in India.
        result = filter_orders(ORDERS, on_date=date(2026, 10, 17), tz=IST)
        assert [o.order_number for o in result] == ["ORD000001", "ORD000002"]

    def test_utc_day(self):
        result = filter_orders(ORDERS, on_date=date(2026, 10, 16))
        assert [o.order_number for o in result] == ["ORD000001"]

    def test_combined_with_search(self):
        result = filter_orders(ORDERS, search="asha", on_date=date(2026, 10, 16))
        assert result == []
