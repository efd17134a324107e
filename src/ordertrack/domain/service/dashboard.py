"""Domain service: dashboard statistics over a window of orders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, tzinfo
from decimal import Decimal
from enum import Enum
from typing import Iterable

import pytz

from ordertrack.domain.model.order import Order
from ordertrack.domain.model.status import OrderStatus
from ordertrack.domain.model.value_objects import Money

NO_BEST_SELLER = "None"


class TimeRange(Enum):
    TODAY = "today"
    MONTHLY = "monthly"
    TOTAL = "total"


@dataclass(frozen=True)
class DashboardStats:
    total_orders: int
    revenue: Money
    balance_owed: Money
    best_seller: str
    remaining_orders: int


def range_start(
    time_range: TimeRange, now: datetime, tz: tzinfo = pytz.utc
) -> datetime | None:
    """Return the UTC instant a window starts at, or None for all time.

    ``today`` starts at local midnight and ``monthly`` on the first of the
    local month, both in the shop's timezone *tz*.
    """
    if time_range == TimeRange.TOTAL:
        return None

    local_today = now.astimezone(tz).date()
    if time_range == TimeRange.MONTHLY:
        local_today = local_today.replace(day=1)

    naive_start = datetime.combine(local_today, time.min)
    if hasattr(tz, "localize"):
        start = tz.localize(naive_start)
    else:
        start = naive_start.replace(tzinfo=tz)
    return start.astimezone(pytz.utc)


def best_seller(orders: Iterable[Order]) -> str:
    """Product with the largest summed quantity; later products win ties."""
    totals: dict[str, Decimal] = {}
    for order in orders:
        for item in order.items:
            totals[item.product_name] = (
                totals.get(item.product_name, Decimal("0")) + item.quantity.value
            )

    best, best_qty = NO_BEST_SELLER, Decimal("0")
    for name, qty in totals.items():
        if qty >= best_qty:
            best, best_qty = name, qty
    return best


def compute_stats(orders: Iterable[Order]) -> DashboardStats:
    orders = list(orders)
    revenue = Money.zero()
    balance = Money.zero()
    for order in orders:
        revenue = revenue + order.price
        balance = balance + order.remaining_amount

    return DashboardStats(
        total_orders=len(orders),
        revenue=revenue,
        balance_owed=balance,
        best_seller=best_seller(orders),
        remaining_orders=sum(
            1 for o in orders if o.order_status != OrderStatus.COMPLETED
        ),
    )
