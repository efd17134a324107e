"""In-memory search over a shop's order list.

The whole tenant order set is fetched and filtered here; this is meant for
a single shop's volume, not for large data sets.
"""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Iterable

import pytz

from ordertrack.domain.model.order import Order


def matches_search(order: Order, search: str) -> bool:
    """Case-insensitive substring match on reference, customer or mobile."""
    needle = search.lower()
    return (
        needle in order.order_number.lower()
        or needle in order.customer_name.lower()
        or needle in order.mobile_number.lower()
    )


def created_on(order: Order, on_date: date, tz: tzinfo = pytz.utc) -> bool:
    """True if the order was created on *on_date* in the shop's timezone."""
    return order.created_at.astimezone(tz).date() == on_date


def filter_orders(
    orders: Iterable[Order],
    search: str | None = None,
    on_date: date | None = None,
    tz: tzinfo = pytz.utc,
) -> list[Order]:
    """Return the orders matching *search* and *on_date*, in input order.

    Either filter is skipped when empty; both must hold when both are set.
    """
    result = list(orders)
    if search:
        result = [o for o in result if matches_search(o, search)]
    if on_date is not None:
        result = [o for o in result if created_on(o, on_date, tz)]
    return result
