"""Display formatting for amounts and timestamps.

Presentation only: the values passed in are never modified, and nothing
formatted here is fed back into stored amounts.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal

import pytz

from ordertrack.domain.model.value_objects import Money, to_decimal

RUPEE = "₹"


def _group_indian(digits: str) -> str:
    """Indian digit grouping: ``1234567`` -> ``12,34,567``."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: Money | Decimal | int | float | str) -> str:
    """Format as whole rupees, e.g. ``Money.of("123456.7")`` -> ``₹1,23,457``."""
    value = amount.amount if isinstance(amount, Money) else to_decimal(amount)
    whole = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    return f"{sign}{RUPEE}{_group_indian(str(abs(int(whole))))}"


def format_date(value: datetime, tz: tzinfo = pytz.utc) -> str:
    """Format like ``17 Oct 2026, 02:30 pm`` in the shop's timezone."""
    local = value.astimezone(tz)
    return local.strftime("%d %b %Y, %I:%M ") + local.strftime("%p").lower()
