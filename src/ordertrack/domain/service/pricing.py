"""Order pricing and payment-status engine.

Pure functions over Decimal amounts. Nothing here validates business
ranges (negative advances, zero quantities); callers that need guard rails
apply them before calling in.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from decimal import ROUND_FLOOR, Decimal
from typing import Iterable, NamedTuple

from ordertrack.domain.model.menu import Menu
from ordertrack.domain.model.status import PaymentStatus
from ordertrack.domain.model.value_objects import to_decimal

Number = int | float | str | Decimal

_ZERO = Decimal("0")
_HALF = Decimal("0.5")


class PriceLine(NamedTuple):
    quantity: Number
    unit_price: Number


def round_to_unit(amount: Decimal) -> Decimal:
    """Round to a whole currency unit, halves upward (``312.5`` -> ``313``)."""
    return (amount + _HALF).to_integral_value(rounding=ROUND_FLOOR)


def line_total(unit_price: Number, quantity: Number) -> Decimal:
    """``unit_price * quantity`` with no rounding."""
    return to_decimal(unit_price) * to_decimal(quantity)


def menu_price(item_name: str, quantity: Number, menu: Menu) -> Decimal:
    """Price of *quantity* units of a menu item, rounded to whole units.

    Unknown items price at zero. Unlike :func:`line_total` this rounds.
    """
    item = menu.get(item_name)
    if item is None:
        return _ZERO
    return round_to_unit(item.price_per_unit.amount * to_decimal(quantity))


def order_total(items: Iterable[PriceLine | tuple[Number, Number]]) -> Decimal:
    """Sum of line totals for ``(quantity, unit_price)`` pairs."""
    total = _ZERO
    for quantity, unit_price in items:
        total += line_total(unit_price, quantity)
    return total


def payment_status(total_price: Number, advance_payment: Number) -> PaymentStatus:
    # Check order matters: a zero advance on a zero bill is still Unpaid.
    advance = to_decimal(advance_payment)
    if advance == 0:
        return PaymentStatus.UNPAID
    if advance >= to_decimal(total_price):
        return PaymentStatus.PAID
    return PaymentStatus.PARTIALLY_PAID


def remaining_amount(total_price: Number, advance_payment: Number) -> Decimal:
    """Balance due; negative when the customer has overpaid."""
    return to_decimal(total_price) - to_decimal(advance_payment)


def generate_order_reference(
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """Build a display reference such as ``ORD482913057``.

    Six trailing digits of the epoch-millisecond clock plus three random
    digits. Collisions are possible; the storage id is the real key.
    """
    now = now or datetime.now(timezone.utc)
    millis = str(int(now.timestamp() * 1000))[-6:]
    draw = (rng or random).randrange(1000)
    return f"ORD{millis}{draw:03d}"
