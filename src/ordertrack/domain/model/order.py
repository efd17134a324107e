"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items. Financial fields
that derive from the items and the advance payment are computed on read.
An order read back without its line items keeps the price stored with it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ordertrack.domain.exceptions import ValidationError
from ordertrack.domain.model.menu import Menu
from ordertrack.domain.model.status import (
    INITIAL_STATUSES,
    OrderStatus,
    OrderType,
    PaymentMode,
    PaymentStatus,
)
from ordertrack.domain.model.value_objects import Money, Quantity
from ordertrack.domain.service import pricing

_MOBILE_RE = re.compile(r"^[0-9]{10}$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_mobile(mobile_number: str) -> str:
    mobile = (mobile_number or "").strip()
    if not _MOBILE_RE.match(mobile):
        raise ValidationError(
            f"Mobile number must be 10 digits, got {mobile_number!r}"
        )
    return mobile


@dataclass(frozen=True)
class OrderItem:
    """One product line, written once together with its order.

    ``whole_units`` marks the synthetic item of a menu-priced order, whose
    total is rounded to whole currency units.
    """

    product_name: str
    quantity: Quantity
    unit_price: Money
    whole_units: bool = False

    @property
    def line_total(self) -> Money:
        amount = pricing.line_total(self.unit_price.amount, self.quantity.value)
        if self.whole_units:
            amount = pricing.round_to_unit(amount)
        return Money(amount, self.unit_price.currency)

    @staticmethod
    def create(product_name: str, quantity: Quantity, unit_price: Money) -> OrderItem:
        """Build a free-form line item, enforcing its invariants."""
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required")
        if unit_price.is_negative:
            raise ValidationError(
                f"Unit price cannot be negative for {product_name.strip()}"
            )
        return OrderItem(product_name.strip(), quantity, unit_price)


@dataclass
class Order:
    """Aggregate root for a shop's customer order.

    Use ``Order.create()`` or ``Order.from_menu()`` for new orders; they
    enforce the creation rules. The ``__init__`` is intentionally simple so
    repositories can reconstitute stored orders without re-validating.
    """

    id: str | None
    order_number: str
    shop_id: str
    customer_name: str
    mobile_number: str
    items: list[OrderItem]
    order_status: OrderStatus = OrderStatus.PENDING
    payment_mode: PaymentMode | None = None
    advance_payment: Money = field(default_factory=Money.zero)
    order_type: OrderType | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    # Bill read from storage for an order whose line items are missing.
    stored_price: Money | None = None

    # --- Factories (used for NEW orders only) ---------------------------------

    @staticmethod
    def create(
        shop_id: str,
        customer_name: str,
        mobile_number: str,
        items: list[OrderItem],
        order_status: OrderStatus = OrderStatus.PENDING,
        payment_mode: PaymentMode | None = None,
        advance_payment: Money | None = None,
        order_type: OrderType | None = None,
        order_number: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not shop_id:
            raise ValidationError("Order must belong to a shop")
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        mobile = validate_mobile(mobile_number)

        if not items:
            raise ValidationError("Order must contain at least one item")

        if order_status not in INITIAL_STATUSES:
            raise ValidationError(
                f"New orders start as Pending or Cooking, not {order_status.value}"
            )

        advance = advance_payment or Money.zero()
        if advance.is_negative:
            raise ValidationError("Advance payment cannot be negative")

        now = now or _utcnow()
        return Order(
            id=None,
            order_number=order_number or pricing.generate_order_reference(now),
            shop_id=shop_id,
            customer_name=customer_name.strip(),
            mobile_number=mobile,
            items=list(items),
            order_status=order_status,
            payment_mode=payment_mode,
            advance_payment=advance,
            order_type=order_type,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def from_menu(
        shop_id: str,
        customer_name: str,
        mobile_number: str,
        item_name: str,
        quantity: Quantity,
        menu: Menu,
        **kwargs,
    ) -> Order:
        """Create a single-item order priced from the fixed menu.

        The item becomes one synthetic line whose total is rounded to whole
        units, so ``price`` equals ``pricing.menu_price``.
        """
        menu_item = menu.get(item_name)
        if menu_item is None:
            raise ValidationError(f"'{item_name}' is not on the menu")
        item = OrderItem(
            product_name=menu_item.name,
            quantity=quantity,
            unit_price=menu_item.price_per_unit,
            whole_units=True,
        )
        return Order.create(shop_id, customer_name, mobile_number, [item], **kwargs)

    # --- State transitions ----------------------------------------------------

    def set_status(self, status: OrderStatus, now: datetime | None = None) -> None:
        """Move to any workflow state; the sequence is not enforced."""
        self.order_status = status
        self._touch(now)

    def toggle_completed(self, now: datetime | None = None) -> OrderStatus:
        """Quick action: reopen a completed order, otherwise complete it."""
        if self.order_status == OrderStatus.COMPLETED:
            nxt = OrderStatus.PENDING
        else:
            nxt = OrderStatus.COMPLETED
        self.set_status(nxt, now)
        return nxt

    def record_payment(
        self,
        advance_payment: Money,
        payment_mode: PaymentMode | None = None,
        now: datetime | None = None,
    ) -> None:
        """Replace the amount received so far (not an increment)."""
        if advance_payment.is_negative:
            raise ValidationError("Advance payment cannot be negative")
        self.advance_payment = advance_payment
        if payment_mode is not None:
            self.payment_mode = payment_mode
        self._touch(now)

    def set_payment_mode(
        self, payment_mode: PaymentMode | None, now: datetime | None = None
    ) -> None:
        self.payment_mode = payment_mode
        self._touch(now)

    def change_mobile(self, mobile_number: str, now: datetime | None = None) -> None:
        self.mobile_number = validate_mobile(mobile_number)
        self._touch(now)

    # --- Computed properties --------------------------------------------------

    @property
    def price(self) -> Money:
        if not self.items and self.stored_price is not None:
            return self.stored_price
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def remaining_amount(self) -> Money:
        return Money(
            pricing.remaining_amount(self.price.amount, self.advance_payment.amount)
        )

    @property
    def payment_status(self) -> PaymentStatus:
        return pricing.payment_status(self.price.amount, self.advance_payment.amount)

    @property
    def total_quantity(self) -> Quantity | None:
        if not self.items:
            return None
        return Quantity(sum(item.quantity.value for item in self.items))

    # --- Internal helpers -----------------------------------------------------

    def _touch(self, now: datetime | None) -> None:
        self.updated_at = now or _utcnow()
