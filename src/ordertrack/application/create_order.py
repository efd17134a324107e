"""Application service: Create Order use case.

Creating an order is two backend writes: the order row, then its items.
They run as a saga: if the items cannot be stored, the order row is
deleted again so no item-less order is left behind.
"""

from __future__ import annotations

import logging
from datetime import tzinfo

import pytz

from ordertrack.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from ordertrack.application.session_context import SessionContext
from ordertrack.domain.exceptions import BackendError, PartialWriteError, ValidationError
from ordertrack.domain.model.menu import BIRYANI_MENU, Menu
from ordertrack.domain.model.order import Order, OrderItem
from ordertrack.domain.model.status import OrderStatus, OrderType, PaymentMode
from ordertrack.domain.model.value_objects import Money, Quantity
from ordertrack.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu: Menu = BIRYANI_MENU,
        tz: tzinfo = pytz.utc,
    ) -> None:
        self._order_repo = order_repo
        self._menu = menu
        self._tz = tz

    def handle(
        self,
        context: SessionContext,
        customer_name: str,
        mobile_number: str,
        item_specs: list[OrderItemSpec],
        order_status: OrderStatus = OrderStatus.PENDING,
        payment_mode: PaymentMode | None = None,
        advance_payment: str = "0",
        order_type: OrderType | None = None,
    ) -> OrderDTO:
        """Create an order from free-form line items.

        Rows with a blank product name are dropped; if nothing is left the
        order is rejected before anything is written.
        """
        shop_id = context.require_shop_id()

        items = [
            OrderItem.create(
                product_name=spec.product_name,
                quantity=Quantity.of(spec.quantity),
                unit_price=Money.of(spec.unit_price),
            )
            for spec in item_specs
            if not spec.is_blank
        ]
        if not items:
            raise ValidationError("Add at least one item with a product name")

        order = Order.create(
            shop_id=shop_id,
            customer_name=customer_name,
            mobile_number=mobile_number,
            items=items,
            order_status=order_status,
            payment_mode=payment_mode,
            advance_payment=Money.of(advance_payment),
            order_type=order_type,
        )
        return self._store(order)

    def handle_menu_item(
        self,
        context: SessionContext,
        customer_name: str,
        mobile_number: str,
        item_name: str,
        quantity: str,
        order_status: OrderStatus = OrderStatus.PENDING,
        payment_mode: PaymentMode | None = None,
        advance_payment: str = "0",
        order_type: OrderType | None = None,
    ) -> OrderDTO:
        """Create a single-item order priced from the menu (rounded to whole units)."""
        shop_id = context.require_shop_id()

        order = Order.from_menu(
            shop_id=shop_id,
            customer_name=customer_name,
            mobile_number=mobile_number,
            item_name=item_name,
            quantity=Quantity.of(quantity),
            menu=self._menu,
            order_status=order_status,
            payment_mode=payment_mode,
            advance_payment=Money.of(advance_payment),
            order_type=order_type,
        )
        return self._store(order)

    # --- Saga -----------------------------------------------------------------

    def _store(self, order: Order) -> OrderDTO:
        order_id = self._order_repo.add(order)
        try:
            self._order_repo.add_items(order)
        except BackendError as exc:
            logger.error(
                "[ORDER] Items for %s failed to save; deleting order %s",
                order.order_number,
                order_id,
            )
            self._compensate(order, order_id)
            raise BackendError(f"Failed to create order: {exc}") from exc

        logger.info(
            "[ORDER] Created %s (%s) for shop %s",
            order.order_number,
            order_id,
            order.shop_id,
        )
        return order_to_dto(order, self._tz)

    def _compensate(self, order: Order, order_id: str) -> None:
        try:
            self._order_repo.delete(order_id, order.shop_id)
        except BackendError as exc:
            logger.exception("[ORDER] Rollback of order %s failed", order_id)
            raise PartialWriteError(
                f"Order {order.order_number} was saved without items and "
                f"could not be removed (id {order_id})",
                order_id=order_id,
            ) from exc
