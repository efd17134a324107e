"""Application service: Update Order use case.

Edits the mutable fields of an order. Whatever touches the advance
payment also refreshes the stored balance and payment status, because the
repository writes them from the aggregate's computed properties.
"""

from __future__ import annotations

import logging
from datetime import tzinfo

import pytz

from ordertrack.application.dto import OrderDTO, order_to_dto
from ordertrack.application.session_context import SessionContext
from ordertrack.application.show_order import find_order
from ordertrack.domain.exceptions import ValidationError
from ordertrack.domain.model.status import OrderStatus, PaymentMode
from ordertrack.domain.model.value_objects import Money
from ordertrack.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository, tz: tzinfo = pytz.utc) -> None:
        self._order_repo = order_repo
        self._tz = tz

    def handle(
        self,
        context: SessionContext,
        reference: str,
        order_status: OrderStatus | None = None,
        payment_mode: PaymentMode | None = None,
        advance_payment: str | None = None,
        mobile_number: str | None = None,
    ) -> OrderDTO:
        """Apply the given changes; fields left as None keep their value."""
        if (
            order_status is None
            and payment_mode is None
            and advance_payment is None
            and mobile_number is None
        ):
            raise ValidationError("Nothing to update")

        shop_id = context.require_shop_id()
        order = find_order(self._order_repo, reference, shop_id)

        if order_status is not None:
            order.set_status(order_status)
        if advance_payment is not None:
            order.record_payment(Money.of(advance_payment), payment_mode)
        elif payment_mode is not None:
            order.set_payment_mode(payment_mode)
        if mobile_number is not None:
            order.change_mobile(mobile_number)

        self._order_repo.update(order)
        logger.info("[ORDER] Updated %s", order.order_number)
        return order_to_dto(order, self._tz)
