"""Application service: Delete Order use case.

Deletion is permanent; the caller must pass ``confirmed=True`` after
asking the user.
"""

from __future__ import annotations

import logging

from ordertrack.application.session_context import SessionContext
from ordertrack.application.show_order import find_order
from ordertrack.domain.exceptions import ValidationError
from ordertrack.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, context: SessionContext, reference: str, confirmed: bool = False) -> str:
        """Delete the order and return its order number."""
        if not confirmed:
            raise ValidationError("Deletion must be confirmed")

        shop_id = context.require_shop_id()
        order = find_order(self._order_repo, reference, shop_id)
        self._order_repo.delete(order.id, shop_id)  # type: ignore[arg-type]
        logger.warning("[ORDER] Deleted %s (%s)", order.order_number, order.id)
        return order.order_number
