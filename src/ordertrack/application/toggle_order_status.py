"""Application service: one-click complete / reopen of an order."""

from __future__ import annotations

import logging
from datetime import tzinfo

import pytz

from ordertrack.application.dto import OrderDTO, order_to_dto
from ordertrack.application.session_context import SessionContext
from ordertrack.application.show_order import find_order
from ordertrack.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ToggleOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, tz: tzinfo = pytz.utc) -> None:
        self._order_repo = order_repo
        self._tz = tz

    def handle(self, context: SessionContext, reference: str) -> OrderDTO:
        order = find_order(self._order_repo, reference, context.require_shop_id())
        new_status = order.toggle_completed()
        self._order_repo.update(order)
        logger.info("[ORDER] %s marked %s", order.order_number, new_status.value)
        return order_to_dto(order, self._tz)
