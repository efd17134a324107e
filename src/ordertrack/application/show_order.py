"""Application service: Show Order use case (query)."""

from __future__ import annotations

import re
from datetime import tzinfo

import pytz

from ordertrack.application.dto import OrderDTO, order_to_dto
from ordertrack.application.session_context import SessionContext
from ordertrack.domain.exceptions import EntityNotFoundError
from ordertrack.domain.model.order import Order
from ordertrack.domain.repository.order_repository import OrderRepository

_ORDER_NUMBER_RE = re.compile(r"^ORD\d+$", re.IGNORECASE)


def find_order(order_repo: OrderRepository, reference: str, shop_id: str) -> Order:
    """Look an order up by its order number (``ORD...``) or its storage id."""
    reference = reference.strip()
    if _ORDER_NUMBER_RE.match(reference):
        wanted = reference.upper()
        for candidate in order_repo.list_for_shop(shop_id):
            if candidate.order_number.upper() == wanted:
                return candidate
    else:
        order = order_repo.get_by_id(reference, shop_id)
        if order is not None:
            return order
    raise EntityNotFoundError(f"Order {reference} not found")


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, tz: tzinfo = pytz.utc) -> None:
        self._order_repo = order_repo
        self._tz = tz

    def handle(self, context: SessionContext, reference: str) -> OrderDTO:
        order = find_order(self._order_repo, reference, context.require_shop_id())
        return order_to_dto(order, self._tz)
