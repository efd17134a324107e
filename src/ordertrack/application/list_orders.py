"""Application service: List Orders use case (query)."""

from __future__ import annotations

from datetime import date, tzinfo

import pytz

from ordertrack.application.dto import OrderDTO, order_to_dto
from ordertrack.application.session_context import SessionContext
from ordertrack.domain.repository.order_repository import OrderRepository
from ordertrack.domain.service.order_filter import filter_orders


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, tz: tzinfo = pytz.utc) -> None:
        self._order_repo = order_repo
        self._tz = tz

    def handle(
        self,
        context: SessionContext,
        search: str | None = None,
        on_date: date | None = None,
    ) -> list[OrderDTO]:
        """Return the shop's orders, newest first, narrowed by search and day."""
        orders = self._order_repo.list_for_shop(context.require_shop_id())
        matching = filter_orders(orders, search=search, on_date=on_date, tz=self._tz)
        return [order_to_dto(order, self._tz) for order in matching]
