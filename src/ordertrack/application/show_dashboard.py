"""Application service: Dashboard use case (query)."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Callable

import pytz

from ordertrack.application.dto import DashboardDTO
from ordertrack.application.formatting import format_currency
from ordertrack.application.session_context import SessionContext
from ordertrack.domain.repository.order_repository import OrderRepository
from ordertrack.domain.service.dashboard import TimeRange, compute_stats, range_start


class ShowDashboardHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        tz: tzinfo = pytz.utc,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._order_repo = order_repo
        self._tz = tz
        self._clock = clock

    def handle(
        self, context: SessionContext, time_range: TimeRange = TimeRange.TODAY
    ) -> DashboardDTO:
        start = range_start(time_range, self._clock(), self._tz)
        orders = self._order_repo.list_for_shop(
            context.require_shop_id(), created_after=start
        )
        stats = compute_stats(orders)
        return DashboardDTO(
            time_range=time_range.value,
            total_orders=stats.total_orders,
            revenue=format_currency(stats.revenue),
            balance_owed=format_currency(stats.balance_owed),
            best_seller=stats.best_seller,
            remaining_orders=stats.remaining_orders,
        )
