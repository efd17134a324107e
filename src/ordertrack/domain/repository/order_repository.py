"""Abstract repository for Order aggregate.

Every method is scoped by ``shop_id``; implementations must never return or
touch another shop's rows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ordertrack.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_for_shop(
        self, shop_id: str, created_after: datetime | None = None
    ) -> list[Order]:
        """Return the shop's orders with their items, newest first.

        With *created_after*, only orders created at or after that instant.
        """

    @abstractmethod
    def get_by_id(self, order_id: str, shop_id: str) -> Order | None:
        """Return one order of the shop, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> str:
        """Insert a new order (without items) and assign its ``id``."""

    @abstractmethod
    def add_items(self, order: Order) -> None:
        """Insert the line items of an already inserted order."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Write the mutable fields of an existing order."""

    @abstractmethod
    def delete(self, order_id: str, shop_id: str) -> None:
        """Permanently remove an order."""
