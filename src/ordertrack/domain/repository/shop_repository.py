"""Abstract repository for shop profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordertrack.domain.model.shop import ShopProfile


class ShopProfileRepository(ABC):

    @abstractmethod
    def get(self, shop_id: str) -> ShopProfile | None:
        """Return the shop's profile, or None if it was never set up."""

    @abstractmethod
    def upsert(self, profile: ShopProfile) -> None:
        """Create or replace the shop's profile."""
