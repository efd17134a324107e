"""Shop profile: the display name of a tenant account."""

from __future__ import annotations

from dataclasses import dataclass

from ordertrack.domain.exceptions import ValidationError


@dataclass
class ShopProfile:
    shop_id: str
    shop_name: str

    @staticmethod
    def create(shop_id: str, shop_name: str) -> ShopProfile:
        name = (shop_name or "").strip()
        if not name:
            raise ValidationError("Please enter your shop name")
        return ShopProfile(shop_id=shop_id, shop_name=name)
