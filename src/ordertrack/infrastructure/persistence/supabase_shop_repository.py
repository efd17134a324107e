"""Supabase-backed implementation of ShopProfileRepository (``profiles`` table)."""

from __future__ import annotations

from supabase import Client

from ordertrack.domain.model.shop import ShopProfile
from ordertrack.domain.repository.shop_repository import ShopProfileRepository
from ordertrack.infrastructure.persistence.supabase_client import execute

PROFILES = "profiles"


class SupabaseShopProfileRepository(ShopProfileRepository):

    def __init__(self, client: Client) -> None:
        self._client = client

    def get(self, shop_id: str) -> ShopProfile | None:
        rows = execute(
            self._client.table(PROFILES)
            .select("user_id, shop_name")
            .eq("user_id", shop_id)
            .limit(1),
            "Fetching shop profile",
        )
        if not rows or not rows[0].get("shop_name"):
            return None
        return ShopProfile(shop_id=rows[0]["user_id"], shop_name=rows[0]["shop_name"])

    def upsert(self, profile: ShopProfile) -> None:
        execute(
            self._client.table(PROFILES).upsert(
                {"user_id": profile.shop_id, "shop_name": profile.shop_name},
                on_conflict="user_id",
            ),
            "Saving shop profile",
        )
