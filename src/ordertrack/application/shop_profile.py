"""Application services: set up and show the shop profile."""

from __future__ import annotations

import logging

from ordertrack.application.session_context import SessionContext
from ordertrack.domain.exceptions import EntityNotFoundError
from ordertrack.domain.model.shop import ShopProfile
from ordertrack.domain.repository.shop_repository import ShopProfileRepository

logger = logging.getLogger(__name__)


class SetupShopHandler:

    def __init__(self, shop_repo: ShopProfileRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, context: SessionContext, shop_name: str) -> ShopProfile:
        """Create or rename the signed-in user's shop."""
        profile = ShopProfile.create(context.require_shop_id(), shop_name)
        self._shop_repo.upsert(profile)
        logger.info("[SHOP] Profile saved for %s", profile.shop_id)
        return profile


class ShowShopHandler:

    def __init__(self, shop_repo: ShopProfileRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, context: SessionContext) -> ShopProfile:
        profile = self._shop_repo.get(context.require_shop_id())
        if profile is None:
            raise EntityNotFoundError("Shop is not set up yet; run 'ordertrack shop setup'")
        return profile
