"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from supabase import Client

from ordertrack.application.session_context import SessionContext
from ordertrack.infrastructure.auth.supabase_auth_gateway import SupabaseAuthGateway
from ordertrack.infrastructure.config import Settings, get_settings
from ordertrack.infrastructure.persistence.supabase_client import create_supabase_client
from ordertrack.infrastructure.persistence.supabase_order_repository import (
    SupabaseOrderRepository,
)
from ordertrack.infrastructure.persistence.supabase_shop_repository import (
    SupabaseShopProfileRepository,
)
from ordertrack.infrastructure.session_store import SessionStore

logger = logging.getLogger(__name__)


def settings() -> Settings:
    return get_settings()


@lru_cache
def supabase_client() -> Client:
    cfg = settings()
    return create_supabase_client(cfg.supabase_url, cfg.supabase_key)


def order_repository() -> SupabaseOrderRepository:
    return SupabaseOrderRepository(supabase_client())


def shop_repository() -> SupabaseShopProfileRepository:
    return SupabaseShopProfileRepository(supabase_client())


def auth_gateway() -> SupabaseAuthGateway:
    return SupabaseAuthGateway(supabase_client())


def session_store() -> SessionStore:
    return SessionStore(settings().session_file)


def session_context() -> SessionContext:
    """Build the session context, resuming the session saved by ``auth login``.

    Token refreshes and sign-outs are written back to the session file.
    """
    gateway = auth_gateway()
    store = session_store()

    saved = store.load()
    if saved is not None and gateway.current_session() is None:
        if gateway.restore(*saved) is None:
            logger.info("[AUTH] Discarding expired saved session")
            store.clear()

    gateway.on_session_change(store.save)
    return SessionContext(gateway)
