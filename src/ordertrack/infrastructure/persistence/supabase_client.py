"""Supabase client construction and request execution."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from ordertrack.domain.exceptions import BackendError, ValidationError

logger = logging.getLogger(__name__)


def create_supabase_client(url: str, key: str) -> Client:
    if not url or not key:
        raise ValidationError(
            "Set ORDERTRACK_SUPABASE_URL and ORDERTRACK_SUPABASE_KEY "
            "(environment or .env) before using the backend"
        )
    return create_client(url, key)


def execute(query: Any, action: str) -> list[dict]:
    """Run a PostgREST query builder and return its rows.

    Store and network failures surface as BackendError; there is no retry.
    """
    try:
        response = query.execute()
    except APIError as exc:
        logger.exception("[BACKEND] %s rejected", action)
        raise BackendError(f"{action} failed: {exc.message}") from exc
    except httpx.HTTPError as exc:
        logger.exception("[BACKEND] %s could not reach the backend", action)
        raise BackendError(f"{action} failed: {exc}") from exc
    return response.data or []
