"""Supabase (GoTrue) implementation of AuthGateway."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

import httpx
from supabase import AuthError, Client

from ordertrack.domain.exceptions import AuthenticationError, BackendError
from ordertrack.domain.model.session import Session, User
from ordertrack.domain.repository.auth_gateway import AuthGateway, SessionListener

logger = logging.getLogger(__name__)


def _to_user(raw: Any) -> User | None:
    if raw is None:
        return None
    return User(id=str(raw.id), email=getattr(raw, "email", None))


def _to_session(raw: Any) -> Session | None:
    if raw is None or raw.user is None:
        return None
    expires_at = None
    if getattr(raw, "expires_at", None):
        expires_at = datetime.fromtimestamp(raw.expires_at, tz=timezone.utc)
    return Session(
        user=_to_user(raw.user),  # type: ignore[arg-type]
        access_token=raw.access_token,
        refresh_token=raw.refresh_token,
        expires_at=expires_at,
    )


class SupabaseAuthGateway(AuthGateway):

    def __init__(self, client: Client) -> None:
        self._client = client

    def current_session(self) -> Session | None:
        try:
            return _to_session(self._client.auth.get_session())
        except (AuthError, httpx.HTTPError) as exc:
            logger.exception("[AUTH] Could not read the current session")
            raise BackendError(f"Could not read session: {exc}") from exc

    def current_user(self) -> User | None:
        try:
            response = self._client.auth.get_user()
        except AuthError as exc:
            # An expired or revoked token means nobody is signed in.
            logger.warning("[AUTH] Session rejected by backend: %s", exc)
            return None
        except httpx.HTTPError as exc:
            logger.exception("[AUTH] Could not reach the auth backend")
            raise BackendError(f"Could not verify user: {exc}") from exc
        return _to_user(response.user) if response else None

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        def _callback(event: Any, raw_session: Any) -> None:
            logger.debug("[AUTH] Auth event %s", event)
            listener(_to_session(raw_session))

        subscription = self._client.auth.on_auth_state_change(_callback)
        return subscription.unsubscribe

    def sign_in(self, email: str, password: str) -> Session:
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(f"Sign-in failed: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.exception("[AUTH] Could not reach the auth backend")
            raise BackendError(f"Sign-in failed: {exc}") from exc

        session = _to_session(response.session)
        if session is None:
            raise AuthenticationError("Sign-in failed: no session returned")
        logger.info("[AUTH] Signed in as %s", session.user.email or session.user.id)
        return session

    def restore(self, access_token: str, refresh_token: str) -> Session | None:
        try:
            response = self._client.auth.set_session(access_token, refresh_token)
        except AuthError as exc:
            logger.warning("[AUTH] Saved session is no longer valid: %s", exc)
            return None
        except httpx.HTTPError as exc:
            logger.exception("[AUTH] Could not reach the auth backend")
            raise BackendError(f"Could not restore session: {exc}") from exc
        return _to_session(response.session)

    def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as exc:
            logger.exception("[AUTH] Sign-out failed")
            raise BackendError(f"Sign-out failed: {exc}") from exc
        logger.info("[AUTH] Signed out")
