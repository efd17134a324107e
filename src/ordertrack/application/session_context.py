"""Explicit session context handed to every use case.

Replaces a process-wide "current session" global: the context is built
from an AuthGateway, keeps itself current through the gateway's change
notifications and is passed into each handler call.
"""

from __future__ import annotations

import logging

from ordertrack.domain.exceptions import AuthenticationError
from ordertrack.domain.model.session import Session, User
from ordertrack.domain.repository.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)


class SessionContext:

    def __init__(self, auth: AuthGateway) -> None:
        self._auth = auth
        self._session = auth.current_session()
        self._unsubscribe = auth.on_session_change(self._on_session_change)

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def is_signed_in(self) -> bool:
        return self._session is not None

    def require_user(self) -> User:
        """Return the signed-in user, asking the backend at call time.

        Raises AuthenticationError when there is no session or the backend
        no longer recognises the user.
        """
        if self._session is None:
            raise AuthenticationError("Not authenticated; run 'ordertrack auth login'")
        user = self._auth.current_user()
        if user is None:
            raise AuthenticationError("Session expired; sign in again")
        return user

    def require_shop_id(self) -> str:
        return self.require_user().id

    def close(self) -> None:
        self._unsubscribe()

    def __enter__(self) -> SessionContext:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_session_change(self, session: Session | None) -> None:
        logger.debug(
            "[AUTH] Session changed: %s", "signed in" if session else "signed out"
        )
        self._session = session
