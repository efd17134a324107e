"""Abstract gateway to the hosted authentication service.

Defined in the domain layer so application code never depends on the
concrete auth client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from ordertrack.domain.model.session import Session, User

SessionListener = Callable[[Session | None], None]


class AuthGateway(ABC):

    @abstractmethod
    def current_session(self) -> Session | None:
        """Return the active session, or None when signed out."""

    @abstractmethod
    def current_user(self) -> User | None:
        """Return the signed-in user, or None."""

    @abstractmethod
    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        """Register *listener* for sign-in/sign-out; returns an unsubscribe callable."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Session:
        """Sign in with email and password."""

    @abstractmethod
    def restore(self, access_token: str, refresh_token: str) -> Session | None:
        """Resume a previously saved session, or None if it is no longer valid."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the current session."""
