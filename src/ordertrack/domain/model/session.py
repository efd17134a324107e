"""Authenticated user and session, as reported by the auth backend.

The signed-in user's id doubles as the shop (tenant) id.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    id: str
    email: str | None = None


@dataclass(frozen=True)
class Session:
    user: User
    access_token: str
    refresh_token: str | None = None
    expires_at: datetime | None = None
