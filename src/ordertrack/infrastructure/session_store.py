"""JSON-file store for the signed-in session's tokens.

Lets one CLI invocation reuse the session started by ``auth login``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ordertrack.domain.model.session import Session

logger = logging.getLogger(__name__)


class SessionStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> tuple[str, str] | None:
        """Return ``(access_token, refresh_token)``, or None if nothing usable is saved."""
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("[AUTH] Ignoring unreadable session file %s", self._file_path)
            return None
        access, refresh = raw.get("access_token"), raw.get("refresh_token")
        if not access or not refresh:
            return None
        return access, refresh

    def save(self, session: Session | None) -> None:
        """Persist *session*; None clears the file."""
        if session is None or not session.refresh_token:
            self.clear()
            return
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(
                {
                    "access_token": session.access_token,
                    "refresh_token": session.refresh_token,
                    "user_id": session.user.id,
                },
                indent=2,
            )
            + "\n",
            encoding="utf-8",
        )
        self._file_path.chmod(0o600)

    def clear(self) -> None:
        self._file_path.unlink(missing_ok=True)
