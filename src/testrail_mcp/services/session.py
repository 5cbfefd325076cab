"""Session resolution: which credentials sign the next outbound call.

Precedence: the environment-derived session (URL, username, and API key
all configured) wins; otherwise the first session added to the
:class:`SessionStore`; otherwise none, which the transport reports as
"Not authenticated".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from testrail_mcp.config.settings import TestRailSettings

ENV_SESSION_ID = "env-session"


@dataclass(frozen=True)
class Session:
    """Resolved credentials plus the TestRail instance they belong to."""

    base_url: str
    principal: str
    secret_key: str = field(repr=False)
    session_id: str = ENV_SESSION_ID

    def api_url(self, api_path: str, path: str) -> str:
        """Join base URL, API prefix, and operation path."""
        return f"{self.base_url.rstrip('/')}/{api_path.strip('/')}/{path}"


class SessionStore:
    """Append-only in-memory registry of established sessions."""

    def __init__(self) -> None:
        self._sessions: list[Session] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def add(self, session: Session) -> None:
        self._sessions.append(session)

    def first(self) -> Session | None:
        return self._sessions[0] if self._sessions else None


class SessionResolver:
    """Resolve the active :class:`Session` for each dispatch.

    No network calls and no side effects; called once per dispatch.
    """

    def __init__(
        self,
        settings: TestRailSettings | None = None,
        store: SessionStore | None = None,
    ) -> None:
        self._settings = settings
        self.store = store if store is not None else SessionStore()

    def _environment_session(self) -> Session | None:
        settings = self._settings
        if settings is None or not settings.has_credentials:
            return None
        assert settings.url and settings.username and settings.api_key
        return Session(
            base_url=settings.url,
            principal=settings.username,
            secret_key=settings.api_key.get_secret_value(),
            session_id=ENV_SESSION_ID,
        )

    def resolve(self) -> Session | None:
        session = self._environment_session()
        if session is not None:
            return session
        return self.store.first()
