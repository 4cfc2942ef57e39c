"""Session store: who is logged in and with which token.

The token is persisted under ``accessToken`` (read by ``ApiClient`` on every
request) and a snapshot of the session under ``auth-storage`` so that a new
store over the same storage resumes the session.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any

from pydantic import ValidationError

from wellnessai.api.auth import AuthApi
from wellnessai.api.errors import ApiError
from wellnessai.models.auth import SessionUser, User
from wellnessai.state.store import Store
from wellnessai.storage import ACCESS_TOKEN_KEY, AUTH_STORE_KEY, USER_KEY, KeyValueStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    user: SessionUser | None = None
    access_token: str | None = None
    is_authenticated: bool = False
    is_loading: bool = False


class SessionStore(Store[SessionState]):
    """Observable, persisted authentication state."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage
        super().__init__(self._restore())

    def _restore(self) -> SessionState:
        snapshot = self._storage.get_item(AUTH_STORE_KEY)
        if not isinstance(snapshot, dict):
            return SessionState()
        try:
            user = SessionUser.model_validate(snapshot["user"]) if snapshot.get("user") else None
        except ValidationError as e:
            logger.warning(f"Discarding unreadable persisted session: {e}")
            return SessionState()
        return SessionState(
            user=user,
            access_token=snapshot.get("accessToken"),
            is_authenticated=bool(snapshot.get("isAuthenticated")),
        )

    def _persist(self) -> None:
        state = self.state
        snapshot: dict[str, Any] = {
            "user": state.user.model_dump(mode="json", by_alias=True) if state.user else None,
            "accessToken": state.access_token,
            "isAuthenticated": state.is_authenticated,
        }
        self._storage.set_item(AUTH_STORE_KEY, snapshot)

    @property
    def user(self) -> SessionUser | None:
        return self.state.user

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    @property
    def is_admin(self) -> bool:
        return bool(self.state.user and self.state.user.is_admin)

    @property
    def stored_token(self) -> str | None:
        """Token currently in storage; may already be cleared by a 401."""
        return self._storage.get_item(ACCESS_TOKEN_KEY)

    def set_auth(self, user: User, token: str) -> None:
        """Store a fresh session and derive the UI-only user fields."""
        session_user = SessionUser.from_user(user)
        logger.info(f"Session started for {session_user.email} (admin={session_user.is_admin})")
        self._storage.set_item(ACCESS_TOKEN_KEY, token)
        self._set(SessionState(
            user=session_user,
            access_token=token,
            is_authenticated=True,
            is_loading=False,
        ))
        self._persist()

    def logout(self) -> None:
        """Clear persisted credentials and reset the session."""
        logger.info("Logging out")
        for key in (ACCESS_TOKEN_KEY, USER_KEY, AUTH_STORE_KEY):
            self._storage.remove_item(key)
        self._set(SessionState())

    def update_user(self, **changes: Any) -> None:
        """Merge profile changes into the current user and recompute derived fields."""
        current = self.state.user
        if current is None:
            return
        merged = current.model_copy(update=changes)
        self._set(replace(self.state, user=SessionUser.from_user(merged)))
        self._persist()

    def set_loading(self, loading: bool) -> None:
        self._set(replace(self.state, is_loading=loading))


async def restore_session(session: SessionStore, auth_api: AuthApi) -> bool:
    """Validate a persisted token on startup.

    With no stored token nothing is fetched. Otherwise the profile is
    re-fetched; any failure (including 401) logs the user out.

    Returns:
        True when a valid session is active afterwards.
    """
    token = session.stored_token
    if not token:
        session.set_loading(False)
        return False

    try:
        session.set_loading(True)
        user = await auth_api.get_profile()
        session.set_auth(user, token)
        return True
    except ApiError as e:
        logger.error(f"Auth check failed: {e}")
        session.logout()
        return False
    finally:
        session.set_loading(False)
