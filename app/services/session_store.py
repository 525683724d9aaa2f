"""
Session store.

Tracks the signed-in principal and its profile.  The identity service
reports auth state changes (a principal id, or None on sign-out); the
store loads the matching profile and tells its listeners.  A principal
without a profile, e.g. one whose profile an admin deleted, is signed
out on the spot.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from app.db.repositories.user import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    principal_id: Optional[str] = None
    profile: Optional[User] = None

    @property
    def signed_in(self) -> bool:
        return self.principal_id is not None and self.profile is not None


SIGNED_OUT = SessionState()


class SessionStore:
    """Current principal plus profile, with change listeners."""

    def __init__(self, users: UserRepository):
        self.users = users
        self._state = SIGNED_OUT
        self._listeners: list[Callable[[SessionState], None]] = []

    @property
    def current(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Callable[[SessionState], None]) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns the unsubscribe handle."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_auth_state_changed(self, principal_id: Optional[str]) -> SessionState:
        if principal_id is None:
            return self._set(SIGNED_OUT)

        profile = self.users.get_by_id(principal_id)
        if profile is None:
            logger.warning("Principal %s has no profile; signing out", principal_id)
            return self._set(SIGNED_OUT)
        return self._set(SessionState(principal_id, profile))

    def sign_out(self) -> SessionState:
        return self.on_auth_state_changed(None)

    def _set(self, state: SessionState) -> SessionState:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return state
