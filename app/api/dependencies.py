"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, role checks and
database access.
"""

from typing import Callable, Optional

from fastapi import Depends, HTTPException, WebSocket, status
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from app.core.security import decode_access_token, oauth2_scheme
from app.db.changes import ChangeFeed
from app.db.repositories.user import UserRepository
from app.db.session import StoreClient, get_db, get_store
from app.models.user import User, UserRole
from app.services.session_store import SessionStore


def get_feed(store: StoreClient = Depends(get_store)) -> ChangeFeed:
    return store.feed


def get_session_store(db: Session = Depends(get_db), feed: ChangeFeed = Depends(get_feed)) -> SessionStore:
    return SessionStore(UserRepository(db, feed))


def resolve_user(token: str, sessions: SessionStore) -> Optional[User]:
    """Profile of the principal carried by ``token``, or None when there is no session."""
    uid = decode_access_token(token)
    if not uid:
        return None
    return sessions.on_auth_state_changed(uid).profile


def get_current_user(token: str = Depends(oauth2_scheme), sessions: SessionStore = Depends(get_session_store), ) -> User:
    """Extract and validate the current user from the JWT token."""
    uid = decode_access_token(token)
    if not uid:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    user = sessions.on_auth_state_changed(uid).profile
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return user


def require_roles(*roles: UserRole) -> Callable[..., User]:
    """Dependency factory: the current user, provided it holds one of ``roles``."""
    allowed = { role.value for role in roles }

    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed for this role")
        return user

    return checker


require_athlete = require_roles(UserRole.ATHLETE)
require_staff = require_roles(UserRole.COACH, UserRole.ADMIN)
require_admin = require_roles(UserRole.ADMIN)


async def authenticate_websocket(websocket: WebSocket, token: str, store: StoreClient, *roles: UserRole) -> Optional[User]:
    """Resolve ``token`` for a WebSocket handshake.

    Closes the socket with a policy-violation code and returns None when
    there is no session or the role is not allowed.
    """

    def resolve() -> Optional[User]:
        with store.session() as db:
            return resolve_user(token, SessionStore(UserRepository(db, store.feed)))

    user = await run_in_threadpool(resolve)
    if user is None or user.role not in { role.value for role in roles }:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return None
    return user
