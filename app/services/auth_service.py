"""
Authentication service.

Email/password identity service: sign-up writes a credential and the
profile keyed by the new principal id; sign-in checks the password and
opens a session, which fails when the profile no longer exists.
"""

import logging
import uuid
from datetime import timedelta
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.core.errors import AuthError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.changes import ChangeFeed
from app.db.repositories.credential import CredentialRepository
from app.db.repositories.user import UserRepository
from app.models.credential import Credential
from app.models.user import User, UserRole
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin
from app.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for sign-up and sign-in."""

    def __init__(self, session: Session, feed: Optional[ChangeFeed] = None):
        self.credentials = CredentialRepository(session)
        self.users = UserRepository(session, feed)

    def register(self, user_data: UserCreate) -> User:
        """
        Sign up a new principal and write its profile.

        Raises:
            AuthError: operation-not-allowed, or email-already-in-use
        """
        self._check_enabled()
        return self.create_account(user_data.email, user_data.password, name=user_data.name,
                                   phone=user_data.phone, role=UserRole(user_data.role.value), )

    def create_account(self, email: str, password: str, name: str, phone: str, role: UserRole) -> User:
        """
        Write a credential and its profile with any role.

        Not reachable from the API; public sign-up goes through
        :meth:`register`, admins are created by scripts/create_admin.py.

        Raises:
            AuthError: email-already-in-use
        """
        if self.credentials.exists_by_email(email):
            raise AuthError("email-already-in-use")

        credential = self.credentials.create(Credential(uid=uuid.uuid4().hex, email=email,
                                                        hashed_password=get_password_hash(password), ))
        logger.info("Registered principal %s as %s", credential.uid, role.value)
        return self.users.create_user_profile(credential.uid, name=name, phone=phone, email=email,
                                              role=role.value, )

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Check credentials and issue an access token.

        Raises:
            AuthError: operation-not-allowed, invalid-credential, or
                profile-not-found when the principal lost its profile
        """
        self._check_enabled()
        credential = self.credentials.get_by_email(login_data.email)
        if not credential or not verify_password(login_data.password, credential.hashed_password):
            raise AuthError("invalid-credential")

        sessions = SessionStore(self.users)
        if not sessions.on_auth_state_changed(credential.uid).signed_in:
            raise AuthError("profile-not-found")

        access_token = create_access_token(data={ "sub": credential.uid },
                                           expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
        return Token(access_token=access_token, token_type="bearer")

    @staticmethod
    def _check_enabled() -> None:
        if not settings.EMAIL_AUTH_ENABLED:
            raise AuthError("operation-not-allowed")
