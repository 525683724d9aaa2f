"""
User repository.

Handles database operations for User profiles, their live
subscriptions, and the delete that cascades to training logs.
"""

import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import DELETE_FAILED_MESSAGE, READ_FAILED_MESSAGE, DataError
from app.db.changes import USERS, ChangeFeed, Subscription
from app.db.repositories.training_log import TrainingLogRepository
from app.models.user import User, UserRole

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session, feed: Optional[ChangeFeed] = None):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
            feed: Change feed shared with the other repositories
        """
        self.session = session
        self.feed = feed or ChangeFeed()

    def create_user_profile(self, uid: str, name: str, phone: str, email: str, role: str) -> User:
        """
        Write the profile of a freshly signed-up principal.

        Args:
            uid: Principal id issued by the identity service
            name: Display name
            phone: Phone number
            email: Sign-in email
            role: One of athlete, coach, admin

        Returns:
            Created profile
        """
        user = User(id=uid, name=name, phone=phone, email=email, role=UserRole(role).value)
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Error creating profile %s: %s", uid, e)
            raise DataError() from e
        self.feed.publish(USERS)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a profile by principal id.

        Returns:
            User instance if found, None otherwise
        """
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error("Error fetching profile %s: %s", user_id, e)
            raise DataError(READ_FAILED_MESSAGE) from e

    def get_all(self) -> list[User]:
        return self._query(select(User))

    def get_by_role(self, role: str) -> list[User]:
        return self._query(select(User).where(User.role == role))

    def subscribe_all_users(self, on_change: Callable[[list[User]], None],
                            on_error: Optional[Callable[[Exception], None]] = None, ) -> Subscription[User]:
        engine = self.session.get_bind()

        def query() -> list[User]:
            with Session(engine) as session:
                return UserRepository(session).get_all()

        return self.feed.watch(USERS, query, on_change, on_error)

    def subscribe_athletes(self, on_change: Callable[[list[User]], None],
                           on_error: Optional[Callable[[Exception], None]] = None, ) -> Subscription[User]:
        engine = self.session.get_bind()

        def query() -> list[User]:
            with Session(engine) as session:
                return UserRepository(session).get_by_role(UserRole.ATHLETE.value)

        return self.feed.watch(USERS, query, on_change, on_error)

    def delete_user(self, user_id: str) -> bool:
        """
        Delete a profile, then every log it owns.

        The profile goes first; if the cascade fails part-way the
        remaining logs stay behind without an owner.

        Returns:
            True if the profile existed, False if not found
        """
        user = self.get_by_id(user_id)
        if not user:
            return False
        try:
            self.session.delete(user)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Error deleting profile %s: %s", user_id, e)
            raise DataError(DELETE_FAILED_MESSAGE) from e
        self.feed.publish(USERS)

        deleted = TrainingLogRepository(self.session, self.feed).delete_all_logs_for_user(user_id)
        logger.info("Deleted user %s and %d training logs", user_id, deleted)
        return True

    def _query(self, statement) -> list[User]:
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.error("Error fetching profiles: %s", e)
            raise DataError(READ_FAILED_MESSAGE) from e
