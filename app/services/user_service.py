"""
User service.

Profile listings for coaches and the admin panel, and user deletion.
"""

from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.changes import ChangeFeed
from app.db.repositories.user import UserRepository
from app.models.user import User, UserRole
from app.schemas.user import RoleGroup, UserResponse


# Order of the sections in the admin panel
ROLE_ORDER = (UserRole.ADMIN, UserRole.COACH, UserRole.ATHLETE)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session, feed: Optional[ChangeFeed] = None):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
            feed: Change feed notified on profile and log writes
        """
        self.repository = UserRepository(session, feed)

    def list_athletes(self) -> list[User]:
        return self.repository.get_by_role(UserRole.ATHLETE.value)

    def grouped_users(self) -> list[RoleGroup]:
        """All users split into admin, coach and athlete sections."""
        users = self.repository.get_all()
        groups = []
        for role in ROLE_ORDER:
            members = [UserResponse.model_validate(u) for u in users if u.role == role.value]
            groups.append(RoleGroup(role=role, label=role.label, count=len(members), users=members))
        return groups

    def delete_user(self, user_id: str) -> None:
        """
        Delete a profile and cascade to its training logs.

        The credential is left alone; the principal can still sign in to
        the identity service but no longer gets a session.

        Raises:
            HTTPException 404: If no such profile exists
        """
        if not self.repository.delete_user(user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
