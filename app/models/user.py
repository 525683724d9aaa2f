"""
User profile database model.

Profiles live apart from credentials: the identity service owns
``credentials``, the application owns ``users``.  A profile is keyed by
the principal id issued at sign-up.
"""

from datetime import datetime
from enum import Enum

from sqlmodel import Field, SQLModel

from app.models.timestamps import created_at_field


class UserRole(str, Enum):
    ATHLETE = "athlete"
    COACH = "coach"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return { "athlete": "선수", "coach": "코치", "admin": "관리자" }[self.value]


class User(SQLModel, table=True):
    """
    Account profile.

    Written once at sign-up and never mutated; deleted by an admin,
    which cascades to the user's training logs.
    """
    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(nullable=False, max_length=100)
    phone: str = Field(nullable=False, max_length=30)
    email: str = Field(index=True, max_length=255, nullable=False)
    role: str = Field(default=UserRole.ATHLETE.value, index=True, max_length=20, nullable=False,
                      sa_column_kwargs={ "server_default": UserRole.ATHLETE.value })

    # Timestamps
    created_at: datetime = created_at_field()
