"""
User API schemas.

Pydantic models for sign-up, sign-in and profile responses.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field

from app.models.user import UserRole


class SignUpRole(str, Enum):
    """Roles open to public sign-up; admins are created with scripts/create_admin.py."""
    ATHLETE = UserRole.ATHLETE.value
    COACH = UserRole.COACH.value


# Request schemas
class UserCreate(BaseModel):
    """Schema for sign-up: credentials plus the profile fields."""
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=30)
    role: SignUpRole = SignUpRole.ATHLETE


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


# Response schemas
class UserResponse(BaseModel):
    """Profile in API responses (no credentials)."""
    id: str
    name: str
    phone: str
    email: str
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects


class RoleGroup(BaseModel):
    """Users of one role, as listed in the admin panel."""
    role: UserRole
    label: str
    count: int
    users: list[UserResponse]
