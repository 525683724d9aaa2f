"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token
from app.schemas.user import RoleGroup, UserCreate, UserLogin, UserResponse
from app.schemas.training_log import (
    TrainingLogResponse,
    TrainingLogUpsert,
    WeekDay,
    WeekSummaryResponse,
)

__all__ = [
    "Token",
    "RoleGroup",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "TrainingLogResponse",
    "TrainingLogUpsert",
    "WeekDay",
    "WeekSummaryResponse",
]
