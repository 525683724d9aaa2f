"""SQLModel database models."""

from app.models.user import User, UserRole
from app.models.credential import Credential
from app.models.training_log import TrainingCategory, TrainingLog

__all__ = [
    "User",
    "UserRole",
    "Credential",
    "TrainingCategory",
    "TrainingLog",
]
