"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.credential import CredentialRepository
from app.db.repositories.training_log import TrainingLogRepository

__all__ = [
    "UserRepository",
    "CredentialRepository",
    "TrainingLogRepository",
]
