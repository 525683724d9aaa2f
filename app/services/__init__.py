"""Business logic services."""

from app.services.auth_service import AuthService
from app.services.session_store import SessionState, SessionStore
from app.services.training_log_service import TrainingLogService
from app.services.user_service import UserService

__all__ = [
    "AuthService",
    "SessionState",
    "SessionStore",
    "TrainingLogService",
    "UserService",
]
