"""
Authentication endpoints.

Handles sign-up and sign-in against the identity service.
"""

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_feed
from app.db.changes import ChangeFeed
from app.db.session import get_db
from app.models.user import User
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin, UserResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register",
             summary="Sign-up endpoint.",
             response_model=UserResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db), feed: ChangeFeed = Depends(get_feed)):
    """
    Register a new principal and write its profile.

    Args:
        user_data: Email, password, name, phone and role (athlete or coach)
        db: Database session
        feed: Change feed (profile listings update live)

    Returns:
        Created profile

    Raises:
        AuthError: email-already-in-use or operation-not-allowed
    """
    service = AuthService(db, feed)
    return service.register(user_data)


@router.post("/login",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Authenticate user via OAuth2 form (for Swagger UI).

    Use email as username.
    """
    service = AuthService(db)
    login_data = UserLogin(email=form_data.username, password=form_data.password)
    return service.authenticate(login_data)


@router.post("/token",
             summary="User login endpoint via Json.",
             response_model=Token)
def login_json(login_data: UserLogin, db: Session = Depends(get_db)):
    service = AuthService(db)
    return service.authenticate(login_data)


@router.get("/me",
            summary="Profile of the signed-in user.",
            response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
