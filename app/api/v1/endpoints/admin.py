"""
Administration endpoints.

User management: listing by role and deletion with log cascade.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_feed, require_admin
from app.db.changes import ChangeFeed
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import RoleGroup
from app.services.user_service import UserService

router = APIRouter()


@router.get("/users", summary="All users grouped by role.", response_model=list[RoleGroup], )
def list_users(db: Session = Depends(get_db), user: User = Depends(require_admin), ):
    return UserService(db).grouped_users()


@router.delete("/users/{user_id}", summary="Delete a user and all of their training logs.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_user(user_id: str, db: Session = Depends(get_db), feed: ChangeFeed = Depends(get_feed),
                user: User = Depends(require_admin), ):
    """
    Delete the profile, then each of its logs.

    The credential is kept; the account can no longer open a session.
    """
    UserService(db, feed).delete_user(user_id)
