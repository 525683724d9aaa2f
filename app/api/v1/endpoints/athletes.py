"""
Athlete endpoints for coaches and admins.

Weekly view of an athlete's logs and the CSV export of their history.
"""

import datetime
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response, WebSocket
from sqlmodel import Session

from app.api.dependencies import authenticate_websocket, require_staff
from app.api.live import stream_snapshots
from app.db.repositories.user import UserRepository
from app.db.session import StoreClient, get_db, get_store
from app.logbook.export import MEDIA_TYPE
from app.models.user import User, UserRole
from app.schemas.training_log import WeekSummaryResponse
from app.schemas.user import UserResponse
from app.services.training_log_service import TrainingLogService
from app.services.user_service import UserService

router = APIRouter()


@router.get("", summary="List athletes.", response_model=list[UserResponse], )
def list_athletes(db: Session = Depends(get_db), user: User = Depends(require_staff), ):
    return UserService(db).list_athletes()


@router.get("/{athlete_id}/logs/week", summary="An athlete's logs for the Monday–Sunday week.",
            response_model=WeekSummaryResponse, )
def get_athlete_week(athlete_id: str,
                     as_of: Optional[datetime.date] = Query(None, description="Any day of the week (defaults to today)"),
                     db: Session = Depends(get_db), user: User = Depends(require_staff), ):
    service = TrainingLogService(db)
    return service.athlete_week(athlete_id, as_of or datetime.date.today())


@router.get("/{athlete_id}/logs/export", summary="Download an athlete's logs as CSV.",
            response_class=Response, responses={ 200: { "content": { "text/csv": { } } } }, )
def export_athlete_logs(athlete_id: str, db: Session = Depends(get_db), user: User = Depends(require_staff), ):
    filename, content = TrainingLogService(db).export(athlete_id)
    disposition = f"attachment; filename=\"training-log.csv\"; filename*=UTF-8''{quote(filename)}"
    return Response(content=content.encode("utf-8"), media_type=MEDIA_TYPE,
                    headers={ "Content-Disposition": disposition })


def _serialize_users(users: list) -> list[dict]:
    return [UserResponse.model_validate(u).model_dump(mode="json") for u in users]


@router.websocket("/live")
async def live_athletes(websocket: WebSocket, token: str = Query(...), store: StoreClient = Depends(get_store)):
    """Stream the athlete list on every profile change."""
    if await authenticate_websocket(websocket, token, store, UserRole.COACH, UserRole.ADMIN) is None:
        return
    await websocket.accept()

    def subscribe(on_change, on_error):
        with store.session() as db:
            return UserRepository(db, store.feed).subscribe_athletes(on_change, on_error)

    await stream_snapshots(websocket, subscribe, _serialize_users)
