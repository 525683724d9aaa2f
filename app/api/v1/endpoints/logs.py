"""
Training log endpoints for athletes.

One log per calendar day; saving a day again replaces it.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, WebSocket
from sqlmodel import Session

from app.api.dependencies import authenticate_websocket, get_feed, require_athlete
from app.api.live import stream_snapshots
from app.db.changes import ChangeFeed
from app.db.repositories.training_log import TrainingLogRepository
from app.db.session import StoreClient, get_db, get_store
from app.models.user import User, UserRole
from app.schemas.training_log import TrainingLogResponse, TrainingLogUpsert, WeekSummaryResponse
from app.services.training_log_service import TrainingLogService

router = APIRouter()


@router.get("", summary="List own training logs, newest first.", response_model=list[TrainingLogResponse], )
def list_logs(db: Session = Depends(get_db), user: User = Depends(require_athlete), ):
    service = TrainingLogService(db)
    return service.list_own(user.id)


@router.get("/week", summary="Own logs for the Monday–Sunday week.", response_model=WeekSummaryResponse, )
def get_week(as_of: Optional[datetime.date] = Query(None, description="Any day of the week (defaults to today)"),
             db: Session = Depends(get_db), user: User = Depends(require_athlete), ):
    service = TrainingLogService(db)
    return service.week(user.id, as_of or datetime.date.today())


@router.put("/{date}", summary="Save the training log for a date.", response_model=TrainingLogResponse, )
def upsert_log(date: datetime.date, data: TrainingLogUpsert, db: Session = Depends(get_db),
               feed: ChangeFeed = Depends(get_feed), user: User = Depends(require_athlete), ):
    service = TrainingLogService(db, feed)
    return service.upsert(user, date, data)


def _serialize_logs(logs: list) -> list[dict]:
    return [TrainingLogResponse.model_validate(log).model_dump(mode="json") for log in logs]


@router.websocket("/live")
async def live_logs(websocket: WebSocket, token: str = Query(...), store: StoreClient = Depends(get_store)):
    """Stream the athlete's own logs (newest first) on every change."""
    user = await authenticate_websocket(websocket, token, store, UserRole.ATHLETE)
    if user is None:
        return
    await websocket.accept()

    def subscribe(on_change, on_error):
        with store.session() as db:
            return TrainingLogRepository(db, store.feed).subscribe_own_logs(user.id, on_change, on_error)

    await stream_snapshots(websocket, subscribe, _serialize_logs)
