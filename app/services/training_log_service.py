"""
Training log service.

Athletes write and read their own logs; coaches and admins read any
athlete's week and export an athlete's full history as CSV.
"""

import datetime
from typing import Optional, Sequence

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.changes import ChangeFeed
from app.db.repositories.training_log import TrainingLogRepository
from app.db.repositories.user import UserRepository
from app.logbook.export import export_filename, to_csv
from app.logbook.week import summarize_week
from app.models.training_log import TrainingLog
from app.models.user import User, UserRole
from app.schemas.training_log import TrainingLogResponse, TrainingLogUpsert, WeekDay, WeekSummaryResponse


class TrainingLogService:
    """Service for training log business logic."""

    def __init__(self, session: Session, feed: Optional[ChangeFeed] = None):
        self.repository = TrainingLogRepository(session, feed)
        self.users = UserRepository(session, feed)

    def upsert(self, user: User, date: datetime.date, data: TrainingLogUpsert) -> TrainingLogResponse:
        entry = self.repository.upsert_log(user.id, date.isoformat(), data.minutes(), user_name=user.name)
        return TrainingLogResponse.model_validate(entry)

    def list_own(self, user_id: str) -> list[TrainingLogResponse]:
        """Every log of the user, newest first."""
        logs = sorted(self.repository.fetch_logs_for_user(user_id), key=lambda log: log.date, reverse=True)
        return [TrainingLogResponse.model_validate(log) for log in logs]

    def week(self, user_id: str, today: datetime.date) -> WeekSummaryResponse:
        # Date range is applied here; the query filters on user_id only
        return self._to_week_response(self.repository.fetch_logs_for_user(user_id), today)

    def athlete_week(self, athlete_id: str, today: datetime.date) -> WeekSummaryResponse:
        self._get_athlete(athlete_id)
        return self.week(athlete_id, today)

    def export(self, athlete_id: str) -> tuple[str, str]:
        """
        CSV of an athlete's full history, oldest first.

        Returns:
            (filename, csv text)

        Raises:
            HTTPException 404: Unknown athlete, or nothing to export
        """
        athlete = self._get_athlete(athlete_id)
        logs = sorted(self.repository.fetch_logs_for_user(athlete_id), key=lambda log: log.date)
        if not logs:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="내보낼 데이터가 없습니다.")
        return export_filename(athlete.name), to_csv(logs)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_athlete(self, athlete_id: str) -> User:
        athlete = self.users.get_by_id(athlete_id)
        if not athlete or athlete.role != UserRole.ATHLETE.value:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found")
        return athlete

    @staticmethod
    def _to_week_response(logs: Sequence[TrainingLog], today: datetime.date) -> WeekSummaryResponse:
        summary = summarize_week(list(logs), today)
        return WeekSummaryResponse(
            start=summary.range.start, end=summary.range.end, total_duration=summary.total_duration,
            logs=[TrainingLogResponse.model_validate(log) for log in summary.logs],
            days=[WeekDay(date=iso, day_name=name, log=TrainingLogResponse.model_validate(log) if log else None)
                  for iso, name, log in summary.days], )
