"""
Training log repository.

Handles database operations for :class:`TrainingLog`, including the
live subscription on an athlete's own logs and the best-effort
cascade used when a user is deleted.
"""

import logging
from typing import Callable, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import DELETE_FAILED_MESSAGE, READ_FAILED_MESSAGE, WRITE_FAILED_MESSAGE, DataError
from app.db.changes import TRAINING_LOGS, ChangeFeed, Subscription
from app.models.timestamps import utcnow
from app.models.training_log import CATEGORY_NAMES, TrainingLog, log_id

logger = logging.getLogger(__name__)


class TrainingLogRepository:
    """Repository for TrainingLog database operations."""

    def __init__(self, session: Session, feed: Optional[ChangeFeed] = None):
        self.session = session
        self.feed = feed or ChangeFeed()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_log(self, user_id: str, date: str) -> Optional[TrainingLog]:
        try:
            return self.session.get(TrainingLog, log_id(user_id, date))
        except SQLAlchemyError as e:
            logger.error("Error fetching log %s/%s: %s", user_id, date, e)
            raise DataError(READ_FAILED_MESSAGE) from e

    def fetch_logs_for_user(self, user_id: str) -> list[TrainingLog]:
        """All logs of ``user_id``, in no particular order."""
        try:
            statement = select(TrainingLog).where(TrainingLog.user_id == user_id)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.error("Error fetching logs for %s: %s", user_id, e)
            raise DataError(READ_FAILED_MESSAGE) from e

    def subscribe_own_logs(self, user_id: str, on_change: Callable[[list[TrainingLog]], None],
                           on_error: Optional[Callable[[Exception], None]] = None, ) -> Subscription[TrainingLog]:
        """Live view of ``user_id``'s logs, newest date first.

        ``on_change`` receives the full set now and after every write to
        the collection.  Query failures go to ``on_error``; nothing is
        retried here.
        """
        engine = self.session.get_bind()

        def query() -> list[TrainingLog]:
            with Session(engine) as session:
                logs = TrainingLogRepository(session).fetch_logs_for_user(user_id)
            return sorted(logs, key=lambda log: log.date, reverse=True)

        return self.feed.watch(TRAINING_LOGS, query, on_change, on_error)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def upsert_log(self, user_id: str, date: str, trainings: Mapping[str, int], user_name: str = "", ) -> TrainingLog:
        """Write the log for ``(user_id, date)``, replacing any earlier one.

        Every category is stored, missing ones as 0.  No concurrency
        check: the last write wins.
        """
        minutes = { name: int(trainings.get(name, 0) or 0) for name in CATEGORY_NAMES }
        entry = TrainingLog(id=log_id(user_id, date), user_id=user_id, user_name=user_name, date=date,
                            trainings=minutes, total_duration=sum(minutes.values()),
                            created_at=utcnow(), )
        try:
            entry = self.session.merge(entry)
            self.session.commit()
            self.session.refresh(entry)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Error saving log %s/%s: %s", user_id, date, e)
            raise DataError(WRITE_FAILED_MESSAGE) from e
        self.feed.publish(TRAINING_LOGS)
        return entry

    def delete_all_logs_for_user(self, user_id: str) -> int:
        """Delete every log of ``user_id`` one record at a time.

        Not atomic: a failure part-way leaves the earlier deletions in
        place.  Returns the number of logs deleted.
        """
        deleted = 0
        try:
            for entry in self.fetch_logs_for_user(user_id):
                self.session.delete(entry)
                self.session.commit()
                deleted += 1
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Error deleting logs for %s after %d deletions: %s", user_id, deleted, e)
            raise DataError(DELETE_FAILED_MESSAGE) from e
        finally:
            if deleted:
                self.feed.publish(TRAINING_LOGS)
        return deleted
