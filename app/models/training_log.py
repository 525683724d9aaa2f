"""
Training log database model.

One record per athlete per calendar day.  The primary key is the
composite ``{user_id}_{date}`` so writing the same day twice replaces
the earlier record.  Per-category minutes are stored as JSON.
"""

import datetime
from enum import Enum

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.models.timestamps import created_at_field


class TrainingCategory(str, Enum):
    """Fixed training categories, in display and export order."""

    STRETCHING = "stretching"
    CARDIO = "cardio"
    STRENGTH = "strength"
    SKILL = "skill"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[TrainingCategory, str] = {
    TrainingCategory.STRETCHING: "스트레칭",
    TrainingCategory.CARDIO: "유산소",
    TrainingCategory.STRENGTH: "근력",
    TrainingCategory.SKILL: "기술",
    TrainingCategory.OTHER: "기타",
}

CATEGORY_NAMES: list[str] = [c.value for c in TrainingCategory]


def log_id(user_id: str, date: str) -> str:
    return f"{user_id}_{date}"


class TrainingLog(SQLModel, table=True):
    """A day of training minutes for one athlete.

    ``date`` is an ISO ``YYYY-MM-DD`` string; the fixed width makes plain
    string comparison equivalent to date comparison.
    ``total_duration`` equals ``sum(trainings.values())`` at write time.
    """

    __tablename__ = "training_logs"

    id: str = Field(primary_key=True, max_length=80)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    user_name: str = Field(default="", max_length=100)
    date: str = Field(nullable=False, max_length=10)

    trainings: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    total_duration: int = Field(default=0, nullable=False)

    created_at: datetime.datetime = created_at_field()
