"""
Training log API schemas.

Minutes are keyed by category name (see :class:`TrainingCategory`).
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.training_log import TrainingCategory


class TrainingLogUpsert(BaseModel):
    """Minutes per category for one day.  Omitted categories count as 0."""

    trainings: dict[TrainingCategory, int] = Field(
        ..., description="Minutes per category, e.g. {'cardio': 30}"
    )

    @field_validator("trainings")
    @classmethod
    def _check_minutes(cls, value: dict[TrainingCategory, int]) -> dict[TrainingCategory, int]:
        if any(minutes < 0 for minutes in value.values()):
            raise ValueError("훈련 시간은 0분 이상이어야 합니다.")
        if not any(minutes > 0 for minutes in value.values()):
            raise ValueError("하나 이상의 훈련 시간을 입력하세요.")
        return value

    def minutes(self) -> dict[str, int]:
        return { category.value: self.trainings.get(category, 0) for category in TrainingCategory }


class TrainingLogResponse(BaseModel):
    """Schema for a training log in API responses."""

    id: str
    user_id: str
    user_name: str
    date: datetime.date
    trainings: dict[str, int]
    total_duration: int
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class WeekDay(BaseModel):
    date: datetime.date
    day_name: str
    log: Optional[TrainingLogResponse] = None


class WeekSummaryResponse(BaseModel):
    """One Monday–Sunday week of logs."""

    start: datetime.date
    end: datetime.date
    total_duration: int = Field(..., description="Sum of total_duration over the week")
    logs: list[TrainingLogResponse] = Field(..., description="Logs in the week, oldest first")
    days: list[WeekDay]
