"""Timestamp columns shared by the tables.

Timestamps are timezone-aware UTC; the columns are declared
``DateTime(timezone=True)`` so aware values are accepted on write.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def created_at_field():
    return Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
