"""
Credential database model.

Email/password principals managed by the identity service.  Deleting a
profile leaves the credential in place; signing in with it afterwards
finds no profile and the session is dropped.
"""

from datetime import datetime

from sqlmodel import Field, SQLModel

from app.models.timestamps import created_at_field


class Credential(SQLModel, table=True):
    __tablename__ = "credentials"

    uid: str = Field(primary_key=True, max_length=64)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    created_at: datetime = created_at_field()
