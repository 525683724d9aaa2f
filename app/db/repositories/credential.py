"""Credential repository for the identity service."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import AuthError, DataError
from app.models.credential import Credential

logger = logging.getLogger(__name__)


class CredentialRepository:
    """Repository for Credential database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_email(self, email: str) -> Optional[Credential]:
        try:
            statement = select(Credential).where(Credential.email == email)
            return self.session.exec(statement).first()
        except SQLAlchemyError as e:
            logger.error("Error fetching credential: %s", e)
            raise DataError() from e

    def create(self, credential: Credential) -> Credential:
        try:
            self.session.add(credential)
            self.session.commit()
            self.session.refresh(credential)
        except IntegrityError as e:
            self.session.rollback()
            raise AuthError("email-already-in-use") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Error creating credential: %s", e)
            raise DataError() from e
        return credential

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None
