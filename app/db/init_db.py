"""
Database initialization.

Creates all tables for development and tests; production schemas are
managed by Alembic.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import StoreClient

logger = logging.getLogger(__name__)


def init_db(store: StoreClient) -> None:
    """Create every SQLModel table that does not exist yet."""
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(store.engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    from app.core.config import settings

    logging.basicConfig(level=settings.LOG_LEVEL)
    init_db(StoreClient.from_url(settings.DATABASE_URL))
