"""
Database session management.

The :class:`StoreClient` bundles the SQLModel engine with the change
feed that drives live queries.  It is constructed explicitly and handed
to the application, so tests can substitute an in-memory store.
"""

from typing import Generator, Optional

from fastapi import Depends
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine
from starlette.requests import HTTPConnection

from app.core.errors import ConfigurationError
from app.db.changes import ChangeFeed


class StoreClient:
    """Handle on the document store: engine plus change feed."""

    def __init__(self, engine: Engine, feed: Optional[ChangeFeed] = None):
        self.engine = engine
        self.feed = feed or ChangeFeed()

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "StoreClient":
        """
        Build a client for ``url``.

        Raises:
            ConfigurationError: If the URL is empty or not understood by SQLAlchemy
        """
        if not url:
            raise ConfigurationError("DATABASE_URL is not set")
        kwargs: dict = { "echo": echo }
        if url.startswith("sqlite"):
            kwargs["connect_args"] = { "check_same_thread": False }
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(pool_pre_ping=True,  # Verify connections before using
                          pool_size=5, max_overflow=10)
        try:
            engine = create_engine(url, **kwargs)
        except (ArgumentError, ImportError) as e:
            raise ConfigurationError(f"Invalid DATABASE_URL: {e}") from e
        return cls(engine)

    @classmethod
    def in_memory(cls) -> "StoreClient":
        return cls.from_url("sqlite://")

    def session(self) -> Session:
        return Session(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_store(connection: HTTPConnection) -> StoreClient:
    """
    Store client attached to the running application.

    Raises:
        ConfigurationError: If the application started without a usable store
    """
    store = connection.app.state.store
    if store is None:
        raise connection.app.state.config_error or ConfigurationError("store is not configured")
    return store


def get_db(store: StoreClient = Depends(get_store)) -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with store.session() as session:
        yield session
