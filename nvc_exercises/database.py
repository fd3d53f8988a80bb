"""Database configuration and session management."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


class Database:
    """
    Owned storage handle shared by the credential store and the content repository.

    The surrounding process decides when the handle is opened and closed:
    the FastAPI lifespan for the server, the command itself for the CLI.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_open(self) -> bool:
        """Whether the engine has been created and not yet disposed."""
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database not open. Call open() first.")
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            raise RuntimeError("Database not open. Call open() first.")
        return self._session_factory

    def open(self) -> None:
        """Create the engine and session factory."""
        if self._engine is not None:
            return

        url = make_url(self.url)
        if url.get_backend_name() == "sqlite":
            in_memory = url.database in (None, "", ":memory:")
            if not in_memory:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            self._engine = create_engine(
                self.url,
                connect_args={"check_same_thread": False},
                # A single shared connection keeps an in-memory database alive
                poolclass=StaticPool if in_memory else None,
            )
        else:
            self._engine = create_engine(
                self.url,
                pool_size=10,
                max_overflow=20,
                pool_pre_ping=True,
                pool_recycle=3600,
            )

        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        logger.info(f"Opened database {url.render_as_string(hide_password=True)}")

    def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        # Import models so their tables are registered on Base.metadata
        from nvc_exercises import models  # noqa: F401, PLC0415

        Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        """Dispose the engine; the handle may be reopened afterwards."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Closed database")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that is closed when the block exits."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()


def get_database(request: Request) -> Database:
    """Get the database handle owned by the running application."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not attached to the application.")
    return database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """Get database session."""
    with database.session() as db:
        yield db


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
