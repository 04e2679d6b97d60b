"""Database handle and session management."""

import logging
from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


class Database:
    """Owns the engine and session factory for one database.

    Built by the application lifespan and disposed on shutdown; tests build
    their own instance against a throwaway database.
    """

    def __init__(self, url: str, **engine_kwargs: Any):
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)

        self.url = url
        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        """Open a new session bound to this database."""
        return self.session_factory()

    def create_all(self) -> None:
        """Create all tables registered on ``Base``."""
        # Import all models here so they are registered with Base.metadata
        from pantry_tracker import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("Disposing database engine")
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency that returns the handle owned by the running app."""
    return request.app.state.database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = database.session()
    try:
        yield db
    finally:
        db.close()
