from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from readiness.config.settings import settings
from readiness.core.logger import get_logger

logger = get_logger("DB")

# Lazy initialization to avoid import-time database connections
_engine = None
_SessionLocal = None


def _get_engine():
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        logger.info(f"Initializing database engine: {settings.database_url}")

        connect_args = {}
        if "sqlite" in settings.database_url.lower():
            # Record-source reads run in worker threads
            connect_args = {"check_same_thread": False}
        else:
            connect_args = {"connect_timeout": 10}

        _engine = create_engine(
            settings.database_url,
            connect_args=connect_args,
            echo=False,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        logger.info("Database engine initialized")
    return _engine


def get_engine():
    """Get or create the database engine (public API)."""
    return _get_engine()


def _get_session_local():
    """Get or create the session factory (lazy initialization)."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
        logger.info("Database session factory initialized")
    return _SessionLocal


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get database session context manager.

    Commits when the block exits cleanly and there is something to commit,
    rolls back and re-raises otherwise.
    """
    logger.debug("Creating new database session")
    session = _get_session_local()()
    try:
        yield session
        if session.dirty or session.new or session.deleted:
            session.commit()
            logger.debug("Database session committed successfully")
    except Exception as e:
        logger.error(f"Database session error, rolling back: {e}")
        session.rollback()
        raise
    finally:
        session.close()
        logger.debug("Database session closed")
