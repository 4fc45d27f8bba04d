"""
Database engine and session management.

Builds the SQLAlchemy engine and session factory backing the durable
key-value store. Nothing is created at import time; callers build an
engine once per storefront session and pass it along.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from comicverse.config import settings
from comicverse.models.db import Base


def create_db_engine(database_url: str | None = None) -> Engine:
    """Create an engine for ``database_url`` (defaults to the configured URL)."""
    return create_engine(
        database_url or settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to ``engine``."""
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,
    )


@contextmanager
def get_session(factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Provide a transactional session.

    Usage:
        factory = create_session_factory(create_db_engine())
        with get_session(factory) as session:
            put_record(session, "default", "comicverse_cart", "[]")

    Commits on normal exit, rolls back on a database error.
    """
    with factory() as session:
        try:
            yield session
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            raise


def init_db(bind: Engine) -> None:
    """
    Initialize database tables.

    Creates all tables defined in the ORM models.
    Should be called once per session before the store is used.
    """
    Base.metadata.create_all(bind)


def drop_db(bind: Engine) -> None:
    """
    Drop all database tables.

    WARNING: Destroys all data. Use only for testing.
    """
    Base.metadata.drop_all(bind)
