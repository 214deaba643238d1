"""
Database configuration and session management.

This module builds the SQLAlchemy engine and session factory for an
application instance and provides the request-scoped session dependency.
"""

import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool

from app.config import DatabaseConfig

logger = logging.getLogger(__name__)

# Base class for all models (using SQLAlchemy 2.0 style)
Base = declarative_base()


# Enable foreign key constraints for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints on SQLite connections."""
    if dbapi_conn.__class__.__module__.startswith("sqlite3"):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(config: DatabaseConfig) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database URL.

    In-memory SQLite URLs share a single connection so every session
    sees the same database.
    """
    kwargs = {"echo": config.ECHO_SQL}
    if config.DATABASE_URL.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}  # Needed for SQLite
        if config.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(config.DATABASE_URL, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to an engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Session:
    """
    Dependency function to get database session.

    Yields:
        Session: Database session that will be automatically closed.

    Usage:
        @router.get("/users")
        async def list_users(db: Session = Depends(get_db)):
            return db.query(User).all()
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """
    Initialise the database.

    Creates all tables defined in the models if they don't exist.
    This is called on application startup.
    """
    # Import all models here so they are registered with Base
    from app.models import user, blog  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialised at {engine.url.render_as_string(hide_password=True)}")
