"""
Database configuration and session management with SQLAlchemy.

Design Decisions:
- Synchronous engine and sessions; batches run sequentially
- Engine created lazily from settings so tests can swap the URL
- In-memory SQLite shares a single connection (StaticPool)
- Session-per-operation pattern with rollback on error
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import DateTime, Engine, Numeric, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from invoicesync.config import get_settings
from invoicesync.domain.models import DECIMAL_PLACES, MAX_INTEGER_DIGITS

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class InvoiceRecord(Base):
    """
    Stored invoice row.

    Rows are returned in primary key order, which is insertion order.
    """
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )
    customer: Mapped[str] = mapped_column(String(256), index=True)
    value: Mapped[Decimal] = mapped_column(
        Numeric(MAX_INTEGER_DIGITS + DECIMAL_PLACES, DECIMAL_PLACES)
    )


# Engine and session factory (initialized lazily)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    """Pool options for the given backend."""
    if database_url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_pre_ping": True,
    }


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            settings.database_url,
            echo=settings.debug,
            **_engine_options(settings.database_url),
        )
        logger.info(f"Database engine created for {_engine.url.get_backend_name()}")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get the session factory for creating database sessions."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            get_engine(),
            expire_on_commit=False,
        )
    return _session_factory


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """
    Get a database session.

    Usage:
        with get_session() as session:
            session.add(record)
            session.commit()
    """
    factory = get_session_factory()
    session = factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """
    Initialize database tables.

    Call this on application startup to ensure tables exist.
    """
    Base.metadata.create_all(get_engine())
    logger.info("Database tables initialized")


def close_db() -> None:
    """Close database connections on shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
    logger.info("Database connections closed")
