"""SQLAlchemy engine, session factory and transaction scope."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from carrental.config import Settings, get_settings
from carrental.domain.exceptions import ServiceFailureError

logger = logging.getLogger(__name__)

# Failures of the store itself, as opposed to domain errors raised by callers.
_STORE_ERRORS = (SQLAlchemyError, asyncio.TimeoutError, TimeoutError, OSError)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _connect_args(async_url: str, statement_timeout: float) -> dict:
    """Driver-specific arguments that bound how long a statement may block."""
    if async_url.startswith("sqlite+aiosqlite"):
        return {"timeout": statement_timeout}
    if async_url.startswith("postgresql+asyncpg"):
        return {"command_timeout": statement_timeout}
    return {}


def _begin_immediate_on_sqlite(engine: AsyncEngine) -> None:
    """Make every SQLite transaction take the database write lock at BEGIN.

    The driver otherwise defers BEGIN to the first write, so an availability
    check and the insert that follows would not share one transaction, and
    writers in other processes could interleave between them.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """Build the async engine described by the application settings."""
    settings = settings or get_settings()
    async_url = _get_async_url(settings.database_url)
    engine = create_async_engine(
        async_url,
        echo=settings.sql_echo,
        connect_args=_connect_args(async_url, settings.db_statement_timeout),
    )
    if engine.dialect.name == "sqlite":
        _begin_immediate_on_sqlite(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
    description: str,
) -> AsyncIterator[AsyncSession]:
    """Yield a session whose work is committed on exit, or rolled back on error.

    Store failures (including commit failures and driver timeouts) are
    logged and re-raised as ``ServiceFailureError`` chained to the original
    error. Any other exception is re-raised unchanged after the rollback.

    Usage:
        async with transaction(session_factory, "inserting rent") as session:
            repo = SQLAlchemyRentRepository(session)
            ...
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except _STORE_ERRORS as exc:
            await session.rollback()
            logger.exception("Store failure when %s", description)
            raise ServiceFailureError(f"Error when {description}", exc) from exc
        except Exception:
            await session.rollback()
            raise
