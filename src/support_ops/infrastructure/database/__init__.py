"""
Database Infrastructure
=======================

Manages database connections, session lifecycle, and engine configuration.

Uses SQLAlchemy 2.0 with asyncpg for async PostgreSQL operations. The
reporting schema is owned by the ingestion side; this service maps it
read-only and never creates or migrates tables.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import func, literal_column, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.elements import ColumnElement

from support_ops.config import Settings
from support_ops.core import DatabaseUnavailableException
from support_ops.infrastructure.database.executor import QueryExecutor


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    SQLAlchemy 2.0 style using DeclarativeBase.
    All models inherit from this class.
    """
    pass


def literal_int(value: int) -> ColumnElement:
    """
    Render a trusted integer inline instead of as a bound parameter.

    Used for LIMIT/OFFSET, whose values always come from a clamped value
    object and never straight from a request string.
    """
    return literal_column(str(int(value)))


def utc_wall_clock(column: ColumnElement) -> ColumnElement:
    """
    A timestamptz column as UTC wall-clock time.

    Day and hour buckets taken from the result do not depend on the
    session TimeZone.
    """
    return func.timezone(literal_column("'UTC'"), column)


class Database:
    """
    Owns the async engine (connection pool) and the session factory.

    Created once on application startup, stored on ``app.state`` and
    disposed on shutdown.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: float = 30.0,
    ):
        # Fix asyncpg SSL: replace sslmode with ssl for asyncpg compatibility
        database_url = database_url.replace("sslmode=", "ssl=")

        self._engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,  # Verify connections before using
        )
        self._session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager for a read-only session.

        Usage:
            async with database.session() as session:
                rows = await QueryExecutor(session).fetch_all(stmt)

        Yields:
            AsyncSession: SQLAlchemy async session
        """
        async with self._session_maker() as session:
            yield session

    async def ping(self) -> None:
        """Check out a connection and run a trivial query."""
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close pooled connections. Should be called during shutdown."""
        await self._engine.dispose()


async def get_executor(request: Request) -> AsyncGenerator[QueryExecutor, None]:
    """
    FastAPI dependency yielding a query executor bound to a pooled session.

    The session is released when the request finishes, whether it succeeded
    or failed.
    """
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseUnavailableException("Database not initialized")

    async with database.session() as session:
        yield QueryExecutor(session)


__all__ = [
    "Base",
    "Database",
    "QueryExecutor",
    "get_executor",
    "literal_int",
    "utc_wall_clock",
]
