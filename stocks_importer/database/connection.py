"""SQLite database handle using the SQLAlchemy async engine over aiosqlite.

The importer is a single-writer batch job, so one ``Database`` owns one
engine bound to a single connection (``StaticPool``). Its lifetime is scoped
explicitly:

    from stocks_importer.database.connection import open_database

    async with open_database("resources/stocks.db") as db:
        async with db.session() as session:
            stock = await session.get(Stock, "AAPL")

Tests build an in-memory handle directly:

    db = Database(get_sqlite_url(":memory:"))
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from stocks_importer.core.exceptions import StorageError
from stocks_importer.core.logging import get_logger


logger = get_logger("database")


# =============================================================================
# DATABASE URL UTILITIES
# =============================================================================

def get_sqlite_url(path: str) -> str:
    """Build an async SQLAlchemy URL for a SQLite file (or ``:memory:``)."""
    if path == ":memory:":
        return "sqlite+aiosqlite:///:memory:"
    return f"sqlite+aiosqlite:///{path}"


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores ON DELETE CASCADE unless this pragma is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# =============================================================================
# DATABASE HANDLE
# =============================================================================


class Database:
    """Owns the async engine and session factory for one SQLite store."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self._engine: AsyncEngine | None = create_async_engine(
            url,
            poolclass=StaticPool,
            echo=echo,
        )
        event.listen(self._engine.sync_engine, "connect", _enable_foreign_keys)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StorageError(f"Database {self.url} is closed")
        return self._engine

    @property
    def is_closed(self) -> bool:
        return self._engine is None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Get a session; rolled back if the block raises.

        Usage:
            async with db.session() as session:
                await session.execute(stmt)
                await session.commit()
        """
        if self._engine is None:
            raise StorageError(f"Database {self.url} is closed")

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        """Open the connection once so a bad path fails before any work starts."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot open database {self.url}: {e}") from e

    async def dispose(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database connection closed")

    async def __aenter__(self) -> Database:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()


def ensure_database_dir(path: str) -> None:
    """Create the directory holding the SQLite file if it does not exist."""
    if path == ":memory:":
        return

    db_dir = Path(path).parent
    if db_dir.exists():
        return

    try:
        db_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create directory for database: {db_dir}")
        raise StorageError(f"Cannot create database directory {db_dir}: {e}") from e
    logger.info(f"Created directory for database: {db_dir}")


@asynccontextmanager
async def open_database(path: str, echo: bool = False) -> AsyncIterator[Database]:
    """Open the store at ``path`` and guarantee it is closed on every exit path."""
    ensure_database_dir(path)
    db = Database(get_sqlite_url(path), echo=echo)
    try:
        await db.ping()
        logger.info(f"Opened database {path}")
        yield db
    finally:
        await db.dispose()
