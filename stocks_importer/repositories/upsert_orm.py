"""Idempotent writes for dependent tables.

Two reconciliation policies:

- ``upsert``: INSERT ... ON CONFLICT(natural key) DO UPDATE every non-key
  column, stamping ``last_updated``. Rows not in the batch are kept.
- ``replace``: DELETE every row of the symbol, then insert the batch.
  Periods that disappeared upstream disappear locally, and an empty
  batch leaves the symbol with no rows.

Each call runs in one transaction. A failing statement rolls the whole
call back and raises ``UpsertError`` carrying table, key and record.
Driver errors raised outside SQLAlchemy's wrapping (an integer too large
for SQLite, an unbindable value) are treated the same way.

Usage:
    executor = UpsertExecutor(db)
    await executor.upsert(FundOwnership, ("symbol", "report_date", "organization"), records)
    await executor.replace(RecommendationTrend, "AAPL", records)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stocks_importer.core.exceptions import UpsertError
from stocks_importer.core.logging import get_logger
from stocks_importer.database.connection import Database
from stocks_importer.database.orm import Base


Record = dict[str, Any]

# sqlite3 raises these directly while binding parameters
WRITE_ERRORS: tuple[type[Exception], ...] = (SQLAlchemyError, OverflowError, TypeError, ValueError)


class UpsertExecutor:
    """Writes mapped records through a ``Database``."""

    def __init__(self, db: Database, logger: logging.Logger | None = None):
        self.db = db
        self.logger = logger or get_logger("repositories.upsert")

    async def upsert(
        self,
        model: type[Base],
        natural_key: Sequence[str],
        records: Sequence[Record],
    ) -> int:
        """Insert or update ``records`` by ``natural_key``. Returns rows written."""
        if not records:
            return 0

        now = datetime.now(UTC)
        current: Record | None = None
        async with self.db.session() as session:
            try:
                for record in records:
                    current = record
                    await self._write(session, model, natural_key, record, now)
                await session.commit()
            except WRITE_ERRORS as e:
                raise self._failure(model, natural_key, current, e) from e

        return len(records)

    async def replace(
        self,
        model: type[Base],
        symbol: str,
        records: Sequence[Record],
        natural_key: Sequence[str] | None = None,
    ) -> int:
        """Delete the symbol's rows then insert ``records``, atomically.

        An empty batch still clears the symbol's rows. With a ``natural_key``,
        duplicates inside the batch collapse to the last one.
        """
        now = datetime.now(UTC)
        current: Record | None = None
        symbol_column = model.__table__.c.symbol
        async with self.db.session() as session:
            try:
                result = await session.execute(delete(model).where(symbol_column == symbol))
                self.logger.debug(f"Cleared {result.rowcount} {model.__tablename__} rows for {symbol}")
                for record in records:
                    current = record
                    await self._write(session, model, natural_key, record, now)
                await session.commit()
            except WRITE_ERRORS as e:
                raise self._failure(model, natural_key, current, e) from e

        return len(records)

    async def _write(
        self,
        session: AsyncSession,
        model: type[Base],
        natural_key: Sequence[str] | None,
        record: Record,
        now: datetime,
    ) -> None:
        values = {**record, "last_updated": now}
        stmt = sqlite_insert(model).values(**values)
        if natural_key is None:
            await session.execute(stmt)
            return
        stmt = stmt.on_conflict_do_update(
            index_elements=list(natural_key),
            set_={column: stmt.excluded[column] for column in values if column not in natural_key},
        )
        await session.execute(stmt)

    def _failure(
        self,
        model: type[Base],
        natural_key: Sequence[str] | None,
        record: Record | None,
        cause: Exception,
    ) -> UpsertError:
        table = model.__tablename__
        record = record or {}
        key_columns = natural_key if natural_key is not None else ("symbol",)
        key = {column: record.get(column) for column in key_columns}
        self.logger.error(
            f"Write to {table} failed for {key}: {cause}",
            extra={"extra_fields": {"table": table, "key": key, "record": record}},
        )
        return UpsertError(table, key, record, cause)
