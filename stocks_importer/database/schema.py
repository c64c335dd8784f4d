"""Table lifecycle: create-if-absent and drop-and-recreate."""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from stocks_importer.core.exceptions import SchemaError
from stocks_importer.core.logging import get_logger
from stocks_importer.database.connection import Database
from stocks_importer.database.orm import Base


logger = get_logger("database.schema")


async def ensure_schema(db: Database) -> None:
    """Create every managed table, constraint and index that does not exist yet."""
    try:
        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        raise SchemaError(f"Failed to create tables: {e}") from e

    logger.info(f"Schema ready ({len(Base.metadata.tables)} tables)")


async def reset_schema(db: Database) -> None:
    """Drop every managed table (children first) and create them again."""
    try:
        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        logger.error(f"Failed to reset tables: {e}")
        raise SchemaError(f"Failed to reset tables: {e}") from e

    logger.warning(f"Schema reset: dropped and recreated {len(Base.metadata.tables)} tables")


async def list_tables(db: Database) -> list[str]:
    """Names of the tables currently present in the store."""
    async with db.engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
