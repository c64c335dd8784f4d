"""Symbol record repository using SQLAlchemy ORM.

Usage:
    from stocks_importer.repositories import symbols_orm as symbols

    await symbols.upsert_symbol(db, "AAPL", "day_gainers", "Day Gainers")
    stock = await symbols.get_symbol(db, "AAPL")
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stocks_importer.core.exceptions import UpsertError
from stocks_importer.core.logging import get_logger
from stocks_importer.database.connection import Database
from stocks_importer.database.orm import Base, Stock
from stocks_importer.repositories.upsert_orm import WRITE_ERRORS


logger = get_logger("repositories.symbols_orm")


# =============================================================================
# INTERNAL ORM REPOSITORY FUNCTIONS (session-managed)
# =============================================================================

async def _get_symbol(session: AsyncSession, symbol: str) -> Stock | None:
    result = await session.execute(
        select(Stock).where(Stock.symbol == symbol.upper())
    )
    return result.scalar_one_or_none()


async def _list_symbols(session: AsyncSession, category_id: str | None = None) -> Sequence[Stock]:
    query = select(Stock).order_by(Stock.symbol)
    if category_id is not None:
        query = query.where(Stock.category_id == category_id)
    result = await session.execute(query)
    return result.scalars().all()


async def _upsert_symbol(
    session: AsyncSession,
    symbol: str,
    category_id: str,
    category_name: str,
    company_name: str | None = None,
) -> None:
    """Create or refresh a symbol record; a known company name is never blanked."""
    now = datetime.now(UTC)
    stmt = sqlite_insert(Stock).values(
        symbol=symbol.upper(),
        company_name=company_name,
        category_id=category_id,
        category_name=category_name,
        last_updated=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Stock.symbol],
        set_={
            "category_id": stmt.excluded.category_id,
            "category_name": stmt.excluded.category_name,
            "company_name": func.coalesce(stmt.excluded.company_name, Stock.company_name),
            "last_updated": now,
        },
    )
    await session.execute(stmt)


async def _update_symbol_snapshot(
    session: AsyncSession,
    symbol: str,
    company_name: str | None,
    market_price: float | None,
    market_cap: int | None,
) -> bool:
    values = {
        "market_price": market_price,
        "market_cap": market_cap,
        "last_updated": datetime.now(UTC),
    }
    if company_name is not None:
        values["company_name"] = company_name

    result = await session.execute(
        update(Stock).where(Stock.symbol == symbol.upper()).values(**values)
    )
    return result.rowcount > 0


async def _delete_symbol(session: AsyncSession, symbol: str) -> bool:
    result = await session.execute(
        delete(Stock).where(Stock.symbol == symbol.upper())
    )
    return result.rowcount > 0


async def _count_rows(session: AsyncSession, model: type[Base], symbol: str | None = None) -> int:
    query = select(func.count()).select_from(model)
    if symbol is not None:
        query = query.where(model.__table__.c.symbol == symbol.upper())
    result = await session.execute(query)
    return result.scalar() or 0


# =============================================================================
# PUBLIC API FUNCTIONS (manage their own sessions)
# =============================================================================

async def get_symbol(db: Database, symbol: str) -> Stock | None:
    """Get a symbol record by ticker."""
    async with db.session() as session:
        return await _get_symbol(session, symbol)


async def list_symbols(db: Database, category_id: str | None = None) -> Sequence[Stock]:
    """List symbol records, optionally for one category."""
    async with db.session() as session:
        return await _list_symbols(session, category_id)


async def upsert_symbol(
    db: Database,
    symbol: str,
    category_id: str,
    category_name: str,
    company_name: str | None = None,
) -> None:
    """Create or refresh the root record every dependent row hangs off."""
    async with db.session() as session:
        try:
            await _upsert_symbol(session, symbol, category_id, category_name, company_name)
            await session.commit()
        except WRITE_ERRORS as e:
            record = {
                "symbol": symbol,
                "category_id": category_id,
                "category_name": category_name,
                "company_name": company_name,
            }
            logger.error(f"Failed to upsert symbol {symbol}: {e}")
            raise UpsertError(Stock.__tablename__, {"symbol": symbol}, record, e) from e


async def update_symbol_snapshot(
    db: Database,
    symbol: str,
    company_name: str | None,
    market_price: float | None,
    market_cap: int | None,
) -> bool:
    """Refresh name, price and market cap from the latest ``price`` module."""
    async with db.session() as session:
        try:
            updated = await _update_symbol_snapshot(session, symbol, company_name, market_price, market_cap)
            await session.commit()
        except WRITE_ERRORS as e:
            logger.error(f"Failed to refresh snapshot for {symbol}: {e}")
            raise UpsertError(
                Stock.__tablename__,
                {"symbol": symbol},
                {"company_name": company_name, "market_price": market_price, "market_cap": market_cap},
                e,
            ) from e
    return updated


async def delete_symbol(db: Database, symbol: str) -> bool:
    """Purge a symbol; the database cascades to every dependent table."""
    async with db.session() as session:
        deleted = await _delete_symbol(session, symbol)
        await session.commit()
    if deleted:
        logger.info(f"Deleted {symbol.upper()} and its dependent rows")
    return deleted


async def count_rows(db: Database, model: type[Base], symbol: str | None = None) -> int:
    """Row count of a table, optionally for one symbol."""
    async with db.session() as session:
        return await _count_rows(session, model, symbol)
