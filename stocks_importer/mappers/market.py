"""Market data mappers."""

from __future__ import annotations

from typing import Any

from stocks_importer.domain.market import DefaultKeyStatistics, FinancialData, Price, SummaryDetail
from stocks_importer.domain.values import raw

from .base import Record, singleton


def map_summary_detail(symbol: str, doc: SummaryDetail) -> list[Record]:
    return singleton(symbol, doc)


def map_price(symbol: str, doc: Price) -> list[Record]:
    return singleton(symbol, doc)


def map_default_key_statistics(symbol: str, doc: DefaultKeyStatistics) -> list[Record]:
    return singleton(symbol, doc)


def map_financial_data(symbol: str, doc: FinancialData) -> list[Record]:
    return singleton(symbol, doc)


def price_snapshot(doc: Price) -> dict[str, Any]:
    """Columns of the symbol record refreshed from ``price``.

    ``company_name`` prefers the long name and falls back to the short one.
    """
    company_name = doc.long_name if doc.long_name is not None else doc.short_name
    return {
        "company_name": company_name,
        "market_price": raw(doc.regular_market_price),
        "market_cap": raw(doc.market_cap),
    }
