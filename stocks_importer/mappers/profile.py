"""Company identity mappers."""

from __future__ import annotations

from stocks_importer.domain.profile import AssetProfile, QuoteType, SummaryProfile

from .base import Record, singleton


def map_asset_profile(symbol: str, doc: AssetProfile) -> list[Record]:
    """Officers roster is stored as JSON text in ``company_officers``."""
    return singleton(symbol, doc)


def map_summary_profile(symbol: str, doc: SummaryProfile) -> list[Record]:
    return singleton(symbol, doc)


def map_quote_type(symbol: str, doc: QuoteType) -> list[Record]:
    return singleton(symbol, doc)
