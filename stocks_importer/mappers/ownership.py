"""Ownership mappers: one row per holder or per insider filing."""

from __future__ import annotations

from stocks_importer.domain.ownership import (
    InsiderHolders,
    InsiderTransactions,
    MajorDirectHolders,
    MajorHoldersBreakdown,
    NetSharePurchaseActivity,
    Ownership,
)
from stocks_importer.domain.values import fmt

from .base import Record, entries, flatten, singleton


def map_major_holders_breakdown(symbol: str, doc: MajorHoldersBreakdown) -> list[Record]:
    return singleton(symbol, doc)


def map_major_direct_holders(symbol: str, doc: MajorDirectHolders) -> list[Record]:
    return singleton(symbol, doc)


def map_net_share_purchase_activity(symbol: str, doc: NetSharePurchaseActivity) -> list[Record]:
    return singleton(symbol, doc)


def map_ownership(symbol: str, doc: Ownership) -> list[Record]:
    """Fund and institution holders, keyed by (report_date, organization)."""
    return [
        {
            "symbol": symbol,
            **flatten(entry),
            "report_date_fmt": fmt(entry.report_date),
        }
        for entry in entries(doc.ownership_list)
    ]


def map_insider_holders(symbol: str, doc: InsiderHolders) -> list[Record]:
    return [{"symbol": symbol, **flatten(holder)} for holder in entries(doc.holders)]


def map_insider_transactions(symbol: str, doc: InsiderTransactions) -> list[Record]:
    return [
        {
            "symbol": symbol,
            **flatten(transaction),
            "start_date_fmt": fmt(transaction.start_date),
        }
        for transaction in entries(doc.transactions)
    ]
