"""Ownership sub-documents: holders breakdown, fund/institution lists, insiders."""

from __future__ import annotations

from .values import JsonList, Text, Wrapped, YahooModel


class MajorHoldersBreakdown(YahooModel):
    insiders_percent_held: Wrapped = None
    institutions_percent_held: Wrapped = None
    institutions_float_percent_held: Wrapped = None
    institutions_count: Wrapped = None


class MajorDirectHolders(YahooModel):
    holders: JsonList = None


class NetSharePurchaseActivity(YahooModel):
    period: Text = None
    buy_info_count: Wrapped = None
    buy_info_shares: Wrapped = None
    buy_percent_insider_shares: Wrapped = None
    sell_info_count: Wrapped = None
    sell_info_shares: Wrapped = None
    sell_percent_insider_shares: Wrapped = None
    net_info_count: Wrapped = None
    net_info_shares: Wrapped = None
    net_percent_insider_shares: Wrapped = None
    total_insider_shares: Wrapped = None


class OwnershipEntry(YahooModel):
    """One holder in ``fundOwnership`` / ``institutionOwnership``."""

    report_date: Wrapped = None
    organization: Text = None
    pct_held: Wrapped = None
    position: Wrapped = None
    value: Wrapped = None
    pct_change: Wrapped = None


class Ownership(YahooModel):
    """``fundOwnership`` and ``institutionOwnership`` share this shape."""

    ownership_list: list[OwnershipEntry] | None = None


class InsiderHolder(YahooModel):
    name: Text = None
    relation: Text = None
    url: Text = None
    transaction_description: Text = None
    latest_trans_date: Wrapped = None
    position_direct: Wrapped = None
    position_direct_date: Wrapped = None
    position_indirect: Wrapped = None
    position_indirect_date: Wrapped = None


class InsiderHolders(YahooModel):
    """``insiderHolders``."""

    holders: list[InsiderHolder] | None = None


class InsiderTransaction(YahooModel):
    filer_name: Text = None
    start_date: Wrapped = None
    filer_relation: Text = None
    filer_url: Text = None
    transaction_text: Text = None
    money_text: Text = None
    ownership: Text = None
    shares: Wrapped = None
    value: Wrapped = None


class InsiderTransactions(YahooModel):
    """``insiderTransactions``."""

    transactions: list[InsiderTransaction] | None = None
