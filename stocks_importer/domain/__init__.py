"""Typed models for Yahoo quote summary sub-documents."""

from .earnings import CalendarEvents, Earnings, EarningsHistory
from .market import DefaultKeyStatistics, FinancialData, Price, SummaryDetail
from .ownership import (
    InsiderHolders,
    InsiderTransactions,
    MajorDirectHolders,
    MajorHoldersBreakdown,
    NetSharePurchaseActivity,
    Ownership,
)
from .profile import AssetProfile, QuoteType, SummaryProfile
from .statements import BalanceSheetHistory, CashflowStatementHistory, IncomeStatementHistory
from .trends import (
    EarningsTrend,
    IndexTrend,
    PeerTrend,
    RecommendationTrend,
    UpgradeDowngradeHistory,
)
from .values import Text, Wrapped, WrappedValue, YahooModel, fmt, raw


__all__ = [
    "AssetProfile",
    "BalanceSheetHistory",
    "CalendarEvents",
    "CashflowStatementHistory",
    "DefaultKeyStatistics",
    "Earnings",
    "EarningsHistory",
    "EarningsTrend",
    "FinancialData",
    "IncomeStatementHistory",
    "IndexTrend",
    "InsiderHolders",
    "InsiderTransactions",
    "MajorDirectHolders",
    "MajorHoldersBreakdown",
    "NetSharePurchaseActivity",
    "Ownership",
    "PeerTrend",
    "Price",
    "QuoteType",
    "RecommendationTrend",
    "SummaryDetail",
    "SummaryProfile",
    "Text",
    "UpgradeDowngradeHistory",
    "Wrapped",
    "WrappedValue",
    "YahooModel",
    "fmt",
    "raw",
]
