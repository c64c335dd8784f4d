"""Module → table routing with natural keys and reconciliation policy.

Every quote summary module fetched by the importer has one entry here.
A module may feed several tables (``earnings`` feeds three); each table
declares its natural key and whether rows are upserted or replaced.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from stocks_importer.core.exceptions import MappingError
from stocks_importer.database import orm
from stocks_importer.domain import earnings, market, ownership, profile, statements, trends
from stocks_importer.domain.values import YahooModel

from . import earnings as earnings_mappers
from . import market as market_mappers
from . import ownership as ownership_mappers
from . import profile as profile_mappers
from . import statements as statement_mappers
from . import trends as trend_mappers
from .base import Record


class WritePolicy(str, Enum):
    """How a table reconciles a fresh batch with what is stored."""

    UPSERT = "upsert"  # insert or overwrite per natural key, keep the rest
    REPLACE = "replace"  # delete every row of the symbol, then insert


Mapper = Callable[[str, Any], list[Record]]


@dataclass(frozen=True)
class TableMapping:
    model: type[orm.Base]
    mapper: Mapper
    natural_key: tuple[str, ...] = ("symbol",)
    policy: WritePolicy = WritePolicy.UPSERT

    @property
    def table_name(self) -> str:
        return self.model.__tablename__


@dataclass(frozen=True)
class ModuleMapping:
    module: str
    document: type[YahooModel]
    tables: tuple[TableMapping, ...]

    def parse(self, symbol: str, payload: Any) -> YahooModel:
        """Validate a raw sub-document; shape errors become ``MappingError``."""
        try:
            return self.document.model_validate(payload)
        except ValidationError as e:
            raise MappingError(self.module, symbol, e) from e

    def map(self, symbol: str, doc: YahooModel) -> list[tuple[TableMapping, list[Record]]]:
        """Records per table for one validated sub-document."""
        results = []
        for table in self.tables:
            try:
                records = table.mapper(symbol, doc)
            except (TypeError, ValueError) as e:
                raise MappingError(self.module, symbol, e) from e
            results.append((table, records))
        return results


def _singleton(module: str, document: type[YahooModel], model: type[orm.Base], mapper: Mapper) -> ModuleMapping:
    return ModuleMapping(module, document, (TableMapping(model, mapper),))


_BY_END_DATE = ("symbol", "end_date")
_BY_PERIOD = ("symbol", "period")
_BY_DATE = ("symbol", "date")
_BY_HOLDER = ("symbol", "report_date", "organization")


MODULE_MAPPINGS: tuple[ModuleMapping, ...] = (
    _singleton("assetProfile", profile.AssetProfile, orm.AssetProfile, profile_mappers.map_asset_profile),
    ModuleMapping(
        "recommendationTrend",
        trends.RecommendationTrend,
        (TableMapping(orm.RecommendationTrend, trend_mappers.map_recommendation_trend, _BY_PERIOD, WritePolicy.REPLACE),),
    ),
    ModuleMapping(
        "cashflowStatementHistory",
        statements.CashflowStatementHistory,
        (TableMapping(orm.CashflowStatementHistory, statement_mappers.map_cashflow_statements, _BY_END_DATE),),
    ),
    ModuleMapping(
        "indexTrend",
        trends.IndexTrend,
        (TableMapping(orm.IndexTrend, trend_mappers.map_index_trend, _BY_PERIOD),),
    ),
    _singleton(
        "defaultKeyStatistics",
        market.DefaultKeyStatistics,
        orm.DefaultKeyStatistics,
        market_mappers.map_default_key_statistics,
    ),
    _singleton("industryTrend", trends.PeerTrend, orm.IndustryTrend, trend_mappers.map_peer_trend),
    _singleton("quoteType", profile.QuoteType, orm.QuoteType, profile_mappers.map_quote_type),
    ModuleMapping(
        "incomeStatementHistory",
        statements.IncomeStatementHistory,
        (TableMapping(orm.IncomeStatementHistory, statement_mappers.map_income_statements, _BY_END_DATE),),
    ),
    ModuleMapping(
        "fundOwnership",
        ownership.Ownership,
        (TableMapping(orm.FundOwnership, ownership_mappers.map_ownership, _BY_HOLDER),),
    ),
    _singleton("summaryDetail", market.SummaryDetail, orm.SummaryDetail, market_mappers.map_summary_detail),
    ModuleMapping(
        "insiderHolders",
        ownership.InsiderHolders,
        (TableMapping(orm.InsiderHolders, ownership_mappers.map_insider_holders, ("symbol", "name", "relation")),),
    ),
    ModuleMapping(
        "calendarEvents",
        earnings.CalendarEvents,
        (TableMapping(orm.CalendarEvents, earnings_mappers.map_calendar_events, ("symbol", "earnings_date")),),
    ),
    ModuleMapping(
        "upgradeDowngradeHistory",
        trends.UpgradeDowngradeHistory,
        (
            TableMapping(
                orm.UpgradeDowngradeHistory,
                trend_mappers.map_upgrade_downgrade_history,
                ("symbol", "grade_date", "firm"),
            ),
        ),
    ),
    _singleton("price", market.Price, orm.Price, market_mappers.map_price),
    ModuleMapping(
        "balanceSheetHistory",
        statements.BalanceSheetHistory,
        (TableMapping(orm.BalanceSheetHistory, statement_mappers.map_balance_sheets, _BY_END_DATE),),
    ),
    ModuleMapping(
        "earningsTrend",
        trends.EarningsTrend,
        (TableMapping(orm.EarningsTrend, trend_mappers.map_earnings_trend, _BY_PERIOD),),
    ),
    ModuleMapping(
        "institutionOwnership",
        ownership.Ownership,
        (TableMapping(orm.InstitutionOwnership, ownership_mappers.map_ownership, _BY_HOLDER),),
    ),
    _singleton(
        "majorHoldersBreakdown",
        ownership.MajorHoldersBreakdown,
        orm.MajorHoldersBreakdown,
        ownership_mappers.map_major_holders_breakdown,
    ),
    ModuleMapping(
        "balanceSheetHistoryQuarterly",
        statements.BalanceSheetHistory,
        (TableMapping(orm.BalanceSheetHistoryQuarterly, statement_mappers.map_balance_sheets, _BY_END_DATE),),
    ),
    ModuleMapping(
        "earningsHistory",
        earnings.EarningsHistory,
        (TableMapping(orm.EarningsHistory, earnings_mappers.map_earnings_history, ("symbol", "quarter")),),
    ),
    _singleton(
        "majorDirectHolders",
        ownership.MajorDirectHolders,
        orm.MajorDirectHolders,
        ownership_mappers.map_major_direct_holders,
    ),
    _singleton("summaryProfile", profile.SummaryProfile, orm.SummaryProfile, profile_mappers.map_summary_profile),
    _singleton(
        "netSharePurchaseActivity",
        ownership.NetSharePurchaseActivity,
        orm.NetSharePurchaseActivity,
        ownership_mappers.map_net_share_purchase_activity,
    ),
    ModuleMapping(
        "insiderTransactions",
        ownership.InsiderTransactions,
        (
            TableMapping(
                orm.InsiderTransactions,
                ownership_mappers.map_insider_transactions,
                ("symbol", "filer_name", "start_date"),
            ),
        ),
    ),
    _singleton("sectorTrend", trends.PeerTrend, orm.SectorTrend, trend_mappers.map_peer_trend),
    ModuleMapping(
        "incomeStatementHistoryQuarterly",
        statements.IncomeStatementHistory,
        (TableMapping(orm.IncomeStatementHistoryQuarterly, statement_mappers.map_income_statements, _BY_END_DATE),),
    ),
    ModuleMapping(
        "cashflowStatementHistoryQuarterly",
        statements.CashflowStatementHistory,
        (
            TableMapping(
                orm.CashflowStatementHistoryQuarterly,
                statement_mappers.map_cashflow_statements,
                _BY_END_DATE,
            ),
        ),
    ),
    ModuleMapping(
        "earnings",
        earnings.Earnings,
        (
            TableMapping(orm.EarningsChart, earnings_mappers.map_earnings_chart, _BY_DATE),
            TableMapping(orm.FinancialsChartYearly, earnings_mappers.map_financials_chart_yearly, _BY_DATE),
            TableMapping(orm.FinancialsChartQuarterly, earnings_mappers.map_financials_chart_quarterly, _BY_DATE),
        ),
    ),
    _singleton("financialData", market.FinancialData, orm.FinancialData, market_mappers.map_financial_data),
)

# Modules requested from the quote summary endpoint, in request order
QUOTE_SUMMARY_MODULES: tuple[str, ...] = tuple(mapping.module for mapping in MODULE_MAPPINGS)

_BY_MODULE: Mapping[str, ModuleMapping] = {mapping.module: mapping for mapping in MODULE_MAPPINGS}


def get_module_mapping(module: str) -> ModuleMapping:
    """Look up a module's routing; ``KeyError`` for unknown modules."""
    return _BY_MODULE[module]


def all_table_mappings() -> list[TableMapping]:
    return [table for mapping in MODULE_MAPPINGS for table in mapping.tables]
