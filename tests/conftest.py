"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio

from stocks_importer.core.config import Settings
from stocks_importer.core.exceptions import FetchError
from stocks_importer.database.connection import Database, get_sqlite_url
from stocks_importer.database.schema import ensure_schema
from stocks_importer.repositories import symbols_orm


def _w(raw: Any, fmt: str | None = None) -> dict[str, Any]:
    """A formatted Yahoo value."""
    return {"raw": raw, "fmt": fmt if fmt is not None else str(raw)}


def build_quote_summary() -> dict[str, Any]:
    """A trimmed but realistically shaped formatted quote summary for AAPL."""
    return {
        "assetProfile": {
            "address1": "One Apple Park Way",
            "city": "Cupertino",
            "state": "CA",
            "zip": "95014",
            "country": "United States",
            "phone": "(408) 996-1010",
            "website": "https://www.apple.com",
            "industry": "Consumer Electronics",
            "industryKey": "consumer-electronics",
            "industryDisp": "Consumer Electronics",
            "sector": "Technology",
            "sectorKey": "technology",
            "sectorDisp": "Technology",
            "longBusinessSummary": "Apple Inc. designs, manufactures, and markets smartphones.",
            "fullTimeEmployees": 164000,
            "companyOfficers": [
                {"maxAge": 1, "name": "Mr. Timothy D. Cook", "title": "CEO & Director", "yearBorn": 1961},
            ],
            "auditRisk": 7,
            "boardRisk": 1,
            "compensationRisk": 3,
            "shareHolderRightsRisk": 1,
            "overallRisk": 1,
            "governanceEpochDate": _w(1727740800, "2024-10-01"),
            "irWebsite": "http://investor.apple.com/",
            "maxAge": 86400,
        },
        "recommendationTrend": {
            "trend": [
                {"period": "0m", "strongBuy": 8, "buy": 24, "hold": 12, "sell": 1, "strongSell": 2},
                {"period": "-1m", "strongBuy": 8, "buy": 24, "hold": 12, "sell": 1, "strongSell": 2},
            ],
            "maxAge": 86400,
        },
        "indexTrend": {
            "maxAge": 1,
            "symbol": "SP5",
            "peRatio": _w(21.8, "21.80"),
            "pegRatio": _w(2.03, "2.03"),
            "estimates": [
                {"period": "0q", "growth": _w(0.051, "5.10%")},
                {"period": "+1q", "growth": {}},
            ],
        },
        "summaryDetail": {
            "maxAge": 1,
            "priceHint": _w(2),
            "previousClose": _w(229.04, "229.04"),
            "dividendRate": _w(1.0, "1.00"),
            "dividendYield": _w(0.0044, "0.44%"),
            "exDividendDate": _w(1731024000, "2024-11-08"),
            "payoutRatio": _w(0.1612, "16.12%"),
            "beta": _w(1.24, "1.24"),
            "trailingPE": _w(37.66, "37.66"),
            "forwardPE": _w(28.25, "28.25"),
            "volume": _w(28481390, "28.48M"),
            "averageVolume10days": _w(41339350, "41.34M"),
            "marketCap": _w(3464419000000, "3.46T"),
            "priceToSalesTrailing12Months": _w(8.86, "8.86"),
            "fiftyTwoWeekLow": _w(164.08, "164.08"),
            "fiftyTwoWeekHigh": _w(237.49, "237.49"),
            "currency": "USD",
        },
        "price": {
            "maxAge": 1,
            "regularMarketChangePercent": _w(-0.0049, "-0.49%"),
            "regularMarketChange": _w(-1.12, "-1.12"),
            "regularMarketTime": _w(1732309201, "4:00PM EST"),
            "regularMarketPrice": _w(229.87, "229.87"),
            "regularMarketVolume": _w(38168252, "38.17M"),
            "exchange": "NMS",
            "exchangeName": "NasdaqGS",
            "exchangeDataDelayedBy": 0,
            "marketState": "POSTPOST",
            "quoteType": "EQUITY",
            "currency": "USD",
            "currencySymbol": "$",
            "shortName": "Apple Inc.",
            "longName": "Apple Inc.",
            "marketCap": _w(3474541232128, "3.47T"),
        },
        "fundOwnership": {
            "maxAge": 1,
            "ownershipList": [
                {
                    "maxAge": 1,
                    "reportDate": _w(1727654400, "2024-09-30"),
                    "organization": "Vanguard Total Stock Market Index Fund",
                    "pctHeld": _w(0.0312, "3.12%"),
                    "position": _w(471745044, "471.75M"),
                    "value": _w(109916593252, "109.92B"),
                    "pctChange": _w(0.0053, "0.53%"),
                },
                {
                    "maxAge": 1,
                    "reportDate": _w(1727654400, "2024-09-30"),
                    "organization": "Vanguard 500 Index Fund",
                    "pctHeld": _w(0.0256, "2.56%"),
                    "position": _w(386710856, "386.71M"),
                    "value": _w(90103629448, "90.1B"),
                    "pctChange": _w(0.0161, "1.61%"),
                },
            ],
        },
        "calendarEvents": {
            "maxAge": 1,
            "earnings": {
                "earningsDate": [_w(1738270800, "2025-01-30")],
                "earningsAverage": _w(2.35, "2.35"),
                "earningsLow": _w(2.2, "2.20"),
                "earningsHigh": _w(2.47, "2.47"),
                "revenueAverage": _w(124035000000, "124.03B"),
                "revenueLow": _w(120966000000, "120.97B"),
                "revenueHigh": _w(127010000000, "127.01B"),
            },
            "exDividendDate": _w(1731024000, "2024-11-08"),
            "dividendDate": _w(1731542400, "2024-11-14"),
        },
        "incomeStatementHistory": {
            "maxAge": 86400,
            "incomeStatementHistory": [
                {
                    "maxAge": 1,
                    "endDate": _w(1727481600, "2024-09-28"),
                    "totalRevenue": _w(391035000000, "391.03B"),
                    "costOfRevenue": _w(210352000000, "210.35B"),
                    "grossProfit": _w(180683000000, "180.68B"),
                    "netIncome": _w(93736000000, "93.74B"),
                    "researchDevelopment": {},
                },
                {
                    "maxAge": 1,
                    "endDate": _w(1696032000, "2023-09-30"),
                    "totalRevenue": _w(383285000000, "383.29B"),
                    "netIncome": _w(96995000000, "97B"),
                },
            ],
        },
        "earnings": {
            "maxAge": 86400,
            "earningsChart": {
                "quarterly": [
                    {"date": "4Q2023", "actual": _w(2.18, "2.18"), "estimate": _w(2.1, "2.10")},
                    {"date": "1Q2024", "actual": _w(1.53, "1.53"), "estimate": _w(1.5, "1.50")},
                ],
                "currentQuarterEstimate": _w(2.35, "2.35"),
            },
            "financialsChart": {
                "yearly": [
                    {"date": 2023, "revenue": _w(383285000000, "383.29B"), "earnings": _w(96995000000, "97B")},
                    {"date": 2024, "revenue": _w(391035000000, "391.03B"), "earnings": _w(93736000000, "93.74B")},
                ],
                "quarterly": [
                    {"date": "4Q2023", "revenue": _w(119575000000, "119.58B"), "earnings": _w(33916000000, "33.92B")},
                ],
            },
            "financialCurrency": "USD",
        },
    }


def build_every_module(version: int) -> dict[str, Any]:
    """One keyed record for every module; non-key values move with ``version``."""
    fy2024 = _w(1727481600, "2024-09-28")
    q4_2024 = _w(1735603200, "2024-12-28")
    sep30 = _w(1727654400, "2024-09-30")
    return {
        "assetProfile": {"city": "Cupertino", "fullTimeEmployees": 164000 + version},
        "recommendationTrend": {"trend": [{"period": "0m", "strongBuy": 8, "buy": 20 + version}]},
        "cashflowStatementHistory": {
            "cashflowStatements": [{"endDate": fy2024, "netIncome": _w(93736000000 + version)}],
        },
        "indexTrend": {
            "symbol": "SP5",
            "peRatio": _w(21.8),
            "estimates": [{"period": "0q", "growth": _w(0.05 + version / 1000)}],
        },
        "defaultKeyStatistics": {"52WeekChange": _w(0.2 + version / 100), "forwardPE": _w(28.25)},
        "industryTrend": {"symbol": "consumer-electronics", "peRatio": _w(20.0 + version)},
        "quoteType": {"exchange": "NMS", "longName": "Apple Inc.", "firstTradeDateEpochUtc": 345479400 + version},
        "incomeStatementHistory": {
            "incomeStatementHistory": [{"endDate": fy2024, "totalRevenue": _w(391035000000 + version)}],
        },
        "fundOwnership": {
            "ownershipList": [
                {"reportDate": sep30, "organization": "Vanguard 500 Index Fund", "position": _w(386710856 + version)},
            ],
        },
        "summaryDetail": {"beta": _w(1.2 + version / 100), "currency": "USD"},
        "insiderHolders": {
            "holders": [
                {"name": "COOK TIMOTHY D", "relation": "Chief Executive Officer", "positionDirect": _w(3280000 + version)},
            ],
        },
        "calendarEvents": {
            "earnings": {
                "earningsDate": [_w(1738270800, "2025-01-30")],
                "earningsAverage": _w(2.35 + version / 100),
            },
        },
        "upgradeDowngradeHistory": {
            "history": [
                {"epochGradeDate": 1732060800, "firm": "Loop Capital", "toGrade": "Buy", "action": f"main-{version}"},
            ],
        },
        "price": {"regularMarketPrice": _w(229.0 + version), "longName": "Apple Inc.", "marketCap": _w(3474541232128)},
        "balanceSheetHistory": {"balanceSheetStatements": [{"endDate": fy2024, "cash": _w(29943000000 + version)}]},
        "earningsTrend": {
            "trend": [
                {
                    "period": "0q",
                    "endDate": "2024-12-31",
                    "growth": _w(0.1 + version / 100),
                    "earningsEstimate": {"avg": _w(2.35), "numberOfAnalysts": _w(28)},
                },
            ],
        },
        "institutionOwnership": {
            "ownershipList": [
                {"reportDate": sep30, "organization": "Vanguard Group Inc", "pctHeld": _w(0.09 + version / 1000)},
            ],
        },
        "majorHoldersBreakdown": {"insidersPercentHeld": _w(0.02 + version / 1000)},
        "balanceSheetHistoryQuarterly": {
            "balanceSheetStatements": [{"endDate": q4_2024, "cash": _w(30299000000 + version)}],
        },
        "earningsHistory": {
            "history": [{"quarter": sep30, "period": "-1q", "epsActual": _w(1.64 + version / 100)}],
        },
        "majorDirectHolders": {"holders": [{"name": "Vanguard", "positionDirect": version}]},
        "summaryProfile": {"city": "Cupertino", "fullTimeEmployees": 164000 + version},
        "netSharePurchaseActivity": {"period": "6m", "buyInfoCount": _w(10 + version)},
        "insiderTransactions": {
            "transactions": [
                {
                    "filerName": "COOK TIMOTHY D",
                    "startDate": _w(1728000000, "2024-10-04"),
                    "shares": _w(223986 + version),
                },
            ],
        },
        "sectorTrend": {"symbol": "technology", "peRatio": _w(30.0 + version)},
        "incomeStatementHistoryQuarterly": {
            "incomeStatementHistory": [{"endDate": q4_2024, "totalRevenue": _w(124300000000 + version)}],
        },
        "cashflowStatementHistoryQuarterly": {
            "cashflowStatements": [{"endDate": q4_2024, "netIncome": _w(36330000000 + version)}],
        },
        "earnings": {
            "earningsChart": {"quarterly": [{"date": "4Q2024", "actual": _w(2.4 + version / 100)}]},
            "financialsChart": {
                "yearly": [{"date": 2024, "revenue": _w(391035000000 + version)}],
                "quarterly": [{"date": "4Q2024", "revenue": _w(124300000000 + version)}],
            },
        },
        "financialData": {"currentPrice": _w(229.0 + version)},
    }


@pytest.fixture
def quote_summary() -> dict[str, Any]:
    """Fresh copy of the AAPL quote summary document."""
    return build_quote_summary()


@pytest.fixture
def every_module_document():
    """Builder for a document carrying all quote summary modules."""
    return build_every_module


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for an offline run: no screener, no pacing, files under tmp_path."""
    return Settings(
        database_path=":memory:",
        watchlist_dir=str(tmp_path / "watchlists"),
        screener_enabled=False,
        fetch_delay_min=0,
        fetch_delay_max=0,
        external_api_retries=1,
        log_dir=str(tmp_path / "log"),
    )


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[Database, None]:
    """In-memory store with every managed table created."""
    database = Database(get_sqlite_url(":memory:"))
    await ensure_schema(database)
    try:
        yield database
    finally:
        await database.dispose()


@pytest_asyncio.fixture
async def seeded_db(db: Database) -> Database:
    """Store holding the AAPL symbol record."""
    await symbols_orm.upsert_symbol(db, "AAPL", "most_actives", "Most Actives", "Apple Inc.")
    return db


class FakeProvider:
    """Document provider serving canned documents or failures per symbol."""

    def __init__(self, documents: dict[str, Any] | None = None):
        self.documents = documents or {}
        self.calls: list[str] = []

    async def get_quote_summary(self, symbol: str) -> dict[str, Any] | None:
        self.calls.append(symbol)
        result = self.documents.get(symbol)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_provider_factory():
    """Build a ``FakeProvider``; a ``FetchError`` value makes that symbol fail."""
    def _make(documents: dict[str, Any] | None = None) -> FakeProvider:
        return FakeProvider(documents)
    return _make


@pytest.fixture
def fetch_error() -> FetchError:
    return FetchError("yahooquery failed for BROKEN: connection reset", details={"symbol": "BROKEN"})
