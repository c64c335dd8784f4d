"""Tests for sub-document → record mapping."""

from __future__ import annotations

import json

import pytest

from stocks_importer.domain.earnings import CalendarEvents, Earnings, EarningsHistory
from stocks_importer.domain.market import Price
from stocks_importer.domain.ownership import InsiderTransactions, Ownership
from stocks_importer.domain.profile import AssetProfile
from stocks_importer.domain.statements import IncomeStatementHistory
from stocks_importer.domain.trends import EarningsTrend, IndexTrend, PeerTrend, UpgradeDowngradeHistory
from stocks_importer.mappers.base import flatten, split_keyed, to_json
from stocks_importer.mappers.earnings import (
    map_calendar_events,
    map_earnings_chart,
    map_earnings_history,
    map_financials_chart_quarterly,
    map_financials_chart_yearly,
)
from stocks_importer.mappers.market import map_price, price_snapshot
from stocks_importer.mappers.ownership import map_insider_transactions, map_ownership
from stocks_importer.mappers.profile import map_asset_profile
from stocks_importer.mappers.statements import map_income_statements
from stocks_importer.mappers.trends import (
    map_earnings_trend,
    map_index_trend,
    map_peer_trend,
    map_upgrade_downgrade_history,
)


class TestBaseHelpers:
    """Tests for flatten, to_json and key partitioning."""

    def test_to_json_sorted_and_none(self):
        assert to_json(None) is None
        assert to_json({"b": 1, "a": 2}) == '{"a": 2, "b": 1}'

    def test_flatten_rejects_nested_model(self):
        doc = Earnings.model_validate({"earningsChart": {"quarterly": []}})
        with pytest.raises(TypeError):
            flatten(doc)

    def test_flatten_excludes(self):
        doc = Earnings.model_validate({"earningsChart": {"quarterly": []}, "financialCurrency": "USD"})
        assert flatten(doc, exclude=("earnings_chart", "financials_chart")) == {"financial_currency": "USD"}

    def test_split_keyed(self):
        records = [
            {"symbol": "AAPL", "period": "0m"},
            {"symbol": "AAPL", "period": None},
            {"symbol": "AAPL", "period": ""},
        ]
        keyed, unkeyed = split_keyed(records, ("symbol", "period"))
        # empty string is a value, only None is missing
        assert [r["period"] for r in keyed] == ["0m", ""]
        assert unkeyed == [{"symbol": "AAPL", "period": None}]


class TestSingletonMappers:
    """Tests for one-row-per-symbol sub-documents."""

    def test_asset_profile(self, quote_summary):
        doc = AssetProfile.model_validate(quote_summary["assetProfile"])

        records = map_asset_profile("AAPL", doc)

        assert len(records) == 1
        record = records[0]
        assert record["symbol"] == "AAPL"
        assert record["full_time_employees"] == 164000
        assert record["governance_epoch_date"] == 1727740800
        assert record["fax"] is None
        officers = json.loads(record["company_officers"])
        assert officers[0]["title"] == "CEO & Director"

    def test_missing_fields_become_none(self):
        records = map_price("AAPL", Price.model_validate({}))
        assert records[0]["symbol"] == "AAPL"
        assert all(v is None for k, v in records[0].items() if k != "symbol")

    def test_peer_trend_estimates_as_json(self):
        doc = PeerTrend.model_validate(
            {"symbol": "technology", "peRatio": 31.2, "estimates": [{"period": "0y", "growth": 0.12}]}
        )

        record = map_peer_trend("AAPL", doc)[0]

        assert record["trend_symbol"] == "technology"
        assert record["pe_ratio"] == 31.2
        assert json.loads(record["estimates"]) == [{"growth": 0.12, "period": "0y"}]


class TestPriceSnapshot:
    """Tests for the symbol record refresh values."""

    def test_prefers_long_name(self, quote_summary):
        snapshot = price_snapshot(Price.model_validate(quote_summary["price"]))
        assert snapshot == {
            "company_name": "Apple Inc.",
            "market_price": 229.87,
            "market_cap": 3474541232128,
        }

    def test_falls_back_to_short_name(self):
        snapshot = price_snapshot(Price.model_validate({"shortName": "Apple", "regularMarketPrice": 229.87}))
        assert snapshot["company_name"] == "Apple"
        assert snapshot["market_cap"] is None


class TestSeriesMappers:
    """Tests for sub-documents producing one row per period or holder."""

    def test_index_trend_repeats_index_ratios(self, quote_summary):
        doc = IndexTrend.model_validate(quote_summary["indexTrend"])

        records = map_index_trend("AAPL", doc)

        assert [r["period"] for r in records] == ["0q", "+1q"]
        assert records[0]["growth"] == 0.051
        assert records[1]["growth"] is None
        assert {r["index_symbol"] for r in records} == {"SP5"}
        assert {r["pe_ratio"] for r in records} == {21.8}

    def test_earnings_trend_flattens_nested_estimates(self):
        doc = EarningsTrend.model_validate(
            {
                "trend": [
                    {
                        "period": "0q",
                        "endDate": "2024-12-31",
                        "earningsEstimate": {"avg": 2.35, "numberOfAnalysts": 28},
                        "revenueEstimate": {"avg": 124035000000},
                        "epsTrend": {"current": 2.35, "7daysAgo": 2.34},
                        "epsRevisions": {"upLast7days": 1, "downLast30days": 0},
                    },
                    {"period": "+1y"},
                ]
            }
        )

        records = map_earnings_trend("AAPL", doc)

        first, second = records
        assert first["earnings_estimate_avg"] == 2.35
        assert first["earnings_estimate_number_of_analysts"] == 28
        assert first["revenue_estimate_avg"] == 124035000000
        assert first["eps_trend_7days_ago"] == 2.34
        assert first["eps_revisions_up_last_7days"] == 1
        assert first["eps_revisions_down_last_30days"] == 0
        assert second["period"] == "+1y"
        assert second["earnings_estimate_avg"] is None
        assert second["eps_trend_current"] is None

    def test_upgrade_downgrade_grade_date(self):
        doc = UpgradeDowngradeHistory.model_validate(
            {
                "history": [
                    {
                        "epochGradeDate": 1730419200,
                        "firm": "Morgan Stanley",
                        "toGrade": "Overweight",
                        "fromGrade": "Overweight",
                        "action": "main",
                    }
                ]
            }
        )

        record = map_upgrade_downgrade_history("AAPL", doc)[0]

        assert record["grade_date"] == 1730419200
        assert record["firm"] == "Morgan Stanley"
        assert record["action"] == "main"

    def test_statement_rows_carry_formatted_end_date(self, quote_summary):
        doc = IncomeStatementHistory.model_validate(quote_summary["incomeStatementHistory"])

        records = map_income_statements("AAPL", doc)

        assert [r["end_date"] for r in records] == [1727481600, 1696032000]
        assert records[0]["end_date_fmt"] == "2024-09-28"
        assert records[0]["research_development"] is None
        assert records[1]["cost_of_revenue"] is None

    def test_ownership_rows(self, quote_summary):
        doc = Ownership.model_validate(quote_summary["fundOwnership"])

        records = map_ownership("AAPL", doc)

        assert len(records) == 2
        assert records[0]["report_date"] == 1727654400
        assert records[0]["report_date_fmt"] == "2024-09-30"
        assert records[0]["organization"] == "Vanguard Total Stock Market Index Fund"
        assert records[1]["pct_held"] == 0.0256

    def test_insider_transactions_start_date(self):
        doc = InsiderTransactions.model_validate(
            {
                "transactions": [
                    {
                        "filerName": "COOK TIMOTHY D",
                        "startDate": {"raw": 1727913600, "fmt": "2024-10-03"},
                        "shares": {"raw": 223986, "longFmt": "223,986"},
                        "ownership": "D",
                    }
                ]
            }
        )

        record = map_insider_transactions("AAPL", doc)[0]

        assert record["filer_name"] == "COOK TIMOTHY D"
        assert record["start_date"] == 1727913600
        assert record["start_date_fmt"] == "2024-10-03"
        assert record["shares"] == 223986

    def test_empty_list_maps_to_nothing(self):
        assert map_ownership("AAPL", Ownership.model_validate({"ownershipList": []})) == []
        assert map_ownership("AAPL", Ownership.model_validate({})) == []


class TestEarningsMappers:
    """Tests for the earnings module and its three tables."""

    def test_one_module_three_tables(self, quote_summary):
        doc = Earnings.model_validate(quote_summary["earnings"])

        chart = map_earnings_chart("AAPL", doc)
        yearly = map_financials_chart_yearly("AAPL", doc)
        quarterly = map_financials_chart_quarterly("AAPL", doc)

        assert [r["date"] for r in chart] == ["4Q2023", "1Q2024"]
        assert chart[0]["actual"] == 2.18
        assert [r["date"] for r in yearly] == ["2023", "2024"]
        assert yearly[1]["revenue"] == 391035000000
        assert len(quarterly) == 1

    def test_missing_charts(self):
        doc = Earnings.model_validate({"financialCurrency": "USD"})
        assert map_earnings_chart("AAPL", doc) == []
        assert map_financials_chart_yearly("AAPL", doc) == []

    def test_earnings_history_quarter(self):
        doc = EarningsHistory.model_validate(
            {
                "history": [
                    {
                        "quarter": {"raw": 1719705600, "fmt": "2024-06-30"},
                        "period": "-1q",
                        "epsActual": 1.4,
                        "epsEstimate": 1.35,
                        "surprisePercent": 0.037,
                    }
                ]
            }
        )

        record = map_earnings_history("AAPL", doc)[0]

        assert record["quarter"] == 1719705600
        assert record["quarter_fmt"] == "2024-06-30"
        assert record["eps_difference"] is None

    def test_calendar_events_row_per_date(self, quote_summary):
        payload = quote_summary["calendarEvents"]
        payload["earnings"]["earningsDate"].append({"raw": 1738702800, "fmt": "2025-02-04"})

        records = map_calendar_events("AAPL", CalendarEvents.model_validate(payload))

        assert [r["earnings_date"] for r in records] == [1738270800, 1738702800]
        assert [r["earnings_date_fmt"] for r in records] == ["2025-01-30", "2025-02-04"]
        assert {r["revenue_average"] for r in records} == {124035000000}
        assert {r["dividend_date"] for r in records} == {1731542400}

    def test_calendar_events_without_dates(self):
        doc = CalendarEvents.model_validate({"earnings": {"earningsAverage": 2.35}})
        assert map_calendar_events("AAPL", doc) == []

    def test_calendar_empty_date_is_unkeyed(self):
        doc = CalendarEvents.model_validate({"earnings": {"earningsDate": [{}]}})

        records = map_calendar_events("AAPL", doc)

        keyed, unkeyed = split_keyed(records, ("symbol", "earnings_date"))
        assert keyed == []
        assert len(unkeyed) == 1
