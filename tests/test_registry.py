"""Tests for the module → table registry."""

from __future__ import annotations

import pytest
from sqlalchemy import UniqueConstraint

from stocks_importer.core.exceptions import MappingError
from stocks_importer.database import orm
from stocks_importer.mappers.registry import (
    MODULE_MAPPINGS,
    QUOTE_SUMMARY_MODULES,
    WritePolicy,
    all_table_mappings,
    get_module_mapping,
)


class TestRegistryShape:
    """Tests for registry completeness and consistency with the ORM."""

    def test_every_module_listed_once(self):
        assert len(QUOTE_SUMMARY_MODULES) == 29
        assert len(set(QUOTE_SUMMARY_MODULES)) == 29
        assert QUOTE_SUMMARY_MODULES[0] == "assetProfile"
        assert QUOTE_SUMMARY_MODULES[-1] == "financialData"

    def test_every_dependent_table_fed(self):
        fed = {table.table_name for table in all_table_mappings()}
        managed = set(orm.Base.metadata.tables) - {"stocks"}
        assert fed == managed

    def test_earnings_feeds_three_tables(self):
        mapping = get_module_mapping("earnings")
        assert [t.table_name for t in mapping.tables] == [
            "earnings_chart",
            "financials_chart_yearly",
            "financials_chart_quarterly",
        ]

    def test_only_recommendation_trend_replaces(self):
        replaced = [t.table_name for t in all_table_mappings() if t.policy is WritePolicy.REPLACE]
        assert replaced == ["recommendation_trend"]

    def test_unknown_module(self):
        with pytest.raises(KeyError):
            get_module_mapping("secFilings")

    @pytest.mark.parametrize("table", all_table_mappings(), ids=lambda t: t.table_name)
    def test_natural_key_is_unique_in_schema(self, table):
        """ON CONFLICT needs a primary key or unique constraint on exactly the natural key."""
        sa_table = table.model.__table__
        unique_sets = [{c.name for c in sa_table.primary_key.columns}]
        unique_sets += [
            {c.name for c in constraint.columns}
            for constraint in sa_table.constraints
            if isinstance(constraint, UniqueConstraint)
        ]
        assert set(table.natural_key) in unique_sets

    @pytest.mark.parametrize("table", all_table_mappings(), ids=lambda t: t.table_name)
    def test_key_columns_not_nullable(self, table):
        columns = table.model.__table__.c
        assert all(not columns[name].nullable for name in table.natural_key)


class TestMappedColumns:
    """Mapper output must only name columns the table has."""

    @pytest.mark.parametrize("mapping", MODULE_MAPPINGS, ids=lambda m: m.module)
    def test_record_keys_are_columns(self, mapping, quote_summary):
        payload = quote_summary.get(mapping.module, {})
        doc = mapping.parse("AAPL", payload)

        for table, records in mapping.map("AAPL", doc):
            columns = set(table.model.__table__.c.keys())
            for record in records:
                assert set(record) <= columns, set(record) - columns

    @pytest.mark.parametrize(
        "module, payload",
        [
            ("recommendationTrend", {"trend": [{"period": "0m"}]}),
            ("indexTrend", {"estimates": [{"period": "0q"}]}),
            ("earningsTrend", {"trend": [{"period": "0q", "earningsEstimate": {}}]}),
            ("upgradeDowngradeHistory", {"history": [{"epochGradeDate": 1, "firm": "x"}]}),
            ("insiderHolders", {"holders": [{"name": "x", "relation": "y"}]}),
            ("insiderTransactions", {"transactions": [{"filerName": "x", "startDate": 1}]}),
            ("earningsHistory", {"history": [{"quarter": 1}]}),
            ("balanceSheetHistory", {"balanceSheetStatements": [{"endDate": 1}]}),
            ("cashflowStatementHistoryQuarterly", {"cashflowStatements": [{"endDate": 1}]}),
            ("institutionOwnership", {"ownershipList": [{"reportDate": 1, "organization": "x"}]}),
            ("majorHoldersBreakdown", {"insidersPercentHeld": 0.02}),
            ("majorDirectHolders", {"holders": []}),
            ("netSharePurchaseActivity", {"period": "6m", "buyInfoCount": 3}),
            ("sectorTrend", {"symbol": "technology"}),
            ("defaultKeyStatistics", {"52WeekChange": 0.2}),
            ("financialData", {"currentPrice": 229.87}),
            ("summaryProfile", {"city": "Cupertino"}),
            ("quoteType", {"exchange": "NMS"}),
        ],
    )
    def test_sparse_records_are_columns(self, module, payload):
        mapping = get_module_mapping(module)
        doc = mapping.parse("AAPL", payload)

        for table, records in mapping.map("AAPL", doc):
            assert records
            columns = set(table.model.__table__.c.keys())
            for record in records:
                assert set(record) <= columns, set(record) - columns


class TestParse:
    """Tests for shape errors surfacing as MappingError."""

    def test_wrong_shape_is_mapping_error(self):
        mapping = get_module_mapping("recommendationTrend")

        with pytest.raises(MappingError) as exc_info:
            mapping.parse("AAPL", {"trend": "not a list"})

        assert exc_info.value.module == "recommendationTrend"
        assert exc_info.value.symbol == "AAPL"

    def test_non_object_is_mapping_error(self):
        with pytest.raises(MappingError):
            get_module_mapping("price").parse("AAPL", "No fundamentals data found")
