"""Tests for watchlist files and screener results as symbol sources."""

from __future__ import annotations

import json

import pytest

from stocks_importer.services import screener as screener_module
from stocks_importer.services.screener import ScreenerService, parse_screen, screener_name
from stocks_importer.services.watchlist import load_watchlist, load_watchlists


class TestWatchlists:
    """Tests for the watchlist directory scan."""

    def test_list_file_uses_stem(self, tmp_path):
        path = tmp_path / "tech_giants.json"
        path.write_text(json.dumps(["aapl", " msft ", ""]))

        entries = load_watchlist(path)

        assert [e.symbol for e in entries] == ["AAPL", "MSFT"]
        assert {e.category_id for e in entries} == {"tech_giants"}
        assert entries[0].category_name == "Tech Giants"

    def test_object_file(self, tmp_path):
        path = tmp_path / "core.json"
        path.write_text(json.dumps({"id": "core", "name": "Core Holdings", "symbols": ["NVDA", "NVDA"]}))

        entries = load_watchlist(path)

        assert len(entries) == 1
        assert entries[0].category_name == "Core Holdings"

    def test_directory_merged_in_name_order(self, tmp_path):
        (tmp_path / "b_second.json").write_text(json.dumps(["AAPL", "AMZN"]))
        (tmp_path / "a_first.json").write_text(json.dumps(["AAPL"]))
        (tmp_path / "notes.txt").write_text("ignored")

        entries = load_watchlists(tmp_path)

        assert [(e.symbol, e.category_id) for e in entries] == [("AAPL", "a_first"), ("AMZN", "b_second")]

    def test_malformed_file_skipped(self, tmp_path, caplog):
        (tmp_path / "broken.json").write_text("{not json")
        (tmp_path / "scalar.json").write_text("42")
        (tmp_path / "good.json").write_text(json.dumps(["AAPL"]))

        entries = load_watchlists(tmp_path)

        assert [e.symbol for e in entries] == ["AAPL"]
        assert "Skipping watchlist broken.json" in caplog.text
        assert "Skipping watchlist scalar.json" in caplog.text

    def test_missing_directory(self, tmp_path):
        assert load_watchlists(tmp_path / "absent") == []


class TestParseScreen:
    """Tests for screener payload parsing."""

    def test_quotes_become_entries(self):
        payload = {
            "id": "day_gainers",
            "quotes": [
                {"symbol": "SMCI", "shortName": "Super Micro", "longName": "Super Micro Computer, Inc."},
                {"symbol": "PLTR", "shortName": "Palantir"},
                {"shortName": "no symbol"},
            ],
        }

        entries = parse_screen("day_gainers", payload)

        assert [e.symbol for e in entries] == ["SMCI", "PLTR"]
        assert entries[0].company_name == "Super Micro Computer, Inc."
        assert entries[1].company_name == "Palantir"
        assert entries[0].category_name == "Day Gainers"

    def test_error_text_yields_nothing(self):
        assert parse_screen("day_gainers", "Screener not found") == []
        assert parse_screen("day_gainers", {"error": "Invalid"}) == []

    def test_unknown_screener_name(self):
        assert screener_name("tech_movers") == "Tech Movers"


class TestScreenerService:
    """Tests for fetching screens through yahooquery."""

    @pytest.mark.asyncio
    async def test_fetch_all_merges_screens(self, test_settings, mocker):
        results = {
            "day_gainers": {"quotes": [{"symbol": "SMCI"}, {"symbol": "NVDA"}]},
            "most_actives": {"quotes": [{"symbol": "NVDA"}, {"symbol": "AAPL"}]},
        }
        screener_cls = mocker.patch.object(screener_module, "Screener")
        screener_cls.return_value.get_screeners.side_effect = lambda ids, count: {ids[0]: results[ids[0]]}

        entries = await ScreenerService(test_settings).fetch_all(["day_gainers", "most_actives"])

        assert [(e.symbol, e.category_id) for e in entries] == [
            ("SMCI", "day_gainers"),
            ("NVDA", "day_gainers"),
            ("AAPL", "most_actives"),
        ]
        screener_cls.return_value.get_screeners.assert_any_call(["day_gainers"], count=test_settings.screener_count)

    @pytest.mark.asyncio
    async def test_failing_screen_is_skipped(self, test_settings, mocker):
        screener_cls = mocker.patch.object(screener_module, "Screener")

        def get_screeners(ids, count):
            if ids[0] == "day_losers":
                raise ConnectionError("connection reset")
            return {ids[0]: {"quotes": [{"symbol": "AAPL"}]}}

        screener_cls.return_value.get_screeners.side_effect = get_screeners

        entries = await ScreenerService(test_settings).fetch_all(["day_losers", "most_actives"])

        assert [e.symbol for e in entries] == ["AAPL"]
