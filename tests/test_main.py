"""Tests for the command-line entry point and its exit codes."""

from __future__ import annotations

import logging

import pytest

from stocks_importer import main as main_module
from stocks_importer.core.exceptions import FetchError, SchemaError, StorageError
from stocks_importer.jobs.importer import ImportReport


@pytest.fixture
def cli(mocker, test_settings):
    mocker.patch.object(main_module, "get_settings", return_value=test_settings)
    mocker.patch.object(main_module, "setup_logging")
    return mocker.patch.object(main_module, "import_cycle", new=mocker.AsyncMock(return_value=ImportReport()))


class TestExitCodes:
    def test_completed_cycle_exits_zero(self, cli):
        assert main_module.main() == 0
        cli.assert_awaited_once()

    @pytest.mark.parametrize("error", [StorageError("Cannot open database"), SchemaError("Failed to create tables")])
    def test_storage_failure_exits_one(self, cli, error, caplog):
        caplog.set_level(logging.INFO)
        cli.side_effect = error

        assert main_module.main() == 1
        assert "Import aborted" in caplog.text
        assert "Import End" in caplog.text

    def test_non_fatal_error_propagates(self, cli):
        cli.side_effect = FetchError("unexpected")

        with pytest.raises(FetchError):
            main_module.main()


class TestImportCycle:
    """The real cycle against a file store with a stubbed provider."""

    @pytest.mark.asyncio
    async def test_cycle_creates_store(self, test_settings, tmp_path, mocker, quote_summary):
        config = test_settings.model_copy(update={"database_path": str(tmp_path / "data" / "stocks.db")})
        watchlists = tmp_path / "watchlists"
        watchlists.mkdir()
        (watchlists / "core.json").write_text('["AAPL"]')
        service_cls = mocker.patch.object(main_module, "YahooQueryService")
        service_cls.return_value.get_quote_summary = mocker.AsyncMock(return_value=quote_summary)

        report = await main_module.import_cycle(config)

        assert report.symbols_succeeded == 1
        assert (tmp_path / "data" / "stocks.db").exists()
        service_cls.assert_called_once_with(config)

    @pytest.mark.asyncio
    async def test_unopenable_store_is_storage_error(self, test_settings, tmp_path):
        config = test_settings.model_copy(update={"database_path": str(tmp_path)})

        with pytest.raises(StorageError):
            await main_module.import_cycle(config)
