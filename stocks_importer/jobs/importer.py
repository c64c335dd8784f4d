"""Import cycle: resolve symbols, fetch each quote summary, map and write it.

Failures are contained at the smallest unit that can fail on its own:

- a symbol whose document cannot be fetched is counted and skipped;
- a sub-document that fails validation is counted, its siblings continue;
- a table write that fails is rolled back and counted, other tables continue.

Only storage/schema setup errors stop the run.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any, Protocol

from stocks_importer.core.config import Settings, settings as default_settings
from stocks_importer.core.exceptions import FetchError, MappingError, UpsertError
from stocks_importer.core.logging import get_logger, symbol_context
from stocks_importer.database.connection import Database
from stocks_importer.database.schema import ensure_schema, reset_schema
from stocks_importer.domain.market import Price
from stocks_importer.domain.symbols import SymbolEntry, merge_entries
from stocks_importer.mappers.base import split_keyed
from stocks_importer.mappers.market import price_snapshot
from stocks_importer.mappers.registry import MODULE_MAPPINGS, ModuleMapping, WritePolicy
from stocks_importer.repositories import symbols_orm
from stocks_importer.repositories.upsert_orm import UpsertExecutor
from stocks_importer.services.screener import ScreenerService
from stocks_importer.services.watchlist import load_watchlists


class DocumentProvider(Protocol):
    async def get_quote_summary(self, symbol: str) -> dict[str, Any] | None: ...


@dataclass
class ImportReport:
    """End-of-run tally."""

    symbols_attempted: int = 0
    symbols_succeeded: int = 0
    symbols_fetch_failed: int = 0
    modules_written: int = 0
    modules_skipped: int = 0
    records_skipped: int = 0
    mapping_errors: int = 0
    write_errors: int = 0
    duration_ms: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    def summary(self) -> str:
        return (
            f"{self.symbols_succeeded}/{self.symbols_attempted} symbols imported "
            f"({self.symbols_fetch_failed} fetch failures); "
            f"{self.modules_written} modules written, {self.modules_skipped} absent, "
            f"{self.records_skipped} records without key, "
            f"{self.mapping_errors} mapping errors, {self.write_errors} write errors "
            f"in {self.duration_ms}ms"
        )


# =============================================================================
# SYMBOL RESOLUTION
# =============================================================================


async def resolve_symbols(
    config: Settings | None = None,
    screener: ScreenerService | None = None,
    logger: logging.Logger | None = None,
) -> list[SymbolEntry]:
    """Watchlist entries first, then screener hits, de-duplicated by symbol."""
    config = config or default_settings
    logger = logger or get_logger("jobs.importer")

    watchlist_entries = load_watchlists(config.watchlist_dir)

    screener_entries: list[SymbolEntry] = []
    if config.screener_enabled:
        screener = screener or ScreenerService(config)
        screener_entries = await screener.fetch_all()

    entries = merge_entries(watchlist_entries, screener_entries)
    logger.info(
        f"Resolved {len(entries)} symbols "
        f"({len(watchlist_entries)} from watchlists, {len(screener_entries)} from screeners)"
    )
    return entries


# =============================================================================
# PER-SYMBOL IMPORT
# =============================================================================


class SymbolImporter:
    """Writes one symbol's document through the module registry."""

    def __init__(
        self,
        db: Database,
        provider: DocumentProvider,
        logger: logging.Logger | None = None,
        modules: Sequence[ModuleMapping] = MODULE_MAPPINGS,
    ):
        self.db = db
        self.provider = provider
        self.logger = logger or get_logger("jobs.importer")
        self.executor = UpsertExecutor(db, self.logger)
        self.modules = modules

    async def import_symbol(self, entry: SymbolEntry, report: ImportReport) -> bool:
        """Root record, fetch, then every module. True if nothing failed."""
        symbol = entry.symbol
        report.symbols_attempted += 1

        try:
            await symbols_orm.upsert_symbol(
                self.db, symbol, entry.category_id, entry.category_name, entry.company_name
            )
        except UpsertError:
            report.write_errors += 1
            return False
        self.logger.info(f"Inserted/Updated: {symbol} in category {entry.category_name}")

        try:
            document = await self.provider.get_quote_summary(symbol)
        except FetchError as e:
            self.logger.error(f"Failed to fetch quote summary for symbol: {symbol}. Error: {e}")
            report.symbols_fetch_failed += 1
            return False

        if document is None:
            self.logger.error(f"No quote summary returned for symbol: {symbol}")
            report.symbols_fetch_failed += 1
            return False

        return await self.write_document(symbol, document, report)

    async def write_document(self, symbol: str, document: dict[str, Any], report: ImportReport) -> bool:
        """Map and write every known module of ``document``."""
        ok = True
        for mapping in self.modules:
            if not await self._write_module(symbol, mapping, document.get(mapping.module), report):
                ok = False
        return ok

    async def _write_module(
        self,
        symbol: str,
        mapping: ModuleMapping,
        payload: Any,
        report: ImportReport,
    ) -> bool:
        if payload is None:
            self.logger.warning(f"No {mapping.module} found for symbol: {symbol}")
            report.modules_skipped += 1
            return True

        try:
            doc = mapping.parse(symbol, payload)
            batches = mapping.map(symbol, doc)
        except MappingError as e:
            self.logger.error(str(e), extra={"extra_fields": e.to_dict()})
            report.mapping_errors += 1
            return False

        ok = True
        for table, records in batches:
            keyed, unkeyed = split_keyed(records, table.natural_key)
            if unkeyed:
                self.logger.warning(
                    f"Skipped {len(unkeyed)} {table.table_name} records for {symbol} "
                    f"missing part of ({', '.join(table.natural_key)})"
                )
                report.records_skipped += len(unkeyed)

            try:
                if table.policy is WritePolicy.REPLACE:
                    written = await self.executor.replace(table.model, symbol, keyed, table.natural_key)
                else:
                    written = await self.executor.upsert(table.model, table.natural_key, keyed)
            except UpsertError:
                report.write_errors += 1
                ok = False
                continue
            self.logger.debug(f"Wrote {written} rows to {table.table_name} for {symbol}")

        if not ok:
            return False

        report.modules_written += 1
        self.logger.info(f"Upserted {mapping.module} for symbol: {symbol}")

        if isinstance(doc, Price):
            try:
                await symbols_orm.update_symbol_snapshot(self.db, symbol, **price_snapshot(doc))
            except UpsertError:
                report.write_errors += 1
                return False
        return True


# =============================================================================
# IMPORT CYCLE
# =============================================================================


async def prepare_schema(db: Database, config: Settings | None = None) -> None:
    """Reset or ensure tables before any write; errors here are fatal."""
    config = config or default_settings
    if config.reset_schema_on_start:
        await reset_schema(db)
    else:
        await ensure_schema(db)


async def run_import(
    db: Database,
    provider: DocumentProvider,
    config: Settings | None = None,
    entries: Sequence[SymbolEntry] | None = None,
    screener: ScreenerService | None = None,
    logger: logging.Logger | None = None,
) -> ImportReport:
    """Run one import cycle and return its tally.

    ``entries`` skips symbol resolution (backfills, tests).
    """
    config = config or default_settings
    logger = logger or get_logger("jobs.importer")
    job_start = time.monotonic()

    await prepare_schema(db, config)

    if entries is None:
        entries = await resolve_symbols(config, screener, logger)

    importer = SymbolImporter(db, provider, logger)
    report = ImportReport()

    for index, entry in enumerate(entries):
        if index > 0:
            await _pause(config)
        with symbol_context(entry.symbol):
            if await importer.import_symbol(entry, report):
                report.symbols_succeeded += 1

    report.duration_ms = int((time.monotonic() - job_start) * 1000)
    logger.info(f"Import finished: {report.summary()}", extra={"extra_fields": report.as_dict()})
    return report


async def _pause(config: Settings) -> None:
    """Randomized politeness delay between remote fetches."""
    if config.fetch_delay_max <= 0:
        return
    await asyncio.sleep(random.uniform(config.fetch_delay_min, config.fetch_delay_max))
