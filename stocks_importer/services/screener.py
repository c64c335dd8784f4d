"""Yahoo predefined screeners as a symbol source.

Usage:
    from stocks_importer.services.screener import ScreenerService

    entries = await ScreenerService().fetch_all()
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from pydantic import ValidationError
from yahooquery import Screener

from stocks_importer.core.config import Settings, settings as default_settings
from stocks_importer.core.logging import get_logger
from stocks_importer.domain.symbols import SymbolEntry, merge_entries

from .data_providers.resilience import RetryExhaustedError, retry_async


logger = get_logger("services.screener")

_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="screener")

# Screener id -> display name
SCREENER_NAMES: dict[str, str] = {
    "day_gainers": "Day Gainers",
    "day_losers": "Day Losers",
    "most_actives": "Most Actives",
    "high_yield_bond": "High Yield Bonds",
    "most_shorted_stocks": "Most Shorted Stocks",
    "undervalued_large_caps": "Undervalued Large Caps",
    "aggressive_small_caps": "Aggressive Small Caps",
    "growth_technology_stocks": "Growth Technology Stocks",
    "small_cap_gainers": "Small Cap Gainers",
    "portfolio_anchors": "Portfolio Anchors",
    "conservative_foreign_funds": "Conservative Foreign Funds",
}


def screener_name(screener_id: str) -> str:
    return SCREENER_NAMES.get(screener_id, screener_id.replace("_", " ").title())


def parse_screen(screener_id: str, payload: Any) -> list[SymbolEntry]:
    """Entries from one screener result; a non-dict payload (error text) yields none."""
    if not isinstance(payload, dict):
        logger.warning(f"No stock data found for {screener_name(screener_id)} ({screener_id}): {payload}")
        return []

    quotes = payload.get("quotes")
    if not isinstance(quotes, list):
        logger.warning(f"No stock data found for {screener_name(screener_id)} ({screener_id})")
        return []

    entries = []
    for quote in quotes:
        if not isinstance(quote, dict) or not quote.get("symbol"):
            continue
        try:
            entries.append(
                SymbolEntry(
                    symbol=quote["symbol"],
                    category_id=screener_id,
                    category_name=screener_name(screener_id),
                    company_name=quote.get("longName") or quote.get("shortName"),
                )
            )
        except ValidationError as e:
            logger.warning(f"Skipping screener quote {quote.get('symbol')}: {e}")
    return entries


class ScreenerService:
    """Symbols from each configured screener, ``count`` per screen."""

    def __init__(self, config: Settings | None = None):
        self.config = config or default_settings

    def _fetch_screen_sync(self, screener_id: str) -> Any:
        screener = Screener(timeout=self.config.external_api_timeout)
        result = screener.get_screeners([screener_id], count=self.config.screener_count)
        if isinstance(result, dict):
            return result.get(screener_id, result)
        return result

    async def fetch_screen(self, screener_id: str) -> list[SymbolEntry]:
        """One screen; failures are logged and produce no symbols."""
        logger.info(f"Fetching stocks for {screener_name(screener_id)} ({screener_id})")
        loop = asyncio.get_running_loop()

        async def _call() -> Any:
            return await loop.run_in_executor(_executor, self._fetch_screen_sync, screener_id)

        try:
            payload = await retry_async(_call, max_attempts=self.config.external_api_retries)
        except RetryExhaustedError as e:
            logger.error(f"Error fetching stocks for {screener_name(screener_id)} ({screener_id}): {e}")
            return []
        except Exception as e:
            logger.error(f"Error while fetching stocks for {screener_name(screener_id)} ({screener_id}): {e}")
            return []

        entries = parse_screen(screener_id, payload)
        logger.info(f"{len(entries)} symbols in {screener_name(screener_id)}")
        return entries

    async def fetch_all(self, screener_ids: Sequence[str] | None = None) -> list[SymbolEntry]:
        """Every configured screen, de-duplicated by symbol (first screen wins)."""
        ids = list(screener_ids) if screener_ids is not None else self.config.screener_ids
        results = []
        for screener_id in ids:
            results.append(await self.fetch_screen(screener_id))
        return merge_entries(*results)
