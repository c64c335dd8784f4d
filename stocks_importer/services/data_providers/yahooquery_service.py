"""
YahooQuery Service - quote summary documents for the importer.

Fetches every module the importer maps, in one request per symbol, with
formatted values (``{"raw", "fmt", "longFmt"}`` triplets). yahooquery is
blocking, so calls run on a small thread pool behind retry and a circuit
breaker.

Usage:
    from stocks_importer.services.data_providers import YahooQueryService

    service = YahooQueryService(get_settings())
    document = await service.get_quote_summary("AAPL")
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from yahooquery import Ticker

from stocks_importer.core.config import Settings, settings as default_settings
from stocks_importer.core.exceptions import FetchError
from stocks_importer.core.logging import get_logger
from stocks_importer.mappers.registry import QUOTE_SUMMARY_MODULES

from .resilience import CircuitOpenError, ResilientExecutor, RetryExhaustedError


logger = get_logger("data_providers.yahooquery")

# Shared executor for blocking yahooquery calls
_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="yahooquery")


def _is_valid_response(data: Any) -> bool:
    """Check if yahooquery returned a document (not an error message)."""
    if data is None:
        return False
    if isinstance(data, str):
        # yahooquery returns error strings like "Quote not found for ticker symbol: XYZ"
        return False
    if not isinstance(data, dict):
        return False
    if "Quote not found" in str(data.get("error", "")):
        return False
    return True


class YahooQueryService:
    """Quote summary provider: one nested document per symbol."""

    def __init__(
        self,
        config: Settings | None = None,
        modules: Sequence[str] = QUOTE_SUMMARY_MODULES,
    ):
        self.config = config or default_settings
        self.modules = list(modules)
        self.resilience = ResilientExecutor(
            name="yahooquery",
            max_retries=self.config.external_api_retries,
        )

    def _fetch_quote_summary_sync(self, symbol: str) -> dict[str, Any] | None:
        """Fetch the quote summary document (blocking).

        Returns ``None`` when Yahoo answers with an error string for the
        symbol. Transport errors propagate for the retry layer.
        """
        ticker = Ticker(
            symbol,
            formatted=True,
            asynchronous=False,
            timeout=self.config.external_api_timeout,
        )
        response = ticker.get_modules(self.modules)

        if not isinstance(response, dict):
            logger.warning(f"yahooquery returned {type(response).__name__} for {symbol}")
            return None

        document = response.get(symbol, response.get(symbol.upper()))
        if not _is_valid_response(document):
            logger.warning(f"yahooquery has no quote summary for {symbol}: {document}")
            return None

        return document

    async def get_quote_summary(self, symbol: str) -> dict[str, Any] | None:
        """Get the quote summary document for ``symbol``.

        Returns ``None`` if Yahoo has no data for the symbol; raises
        ``FetchError`` if the request itself failed.
        """
        loop = asyncio.get_running_loop()

        async def _call() -> dict[str, Any] | None:
            return await loop.run_in_executor(_executor, self._fetch_quote_summary_sync, symbol)

        try:
            return await self.resilience.execute(_call)
        except CircuitOpenError as e:
            raise FetchError(f"yahooquery unavailable for {symbol}: {e}", details={"symbol": symbol}) from e
        except RetryExhaustedError as e:
            raise FetchError(f"yahooquery failed for {symbol}: {e}", details={"symbol": symbol}) from e
        except Exception as e:
            logger.warning(f"yahooquery quote summary failed for {symbol}: {e}")
            raise FetchError(f"yahooquery failed for {symbol}: {e}", details={"symbol": symbol}) from e
