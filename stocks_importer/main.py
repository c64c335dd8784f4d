"""Command-line entry point: one import cycle, then exit.

Exit codes: 0 when the cycle completed (even with per-symbol failures),
1 when storage or schema setup failed.
"""

from __future__ import annotations

import asyncio
import sys

from stocks_importer.core.config import Settings, get_settings
from stocks_importer.core.exceptions import ImporterError
from stocks_importer.core.logging import get_logger, setup_logging
from stocks_importer.database.connection import open_database
from stocks_importer.jobs.importer import ImportReport, run_import
from stocks_importer.services.data_providers import YahooQueryService


logger = get_logger("main")


async def import_cycle(config: Settings) -> ImportReport:
    async with open_database(config.database_path) as db:
        provider = YahooQueryService(config)
        return await run_import(db, provider, config)


def main() -> int:
    config = get_settings()
    setup_logging(config)

    logger.info("################### Import Start #######################")
    try:
        asyncio.run(import_cycle(config))
    except ImporterError as e:
        if not e.fatal:
            raise
        logger.error(f"Import aborted: {e.message}", extra={"extra_fields": e.to_dict()})
        return 1
    finally:
        logger.info("################### Import End #########################")
    return 0


if __name__ == "__main__":
    sys.exit(main())
