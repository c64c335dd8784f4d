"""Logging configuration with per-symbol context tracking."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings, settings as default_settings


# Symbol currently being imported, attached to every record emitted meanwhile
symbol_var: ContextVar[Optional[str]] = ContextVar("symbol", default=None)


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    def __init__(self, include_location: bool = False):
        super().__init__()
        self.include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        symbol = symbol_var.get()
        if symbol:
            log_data["symbol"] = symbol

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.include_location:
            log_data["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter: ``Oct 16 09:30:01 (I) [AAPL] message``."""

    LEVEL_LABELS = {
        "CRITICAL": "(E)",
        "ERROR": "(E)",
        "WARNING": "(W)",
        "INFO": "(I)",
        "DEBUG": "(D)",
    }

    def format(self, record: logging.LogRecord) -> str:
        symbol = symbol_var.get()
        sym = f"[{symbol}] " if symbol else ""
        timestamp = datetime.now().strftime("%b %d %H:%M:%S")
        label = self.LEVEL_LABELS.get(record.levelname, "(?)")
        base = f"{timestamp} {label} {sym}{record.getMessage()}"

        if hasattr(record, "extra_fields") and record.extra_fields:
            base += " " + json.dumps(record.extra_fields, default=str)

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def _build_formatter(config: Settings) -> logging.Formatter:
    if config.log_format == "json":
        return StructuredFormatter(include_location=config.debug)
    return TextFormatter()


def setup_logging(config: Settings | None = None) -> None:
    """Configure console, size-rotated and daily-rotated file logging."""
    config = config or default_settings
    level = getattr(logging, config.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = _build_formatter(config)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / config.log_file_name

    rotating = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=config.log_max_bytes,
        backupCount=config.log_backup_count,
        encoding="utf-8",
    )
    rotating.setLevel(level)
    rotating.setFormatter(formatter)
    root_logger.addHandler(rotating)

    daily = logging.handlers.TimedRotatingFileHandler(
        log_dir / f"{log_path.stem}.daily{log_path.suffix}",
        when="midnight",
        encoding="utf-8",
    )
    daily.setLevel(max(level, logging.INFO))
    daily.setFormatter(formatter)
    root_logger.addHandler(daily)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("yahooquery").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the stocks_importer prefix."""
    return logging.getLogger(f"stocks_importer.{name}")


@contextmanager
def symbol_context(symbol: str) -> Iterator[None]:
    """Tag every log record emitted inside the block with ``symbol``."""
    token = symbol_var.set(symbol)
    try:
        yield
    finally:
        symbol_var.reset(token)
