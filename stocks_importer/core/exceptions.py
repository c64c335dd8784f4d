"""Importer exception hierarchy.

Fatal errors (``StorageError``, ``SchemaError``) stop the run. The rest are
caught by the importer at symbol or sub-document granularity.
"""

from __future__ import annotations

from typing import Any


class ImporterError(Exception):
    """Base importer exception with structured context."""

    error_code: str = "IMPORTER_ERROR"
    message: str = "An unexpected importer error occurred"
    fatal: bool = False

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Structured form for log ``extra_fields``."""
        return {
            "error": self.error_code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


class StorageError(ImporterError):
    """Storage file or connection could not be opened."""

    error_code = "STORAGE_ERROR"
    message = "Storage unavailable"
    fatal = True


class SchemaError(ImporterError):
    """DDL failed while creating or resetting tables."""

    error_code = "SCHEMA_ERROR"
    message = "Schema setup failed"
    fatal = True


class FetchError(ImporterError):
    """Remote data source failed for a request."""

    error_code = "FETCH_ERROR"
    message = "External data source unavailable"


class MappingError(ImporterError):
    """A sub-document did not match its expected shape."""

    error_code = "MAPPING_ERROR"
    message = "Sub-document could not be mapped"

    def __init__(self, module: str, symbol: str, cause: Exception):
        self.module = module
        self.symbol = symbol
        super().__init__(
            message=f"Cannot map {module} for {symbol}: {cause}",
            details={"module": module, "symbol": symbol},
        )


class UpsertError(ImporterError):
    """A write against one table failed."""

    error_code = "UPSERT_ERROR"
    message = "Write failed"

    def __init__(
        self,
        table: str,
        key: dict[str, Any],
        record: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.table = table
        self.key = key
        self.record = record or {}
        super().__init__(
            message=f"Write to {table} failed for {key}: {cause}",
            details={"table": table, "key": key, "record": self.record},
        )
