"""Core infrastructure: settings, logging, exceptions."""

from .config import Settings, get_settings, settings
from .exceptions import (
    FetchError,
    ImporterError,
    MappingError,
    SchemaError,
    StorageError,
    UpsertError,
)
from .logging import get_logger, setup_logging, symbol_context


__all__ = [
    "FetchError",
    "ImporterError",
    "MappingError",
    "SchemaError",
    "Settings",
    "StorageError",
    "UpsertError",
    "get_logger",
    "get_settings",
    "settings",
    "setup_logging",
    "symbol_context",
]
