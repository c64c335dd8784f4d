"""SQLite storage: connection handle, ORM tables and schema lifecycle."""

from .connection import Database, get_sqlite_url, open_database
from .orm import Base, Stock
from .schema import ensure_schema, list_tables, reset_schema


__all__ = [
    "Base",
    "Database",
    "Stock",
    "ensure_schema",
    "get_sqlite_url",
    "list_tables",
    "open_database",
    "reset_schema",
]
