"""Batch jobs."""

from .importer import ImportReport, SymbolImporter, resolve_symbols, run_import


__all__ = [
    "ImportReport",
    "SymbolImporter",
    "resolve_symbols",
    "run_import",
]
