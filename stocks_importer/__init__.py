"""Yahoo Finance screener and quote summary importer into a local SQLite mirror."""

__version__ = "1.0.0"
