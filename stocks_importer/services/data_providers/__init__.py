"""Data providers - centralized external API access."""

from .yahooquery_service import YahooQueryService


__all__ = [
    "YahooQueryService",
]
