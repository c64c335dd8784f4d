"""Symbols to import and the category they were discovered under."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SymbolEntry(BaseModel):
    """A ticker plus the screener bucket or watchlist it came from."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    category_id: str = Field(..., description="Screener id or watchlist id")
    category_name: str = Field(..., description="Display name of the category")
    company_name: str | None = Field(None, description="Name reported by the source, if any")

    @field_validator("symbol", mode="before")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


def merge_entries(*sources: Iterable[SymbolEntry]) -> list[SymbolEntry]:
    """Concatenate sources, keeping the first entry seen for each symbol."""
    seen: set[str] = set()
    merged: list[SymbolEntry] = []
    for source in sources:
        for entry in source:
            if entry.symbol in seen:
                continue
            seen.add(entry.symbol)
            merged.append(entry)
    return merged
