"""Local watchlists: every ``*.json`` file in the watchlist directory.

Two shapes are accepted::

    ["AAPL", "MSFT"]                                   # id = file stem
    {"id": "core", "name": "Core Holdings", "symbols": ["AAPL", "MSFT"]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from stocks_importer.core.logging import get_logger
from stocks_importer.domain.symbols import SymbolEntry, merge_entries


logger = get_logger("services.watchlist")


class WatchlistFile(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    symbols: list[str] = Field(default_factory=list)


def _parse_watchlist(path: Path, payload: Any) -> WatchlistFile:
    if isinstance(payload, list):
        return WatchlistFile(
            id=path.stem,
            name=path.stem.replace("_", " ").replace("-", " ").title(),
            symbols=payload,
        )
    if isinstance(payload, dict):
        return WatchlistFile(
            id=payload.get("id") or path.stem,
            name=payload.get("name") or path.stem.replace("_", " ").title(),
            symbols=payload.get("symbols", []),
        )
    raise ValueError(f"expected a list or an object, got {type(payload).__name__}")


def load_watchlist(path: Path) -> list[SymbolEntry]:
    """Entries of one watchlist file. Raises on unreadable or malformed files."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    watchlist = _parse_watchlist(path, payload)
    return merge_entries(
        SymbolEntry(symbol=symbol, category_id=watchlist.id, category_name=watchlist.name)
        for symbol in watchlist.symbols
        if symbol.strip()
    )


def load_watchlists(directory: str | Path) -> list[SymbolEntry]:
    """Entries of every watchlist file, de-duplicated by symbol (first file wins)."""
    root = Path(directory)
    if not root.is_dir():
        logger.info(f"No watchlist directory at {root}")
        return []

    loaded: list[list[SymbolEntry]] = []
    for path in sorted(root.glob("*.json")):
        try:
            entries = load_watchlist(path)
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Skipping watchlist {path.name}: {e}")
            continue
        logger.info(f"Loaded {len(entries)} symbols from watchlist {path.name}")
        loaded.append(entries)

    return merge_entries(*loaded)
