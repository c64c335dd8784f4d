"""Helpers turning typed sub-documents into flat table records.

Mappers are pure: they take a symbol and a validated model and return
``list[dict]`` keyed by column name. Presence is decided with ``is None``
only, so ``0``, ``False`` and ``""`` reach the database unchanged.
"""

from __future__ import annotations

import json
from collections.abc import Collection, Iterable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from stocks_importer.domain.values import WrappedValue


Record = dict[str, Any]

T = TypeVar("T")


def to_json(value: Any) -> str | None:
    """Deterministic JSON text (sorted keys) or ``None``."""
    if value is None:
        return None
    return json.dumps(value, sort_keys=True, default=str)


def flatten(model: BaseModel, exclude: Collection[str] = ()) -> Record:
    """Project a model onto its field names.

    Wrapped values collapse to ``raw``; lists and dicts become JSON text.
    Nested models must be excluded and mapped explicitly by the caller.
    """
    record: Record = {}
    for name in type(model).model_fields:
        if name in exclude:
            continue
        value = getattr(model, name)
        if isinstance(value, WrappedValue):
            value = value.raw
        elif isinstance(value, (list, dict)):
            value = to_json(value)
        elif isinstance(value, BaseModel):
            raise TypeError(f"{type(model).__name__}.{name} is nested; exclude it and map it explicitly")
        record[name] = value
    return record


def entries(items: Sequence[T] | None) -> list[T]:
    """A list field that may be absent, as a list."""
    if items is None:
        return []
    return list(items)


def singleton(symbol: str, model: BaseModel) -> list[Record]:
    return [{"symbol": symbol, **flatten(model)}]


def missing_key_parts(record: Record, natural_key: Iterable[str]) -> list[str]:
    return [column for column in natural_key if record.get(column) is None]


def split_keyed(
    records: Iterable[Record],
    natural_key: Sequence[str],
) -> tuple[list[Record], list[Record]]:
    """Partition records into (writable, missing part of the natural key)."""
    keyed: list[Record] = []
    unkeyed: list[Record] = []
    for record in records:
        if missing_key_parts(record, natural_key):
            unkeyed.append(record)
        else:
            keyed.append(record)
    return keyed, unkeyed
