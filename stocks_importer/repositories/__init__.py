"""Write and lookup access to the SQLite store."""

from .upsert_orm import UpsertExecutor


__all__ = ["UpsertExecutor"]
