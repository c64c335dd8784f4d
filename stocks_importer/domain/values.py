"""Value types shared by every quote summary model.

Yahoo's formatted responses wrap numbers and dates as
``{"raw": 1.5, "fmt": "1.50", "longFmt": "1.50"}``, send ``{}`` for
"no value", and occasionally send the bare scalar instead. ``Wrapped``
normalizes all three into ``WrappedValue | None``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WrappedValue(BaseModel):
    """A ``raw``/``fmt``/``longFmt`` triplet."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    raw: int | float | bool | str | None = None
    fmt: str | None = None
    long_fmt: str | None = Field(None, alias="longFmt")


def _coerce_wrapped(value: Any) -> Any:
    if value is None or isinstance(value, WrappedValue):
        return value
    if isinstance(value, Mapping):
        if len(value) == 0:
            return None
        return value
    if isinstance(value, (list, tuple)):
        raise ValueError("expected a wrapped value or scalar, got a list")
    return {"raw": value}


def _coerce_text(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Mapping):
        if len(value) == 0:
            return None
        if value.get("fmt") is not None:
            return value["fmt"]
        if value.get("raw") is not None:
            return str(value["raw"])
        return None
    raise ValueError(f"expected text, got {type(value).__name__}")


Wrapped = Annotated[WrappedValue | None, BeforeValidator(_coerce_wrapped)]
Text = Annotated[str | None, BeforeValidator(_coerce_text)]

# Lists/objects persisted verbatim as JSON text
JsonList = list[dict[str, Any]] | None


class YahooModel(BaseModel):
    """Base for quote summary sub-documents: camelCase in, snake_case out."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def raw(value: WrappedValue | None) -> Any:
    """``raw`` of a wrapped value, ``None`` when absent. Keeps 0/False/''."""
    if value is None:
        return None
    return value.raw


def fmt(value: WrappedValue | None) -> str | None:
    if value is None:
        return None
    return value.fmt
