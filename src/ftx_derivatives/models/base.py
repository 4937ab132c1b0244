"""Shared base model, monetary field type and response envelopes."""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, PlainValidator

T = TypeVar("T")


def _parse_raw_amount(value: Any) -> int | Decimal:
    """Decode a monetary wire value without guessing its scale.

    JSON integers stay integers (implicit-scale mantissa). Strings and
    floats become Decimal; floats go through repr so 1.1 stays 1.1.
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a monetary amount")
    if isinstance(value, (int, Decimal)):
        parsed = value
    elif isinstance(value, float):
        parsed = Decimal(repr(value))
    elif isinstance(value, str):
        if "_" in value:
            raise ValueError(f"digit separators are not allowed: {value!r}")
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"not a decimal number: {value!r}") from None
    else:
        raise ValueError(f"unsupported monetary value: {value!r}")

    if isinstance(parsed, Decimal) and not parsed.is_finite():
        raise ValueError(f"non-finite monetary value: {value!r}")
    return parsed


RawAmount = Annotated[int | Decimal, PlainValidator(_parse_raw_amount)]


class Record(BaseModel):
    """Immutable API record. Unknown keys from the venue are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ListMeta(Record):
    """Paging metadata returned alongside list payloads."""

    total_count: int
    next: str | None = None
    previous: str | None = None
    limit: int
    offset: int


class ListEnvelope(Record, Generic[T]):
    """`{meta, data}` wrapper used by list endpoints."""

    meta: ListMeta
    data: list[T]


class DataEnvelope(Record, Generic[T]):
    """`{data}` wrapper used by single-resource endpoints."""

    data: T
