"""Position records."""

from enum import Enum

from pydantic import Field

from ftx_derivatives.models.base import Record
from ftx_derivatives.models.contract import Contract


class PositionType(str, Enum):
    LONG = "long"
    SHORT = "short"


class Position(Record):
    """An open or settled position in a single contract."""

    id: int
    size: int
    assigned_size: int
    position_type: PositionType = Field(alias="type")
    exercise_instruction: str | None = None
    has_settled: bool
    contract: Contract
