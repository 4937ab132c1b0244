"""Contract records: a tagged union over derivative types."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import AwareDatetime, Field

from ftx_derivatives.models.base import RawAmount, Record


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"


class DayAheadSwap(Record):
    """Next-day bitcoin/ether swap. Carries no monetary fields to normalize."""

    derivative_type: Literal["day_ahead_swap"] = "day_ahead_swap"
    id: int
    name: str | None = None
    min_increment: int
    date_live: AwareDatetime
    date_expires: AwareDatetime
    date_exercise: AwareDatetime
    open_interest: int
    multiplier: RawAmount
    label: str
    active: bool
    is_next_day: bool
    underlying_asset: str
    collateral_asset: str


class OptionContract(Record):
    """Call or put option. The strike is quoted in USD."""

    derivative_type: Literal["options_contract"] = "options_contract"
    id: int
    name: str | None = None
    is_call: bool
    strike_price: RawAmount
    min_increment: int
    date_live: AwareDatetime
    date_expires: AwareDatetime
    date_exercise: AwareDatetime
    open_interest: int
    multiplier: RawAmount
    label: str
    active: bool
    underlying_asset: str
    collateral_asset: str
    option_type: OptionType = Field(alias="type")


Contract = Annotated[DayAheadSwap | OptionContract, Field(discriminator="derivative_type")]
