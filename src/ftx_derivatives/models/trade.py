"""Trade (execution) records. Prices and fees are quoted in USD."""

from enum import Enum

from pydantic import AwareDatetime

from ftx_derivatives.models.base import RawAmount, Record


class OrderType(str, Enum):
    CUSTOMER_LIMIT_ORDER = "customer_limit_order"


class TradeSide(str, Enum):
    BID = "bid"
    ASK = "ask"


class Trade(Record):
    id: int
    contract_id: str
    contract_label: str
    filled_price: RawAmount
    filled_size: int
    fee: RawAmount
    rebate: RawAmount
    premium: RawAmount
    created: AwareDatetime
    order_type: OrderType
    order_id: str
    state: str | None = None
    status_type: str
    side: TradeSide
    execution_time: AwareDatetime
