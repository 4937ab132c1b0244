"""Contract ticker records."""

from pydantic import AwareDatetime

from ftx_derivatives.models.base import RawAmount, Record


class ContractTickerLastTrade(Record):
    id: int
    price: RawAmount
    size: int
    time: AwareDatetime


class ContractTicker(Record):
    """Top of book and last trade for one contract."""

    ask: RawAmount
    bid: RawAmount
    volume_24h: int
    last_trade: ContractTickerLastTrade | None = None
    time: AwareDatetime
