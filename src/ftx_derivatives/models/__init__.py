"""Typed API records decoded from FTX Derivatives JSON responses."""

from ftx_derivatives.models.base import DataEnvelope, ListEnvelope, ListMeta, RawAmount
from ftx_derivatives.models.contract import Contract, DayAheadSwap, OptionContract, OptionType
from ftx_derivatives.models.position import Position, PositionType
from ftx_derivatives.models.ticker import ContractTicker, ContractTickerLastTrade
from ftx_derivatives.models.trade import OrderType, Trade, TradeSide
from ftx_derivatives.models.transaction import Transaction, TransactionState, TransactionType

__all__ = [
    "Contract",
    "ContractTicker",
    "ContractTickerLastTrade",
    "DataEnvelope",
    "DayAheadSwap",
    "ListEnvelope",
    "ListMeta",
    "OptionContract",
    "OptionType",
    "OrderType",
    "Position",
    "PositionType",
    "RawAmount",
    "Trade",
    "TradeSide",
    "Transaction",
    "TransactionState",
    "TransactionType",
]
