"""Client library for the FTX Derivatives (formerly LedgerX) API."""

from ftx_derivatives.balances import aggregate_balances
from ftx_derivatives.batch import fetch_many, fetch_many_settled
from ftx_derivatives.client import FTXDerivativesClient
from ftx_derivatives.config import ApiSettings, AppSettings, PrecisionSettings
from ftx_derivatives.convert import RecordConverter
from ftx_derivatives.exceptions import (
    DecimalError,
    DeserializationError,
    FTXDerivativesError,
    PrecisionLossError,
    TransportError,
    UnknownCurrencyError,
)
from ftx_derivatives.normalize import rescale, rescale_optional
from ftx_derivatives.precision import CurrencyPrecisionTable

__all__ = [
    "ApiSettings",
    "AppSettings",
    "CurrencyPrecisionTable",
    "DecimalError",
    "DeserializationError",
    "FTXDerivativesClient",
    "FTXDerivativesError",
    "PrecisionLossError",
    "PrecisionSettings",
    "RecordConverter",
    "TransportError",
    "UnknownCurrencyError",
    "aggregate_balances",
    "fetch_many",
    "fetch_many_settled",
    "rescale",
    "rescale_optional",
]
