"""Custom exceptions for the FTX Derivatives client.

Every error surfaced by the client derives from FTXDerivativesError so
callers can catch the whole family with a single except clause.
"""

from decimal import Decimal


class FTXDerivativesError(Exception):
    """Base exception for all client errors."""


class TransportError(FTXDerivativesError):
    """Raised when the HTTP request fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DeserializationError(FTXDerivativesError):
    """Raised when a response body is not the JSON shape we expect.

    The raw body is kept on the exception for diagnosis.
    """

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body


class DecimalError(FTXDerivativesError):
    """Raised when a value cannot be represented as an exact decimal."""


class PrecisionLossError(DecimalError):
    """Raised when narrowing a decimal would discard nonzero digits."""

    def __init__(self, value: Decimal, scale: int) -> None:
        super().__init__(f"cannot rescale {value} to {scale} decimal places without rounding")
        self.value = value
        self.scale = scale


class UnknownCurrencyError(FTXDerivativesError):
    """Raised when a currency code has no entry in the precision table."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"unknown currency: {currency!r}")
        self.currency = currency
