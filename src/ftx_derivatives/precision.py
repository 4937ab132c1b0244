"""Currency precision table: fractional-digit count per currency code.

A single table drives every rescale in the client. Prices, fees and
strikes resolve through the quote currency; ledger amounts resolve
through the transaction's own asset. Unknown currencies are a hard error,
never a silent default.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from ftx_derivatives.exceptions import UnknownCurrencyError

if TYPE_CHECKING:
    from ftx_derivatives.config import PrecisionSettings

DEFAULT_PRECISIONS: Mapping[str, int] = MappingProxyType({"USD": 2, "CBTC": 8, "ETH": 9})
DEFAULT_QUOTE_CURRENCY = "USD"


class CurrencyPrecisionTable:
    """Read-only lookup from currency code to number of decimal places.

    Args:
        precisions: Currency code to fractional-digit count. Defaults to
            DEFAULT_PRECISIONS.
        quote_currency: Currency that prices, fees and strikes are quoted in.
    """

    def __init__(
        self,
        precisions: Mapping[str, int] | None = None,
        quote_currency: str = DEFAULT_QUOTE_CURRENCY,
    ) -> None:
        table = dict(DEFAULT_PRECISIONS if precisions is None else precisions)
        for currency, digits in table.items():
            if digits < 0:
                raise ValueError(f"precision for {currency} must be non-negative, got {digits}")
        self._precisions: Mapping[str, int] = MappingProxyType(table)
        self._quote_currency = quote_currency

    @classmethod
    def from_settings(cls, settings: PrecisionSettings) -> CurrencyPrecisionTable:
        """Build a table from PrecisionSettings (environment-configurable)."""
        return cls(settings.currencies, quote_currency=settings.quote_currency)

    @property
    def quote_currency(self) -> str:
        return self._quote_currency

    @property
    def currencies(self) -> Mapping[str, int]:
        return self._precisions

    def precision_of(self, currency: str) -> int:
        """Return the number of decimal places for a currency.

        Raises:
            UnknownCurrencyError: If the currency has no entry.
        """
        try:
            return self._precisions[currency]
        except KeyError:
            raise UnknownCurrencyError(currency) from None

    def quote_precision(self) -> int:
        """Return the number of decimal places for the quote currency."""
        return self.precision_of(self._quote_currency)

    def __contains__(self, currency: object) -> bool:
        return currency in self._precisions

    def __repr__(self) -> str:
        return f"CurrencyPrecisionTable({dict(self._precisions)!r}, quote_currency={self._quote_currency!r})"
