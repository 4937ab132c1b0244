"""Record conversion: normalize every monetary field of an API record.

Each convert_* method returns a structural copy of the record with its
monetary fields rescaled and every other field untouched. Conversion
fails on the first field that cannot be normalized; a partially
converted record is never returned.

Currency resolution, all through one CurrencyPrecisionTable:
- strikes, ticker prices and trade prices/fees use the quote currency
  (USD), whatever asset the contract settles in;
- ledger transactions use their own `asset`.
"""

from ftx_derivatives.models import (
    Contract,
    ContractTicker,
    OptionContract,
    Position,
    Trade,
    Transaction,
)
from ftx_derivatives.normalize import rescale, rescale_optional
from ftx_derivatives.precision import CurrencyPrecisionTable

_TRANSACTION_OPTIONAL_FIELDS = (
    "debit_pre_balance",
    "debit_post_balance",
    "credit_pre_balance",
    "credit_post_balance",
)


class RecordConverter:
    """Applies currency precision to API records.

    Args:
        table: Precision table consulted for every rescale.
    """

    def __init__(self, table: CurrencyPrecisionTable | None = None) -> None:
        self._table = table if table is not None else CurrencyPrecisionTable()

    @property
    def table(self) -> CurrencyPrecisionTable:
        return self._table

    def convert_contract(self, contract: Contract) -> Contract:
        """Normalize an option's strike; other contract variants pass through."""
        if isinstance(contract, OptionContract):
            # Strikes are USD-denominated regardless of the settlement asset.
            scale = self._table.quote_precision()
            return contract.model_copy(
                update={"strike_price": rescale(contract.strike_price, scale)}
            )
        return contract

    def convert_position(self, position: Position) -> Position:
        return position.model_copy(update={"contract": self.convert_contract(position.contract)})

    def convert_ticker(self, ticker: ContractTicker) -> ContractTicker:
        scale = self._table.quote_precision()
        update: dict = {
            "ask": rescale(ticker.ask, scale),
            "bid": rescale(ticker.bid, scale),
        }
        if ticker.last_trade is not None:
            update["last_trade"] = ticker.last_trade.model_copy(
                update={"price": rescale(ticker.last_trade.price, scale)}
            )
        return ticker.model_copy(update=update)

    def convert_trade(self, trade: Trade) -> Trade:
        scale = self._table.quote_precision()
        return trade.model_copy(
            update={
                "filled_price": rescale(trade.filled_price, scale),
                "fee": rescale(trade.fee, scale),
                "rebate": rescale(trade.rebate, scale),
                "premium": rescale(trade.premium, scale),
            }
        )

    def convert_transaction(self, transaction: Transaction) -> Transaction:
        """Normalize ledger amounts to the precision of the transaction's own asset.

        Raises:
            UnknownCurrencyError: If the asset is not in the table.
            PrecisionLossError: If an amount carries digits beyond the asset's scale.
        """
        scale = self._table.precision_of(transaction.asset)
        update: dict = {
            "amount": rescale(transaction.amount, scale),
            "net_change": rescale(transaction.net_change, scale),
        }
        for field in _TRANSACTION_OPTIONAL_FIELDS:
            update[field] = rescale_optional(getattr(transaction, field), scale)
        return transaction.model_copy(update=update)
