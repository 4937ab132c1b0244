"""Per-currency balances derived from ledger transactions."""

from collections.abc import Iterable
from decimal import Decimal, Inexact, InvalidOperation, Rounded, localcontext

from ftx_derivatives.exceptions import DecimalError
from ftx_derivatives.logging import get_logger
from ftx_derivatives.models import Transaction
from ftx_derivatives.normalize import rescale, scale_of
from ftx_derivatives.precision import CurrencyPrecisionTable

logger = get_logger(__name__)


def aggregate_balances(
    transactions: Iterable[Transaction],
    table: CurrencyPrecisionTable,
) -> dict[str, Decimal]:
    """Sum each transaction's net_change into a running total per asset.

    net_change is normalized against the transaction's own asset before it
    is added, so raw and already-converted transactions give the same
    result. Signs are kept as delivered. Assets without transactions get
    no entry.

    Raises:
        UnknownCurrencyError: If a transaction's asset is not in the table.
        PrecisionLossError: If a net_change has digits beyond its asset's scale.
        DecimalError: If a sum cannot be represented exactly.
    """
    balances: dict[str, Decimal] = {}

    for txn in transactions:
        change = rescale(txn.net_change, table.precision_of(txn.asset))
        current = balances.get(txn.asset)
        if current is None:
            balances[txn.asset] = change
            continue

        # Same asset, same table entry: operands always share a scale.
        assert scale_of(current) == scale_of(change), (txn.asset, current, change)
        balances[txn.asset] = _exact_add(current, change)

    logger.debug("balances_aggregated", currencies=len(balances), balances=balances)
    return balances


def _exact_add(left: Decimal, right: Decimal) -> Decimal:
    with localcontext() as ctx:
        # One digit more than the longer operand holds any exact sum.
        ctx.prec = max(len(left.as_tuple().digits), len(right.as_tuple().digits)) + 1
        ctx.traps[Inexact] = True
        ctx.traps[Rounded] = True
        try:
            return left + right
        except (Inexact, Rounded, InvalidOperation) as exc:
            raise DecimalError(f"balance overflow adding {right} to {left}") from exc
