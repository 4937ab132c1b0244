"""Exact rescaling of raw monetary amounts to a currency's precision.

The API delivers money in two wire forms:
- integers, which are the mantissa at the currency's native scale
  (500 at scale 2 is 5.00), and
- decimals, whose own scale may be wider or narrower than the currency's.

Rescaling never rounds. Widening appends zeros; narrowing is only allowed
when every discarded digit is zero.
"""

from decimal import Decimal, InvalidOperation, localcontext

from ftx_derivatives.exceptions import DecimalError, PrecisionLossError

RawAmount = int | Decimal


def rescale(amount: RawAmount, scale: int) -> Decimal:
    """Return `amount` as a Decimal with exactly `scale` fractional digits.

    Args:
        amount: Integer mantissa or Decimal value.
        scale: Target number of fractional digits (non-negative).

    Raises:
        PrecisionLossError: If narrowing would discard a nonzero digit.
        DecimalError: If the amount is not finite or does not fit the
            decimal context.
    """
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    if isinstance(amount, bool):
        raise DecimalError(f"boolean is not a monetary amount: {amount!r}")
    if isinstance(amount, int):
        return _attach_scale(amount, scale)
    if isinstance(amount, Decimal):
        return _rescale_decimal(amount, scale)
    raise DecimalError(f"unsupported amount type: {type(amount).__name__}")


def rescale_optional(amount: RawAmount | None, scale: int) -> Decimal | None:
    """Rescale an optional amount, passing None through."""
    if amount is None:
        return None
    return rescale(amount, scale)


def scale_of(value: Decimal) -> int:
    """Number of fractional digits carried by a Decimal (0 for positive exponents)."""
    exponent = value.as_tuple().exponent
    if not isinstance(exponent, int):
        raise DecimalError(f"non-finite decimal has no scale: {value}")
    return max(-exponent, 0)


def _attach_scale(mantissa: int, scale: int) -> Decimal:
    # Rebuild from the digit tuple so the context precision never rounds it.
    sign, digits, _ = Decimal(mantissa).as_tuple()
    return Decimal((sign, digits, -scale))


def _rescale_decimal(value: Decimal, scale: int) -> Decimal:
    if not value.is_finite():
        raise DecimalError(f"non-finite decimal: {value}")

    _, digits, exponent = value.as_tuple()
    quantum = Decimal((0, (1,), -scale))
    with localcontext() as ctx:
        # Room for every digit of the widened coefficient, trailing zeros included.
        ctx.prec = max(ctx.prec, len(digits) + max(exponent, 0) + scale + 1)
        try:
            rescaled = value.quantize(quantum)
        except InvalidOperation as exc:
            raise DecimalError(f"cannot rescale {value} to {scale} decimal places") from exc

    if rescaled != value:
        raise PrecisionLossError(value, scale)
    return rescaled
