"""Decimal-scale adjustment and human-price conversion helpers.

adjust_decimals prepares a Q64.64 price for square-rooting by reserving the
fractional bits of the result and moving the price between the decimal
conventions of the base and quote tokens.

The Decimal helpers only parse and format human input. The codec itself is
integer-only.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow

import structlog

from launchpad.constants import UINT8_BITS, UINT256_BITS
from launchpad.pricing.config import DEFAULT_CODEC_CONFIG, CodecConfig
from launchpad.uint import UintRangeError, require_uint

__all__ = [
    "DECIMAL_HIGH_PREC_CONTEXT",
    "adjust_decimals",
    "to_smallest_unit",
    "from_smallest_unit",
    "price_to_x64",
]

logger = structlog.get_logger()

# 78 digits of precision: enough for any uint256 value (up to ~10^77)
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78, rounding=ROUND_HALF_UP)


def adjust_decimals(
    price: int,
    base_decimals: int,
    quote_decimals: int,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> int:
    """Shift a price left by the fixed-point resolution and rescale decimals.

    The shift happens first so that the square root taken afterwards keeps
    its fractional bits instead of losing them to integer truncation.

    - quote_decimals > base_decimals: multiply by 10^(quote - base)
    - base_decimals > quote_decimals: floor-divide by 10^(base - quote)
    - equal: unchanged

    The division branch truncates. Price content finer than the decimal gap
    is dropped silently; this matches the on-chain result and is kept as is.

    Args:
        price: uint256 price (Q64.64 human price for the encoder)
        base_decimals: Decimals of the base token (uint8)
        quote_decimals: Decimals of the quote token (uint8)
        config: Fixed-point parameters

    Returns:
        Scaled price ready for the square root. Not bounded to 256 bits.

    Raises:
        UintRangeError: If price is not a uint256 or a decimals value not a uint8
    """
    require_uint(price, UINT256_BITS, "price")
    require_uint(base_decimals, UINT8_BITS, "base_decimals")
    require_uint(quote_decimals, UINT8_BITS, "quote_decimals")

    scaled = price << config.resolution_bits
    if quote_decimals > base_decimals:
        scaled *= 10 ** (quote_decimals - base_decimals)
    elif base_decimals > quote_decimals:
        divisor = 10 ** (base_decimals - quote_decimals)
        remainder = scaled % divisor
        scaled //= divisor
        if remainder:
            logger.debug(
                "decimal_adjustment_truncated",
                price=price,
                base_decimals=base_decimals,
                quote_decimals=quote_decimals,
                dropped_remainder=remainder,
            )
    return scaled


def _to_decimal(value: Decimal | str | int, name: str) -> Decimal:
    """Parse a human number into a finite, non-negative Decimal."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, str, int)):
        raise TypeError(f"{name} must be Decimal, str or int, got {type(value).__name__}")
    try:
        d = value if isinstance(value, Decimal) else Decimal(value)
    except InvalidOperation as err:
        raise ValueError(f"{name} is not a decimal number: {value!r}") from err
    if not d.is_finite():
        raise ValueError(f"{name} must be finite, got {d}")
    if d < 0:
        raise ValueError(f"{name} must be non-negative, got {d}")
    return d


def to_smallest_unit(amount: Decimal | str | int, decimals: int) -> int:
    """Convert a human amount (e.g. "1.5") to smallest units.

    Uses ROUND_HALF_UP for digits beyond the token's precision.

    Raises:
        ValueError: If amount is negative, non-finite or unparseable
        UintRangeError: If decimals is not a uint8 or the result exceeds uint256
    """
    require_uint(decimals, UINT8_BITS, "decimals")
    d = _to_decimal(amount, "amount")
    try:
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            scaled = d.scaleb(decimals).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, Overflow) as err:
        raise UintRangeError(f"amount exceeds uint256 max: {d} at {decimals} decimals") from err
    return require_uint(int(scaled), UINT256_BITS, "amount")


def from_smallest_unit(amount: int, decimals: int) -> Decimal:
    """Convert smallest units back to a human Decimal for display."""
    require_uint(amount, UINT256_BITS, "amount")
    require_uint(decimals, UINT8_BITS, "decimals")
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(amount).scaleb(-decimals)


def price_to_x64(price: Decimal | str | int, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> int:
    """Convert a human price (quote per base) to the encoder's Q64.64 input.

    Example:
        price_to_x64("0.007") == round(0.007 * 2^64)

    Raises:
        ValueError: If price is negative, non-finite or unparseable
        UintRangeError: If the fixed-point value exceeds uint256
    """
    d = _to_decimal(price, "price")
    try:
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            scaled = (d * (1 << config.resolution_bits)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, Overflow) as err:
        raise UintRangeError(f"price exceeds uint256 max in fixed point: {d}") from err
    return require_uint(int(scaled), UINT256_BITS, "price")
