"""Price codec package.

This package converts launch prices into the sqrt-price encoding of a
concentrated-liquidity pool and back:
- CodecConfig: fixed-point parameters (Q64.64, 18-decimal output)
- adjust_decimals: decimal-scale adjustment ahead of the square root
- calculate_initial_price / decode_sqrt_price_x64: the codec itself
- to_smallest_unit / from_smallest_unit / price_to_x64: human-input helpers

Usage:
    from launchpad.pricing import calculate_initial_price, price_to_x64

    sqrt_price = calculate_initial_price(price_to_x64("0.007"), 18, 18)
"""

from launchpad.pricing.codec import calculate_initial_price, decode_sqrt_price_x64
from launchpad.pricing.config import DEFAULT_CODEC_CONFIG, CodecConfig
from launchpad.pricing.scaling import (
    DECIMAL_HIGH_PREC_CONTEXT,
    adjust_decimals,
    from_smallest_unit,
    price_to_x64,
    to_smallest_unit,
)

__all__ = [
    # Config
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    # Scaling
    "DECIMAL_HIGH_PREC_CONTEXT",
    "adjust_decimals",
    "to_smallest_unit",
    "from_smallest_unit",
    "price_to_x64",
    # Codec
    "calculate_initial_price",
    "decode_sqrt_price_x64",
]
