"""Q64.64 sqrt-price codec for concentrated-liquidity pool initialisation.

Encode: Q64.64 price -> decimal adjustment -> floor square root -> uint128.
Decode: uint160 sqrt price -> square -> two truncating shifts -> 18-decimal price.

The encoder's price argument is the human price (quote per base) as a
Q64.64 integer, see price_to_x64. Its result is the Q64.64 square root of
the smallest-unit price ratio, which is what the pool stores. Decoding that
value gives the smallest-unit ratio in the 18-decimal convention, so with
equal decimals decode(encode(x)) recovers the human price within a few units
of the last decimal place.

Intermediates are Python ints, so squaring a 160-bit value has the 320-bit
headroom it needs. Results are range checked instead of wrapped.
"""

from __future__ import annotations

import structlog

from launchpad.constants import UINT160_BITS, UINT256_BITS
from launchpad.math.sqrt import floor_sqrt
from launchpad.pricing.config import DEFAULT_CODEC_CONFIG, CodecConfig
from launchpad.pricing.scaling import adjust_decimals
from launchpad.uint import SqrtPriceOverflow, require_uint

__all__ = ["calculate_initial_price", "decode_sqrt_price_x64"]

logger = structlog.get_logger()


def calculate_initial_price(
    price_in_smallest_unit: int,
    base_decimals: int,
    quote_decimals: int,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> int:
    """Encode a price as a Q64.64 sqrt price for pool initialisation.

    Args:
        price_in_smallest_unit: uint256 price as Q64.64 (human price * 2^64)
        base_decimals: Decimals of the base token (uint8)
        quote_decimals: Decimals of the quote token (uint8)
        config: Fixed-point parameters

    Returns:
        floor(sqrt(adjusted price)) as a uint128

    Raises:
        UintRangeError: If an input is outside its unsigned width
        SqrtPriceOverflow: If the root exceeds config.max_sqrt_price
    """
    scaled = adjust_decimals(price_in_smallest_unit, base_decimals, quote_decimals, config)
    sqrt_price = floor_sqrt(scaled)

    if sqrt_price > config.max_sqrt_price:
        logger.warning(
            "sqrt_price_overflow",
            price=price_in_smallest_unit,
            base_decimals=base_decimals,
            quote_decimals=quote_decimals,
            sqrt_price=sqrt_price,
            max_sqrt_price=config.max_sqrt_price,
        )
        raise SqrtPriceOverflow(f"Sqrt price exceeds uint128 max: {sqrt_price} > {config.max_sqrt_price}")

    logger.debug(
        "initial_price_encoded",
        price=price_in_smallest_unit,
        base_decimals=base_decimals,
        quote_decimals=quote_decimals,
        sqrt_price_x64=sqrt_price,
    )
    return sqrt_price


def decode_sqrt_price_x64(sqrt_price_x64: int, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> int:
    """Decode a Q64.64 sqrt price into an 18-decimal price.

    price = ((s * s) >> 64) * 10^18 >> 64

    Both shifts truncate. The input is accepted as a uint160 (the pool's
    wire width); values emitted by calculate_initial_price fit in 128 bits.

    Raises:
        UintRangeError: If the input is not a uint160 or the result exceeds uint256
    """
    require_uint(sqrt_price_x64, UINT160_BITS, "sqrt_price_x64")

    ratio = (sqrt_price_x64 * sqrt_price_x64) >> config.resolution_bits
    price = (ratio * config.output_unit) >> config.resolution_bits
    return require_uint(price, UINT256_BITS, "decoded price")
