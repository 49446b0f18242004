"""Launchpad price codec - fixed-point sqrt-price math for pool initialisation."""

from launchpad.constants import (
    MAX_DECIMAL_DIGITS,
    ONE_18,
    PRICE_DECIMALS,
    Q64,
    Q64_RESOLUTION,
    UINT8_BITS,
    UINT8_MAX,
    UINT128_BITS,
    UINT128_MAX,
    UINT160_BITS,
    UINT160_MAX,
    UINT256_BITS,
    UINT256_MAX,
)
from launchpad.math import count_decimals, floor_sqrt, sqrt
from launchpad.models import DecimalsMeta, TokenPair
from launchpad.pricing import (
    DEFAULT_CODEC_CONFIG,
    CodecConfig,
    adjust_decimals,
    calculate_initial_price,
    decode_sqrt_price_x64,
    from_smallest_unit,
    price_to_x64,
    to_smallest_unit,
)
from launchpad.uint import PriceMathError, SqrtPriceOverflow, UintRangeError, require_uint

__version__ = "0.1.0"
__all__ = [
    # Math
    "floor_sqrt",
    "sqrt",
    "count_decimals",
    # Codec
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    "adjust_decimals",
    "calculate_initial_price",
    "decode_sqrt_price_x64",
    "to_smallest_unit",
    "from_smallest_unit",
    "price_to_x64",
    # Models
    "DecimalsMeta",
    "TokenPair",
    # Errors
    "PriceMathError",
    "UintRangeError",
    "SqrtPriceOverflow",
    "require_uint",
    # Constants
    "MAX_DECIMAL_DIGITS",
    "ONE_18",
    "PRICE_DECIMALS",
    "Q64",
    "Q64_RESOLUTION",
    "UINT8_BITS",
    "UINT128_BITS",
    "UINT160_BITS",
    "UINT256_BITS",
    "UINT8_MAX",
    "UINT128_MAX",
    "UINT160_MAX",
    "UINT256_MAX",
    "__version__",
]
