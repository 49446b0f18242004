"""Numeric constants shared by the price codec.

Bit widths match the on-chain integer types the pool layer consumes.
"""

# Unsigned integer widths
UINT8_BITS = 8
UINT128_BITS = 128
UINT160_BITS = 160
UINT256_BITS = 256

# Unsigned integer maxima
UINT8_MAX = (1 << UINT8_BITS) - 1
UINT128_MAX = (1 << UINT128_BITS) - 1
UINT160_MAX = (1 << UINT160_BITS) - 1
UINT256_MAX = (1 << UINT256_BITS) - 1

# Q64.64 fixed point: lower 64 bits are the fractional part
Q64_RESOLUTION = 64
Q64 = 1 << Q64_RESOLUTION

# Decoded prices use an 18-decimal convention
PRICE_DECIMALS = 18
ONE_18 = 10**PRICE_DECIMALS

# Digit classifier ceiling. A uint256 can have 78 digits; callers rely on the cap.
MAX_DECIMAL_DIGITS = 50

__all__ = [
    "UINT8_BITS",
    "UINT128_BITS",
    "UINT160_BITS",
    "UINT256_BITS",
    "UINT8_MAX",
    "UINT128_MAX",
    "UINT160_MAX",
    "UINT256_MAX",
    "Q64_RESOLUTION",
    "Q64",
    "PRICE_DECIMALS",
    "ONE_18",
    "MAX_DECIMAL_DIGITS",
]
