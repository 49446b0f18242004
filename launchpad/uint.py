"""Unsigned integer range checks and the codec's error hierarchy.

Python integers never overflow, so the fixed widths of the pool layer
(uint8 decimals, uint128 sqrt prices, uint256 amounts) are enforced here
instead of by wrapping:

    from launchpad.constants import UINT8_BITS, UINT256_BITS
    from launchpad.uint import require_uint

    def encode(price: int, decimals: int) -> int:
        require_uint(price, UINT256_BITS, "price")
        require_uint(decimals, UINT8_BITS, "decimals")
        ...

A value that is negative or wider than its declared width raises
UintRangeError. Nothing is ever truncated.
"""

from __future__ import annotations


class PriceMathError(ArithmeticError):
    """Base class for price codec arithmetic errors."""

    pass


class UintRangeError(PriceMathError):
    """Value is negative or exceeds its unsigned bit width."""

    pass


class SqrtPriceOverflow(UintRangeError):
    """Encoded sqrt price does not fit in 128 bits."""

    pass


def uint_max(bits: int) -> int:
    """Largest value representable in an unsigned integer of `bits` bits."""
    return (1 << bits) - 1


def fits_uint(value: int, bits: int) -> bool:
    """Check if value fits in an unsigned `bits`-wide integer without raising."""
    return 0 <= value <= uint_max(bits)


def require_uint(value: int, bits: int, name: str = "value") -> int:
    """Validate that value is a non-negative int within `bits` bits.

    Args:
        value: Integer to validate
        bits: Declared unsigned width (8, 128, 160, 256, ...)
        name: Argument name for error messages

    Returns:
        The value unchanged

    Raises:
        TypeError: If value is not an int (bool is rejected too)
        UintRangeError: If value is negative or exceeds 2^bits - 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if fits_uint(value, bits):
        return value
    if value < 0:
        raise UintRangeError(f"Negative value cannot be uint{bits}: {name}={value}")
    raise UintRangeError(f"{name} exceeds uint{bits} max: {value}")


__all__ = [
    "PriceMathError",
    "UintRangeError",
    "SqrtPriceOverflow",
    "uint_max",
    "fits_uint",
    "require_uint",
]
