"""Decimal digit-length classifier for raw token amounts."""

from __future__ import annotations

from launchpad.constants import MAX_DECIMAL_DIGITS, UINT256_BITS
from launchpad.uint import require_uint

__all__ = ["count_decimals"]

# (threshold, digits) from 10^49 down to 10^1
_DIGIT_LADDER = tuple((10 ** (digits - 1), digits) for digits in range(MAX_DECIMAL_DIGITS, 1, -1))


def count_decimals(amount: int) -> int:
    """Count the decimal digits of a uint256 amount, capped at MAX_DECIMAL_DIGITS.

    Walks a descending ladder of exact comparisons against 10^49 ... 10^1.
    Anything at or above 10^49 reports 50 even though a uint256 can have up
    to 78 digits. Zero has one digit.

    Args:
        amount: Raw amount in smallest units

    Returns:
        Digit count in [1, 50]

    Raises:
        UintRangeError: If amount is negative or exceeds uint256
    """
    require_uint(amount, UINT256_BITS, "amount")
    for threshold, digits in _DIGIT_LADDER:
        if amount >= threshold:
            return digits
    return 1
