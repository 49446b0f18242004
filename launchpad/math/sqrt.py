"""Integer square root algorithms.

Two interchangeable floor square roots, both integer-only:

- floor_sqrt: Babylonian convergence loop. Canonical, used by the price codec.
  Accepts any non-negative int.
- sqrt: Newton-Raphson with a bit-length seed and a fixed seven rounds,
  matching the metered on-chain implementation. Bounded to uint256 inputs.

Both return the largest r with r * r <= x. Division truncates, which the
refinement step depends on.
"""

from __future__ import annotations

from launchpad.constants import UINT256_BITS
from launchpad.uint import UintRangeError, require_uint

__all__ = ["floor_sqrt", "sqrt", "NEWTON_ROUNDS"]

# Seven rounds converge from the bit-length seed for any 256-bit input
NEWTON_ROUNDS = 7

# (threshold exponent, seed shift) pairs, widest first
_SEED_BANDS = ((128, 64), (64, 32), (32, 16), (16, 8), (8, 4), (4, 2))


def floor_sqrt(x: int) -> int:
    """Floor square root by Babylonian iteration.

    Starts at (x + 1) // 2, which is zero-safe, and iterates
    z = (x // z + z) // 2 while the estimate strictly decreases. The last
    decreasing value is the floor root.

    Args:
        x: Non-negative integer of any size

    Returns:
        floor(sqrt(x))

    Raises:
        TypeError: If x is not an int
        UintRangeError: If x is negative
    """
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"floor_sqrt requires int, got {type(x).__name__}")
    if x < 0:
        raise UintRangeError(f"floor_sqrt requires a non-negative integer, got {x}")

    z = (x + 1) // 2
    y = x
    while z < y:
        y = z
        z = (x // z + z) // 2
    return y


def sqrt(x: int) -> int:
    """Floor square root by seeded Newton-Raphson with a fixed round count.

    The seed is derived from the bit length of x in power-of-two bands so it
    lands within a factor of two of the true root; seven rounds of
    r = (r + x // r) // 2 then suffice for any uint256. The last round can
    overshoot to floor + 1, so the smaller of r and x // r is returned.

    Args:
        x: uint256 value

    Returns:
        floor(sqrt(x))

    Raises:
        TypeError: If x is not an int
        UintRangeError: If x is negative or wider than 256 bits
    """
    require_uint(x, UINT256_BITS, "x")
    if x == 0:
        return 0

    xx = x
    r = 1
    for threshold, shift in _SEED_BANDS:
        if xx >= 1 << threshold:
            xx >>= threshold
            r <<= shift
    if xx >= 1 << 2:
        r <<= 1

    for _ in range(NEWTON_ROUNDS):
        r = (r + x // r) >> 1

    r1 = x // r
    return r if r < r1 else r1
