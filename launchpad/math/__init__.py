"""Integer math primitives for the price codec.

This package provides:
- floor_sqrt / sqrt: integer floor square roots (Babylonian and seeded Newton)
- count_decimals: capped decimal digit classifier
"""

from launchpad.math.digits import count_decimals
from launchpad.math.sqrt import floor_sqrt, sqrt

__all__ = ["floor_sqrt", "sqrt", "count_decimals"]
