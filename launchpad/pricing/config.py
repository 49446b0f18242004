"""Codec configuration."""

from dataclasses import dataclass

from launchpad.constants import PRICE_DECIMALS, Q64_RESOLUTION, UINT128_MAX


@dataclass(frozen=True)
class CodecConfig:
    """Fixed-point parameters for encoding and decoding sqrt prices.

    The defaults are the values the concentrated-liquidity pool expects;
    changing them produces results that are not compatible on-chain.

    Attributes:
        resolution_bits: Fractional bits of the fixed-point format (default: 64)
        output_decimals: Decimal convention of decoded prices (default: 18)
        max_sqrt_price: Largest sqrt price the encoder may emit (default: 2^128 - 1)
    """

    resolution_bits: int = Q64_RESOLUTION
    output_decimals: int = PRICE_DECIMALS
    max_sqrt_price: int = UINT128_MAX

    @property
    def output_unit(self) -> int:
        """One whole unit in the decoded price convention (10^output_decimals)."""
        return 10**self.output_decimals


# Default configuration instance
DEFAULT_CODEC_CONFIG = CodecConfig()
