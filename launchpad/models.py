"""Pydantic model tying a token pair's decimals metadata to the price codec.

Callers pass decimals explicitly per pair; there is no global token registry.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from launchpad.constants import UINT8_MAX
from launchpad.pricing.codec import calculate_initial_price, decode_sqrt_price_x64
from launchpad.pricing.config import DEFAULT_CODEC_CONFIG, CodecConfig
from launchpad.pricing.scaling import from_smallest_unit, price_to_x64

# Token decimals, stored on-chain as uint8
DecimalsMeta = Annotated[int, Field(ge=0, le=UINT8_MAX, description="Token decimals (uint8)")]


class TokenPair(BaseModel):
    """Base/quote token pair of a pool, described by its decimals.

    Prices are quoted as units of quote token per unit of base token.
    """

    model_config = ConfigDict(frozen=True)

    base_decimals: DecimalsMeta
    quote_decimals: DecimalsMeta
    base_symbol: str | None = None
    quote_symbol: str | None = None

    def initial_sqrt_price(
        self,
        price_in_smallest_unit: int,
        config: CodecConfig = DEFAULT_CODEC_CONFIG,
    ) -> int:
        """Encode a Q64.64 price as the pool's initial sqrt price."""
        return calculate_initial_price(
            price_in_smallest_unit, self.base_decimals, self.quote_decimals, config
        )

    def initial_sqrt_price_from_decimal(
        self,
        price: Decimal | str | int,
        config: CodecConfig = DEFAULT_CODEC_CONFIG,
    ) -> int:
        """Encode a human price (e.g. "0.007") as the pool's initial sqrt price."""
        return self.initial_sqrt_price(price_to_x64(price, config), config)

    def decode_price(self, sqrt_price_x64: int, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> Decimal:
        """Decode a sqrt price into a display Decimal.

        The result is the smallest-unit price ratio. It equals the human
        price when both tokens use the same decimals.
        """
        decoded = decode_sqrt_price_x64(sqrt_price_x64, config)
        return from_smallest_unit(decoded, config.output_decimals)


__all__ = ["DecimalsMeta", "TokenPair"]
