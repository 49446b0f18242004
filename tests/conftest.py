"""Pytest configuration and fixtures."""

from dataclasses import dataclass

import pytest

from launchpad.models import TokenPair
from launchpad.pricing.config import CodecConfig

# =============================================================================
# Token decimals (mainnet conventions)
# =============================================================================

WETH_DECIMALS = 18
USDC_DECIMALS = 6


@pytest.fixture
def equal_pair() -> TokenPair:
    """Launch token quoted in an 18-decimal native token."""
    return TokenPair(base_decimals=18, quote_decimals=18, base_symbol="TKN", quote_symbol="WBERA")


@pytest.fixture
def weth_usdc_pair() -> TokenPair:
    """WETH priced in USDC: quote has fewer decimals than base."""
    return TokenPair(
        base_decimals=WETH_DECIMALS,
        quote_decimals=USDC_DECIMALS,
        base_symbol="WETH",
        quote_symbol="USDC",
    )


@pytest.fixture
def usdc_weth_pair() -> TokenPair:
    """USDC priced in WETH: quote has more decimals than base."""
    return TokenPair(
        base_decimals=USDC_DECIMALS,
        quote_decimals=WETH_DECIMALS,
        base_symbol="USDC",
        quote_symbol="WETH",
    )


@dataclass(frozen=True)
class RoundTripCase:
    """A human price and the 18-decimal value it should decode back to."""

    price: str
    expected_decoded: int


@pytest.fixture
def round_trip_cases() -> list[RoundTripCase]:
    """Representative launch prices for equal-decimal round trips."""
    return [
        RoundTripCase("0.007", 7 * 10**15),
        RoundTripCase("1", 10**18),
        RoundTripCase("0.000001", 10**12),
        RoundTripCase("2500", 2500 * 10**18),
        RoundTripCase("123.456789", 123_456_789 * 10**12),
    ]


@pytest.fixture
def q96_config() -> CodecConfig:
    """Non-default resolution, for checking that config flows through."""
    return CodecConfig(resolution_bits=96, max_sqrt_price=2**160 - 1)
