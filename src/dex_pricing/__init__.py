"""
Whitelist-anchored price oracle for constant-product DEX pairs.

Derives the native asset's USD price from stablecoin pairs, each token's price
in native-asset units through a single whitelist hop, and the tracked USD
value of swaps and liquidity deposits.
"""

from dex_pricing.entities import Bundle, Pair, Token
from dex_pricing.pricing.oracle import PriceOracle

__all__ = [
    "Bundle",
    "Pair",
    "Token",
    "PriceOracle",
]
