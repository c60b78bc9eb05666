"""
Price oracle bound to one chain deployment.
"""

import logging
from decimal import Decimal

from dex_pricing.config.pricing import PricingProfile
from dex_pricing.core.storage.base import EntityStore
from dex_pricing.entities import Token
from dex_pricing.resolvers.base import PairResolver

from .native_price import get_native_price_in_usd
from .token_price import find_native_price_per_token
from .tracked import get_tracked_liquidity_usd, get_tracked_volume_usd

logger = logging.getLogger(__name__)


class PriceOracle:
    """
    Pricing entry points over a record store and a pair resolver.

    The oracle never writes records. Callers persist derived prices and the
    bundle's native USD price between ingestion steps.
    """

    def __init__(self, profile: PricingProfile, store: EntityStore, resolver: PairResolver):
        """
        Initialize the oracle.

        Args:
            profile: Pricing constants for the chain
            store: Token/Pair/Bundle record store
            resolver: Pair address lookup
        """
        self.profile = profile
        self.store = store
        self.resolver = resolver

    def is_whitelisted(self, address: str) -> bool:
        return self.profile.is_whitelisted(address)

    def native_price_in_usd(self) -> Decimal:
        """Native asset USD price from the stablecoin pairs."""
        return get_native_price_in_usd(self.store, self.profile)

    def derive_native_price(self, token: Token) -> Decimal:
        """Token price in native-asset units."""
        return find_native_price_per_token(token, self.store, self.resolver, self.profile)

    def tracked_volume_usd(
        self, amount0: Decimal, token0: Token, amount1: Decimal, token1: Token
    ) -> Decimal:
        """Tracked USD volume of a swap, priced with the stored bundle."""
        bundle = self.store.load_bundle()
        return get_tracked_volume_usd(bundle, amount0, token0, amount1, token1, self.is_whitelisted)

    def tracked_liquidity_usd(
        self, amount0: Decimal, token0: Token, amount1: Decimal, token1: Token
    ) -> Decimal:
        """Tracked USD liquidity of a deposit, priced with the stored bundle."""
        bundle = self.store.load_bundle()
        return get_tracked_liquidity_usd(bundle, amount0, token0, amount1, token1, self.is_whitelisted)

    def __repr__(self) -> str:
        return f"PriceOracle(chain={self.profile.chain})"
