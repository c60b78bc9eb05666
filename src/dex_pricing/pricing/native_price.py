"""
Native asset USD price from the designated stablecoin pairs.
"""

import logging
from decimal import Decimal
from typing import List, Tuple

from dex_pricing.config.pricing import PricingProfile, StablecoinPair
from dex_pricing.constants import ZERO_BD
from dex_pricing.core.storage.base import EntityStore
from dex_pricing.entities import Pair

logger = logging.getLogger(__name__)


def native_side_reserve(pair: Pair, stable: StablecoinPair) -> Decimal:
    """Reserve of the native asset in a stablecoin pair."""
    return pair.reserve1 if stable.stable_is_token0 else pair.reserve0


def stable_side_price(pair: Pair, stable: StablecoinPair) -> Decimal:
    """Stablecoin units per one native asset."""
    return pair.token0_price if stable.stable_is_token0 else pair.token1_price


def get_native_price_in_usd(store: EntityStore, profile: PricingProfile) -> Decimal:
    """
    Price of the native asset in USD.

    With both stablecoin pairs present the pair prices are weighted by each
    pair's native-side reserve, so the deeper pair dominates. A single present
    pair is used as is. No pairs, or two pairs with zero combined native
    reserve, give zero.

    Args:
        store: Record store
        profile: Pricing profile naming the stablecoin pairs

    Returns:
        Native asset USD price, zero when unavailable
    """
    present: List[Tuple[StablecoinPair, Pair]] = []
    for stable in profile.stable_pairs:
        pair = store.load_pair(stable.address)
        if pair is not None:
            present.append((stable, pair))

    if len(present) == 1:
        stable, pair = present[0]
        return stable_side_price(pair, stable)

    if not present:
        logger.debug(f"No stablecoin pairs loaded for {profile.chain}")
        return ZERO_BD

    total_native = sum((native_side_reserve(pair, stable) for stable, pair in present), ZERO_BD)
    if total_native == ZERO_BD:
        logger.debug(f"Stablecoin pairs on {profile.chain} hold no native liquidity")
        return ZERO_BD

    price = ZERO_BD
    for stable, pair in present:
        weight = native_side_reserve(pair, stable) / total_native
        price += stable_side_price(pair, stable) * weight
    return price
