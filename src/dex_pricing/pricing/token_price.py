"""
Token price in native-asset units through the whitelist.
"""

import logging
from decimal import Decimal

from dex_pricing.config.pricing import PricingProfile
from dex_pricing.constants import ONE_BD, ZERO_BD
from dex_pricing.core.storage.base import EntityStore
from dex_pricing.entities import Token
from dex_pricing.resolvers.base import PairResolver

logger = logging.getLogger(__name__)


def find_native_price_per_token(
    token: Token,
    store: EntityStore,
    resolver: PairResolver,
    profile: PricingProfile,
) -> Decimal:
    """
    Derive a token's price in native-asset units.

    Walks the whitelist in order and prices the token from the first pair
    against a whitelist token whose reserve_native is strictly above the
    profile's minimum liquidity. The whitelist token's own price is read from
    its stored record, never re-derived, so the search is a single hop.

    A zero result means either a zero-valued token or no usable pair; the two
    cases are not distinguished.

    Args:
        token: Token to price
        store: Record store for pairs and whitelist tokens
        resolver: Pair address lookup
        profile: Pricing profile with the whitelist and threshold

    Returns:
        Price in native-asset units, zero when no qualifying pair exists
    """
    if profile.is_native_asset(token.address):
        return ONE_BD

    threshold = profile.minimum_liquidity_native

    for anchor in profile.whitelist:
        if anchor == token.address:
            continue

        pair_address = resolver.resolve_pair_address(token.address, anchor)
        if pair_address is None:
            continue

        pair = store.load_pair(pair_address)
        if pair is None:
            logger.debug(f"Pair {pair_address} resolved but not stored, skipping")
            continue

        if pair.reserve_native <= threshold:
            logger.debug(
                f"Pair {pair.address} below liquidity threshold "
                f"({pair.reserve_native} <= {threshold}), skipping"
            )
            continue

        if pair.token0 == token.address:
            # token1 per our token * native per token1
            return pair.token1_price * _stored_native_price(store, pair.token1)
        if pair.token1 == token.address:
            # token0 per our token * native per token0
            return pair.token0_price * _stored_native_price(store, pair.token0)

        logger.warning(f"Pair {pair.address} does not contain {token.address}, skipping")

    return ZERO_BD


def _stored_native_price(store: EntityStore, address: str) -> Decimal:
    """Cached derived price of a stored token, zero if unknown."""
    other = store.load_token(address)
    if other is None:
        logger.debug(f"Token {address} not stored, pricing as zero")
        return ZERO_BD
    return other.derived_native_price_or_zero
