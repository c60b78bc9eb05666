"""
Tracked USD value of swaps and liquidity deposits.

Only amounts of whitelisted tokens count toward tracked totals. Volume and
liquidity share one combination routine and differ only by policy:

- volume: both sides whitelisted -> mean of the two USD amounts,
  one side -> that side's amount
- liquidity: both sides whitelisted -> sum of the two USD amounts,
  one side -> that side's amount doubled, since deposits are value-balanced
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from dex_pricing.constants import ONE_BD, TWO_BD, ZERO_BD
from dex_pricing.entities import Bundle, Token


@dataclass(frozen=True)
class TrackingPolicy:
    """
    How the USD amounts of a two-sided event combine.

    Attributes:
        name: Policy name
        both_divisor: Divides the summed amounts when both tokens are whitelisted
        single_multiplier: Scales the whitelisted side when only one token is
    """

    name: str
    both_divisor: Decimal
    single_multiplier: Decimal

    def __post_init__(self):
        if self.both_divisor <= ZERO_BD:
            raise ValueError(f"{self.name}: both_divisor must be positive")


VOLUME_POLICY = TrackingPolicy(name="volume", both_divisor=TWO_BD, single_multiplier=ONE_BD)
LIQUIDITY_POLICY = TrackingPolicy(name="liquidity", both_divisor=ONE_BD, single_multiplier=TWO_BD)


def token_price_usd(token: Token, bundle: Bundle) -> Decimal:
    """USD price of one token unit."""
    return token.derived_native_price_or_zero * bundle.native_price_usd


def tracked_amount_usd(
    bundle: Bundle,
    amount0: Decimal,
    token0: Token,
    amount1: Decimal,
    token1: Token,
    is_whitelisted: Callable[[str], bool],
    policy: TrackingPolicy,
) -> Decimal:
    """
    Combine the USD amounts of both sides of an event under a policy.

    Args:
        bundle: Bundle carrying the native asset USD price
        amount0: Amount of token0
        token0: First token
        amount1: Amount of token1
        token1: Second token
        is_whitelisted: Whitelist membership check
        policy: Combination policy

    Returns:
        Tracked USD amount, zero when neither token is whitelisted
    """
    tracked0 = is_whitelisted(token0.address)
    tracked1 = is_whitelisted(token1.address)

    if tracked0 and tracked1:
        total = amount0 * token_price_usd(token0, bundle) + amount1 * token_price_usd(token1, bundle)
        return total / policy.both_divisor

    if tracked0:
        return amount0 * token_price_usd(token0, bundle) * policy.single_multiplier

    if tracked1:
        return amount1 * token_price_usd(token1, bundle) * policy.single_multiplier

    return ZERO_BD


def get_tracked_volume_usd(
    bundle: Bundle,
    amount0: Decimal,
    token0: Token,
    amount1: Decimal,
    token1: Token,
    is_whitelisted: Callable[[str], bool],
) -> Decimal:
    """Tracked USD volume of a swap."""
    return tracked_amount_usd(bundle, amount0, token0, amount1, token1, is_whitelisted, VOLUME_POLICY)


def get_tracked_liquidity_usd(
    bundle: Bundle,
    amount0: Decimal,
    token0: Token,
    amount1: Decimal,
    token1: Token,
    is_whitelisted: Callable[[str], bool],
) -> Decimal:
    """Tracked USD liquidity of a deposit."""
    return tracked_amount_usd(bundle, amount0, token0, amount1, token1, is_whitelisted, LIQUIDITY_POLICY)
