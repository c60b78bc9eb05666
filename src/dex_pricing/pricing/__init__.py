"""Native asset, token and tracked-value pricing."""

from .native_price import get_native_price_in_usd
from .oracle import PriceOracle
from .token_price import find_native_price_per_token
from .tracked import (
    LIQUIDITY_POLICY,
    VOLUME_POLICY,
    TrackingPolicy,
    get_tracked_liquidity_usd,
    get_tracked_volume_usd,
    tracked_amount_usd,
)

__all__ = [
    "PriceOracle",
    "get_native_price_in_usd",
    "find_native_price_per_token",
    "get_tracked_volume_usd",
    "get_tracked_liquidity_usd",
    "tracked_amount_usd",
    "TrackingPolicy",
    "VOLUME_POLICY",
    "LIQUIDITY_POLICY",
]
