"""Shared fixtures for pricing tests."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from dex_pricing.config.pricing import PricingProfile, StablecoinPair
from dex_pricing.core.storage.memory import InMemoryEntityStore
from dex_pricing.entities import Pair, Token
from dex_pricing.resolvers.static import StaticPairResolver

ADDRESSES = SimpleNamespace(
    native="0x1000000000000000000000000000000000000001",
    usdc="0x2000000000000000000000000000000000000002",
    usdt="0x3000000000000000000000000000000000000003",
    token="0x5000000000000000000000000000000000000005",
    other="0x6000000000000000000000000000000000000006",
    usdc_native_pair="0xa00000000000000000000000000000000000000a",
    native_usdt_pair="0xb00000000000000000000000000000000000000b",
)


@pytest.fixture
def addrs():
    """Test token and pair addresses."""
    return ADDRESSES


@pytest.fixture
def profile(addrs):
    """Profile with whitelist [native, usdc, usdt] and a threshold of 10."""
    return PricingProfile(
        chain="testnet",
        native_asset=addrs.native,
        stable_pairs=(
            StablecoinPair(address=addrs.usdc_native_pair, stable_is_token0=True, label="USDC/NATIVE"),
            StablecoinPair(address=addrs.native_usdt_pair, stable_is_token0=False, label="NATIVE/USDT"),
        ),
        whitelist=(addrs.native, addrs.usdc, addrs.usdt),
        minimum_liquidity_native=Decimal("10"),
    )


@pytest.fixture
def store():
    """Empty in-memory record store."""
    return InMemoryEntityStore()


@pytest.fixture
def resolver():
    """Empty static pair resolver."""
    return StaticPairResolver()


@pytest.fixture
def add_pair(store, resolver):
    """Store a pair and make it resolvable."""

    def _add_pair(
        address,
        token0,
        token1,
        reserve_native,
        token0_price=Decimal("0"),
        token1_price=Decimal("0"),
    ):
        pair = Pair(
            address=address,
            token0=token0,
            token1=token1,
            reserve_native=Decimal(reserve_native),
            token0_price=Decimal(token0_price),
            token1_price=Decimal(token1_price),
        )
        store.save_pair(pair)
        resolver.register(token0, token1, address)
        return pair

    return _add_pair


@pytest.fixture
def add_token(store):
    """Store a token with an optional derived native price."""

    def _add_token(address, derived_native_price=None):
        token = Token(
            address=address,
            derived_native_price=None if derived_native_price is None else Decimal(derived_native_price),
        )
        store.save_token(token)
        return token

    return _add_token
