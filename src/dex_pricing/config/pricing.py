"""
Per-deployment pricing profiles.

A PricingProfile carries every constant the pricing functions depend on: the
native asset, the two stablecoin pairs used to price it in USD, the ordered
whitelist of anchor tokens and the minimum pair liquidity. The same logic
runs against any chain by swapping the profile.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Dict, FrozenSet, Tuple

from .base import ConfigError
from dex_pricing.constants import ZERO_BD, normalize_address


@dataclass(frozen=True)
class StablecoinPair:
    """
    A USD-stablecoin / native-asset pair used for the native USD price.

    Attributes:
        address: Pair contract address
        stable_is_token0: True when the stablecoin is token0 of the pair
        label: Human readable name for logs
    """

    address: str
    stable_is_token0: bool
    label: str = ""

    def __post_init__(self):
        object.__setattr__(self, "address", normalize_address(self.address))


@dataclass(frozen=True)
class PricingProfile:
    """
    Immutable pricing constants for one chain deployment.

    Attributes:
        chain: Chain name
        native_asset: Address of the wrapped native asset
        stable_pairs: The two stablecoin / native-asset pairs
        whitelist: Anchor tokens, most authoritative first
        minimum_liquidity_native: Pair reserve_native must exceed this to be priced from
        factory_address: V2 factory used to resolve pair addresses
    """

    chain: str
    native_asset: str
    stable_pairs: Tuple[StablecoinPair, StablecoinPair]
    whitelist: Tuple[str, ...]
    minimum_liquidity_native: Decimal
    factory_address: str = ""
    _whitelist_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "native_asset", normalize_address(self.native_asset))
        object.__setattr__(self, "stable_pairs", tuple(self.stable_pairs))
        whitelist = tuple(normalize_address(address) for address in self.whitelist)
        object.__setattr__(self, "whitelist", whitelist)
        object.__setattr__(self, "_whitelist_set", frozenset(whitelist))
        if self.factory_address:
            object.__setattr__(self, "factory_address", normalize_address(self.factory_address))
        self._validate()

    def _validate(self):
        if len(self.stable_pairs) != 2:
            raise ConfigError(
                f"{self.chain}: exactly two stablecoin pairs are required, got {len(self.stable_pairs)}"
            )
        if not self.whitelist:
            raise ConfigError(f"{self.chain}: whitelist must not be empty")
        if len(self._whitelist_set) != len(self.whitelist):
            raise ConfigError(f"{self.chain}: whitelist contains duplicate addresses")
        if not isinstance(self.minimum_liquidity_native, Decimal):
            raise ConfigError(f"{self.chain}: minimum liquidity must be a Decimal")
        if self.minimum_liquidity_native < ZERO_BD:
            raise ConfigError(f"{self.chain}: minimum liquidity must be non-negative")

    def is_whitelisted(self, address: str) -> bool:
        """Check whitelist membership."""
        return normalize_address(address) in self._whitelist_set

    def is_native_asset(self, address: str) -> bool:
        """Check whether an address is the chain's native asset."""
        return normalize_address(address) == self.native_asset

    def with_threshold(self, minimum_liquidity_native: Decimal) -> "PricingProfile":
        """Return a copy of this profile with another liquidity threshold."""
        return replace(self, minimum_liquidity_native=minimum_liquidity_native)


AVALANCHE_PROFILE = PricingProfile(
    chain="avalanche",
    native_asset="0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7",  # WAVAX
    stable_pairs=(
        StablecoinPair(
            address="0x1d704f88fbdfff582bc46167e450f6f8dab83e64",
            stable_is_token0=False,
            label="WAVAX/BUSD",
        ),
        StablecoinPair(
            address="0x9ee0a4e21bd333a6bb2ab298194320b8daa26516",
            stable_is_token0=True,
            label="USDT/WAVAX",
        ),
    ),
    whitelist=(
        "0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7",  # WAVAX
        "0xaEb044650278731Ef3DC244692AB9F64C78FfaEA",  # BUSD
        "0xde3A24028580884448a5397872046a019649b084",  # USDT
        "0x9b71805C8D82E0DA861cA3C2b6c11A331Bd6A318",  # WETH
    ),
    minimum_liquidity_native=Decimal("10"),
    factory_address="0xefa94DE7a4656D787667C749f7E1223D71E9FD88",
)

ETHEREUM_PROFILE = PricingProfile(
    chain="ethereum",
    native_asset="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",  # WETH
    stable_pairs=(
        StablecoinPair(
            address="0xA478c2975Ab1Ea89e8196811F51A7B7Ade33eB11",
            stable_is_token0=True,
            label="DAI/WETH",
        ),
        StablecoinPair(
            address="0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc",
            stable_is_token0=True,
            label="USDC/WETH",
        ),
    ),
    whitelist=(
        "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",  # WETH
        "0x6B175474E89094C44Da98b954EedeAC495271d0F",  # DAI
        "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",  # USDC
        "0xdAC17F958D2ee523a2206206994597C13D831ec7",  # USDT
        "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599",  # WBTC
    ),
    minimum_liquidity_native=Decimal("2"),
    factory_address="0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",  # Uniswap V2
)

BUILTIN_PROFILES: Dict[str, PricingProfile] = {
    AVALANCHE_PROFILE.chain: AVALANCHE_PROFILE,
    ETHEREUM_PROFILE.chain: ETHEREUM_PROFILE,
}
