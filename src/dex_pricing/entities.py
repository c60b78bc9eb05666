"""
Core records for pair-graph pricing.

Token, Pair and Bundle mirror the records kept by the indexing layer. The
pricing functions only read them; ingestion owns their creation and updates.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from dex_pricing.constants import ZERO_BD, normalize_address


@dataclass
class Token:
    """
    Token record.

    Attributes:
        address: Token contract address (lowercase)
        symbol: Ticker symbol (optional)
        decimals: ERC20 decimals (optional)
        derived_native_price: Price in native-asset units, None if never derived
    """

    address: str
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    derived_native_price: Optional[Decimal] = None

    def __post_init__(self):
        self.address = normalize_address(self.address)

    @property
    def derived_native_price_or_zero(self) -> Decimal:
        """Derived price with the unset state read as zero."""
        if self.derived_native_price is None:
            return ZERO_BD
        return self.derived_native_price


@dataclass
class Pair:
    """
    Constant-product pair record.

    Prices follow the V2 subgraph convention: token0_price is token0 units
    per one token1 (reserve0 / reserve1) and token1_price is token1 units per
    one token0 (reserve1 / reserve0).

    Attributes:
        address: Pair contract address (lowercase)
        token0: Address of the first token
        token1: Address of the second token
        reserve0: Reserve balance of token0
        reserve1: Reserve balance of token1
        reserve_native: Total pair value in native-asset units
        token0_price: Spot price of token1 expressed in token0
        token1_price: Spot price of token0 expressed in token1
    """

    address: str
    token0: str
    token1: str
    reserve0: Decimal = ZERO_BD
    reserve1: Decimal = ZERO_BD
    reserve_native: Decimal = ZERO_BD
    token0_price: Decimal = ZERO_BD
    token1_price: Decimal = ZERO_BD

    def __post_init__(self):
        self.address = normalize_address(self.address)
        self.token0 = normalize_address(self.token0)
        self.token1 = normalize_address(self.token1)

        for name in ("reserve0", "reserve1", "reserve_native", "token0_price", "token1_price"):
            if getattr(self, name) < ZERO_BD:
                raise ValueError(f"Pair {self.address}: {name} must be non-negative")

    @classmethod
    def from_reserves(
        cls,
        address: str,
        token0: str,
        token1: str,
        reserve0: Decimal,
        reserve1: Decimal,
        reserve_native: Decimal = ZERO_BD,
    ) -> "Pair":
        """
        Build a pair and sync both spot prices from its reserves.

        A side whose opposite reserve is zero keeps a zero price.
        """
        token0_price = reserve0 / reserve1 if reserve1 != ZERO_BD else ZERO_BD
        token1_price = reserve1 / reserve0 if reserve0 != ZERO_BD else ZERO_BD
        return cls(
            address=address,
            token0=token0,
            token1=token1,
            reserve0=reserve0,
            reserve1=reserve1,
            reserve_native=reserve_native,
            token0_price=token0_price,
            token1_price=token1_price,
        )

    def has_token(self, address: str) -> bool:
        """Check whether a token is one of the pair's two sides."""
        address = normalize_address(address)
        return address in (self.token0, self.token1)


@dataclass
class Bundle:
    """Process-wide price bundle holding the native asset's USD price."""

    native_price_usd: Decimal = ZERO_BD
