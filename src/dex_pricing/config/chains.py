"""
Chain-specific configuration for dex-pricing.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from .base import BaseConfig
from .pricing import BUILTIN_PROFILES, PricingProfile

logger = logging.getLogger(__name__)


def threshold_env_key(chain_name: str) -> str:
    """Environment variable overriding a chain's liquidity threshold."""
    return f"{chain_name.upper()}_MIN_LIQUIDITY_THRESHOLD_NATIVE"


@dataclass
class ChainConfig(BaseConfig):
    """Chain-specific configuration for different blockchains."""

    # Default chain settings
    DEFAULT_CHAIN: str = BaseConfig.get_env("DEFAULT_CHAIN", "avalanche")

    # Chain-specific RPC URLs
    AVALANCHE_RPC_URL: str = BaseConfig.get_env(
        "AVALANCHE_RPC_URL", "https://api.avax.network/ext/bc/C/rpc"
    )
    ETHEREUM_RPC_URL: str = BaseConfig.get_env(
        "ETHEREUM_RPC_URL", "https://eth.llamarpc.com"
    )

    # Chain IDs
    AVALANCHE_CHAIN_ID: int = 43114
    ETHEREUM_CHAIN_ID: int = 1

    # Resolver retry settings
    MAX_RETRY_ATTEMPTS: int = BaseConfig.get_env_int("MAX_RETRY_ATTEMPTS", 3)

    @property
    def supported_chains(self) -> Dict[str, Dict]:
        """Get configuration for all supported chains."""
        return {
            "avalanche": {
                "chain_id": self.AVALANCHE_CHAIN_ID,
                "rpc_url": self.AVALANCHE_RPC_URL,
                "native_token": "AVAX",
                "explorer_url": "https://snowtrace.io",
            },
            "ethereum": {
                "chain_id": self.ETHEREUM_CHAIN_ID,
                "rpc_url": self.ETHEREUM_RPC_URL,
                "native_token": "ETH",
                "explorer_url": "https://etherscan.io",
            },
        }

    def list_chains(self) -> List[str]:
        """Names of chains with a pricing profile."""
        return [chain for chain in self.supported_chains if chain in BUILTIN_PROFILES]

    def get_chain_config(self, chain_name: str) -> Dict:
        """Get configuration for a specific chain."""
        if chain_name not in self.supported_chains:
            raise ValueError(f"Unsupported chain: {chain_name}")
        return self.supported_chains[chain_name]

    def get_rpc_url(self, chain_name: str) -> str:
        """Get RPC URL for a specific chain."""
        return self.get_chain_config(chain_name)["rpc_url"]

    def get_chain_id(self, chain_name: str) -> int:
        """Get chain ID for a specific chain."""
        return self.get_chain_config(chain_name)["chain_id"]

    def get_pricing_profile(self, chain_name: str) -> PricingProfile:
        """
        Get the pricing profile for a chain.

        <CHAIN>_MIN_LIQUIDITY_THRESHOLD_NATIVE overrides the built-in threshold
        when set, e.g. AVALANCHE_MIN_LIQUIDITY_THRESHOLD_NATIVE.
        Thresholds are in native-asset units of that chain.

        Args:
            chain_name: Name of the blockchain (avalanche, ethereum)

        Returns:
            PricingProfile for the chain

        Raises:
            ValueError: If the chain has no profile
        """
        self.get_chain_config(chain_name)
        profile = BUILTIN_PROFILES.get(chain_name)
        if profile is None:
            raise ValueError(f"No pricing profile for chain: {chain_name}")

        threshold = self.get_env_decimal(threshold_env_key(chain_name))
        if threshold is not None:
            logger.info(f"Overriding {chain_name} liquidity threshold: {threshold}")
            profile = profile.with_threshold(threshold)

        return profile
