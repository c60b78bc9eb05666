"""
Configuration management for dex-pricing.

Use get_config() to access all configuration settings.

Example:
    from dex_pricing.config import get_config

    config = get_config()

    # Pricing constants for a chain
    profile = config.get_pricing_profile("avalanche")

    # RPC endpoint for the pair resolver
    rpc_url = config.chains.get_rpc_url("avalanche")

    # Redis settings for the record store
    redis_kwargs = config.database.get_redis_connection_kwargs()
"""

from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .database import DatabaseConfig
from .manager import ConfigManager, get_config, reload_config
from .pricing import (
    AVALANCHE_PROFILE,
    BUILTIN_PROFILES,
    ETHEREUM_PROFILE,
    PricingProfile,
    StablecoinPair,
)

__all__ = [
    "BaseConfig",
    "ConfigError",
    "ChainConfig",
    "DatabaseConfig",
    "ConfigManager",
    "get_config",
    "reload_config",
    "PricingProfile",
    "StablecoinPair",
    "AVALANCHE_PROFILE",
    "ETHEREUM_PROFILE",
    "BUILTIN_PROFILES",
]
