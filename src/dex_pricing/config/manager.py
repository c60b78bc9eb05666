"""
Configuration manager for dex-pricing.

Combines the configuration classes into a single interface.
"""

import logging
from typing import Any, Dict, Optional
from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .database import DatabaseConfig
from .pricing import PricingProfile

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager that combines all configuration classes.
    """

    def __init__(self, environment: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production)
        """
        self._environment = environment
        self._base_config = None
        self._database_config = None
        self._chain_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        try:
            self._base_config = BaseConfig()
            if self._environment:
                self._base_config.ENVIRONMENT = self._environment
                self._base_config._validate_config()

            self._database_config = DatabaseConfig()
            self._chain_config = ChainConfig()

            logger.info(f"Configuration initialized for environment: {self.environment}")

        except ConfigError:
            raise
        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def database(self) -> DatabaseConfig:
        """Get record store configuration."""
        return self._database_config

    @property
    def chains(self) -> ChainConfig:
        """Get chain configuration."""
        return self._chain_config

    def get_pricing_profile(self, chain_name: Optional[str] = None) -> PricingProfile:
        """Pricing profile for a chain, the default chain when omitted."""
        return self.chains.get_pricing_profile(chain_name or self.chains.DEFAULT_CHAIN)

    def validate_configuration(self) -> bool:
        """
        Validate all configuration settings.

        Returns:
            True if all configurations are valid

        Raises:
            ConfigError: If any configuration is invalid
        """
        try:
            if self.chains.DEFAULT_CHAIN not in self.chains.list_chains():
                raise ConfigError(f"Default chain has no pricing profile: {self.chains.DEFAULT_CHAIN}")

            for chain in self.chains.list_chains():
                profile = self.chains.get_pricing_profile(chain)
                if not profile.factory_address:
                    logger.warning(f"No factory address for {chain}")

            logger.info("Configuration validation successful")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise ConfigError(f"Configuration validation failed: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict() if self.base else {},
            "database": self.database.to_dict() if self.database else {},
            "chains": self.chains.to_dict() if self.chains else {},
        }

    def __repr__(self) -> str:
        """String representation of the configuration manager."""
        return f"ConfigManager(environment={self.environment})"


# Global configuration manager instance
_config_manager = None


def get_config(environment: Optional[str] = None, force_reload: bool = False) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment)
        _config_manager.validate_configuration()

    return _config_manager


def reload_config(environment: Optional[str] = None) -> ConfigManager:
    """Reload the global configuration manager."""
    return get_config(environment=environment, force_reload=True)
