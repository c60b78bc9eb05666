"""
Record store configuration for dex-pricing.
"""

from dataclasses import dataclass
from typing import Optional

from .base import BaseConfig


@dataclass
class DatabaseConfig(BaseConfig):
    """Redis connection settings for the Token/Pair/Bundle record store."""

    REDIS_HOST: str = BaseConfig.get_env("REDIS_HOST", "localhost")
    REDIS_PORT: int = BaseConfig.get_env_int("REDIS_PORT", 6379)
    REDIS_PASSWORD: Optional[str] = BaseConfig.get_env("REDIS_PASSWORD") or None
    REDIS_DB: int = BaseConfig.get_env_int("REDIS_DB", 0)
    REDIS_KEY_PREFIX: str = BaseConfig.get_env("REDIS_KEY_PREFIX", "pricing")

    CONNECTION_TIMEOUT: int = BaseConfig.get_env_int("CONNECTION_TIMEOUT", 30)

    def key_prefix_for_chain(self, chain_name: str) -> str:
        """Key namespace for one chain's records."""
        return f"{self.REDIS_KEY_PREFIX}.{chain_name}"

    def get_redis_connection_kwargs(self) -> dict:
        """Get Redis connection parameters."""
        kwargs = {
            "host": self.REDIS_HOST,
            "port": self.REDIS_PORT,
            "db": self.REDIS_DB,
            "decode_responses": True,
            "socket_timeout": self.CONNECTION_TIMEOUT,
            "socket_connect_timeout": self.CONNECTION_TIMEOUT,
        }

        # Only add password if it's actually set and not empty/whitespace
        if self.REDIS_PASSWORD and self.REDIS_PASSWORD.strip():
            kwargs["password"] = self.REDIS_PASSWORD.strip()

        return kwargs
