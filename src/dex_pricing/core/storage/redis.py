"""
Redis record store implementation.

Each record is a Redis hash keyed ``{prefix}.pair:{address}``,
``{prefix}.token:{address}`` or ``{prefix}.bundle``. Decimal fields are stored
as strings so values round-trip without float conversion.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

import redis
from redis import Redis

from dex_pricing.constants import normalize_address
from dex_pricing.entities import Bundle, Pair, Token

from .base import ConnectionError, DataError, EntityStore

logger = logging.getLogger(__name__)

PAIR_DECIMAL_FIELDS = ("reserve0", "reserve1", "reserve_native", "token0_price", "token1_price")


class RedisEntityStore(EntityStore):
    """
    Redis-backed record store.

    Reads are single HGETALL calls; the store keeps no local cache so every
    call sees the latest state written by the ingestion layer.
    """

    def __init__(self, config: Dict[str, Any], key_prefix: str = "pricing"):
        """
        Initialize Redis store.

        Args:
            config: Connection kwargs with keys host, port, db, password (optional),
                decode_responses, socket_timeout
            key_prefix: Namespace prepended to every record key
        """
        self.config = config
        self.key_prefix = key_prefix
        self.client: Optional[Redis] = None
        self.is_connected = False

    def connect(self) -> None:
        """Establish connection to Redis."""
        try:
            pool_kwargs = {
                'host': self.config.get('host', 'localhost'),
                'port': self.config.get('port', 6379),
                'db': self.config.get('db', 0),
                'decode_responses': True,
                'socket_timeout': self.config.get('socket_timeout', 5),
            }

            # Only add password if it's actually set
            password = self.config.get('password')
            if password is not None:
                pool_kwargs['password'] = password

            pool = redis.ConnectionPool(**pool_kwargs)
            self.client = redis.Redis(connection_pool=pool)
            self.client.ping()

            self.is_connected = True
            logger.info("Redis connection established")

        except redis.RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise ConnectionError(f"Redis connection failed: {e}")

    def disconnect(self) -> None:
        """Close Redis connection."""
        if self.client:
            self.client.close()
        self.is_connected = False
        logger.info("Redis connection closed")

    def health_check(self) -> bool:
        """Check Redis connection health."""
        if not self.client:
            return False
        try:
            return self.client.ping() is True
        except redis.RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()

    # Keys

    def pair_key(self, address: str) -> str:
        return f"{self.key_prefix}.pair:{normalize_address(address)}"

    def token_key(self, address: str) -> str:
        return f"{self.key_prefix}.token:{normalize_address(address)}"

    @property
    def bundle_key(self) -> str:
        return f"{self.key_prefix}.bundle"

    # Reads

    def _require_client(self) -> Redis:
        if not self.client:
            raise ConnectionError("Redis store is not connected")
        return self.client

    def _hgetall(self, key: str) -> Dict[str, str]:
        client = self._require_client()
        try:
            return client.hgetall(key)
        except redis.RedisError as e:
            logger.error(f"Failed to read {key}: {e}")
            raise ConnectionError(f"Redis read failed for {key}: {e}")

    def load_pair(self, address: str) -> Optional[Pair]:
        key = self.pair_key(address)
        data = self._hgetall(key)
        if not data:
            return None
        try:
            return Pair(
                address=address,
                token0=data["token0"],
                token1=data["token1"],
                **{name: _to_decimal(data.get(name)) for name in PAIR_DECIMAL_FIELDS},
            )
        except (KeyError, ValueError, InvalidOperation) as e:
            raise DataError(f"Malformed pair record {key}: {e}")

    def load_token(self, address: str) -> Optional[Token]:
        key = self.token_key(address)
        data = self._hgetall(key)
        if not data:
            return None
        try:
            derived = data.get("derived_native_price")
            decimals = data.get("decimals")
            return Token(
                address=address,
                symbol=data.get("symbol") or None,
                decimals=int(decimals) if decimals else None,
                derived_native_price=Decimal(derived) if derived else None,
            )
        except (ValueError, InvalidOperation) as e:
            raise DataError(f"Malformed token record {key}: {e}")

    def load_bundle(self) -> Bundle:
        data = self._hgetall(self.bundle_key)
        try:
            return Bundle(native_price_usd=_to_decimal(data.get("native_price_usd")))
        except InvalidOperation as e:
            raise DataError(f"Malformed bundle record {self.bundle_key}: {e}")

    # Writes, used by ingestion and tooling

    def _hset(self, key: str, mapping: Dict[str, str]) -> None:
        client = self._require_client()
        try:
            client.hset(key, mapping=mapping)
        except redis.RedisError as e:
            logger.error(f"Failed to write {key}: {e}")
            raise ConnectionError(f"Redis write failed for {key}: {e}")

    def save_pair(self, pair: Pair) -> None:
        mapping = {"token0": pair.token0, "token1": pair.token1}
        mapping.update({name: str(getattr(pair, name)) for name in PAIR_DECIMAL_FIELDS})
        self._hset(self.pair_key(pair.address), mapping)

    def save_token(self, token: Token) -> None:
        mapping = {
            "symbol": token.symbol or "",
            "decimals": "" if token.decimals is None else str(token.decimals),
            "derived_native_price": "" if token.derived_native_price is None else str(token.derived_native_price),
        }
        self._hset(self.token_key(token.address), mapping)

    def save_bundle(self, bundle: Bundle) -> None:
        self._hset(self.bundle_key, {"native_price_usd": str(bundle.native_price_usd)})


def _to_decimal(value: Optional[str]) -> Decimal:
    """Parse a stored decimal, treating a missing field as zero."""
    if value is None or value == "":
        return Decimal("0")
    return Decimal(value)
