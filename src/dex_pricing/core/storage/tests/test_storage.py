"""Tests for the record store backends."""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
import redis

from dex_pricing.core.storage import (
    ConnectionError,
    DataError,
    InMemoryEntityStore,
    RedisEntityStore,
)
from dex_pricing.entities import Bundle, Pair, Token

PAIR = "0xAa00000000000000000000000000000000000001"
TOKEN0 = "0xBb00000000000000000000000000000000000002"
TOKEN1 = "0xCc00000000000000000000000000000000000003"


class TestInMemoryEntityStore:
    """Dictionary-backed store."""

    def test_missing_records(self):
        """Test missing pairs and tokens return None and the bundle defaults to zero."""
        store = InMemoryEntityStore()

        assert store.load_pair(PAIR) is None
        assert store.load_token(TOKEN0) is None
        assert store.load_bundle().native_price_usd == Decimal("0")

    def test_lookup_is_case_insensitive(self):
        """Test records saved with checksummed addresses load by any casing."""
        store = InMemoryEntityStore(
            pairs=[Pair(address=PAIR, token0=TOKEN0, token1=TOKEN1)],
            tokens=[Token(address=TOKEN0, symbol="AAA")],
        )

        assert store.load_pair(PAIR.lower()).token0 == TOKEN0.lower()
        assert store.load_token(TOKEN0.upper().replace("0X", "0x")).symbol == "AAA"
        assert len(store) == 2

    def test_save_bundle(self):
        """Test the bundle is replaced on save."""
        store = InMemoryEntityStore()
        store.save_bundle(Bundle(native_price_usd=Decimal("17.5")))
        assert store.load_bundle().native_price_usd == Decimal("17.5")


class TestPairRecord:
    """Pair construction rules."""

    def test_from_reserves_syncs_prices(self):
        """Test prices follow token0_price = reserve0 / reserve1."""
        pair = Pair.from_reserves(PAIR, TOKEN0, TOKEN1, Decimal("200"), Decimal("50"))

        assert pair.token0_price == Decimal("4")
        assert pair.token1_price == Decimal("0.25")

    def test_from_reserves_with_empty_side(self):
        """Test an empty reserve leaves the dependent price at zero."""
        pair = Pair.from_reserves(PAIR, TOKEN0, TOKEN1, Decimal("0"), Decimal("50"))

        assert pair.token0_price == Decimal("0")
        assert pair.token1_price == Decimal("0")

    def test_negative_reserve_rejected(self):
        """Test negative reserves are invalid."""
        with pytest.raises(ValueError, match="reserve0"):
            Pair(address=PAIR, token0=TOKEN0, token1=TOKEN1, reserve0=Decimal("-1"))

    def test_has_token(self):
        """Test side membership ignores casing."""
        pair = Pair(address=PAIR, token0=TOKEN0, token1=TOKEN1)
        assert pair.has_token(TOKEN1)
        assert not pair.has_token(PAIR)


class TestRedisEntityStore:
    """Redis-backed store with a mocked client."""

    @pytest.fixture
    def client(self):
        return MagicMock()

    @pytest.fixture
    def store(self, client):
        store = RedisEntityStore({"host": "localhost"}, key_prefix="pricing.testnet")
        store.client = client
        store.is_connected = True
        return store

    def test_load_pair(self, store, client):
        """Test a stored hash decodes into a Pair."""
        client.hgetall.return_value = {
            "token0": TOKEN0,
            "token1": TOKEN1,
            "reserve0": "200",
            "reserve1": "50",
            "reserve_native": "12.5",
            "token0_price": "4",
            "token1_price": "0.25",
        }

        pair = store.load_pair(PAIR)

        client.hgetall.assert_called_once_with(f"pricing.testnet.pair:{PAIR.lower()}")
        assert pair.token0 == TOKEN0.lower()
        assert pair.reserve_native == Decimal("12.5")
        assert pair.token1_price == Decimal("0.25")

    def test_missing_pair(self, store, client):
        """Test an empty hash means no record."""
        client.hgetall.return_value = {}
        assert store.load_pair(PAIR) is None

    def test_malformed_pair(self, store, client):
        """Test a record without token fields raises DataError."""
        client.hgetall.return_value = {"reserve0": "1"}
        with pytest.raises(DataError, match="Malformed pair"):
            store.load_pair(PAIR)

    def test_negative_pair_value(self, store, client):
        """Test an invalid stored value raises DataError."""
        client.hgetall.return_value = {"token0": TOKEN0, "token1": TOKEN1, "reserve_native": "-3"}
        with pytest.raises(DataError):
            store.load_pair(PAIR)

    def test_load_token_without_derived_price(self, store, client):
        """Test an empty derived price decodes as unset."""
        client.hgetall.return_value = {"symbol": "AAA", "decimals": "18", "derived_native_price": ""}

        token = store.load_token(TOKEN0)

        assert token.symbol == "AAA"
        assert token.decimals == 18
        assert token.derived_native_price is None

    def test_load_token_with_derived_price(self, store, client):
        """Test a stored derived price keeps its exact value."""
        client.hgetall.return_value = {"derived_native_price": "0.000123456789012345678901"}
        token = store.load_token(TOKEN0)
        assert token.derived_native_price == Decimal("0.000123456789012345678901")

    def test_missing_bundle_is_zero(self, store, client):
        """Test a never-written bundle reads as zero."""
        client.hgetall.return_value = {}
        assert store.load_bundle().native_price_usd == Decimal("0")

    def test_save_pair(self, store, client):
        """Test pairs are written as string fields."""
        store.save_pair(Pair.from_reserves(PAIR, TOKEN0, TOKEN1, Decimal("200"), Decimal("50")))

        key = client.hset.call_args[0][0]
        mapping = client.hset.call_args[1]["mapping"]
        assert key == f"pricing.testnet.pair:{PAIR.lower()}"
        assert mapping["token0_price"] == "4"
        assert mapping["token1"] == TOKEN1.lower()

    def test_read_failure(self, store, client):
        """Test Redis errors surface as ConnectionError."""
        client.hgetall.side_effect = redis.ConnectionError("refused")
        with pytest.raises(ConnectionError, match="Redis read failed"):
            store.load_token(TOKEN0)

    def test_not_connected(self):
        """Test reads before connect raise ConnectionError."""
        store = RedisEntityStore({})
        with pytest.raises(ConnectionError, match="not connected"):
            store.load_bundle()

    def test_writes_require_connection(self):
        """Test saves before connect raise ConnectionError."""
        store = RedisEntityStore({})

        with pytest.raises(ConnectionError, match="not connected"):
            store.save_pair(Pair(address=PAIR, token0=TOKEN0, token1=TOKEN1))
        with pytest.raises(ConnectionError, match="not connected"):
            store.save_token(Token(address=TOKEN0))
        with pytest.raises(ConnectionError, match="not connected"):
            store.save_bundle(Bundle())

    def test_write_failure(self, store, client):
        """Test Redis errors on save surface as ConnectionError."""
        client.hset.side_effect = redis.ConnectionError("refused")
        with pytest.raises(ConnectionError, match="Redis write failed"):
            store.save_bundle(Bundle(native_price_usd=Decimal("20")))

    @patch("dex_pricing.core.storage.redis.redis.ConnectionPool")
    @patch("dex_pricing.core.storage.redis.redis.Redis")
    def test_connect(self, mock_redis, mock_pool):
        """Test connect pings the server and omits an unset password."""
        mock_redis.return_value.ping.return_value = True

        store = RedisEntityStore({"host": "redis.local", "port": 6380})
        store.connect()

        assert store.is_connected
        assert "password" not in mock_pool.call_args[1]
        assert mock_pool.call_args[1]["host"] == "redis.local"

    @patch("dex_pricing.core.storage.redis.redis.ConnectionPool")
    @patch("dex_pricing.core.storage.redis.redis.Redis")
    def test_connect_failure(self, mock_redis, mock_pool):
        """Test a failed ping raises ConnectionError."""
        mock_redis.return_value.ping.side_effect = redis.ConnectionError("refused")

        store = RedisEntityStore({"host": "redis.local"})
        with pytest.raises(ConnectionError, match="Redis connection failed"):
            store.connect()
        assert not store.is_connected

    def test_health_check(self, store, client):
        """Test health_check reports ping results and never raises."""
        client.ping.return_value = True
        assert store.health_check() is True

        client.ping.side_effect = redis.ConnectionError("gone")
        assert store.health_check() is False

        assert RedisEntityStore({}).health_check() is False
