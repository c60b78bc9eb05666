"""Tests for pair resolvers."""

from unittest.mock import MagicMock, patch

import pytest
from web3.exceptions import ContractLogicError

from dex_pricing.constants import ADDRESS_ZERO
from dex_pricing.entities import Pair
from dex_pricing.resolvers import (
    ContractError,
    ErrorHandler,
    FactoryPairResolver,
    NetworkError,
    RateLimitError,
    StaticPairResolver,
)

FACTORY = "0xefa94DE7a4656D787667C749f7E1223D71E9FD88"
TOKEN_A = "0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7"
TOKEN_B = "0xaEb044650278731Ef3DC244692AB9F64C78FfaEA"
PAIR = "0x1D704F88FBDFFF582BC46167E450F6F8DAB83E64"


class TestStaticPairResolver:
    """Mapping-backed resolver."""

    def test_lookup_is_order_insensitive(self):
        """Test getPair(a, b) and getPair(b, a) agree."""
        resolver = StaticPairResolver([Pair(address=PAIR, token0=TOKEN_A, token1=TOKEN_B)])

        assert resolver.resolve_pair_address(TOKEN_A, TOKEN_B) == PAIR.lower()
        assert resolver.resolve_pair_address(TOKEN_B.lower(), TOKEN_A) == PAIR.lower()

    def test_unknown_pair(self):
        """Test unknown combinations resolve to None."""
        assert StaticPairResolver().resolve_pair_address(TOKEN_A, TOKEN_B) is None


class TestFactoryPairResolver:
    """web3-backed resolver with a mocked contract."""

    @pytest.fixture
    def web3(self):
        return MagicMock()

    @pytest.fixture
    def get_pair_call(self, web3):
        return web3.eth.contract.return_value.functions.getPair.return_value.call

    @pytest.fixture
    def resolver(self, web3):
        return FactoryPairResolver(web3, FACTORY, max_retries=3)

    def test_existing_pair(self, resolver, get_pair_call):
        """Test a pair address is returned lowercase."""
        get_pair_call.return_value = PAIR
        assert resolver.resolve_pair_address(TOKEN_A, TOKEN_B) == PAIR.lower()

    def test_zero_address_is_none(self, resolver, get_pair_call):
        """Test the factory's zero address maps to None."""
        get_pair_call.return_value = ADDRESS_ZERO
        assert resolver.resolve_pair_address(TOKEN_A, TOKEN_B) is None

    def test_existing_pairs_are_cached(self, resolver, get_pair_call):
        """Test a resolved pair is not fetched twice, in either token order."""
        get_pair_call.return_value = PAIR

        resolver.resolve_pair_address(TOKEN_A, TOKEN_B)
        resolver.resolve_pair_address(TOKEN_B, TOKEN_A)

        assert get_pair_call.call_count == 1

    def test_missing_pairs_are_not_cached(self, resolver, get_pair_call):
        """Test a pair created later is picked up."""
        get_pair_call.side_effect = [ADDRESS_ZERO, PAIR]

        assert resolver.resolve_pair_address(TOKEN_A, TOKEN_B) is None
        assert resolver.resolve_pair_address(TOKEN_A, TOKEN_B) == PAIR.lower()

    def test_revert_is_not_retried(self, resolver, get_pair_call):
        """Test contract reverts raise ContractError immediately."""
        get_pair_call.side_effect = ContractLogicError("execution reverted")

        with pytest.raises(ContractError):
            resolver.resolve_pair_address(TOKEN_A, TOKEN_B)
        assert get_pair_call.call_count == 1

    @patch("dex_pricing.resolvers.factory.time.sleep")
    def test_network_error_is_retried(self, mock_sleep, resolver, get_pair_call):
        """Test transient network errors are retried."""
        get_pair_call.side_effect = [OSError("connection reset"), PAIR]

        assert resolver.resolve_pair_address(TOKEN_A, TOKEN_B) == PAIR.lower()
        mock_sleep.assert_called_once_with(1)

    @patch("dex_pricing.resolvers.factory.time.sleep")
    def test_persistent_network_error(self, mock_sleep, resolver, get_pair_call):
        """Test NetworkError is raised once retries are exhausted."""
        get_pair_call.side_effect = OSError("connection timeout")

        with pytest.raises(NetworkError):
            resolver.resolve_pair_address(TOKEN_A, TOKEN_B)
        assert get_pair_call.call_count == 3
        assert mock_sleep.call_count == 2

    def test_requires_factory(self, web3):
        """Test a factory address is mandatory."""
        with pytest.raises(ValueError, match="factory_address"):
            FactoryPairResolver(web3, "")


class TestErrorHandler:
    """Error classification."""

    @pytest.mark.parametrize(
        "error, category",
        [
            (OSError("429 Too Many Requests"), "rate_limit"),
            (OSError("read timed out"), "network"),
            (ValueError("execution reverted"), "contract"),
            (ValueError("invalid address"), "validation"),
            (RuntimeError("boom"), "unknown"),
        ],
    )
    def test_classify_error(self, error, category):
        assert ErrorHandler().classify_error(error) == category

    def test_should_retry(self):
        """Test deterministic errors are not retried and attempts are bounded."""
        handler = ErrorHandler()

        assert handler.should_retry(OSError("connection refused"), 0, 3)
        assert not handler.should_retry(OSError("connection refused"), 2, 3)
        assert not handler.should_retry(ValueError("execution reverted"), 0, 3)

    def test_retry_after_is_honoured(self):
        """Test an explicit retry_after overrides backoff."""
        assert ErrorHandler().get_retry_delay(RateLimitError("slow down", retry_after=7.5), 0) == 7.5
