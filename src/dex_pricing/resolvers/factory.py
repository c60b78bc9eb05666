"""
V2 factory pair resolver.

Resolves pair addresses with the factory's getPair(address,address) view
function through web3.
"""

import logging
import time
from typing import Dict, Optional, Tuple, Union

from web3 import Web3
from web3.exceptions import ContractLogicError

from dex_pricing.constants import ADDRESS_ZERO, normalize_address

from .base import PairResolver
from .errors import ContractError, ErrorHandler, NetworkError, RateLimitError, ResolverError

logger = logging.getLogger(__name__)

V2_FACTORY_ABI = [
    {
        "constant": True,
        "inputs": [
            {"internalType": "address", "name": "tokenA", "type": "address"},
            {"internalType": "address", "name": "tokenB", "type": "address"},
        ],
        "name": "getPair",
        "outputs": [{"internalType": "address", "name": "pair", "type": "address"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    }
]


class FactoryPairResolver(PairResolver):
    """
    Pair resolver backed by an on-chain V2 factory.

    Existing pairs are cached per token combination since a V2 pair address
    never changes once created. Missing pairs are not cached because they can
    be created at any block.
    """

    def __init__(
        self,
        web3: Web3,
        factory_address: str,
        max_retries: int = 3,
        block_identifier: Union[int, str] = "latest",
    ):
        """
        Initialize the resolver.

        Args:
            web3: Web3 instance connected to the target chain
            factory_address: V2 factory contract address
            max_retries: Attempts per lookup for transient RPC failures
            block_identifier: Block to call at
        """
        if not factory_address:
            raise ValueError("factory_address is required")
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        self.web3 = web3
        self.factory_address = normalize_address(factory_address)
        self.max_retries = max_retries
        self.block_identifier = block_identifier
        self.error_handler = ErrorHandler(logger)
        self.factory = web3.eth.contract(
            address=Web3.to_checksum_address(self.factory_address),
            abi=V2_FACTORY_ABI,
        )
        self._cache: Dict[Tuple[str, str], str] = {}

    def resolve_pair_address(self, token_a: str, token_b: str) -> Optional[str]:
        token_a = normalize_address(token_a)
        token_b = normalize_address(token_b)
        key = (token_a, token_b) if token_a < token_b else (token_b, token_a)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = normalize_address(self._call_get_pair(token_a, token_b))
        if result == ADDRESS_ZERO:
            return None

        self._cache[key] = result
        return result

    def _call_get_pair(self, token_a: str, token_b: str) -> str:
        """Call getPair with retries for transient failures."""
        call = self.factory.functions.getPair(
            Web3.to_checksum_address(token_a),
            Web3.to_checksum_address(token_b),
        )

        for attempt in range(self.max_retries):
            try:
                return call.call(block_identifier=self.block_identifier)
            except ContractLogicError as e:
                raise ContractError(f"getPair reverted for {token_a}/{token_b}: {e}")
            except Exception as e:
                self.error_handler.log_error(
                    e,
                    {
                        "attempt": attempt + 1,
                        "max_retries": self.max_retries,
                        "tokens": (token_a, token_b),
                    },
                )
                if not self.error_handler.should_retry(e, attempt, self.max_retries):
                    raise self._wrap_error(e, token_a, token_b)

                delay = self.error_handler.get_retry_delay(e, attempt)
                logger.info(f"Retrying getPair in {delay:.1f}s")
                time.sleep(delay)

        raise ResolverError(f"getPair failed for {token_a}/{token_b}")

    def _wrap_error(self, error: Exception, token_a: str, token_b: str) -> ResolverError:
        if isinstance(error, ResolverError):
            return error

        message = f"getPair failed for {token_a}/{token_b}: {error}"
        category = self.error_handler.classify_error(error)
        if category == 'network':
            return NetworkError(message)
        if category == 'rate_limit':
            return RateLimitError(message)
        if category == 'contract':
            return ContractError(message)
        return ResolverError(message)
