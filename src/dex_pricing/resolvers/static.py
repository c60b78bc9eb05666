"""
Mapping-backed pair resolver.
"""

from typing import Dict, FrozenSet, Iterable, Optional

from dex_pricing.constants import normalize_address
from dex_pricing.entities import Pair

from .base import PairResolver


class StaticPairResolver(PairResolver):
    """
    Resolves pairs from a fixed token-pair index.

    Lookups are order-insensitive, matching V2 factories where
    getPair(a, b) == getPair(b, a).
    """

    def __init__(self, pairs: Optional[Iterable[Pair]] = None):
        self._index: Dict[FrozenSet[str], str] = {}
        for pair in pairs or ():
            self.register(pair.token0, pair.token1, pair.address)

    def register(self, token_a: str, token_b: str, pair_address: str) -> None:
        self._index[_key(token_a, token_b)] = normalize_address(pair_address)

    def resolve_pair_address(self, token_a: str, token_b: str) -> Optional[str]:
        return self._index.get(_key(token_a, token_b))


def _key(token_a: str, token_b: str) -> FrozenSet[str]:
    return frozenset((normalize_address(token_a), normalize_address(token_b)))
