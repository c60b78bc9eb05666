"""
In-process record store.
"""

import logging
from typing import Dict, Iterable, Optional

from dex_pricing.constants import normalize_address
from dex_pricing.entities import Bundle, Pair, Token

from .base import EntityStore

logger = logging.getLogger(__name__)


class InMemoryEntityStore(EntityStore):
    """
    Dictionary-backed record store.

    Used when the ingestion layer runs in the same process, and in tests.
    """

    def __init__(
        self,
        pairs: Optional[Iterable[Pair]] = None,
        tokens: Optional[Iterable[Token]] = None,
        bundle: Optional[Bundle] = None,
    ):
        self._pairs: Dict[str, Pair] = {}
        self._tokens: Dict[str, Token] = {}
        self._bundle = bundle or Bundle()

        for pair in pairs or ():
            self.save_pair(pair)
        for token in tokens or ():
            self.save_token(token)

    def load_pair(self, address: str) -> Optional[Pair]:
        return self._pairs.get(normalize_address(address))

    def load_token(self, address: str) -> Optional[Token]:
        return self._tokens.get(normalize_address(address))

    def load_bundle(self) -> Bundle:
        return self._bundle

    def save_pair(self, pair: Pair) -> None:
        self._pairs[pair.address] = pair

    def save_token(self, token: Token) -> None:
        self._tokens[token.address] = token

    def save_bundle(self, bundle: Bundle) -> None:
        self._bundle = bundle

    def __len__(self) -> int:
        return len(self._pairs) + len(self._tokens)
