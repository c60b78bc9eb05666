"""
Pair resolver interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PairResolver(ABC):
    """
    Resolves the pair address for two tokens.

    Implementations return None when no pair exists; the factory's zero
    address never leaks to callers.
    """

    @abstractmethod
    def resolve_pair_address(self, token_a: str, token_b: str) -> Optional[str]:
        """
        Look up the pair for two tokens.

        Args:
            token_a: First token address
            token_b: Second token address

        Returns:
            Lowercase pair address, or None if the pair does not exist
        """
        pass
