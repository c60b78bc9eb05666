"""
Base classes and interfaces for record store implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from dex_pricing.entities import Bundle, Pair, Token

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base exception for storage-related errors."""
    pass


class ConnectionError(StorageError):
    """Raised when connection to storage backend fails."""
    pass


class DataError(StorageError):
    """Raised when a stored record cannot be decoded."""
    pass


class EntityStore(ABC):
    """
    Read interface over the Token, Pair and Bundle records.

    Lookups are keyed by address. A missing record is a normal state and is
    returned as None; only backend faults raise.
    """

    @abstractmethod
    def load_pair(self, address: str) -> Optional[Pair]:
        """Retrieve a pair by address."""
        pass

    @abstractmethod
    def load_token(self, address: str) -> Optional[Token]:
        """Retrieve a token by address."""
        pass

    @abstractmethod
    def load_bundle(self) -> Bundle:
        """Retrieve the price bundle, a zero-priced one if never written."""
        pass
