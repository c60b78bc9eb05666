"""
Pair address resolution.

Given two token addresses, a resolver returns the address of their pair or
None when no pair exists.
"""

from .base import PairResolver
from .errors import ContractError, ErrorHandler, NetworkError, RateLimitError, ResolverError
from .factory import FactoryPairResolver
from .static import StaticPairResolver

__all__ = [
    'PairResolver',
    'FactoryPairResolver',
    'StaticPairResolver',
    'ResolverError',
    'NetworkError',
    'RateLimitError',
    'ContractError',
    'ErrorHandler',
]
