"""
Shared decimal constants and address helpers.
"""

from decimal import Decimal

ZERO_BD = Decimal("0")
ONE_BD = Decimal("1")
TWO_BD = Decimal("2")

# Returned by V2 factories for token combinations without a pair
ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"


def normalize_address(address: str) -> str:
    """
    Normalize an address for identity comparisons.

    Records, whitelists and resolver results are all keyed by lowercase hex
    so checksummed and plain inputs compare equal.

    Args:
        address: Hex address in any casing

    Returns:
        Lowercase address
    """
    return address.strip().lower()
