#!/usr/bin/env python3
"""
Command-line interface for the price oracle.

Usage:
    python -m dex_pricing.cli --chain avalanche native-price
    python -m dex_pricing.cli --chain avalanche token-price 0xTOKEN
    python -m dex_pricing.cli tracked-volume 5 0xTOKEN0 5 0xTOKEN1
    python -m dex_pricing.cli tracked-liquidity 5 0xTOKEN0 5 0xTOKEN1
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from web3 import Web3

from dex_pricing.config import ConfigError, get_config
from dex_pricing.constants import normalize_address
from dex_pricing.core.storage import RedisEntityStore, StorageError
from dex_pricing.entities import Token
from dex_pricing.pricing.oracle import PriceOracle
from dex_pricing.resolvers import FactoryPairResolver, ResolverError

logger = logging.getLogger(__name__)


def decimal_arg(value: str) -> Decimal:
    """argparse type for exact decimal amounts."""
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a decimal: {value}")


def address_arg(value: str) -> str:
    """argparse type for hex addresses in any casing."""
    if not Web3.is_address(normalize_address(value)):
        raise argparse.ArgumentTypeError(f"not an address: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Whitelist-anchored DEX price oracle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Native asset USD price from the stablecoin pairs
  python -m dex_pricing.cli --chain avalanche native-price

  # Token price in native-asset units
  python -m dex_pricing.cli --chain avalanche token-price 0xaEb044650278731Ef3DC244692AB9F64C78FfaEA
        """,
    )
    parser.add_argument("--chain", help="Chain name (defaults to DEFAULT_CHAIN)")
    parser.add_argument("--rpc-url", help="Override the chain RPC URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("native-price", help="Native asset price in USD")

    token_parser = subparsers.add_parser("token-price", help="Token price in native-asset units")
    token_parser.add_argument("token", type=address_arg, help="Token address")

    for name, help_text in (
        ("tracked-volume", "Tracked USD volume of a swap"),
        ("tracked-liquidity", "Tracked USD liquidity of a deposit"),
    ):
        tracked_parser = subparsers.add_parser(name, help=help_text)
        tracked_parser.add_argument("amount0", type=decimal_arg)
        tracked_parser.add_argument("token0", type=address_arg)
        tracked_parser.add_argument("amount1", type=decimal_arg)
        tracked_parser.add_argument("token1", type=address_arg)

    return parser


def load_token(oracle: PriceOracle, address: str) -> Token:
    """Stored token record, or a bare record with no derived price."""
    token = oracle.store.load_token(address)
    if token is None:
        logger.warning(f"Token {address} not in store, treating its price as unknown")
        return Token(address=address)
    return token


def run_command(args, oracle: PriceOracle) -> Decimal:
    if args.command == "native-price":
        return oracle.native_price_in_usd()

    if args.command == "token-price":
        return oracle.derive_native_price(load_token(oracle, args.token))

    token0 = load_token(oracle, args.token0)
    token1 = load_token(oracle, args.token1)
    if args.command == "tracked-volume":
        return oracle.tracked_volume_usd(args.amount0, token0, args.amount1, token1)
    return oracle.tracked_liquidity_usd(args.amount0, token0, args.amount1, token1)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = get_config()
        chain = args.chain or config.chains.DEFAULT_CHAIN
        profile = config.get_pricing_profile(chain)

        web3 = Web3(Web3.HTTPProvider(args.rpc_url or config.chains.get_rpc_url(chain)))
        resolver = FactoryPairResolver(
            web3,
            profile.factory_address,
            max_retries=config.chains.MAX_RETRY_ATTEMPTS,
        )

        store = RedisEntityStore(
            config.database.get_redis_connection_kwargs(),
            key_prefix=config.database.key_prefix_for_chain(chain),
        )
        with store as record_store:
            result = run_command(args, PriceOracle(profile, record_store, resolver))

    except (ConfigError, ValueError) as e:
        logger.error(f"❌ Configuration error: {e}")
        return 1
    except (StorageError, ResolverError) as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
