"""Command-line interface for inspecting networks and probing fees."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .config import load_config
from .factory import ClientFactory
from .logging_setup import configure_logging
from .models import NETWORKS
from .networks import CHAIN_NETWORKS, get_network


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="wallet-factory",
        description="Multi-chain network registry and client factory",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    networks_parser = sub.add_parser("networks", help="List registered networks")
    networks_parser.add_argument("--chain", default=None, help="Only this chain")

    explorer_parser = sub.add_parser("explorer", help="Render an explorer URL")
    explorer_parser.add_argument("chain")
    explorer_parser.add_argument("network")
    explorer_parser.add_argument("kind", choices=["tx", "address"])
    explorer_parser.add_argument("value")

    fees_parser = sub.add_parser("fees", help="Fetch current Bitcoin fee estimates")
    fees_parser.add_argument("network", nargs="?", default="mainnet", choices=NETWORKS)

    return parser


def _print_networks(chain: str | None) -> None:
    for name, networks in sorted(CHAIN_NETWORKS.items()):
        if chain is not None and name != chain:
            continue
        for network, d in networks.items():
            chain_id = "" if d.chain_id is None else f" chain_id={d.chain_id}"
            print(
                f"{name:<10} {network:<8} {d.name:<20} id={d.network_id} "
                f"coin_type={d.coin_type}{chain_id} rpc={d.rpc_urls[0]}"
            )


def _print_explorer(args: argparse.Namespace) -> None:
    descriptor = get_network(args.chain, args.network)
    if args.kind == "tx":
        url = descriptor.tx_url(args.value)
    else:
        url = descriptor.address_url(args.value)
    if url is None:
        print(f"No explorer configured for {args.chain} {args.network}")
        sys.exit(1)
    print(url)


async def _print_fees(args: argparse.Namespace) -> None:
    factory = ClientFactory(load_config(args.config))
    fees = await factory.create_btc_chain_provider(args.network).get_fees()
    print(f"slow={fees.slow} average={fees.average} fast={fees.fast}")


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)

    if args.command == "networks":
        _print_networks(args.chain)
    elif args.command == "explorer":
        _print_explorer(args)
    elif args.command == "fees":
        asyncio.run(_print_fees(args))
