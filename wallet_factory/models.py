"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass

MAINNET = "mainnet"
TESTNET = "testnet"
NETWORKS: tuple[str, ...] = (MAINNET, TESTNET)


@dataclass(frozen=True)
class ExplorerView:
    """Explorer URL templates; ``{hash}`` and ``{address}`` are substituted."""

    tx: str
    address: str


@dataclass(frozen=True)
class NetworkDescriptor:
    """Static per-network configuration record for one chain."""

    name: str
    network_id: str
    coin_type: str
    is_testnet: bool = False
    rpc_urls: tuple[str, ...] = ()
    scraper_urls: tuple[str, ...] = ()
    explorer_views: tuple[ExplorerView, ...] = ()
    wallet_url: str | None = None
    chain_id: int | None = None
    helper_url: str | None = None

    def tx_url(self, tx_hash: str) -> str | None:
        if not self.explorer_views:
            return None
        return self.explorer_views[0].tx.replace("{hash}", tx_hash)

    def address_url(self, address: str) -> str | None:
        if not self.explorer_views:
            return None
        return self.explorer_views[0].address.replace("{address}", address)


@dataclass(frozen=True)
class Account:
    """Hardware-wallet account reference used for xpub-style derivation."""

    public_key: str | None = None
    chain_code: str | None = None


@dataclass(frozen=True)
class FeeDetails:
    """Fee estimates for three confirmation speeds (sat/vB or gwei)."""

    slow: float
    average: float
    fast: float


@dataclass(frozen=True)
class EvmSwapOptions:
    """Options for the EVM HTLC swap provider."""

    contract_address: str | None = None
    number_of_blocks_per_request: int = 2000
    total_number_of_blocks: int = 100_000
    gas_limit_margin: int = 1000
