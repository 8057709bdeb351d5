"""Bitcoin-family providers backed by Esplora-compatible APIs."""
from __future__ import annotations

import logging
from typing import Any

from ..interfaces.chain import ChainProvider
from ..interfaces.fee import FeeProvider
from ..interfaces.transport import LedgerTransport
from ..models import FeeDetails, NetworkDescriptor
from .base import (
    BaseChainProvider,
    EndpointClient,
    LedgerWalletProvider,
    MnemonicWalletProvider,
    SwapProvider,
)

logger = logging.getLogger(__name__)


class BitcoinFeeApiProvider:
    """Recommended fees from a mempool.space-style fee API."""

    def __init__(self, url: str, timeout: int = 30) -> None:
        self.url = url
        self.client = EndpointClient([url], timeout)

    async def get_fees(self) -> FeeDetails:
        data = await self.client.request()
        return FeeDetails(
            slow=float(data["hourFee"]),
            average=float(data["halfHourFee"]),
            fast=float(data["fastestFee"]),
        )


class BitcoinEsploraApiProvider(BaseChainProvider):
    """Esplora chain provider with an optional fee-estimation override."""

    def __init__(
        self,
        network: NetworkDescriptor,
        url: str,
        batch_url: str | None = None,
        number_of_block_confirmation: int = 2,
        timeout: int = 30,
    ) -> None:
        endpoints = [url] + [u for u in network.rpc_urls if u != url]
        super().__init__(network, endpoints, timeout)
        self.batch_client = EndpointClient([batch_url or url], timeout)
        self.number_of_block_confirmation = number_of_block_confirmation
        self._fee_provider: FeeProvider | None = None

    @property
    def fee_provider(self) -> FeeProvider | None:
        return self._fee_provider

    def set_fee_provider(self, fee_provider: FeeProvider) -> None:
        self._fee_provider = fee_provider

    async def get_block_height(self) -> int:
        return int(await self.client.request("blocks/tip/height"))

    async def get_transaction(self, tx_hash: str) -> dict[str, Any]:
        return await self.client.request(f"tx/{tx_hash}")

    async def get_address_stats(self, addresses: list[str]) -> list[dict[str, Any]]:
        """Address stats for many addresses in one batch request."""
        return await self.batch_client.request(
            "addresses", payload={"addresses": addresses}
        )

    async def get_fees(self) -> FeeDetails:
        if self._fee_provider is not None:
            return await self._fee_provider.get_fees()

        logger.debug("No fee provider set, using Esplora fee estimates")
        # Esplora keys estimates by confirmation target in blocks
        estimates = await self.client.request("fee-estimates")
        return FeeDetails(
            slow=float(estimates.get("6", 1)),
            average=float(estimates.get("3", 1)),
            fast=float(estimates.get("1", 1)),
        )


class BitcoinHDWalletProvider(MnemonicWalletProvider):
    """Software HD wallet rooted at ``base_derivation_path``."""

    def __init__(
        self, chain_provider: ChainProvider, mnemonic: str, base_derivation_path: str
    ) -> None:
        super().__init__(chain_provider, mnemonic, base_derivation_path)


class BitcoinLedgerProvider(LedgerWalletProvider):
    """Ledger-backed wallet for a given address type (bech32, legacy, ...)."""

    def __init__(
        self,
        chain_provider: ChainProvider,
        base_derivation_path: str,
        transport: LedgerTransport,
        address_type: str,
        base_public_key: str | None = None,
        base_chain_code: str | None = None,
    ) -> None:
        super().__init__(chain_provider, base_derivation_path, transport)
        self.address_type = address_type
        self.base_public_key = base_public_key
        self.base_chain_code = base_chain_code


class BitcoinSwapEsploraProvider(SwapProvider):
    """Bitcoin HTLC swaps, scraping swap transactions from Esplora."""

    def __init__(
        self, network: NetworkDescriptor, scraper_url: str, timeout: int = 30
    ) -> None:
        super().__init__()
        self.network = network
        self.scraper = EndpointClient([scraper_url], timeout)

    async def get_transaction(self, tx_hash: str) -> dict[str, Any]:
        self._require_wallet()
        return await self.scraper.request(f"tx/{tx_hash}")
