"""NFT providers for the supported marketplace/indexer vendors."""
from __future__ import annotations

from typing import Any

from ..config import MoralisConfig, OpenSeaConfig
from ..interfaces.wallet import WalletProvider
from .base import EndpointClient

OPENSEA = "opensea"
MORALIS = "moralis"


class OpenSeaNftProvider:
    """NFT assets from the OpenSea API."""

    vendor = OPENSEA

    def __init__(
        self, wallet: WalletProvider, config: OpenSeaConfig, timeout: int = 30
    ) -> None:
        self.wallet = wallet
        self.client = EndpointClient(
            [config.url], timeout, headers={"X-API-KEY": config.api_key}
        )

    async def fetch(self, owner: str) -> list[dict[str, Any]]:
        data = await self.client.request("assets", params={"owner": owner})
        return data.get("assets", [])


class MoralisNftProvider:
    """NFT assets from the Moralis Web3 API, scoped to the wallet's chain."""

    vendor = MORALIS

    def __init__(
        self, wallet: WalletProvider, config: MoralisConfig, timeout: int = 30
    ) -> None:
        self.wallet = wallet
        self.client = EndpointClient(
            [config.url], timeout, headers={"X-API-Key": config.api_key}
        )

    async def fetch(self, owner: str) -> list[dict[str, Any]]:
        chain_id = self.wallet.get_connected_network().chain_id
        data = await self.client.request(
            f"{owner}/nft", params={"chain": hex(chain_id or 0)}
        )
        return data.get("result", [])
