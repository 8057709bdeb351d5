"""Terra providers backed by the LCD REST API."""
from __future__ import annotations

from ..interfaces.chain import ChainProvider
from .base import BaseChainProvider, MnemonicWalletProvider, SwapProvider


class TerraChainProvider(BaseChainProvider):
    async def get_block_height(self) -> int:
        latest = await self.client.request("blocks/latest")
        return int(latest["block"]["header"]["height"])


class TerraWalletProvider(MnemonicWalletProvider):
    def __init__(
        self,
        chain_provider: ChainProvider,
        mnemonic: str,
        derivation_path: str,
        helper_url: str | None,
    ) -> None:
        super().__init__(chain_provider, mnemonic, derivation_path)
        self.helper_url = helper_url


class TerraSwapProvider(SwapProvider):
    """Terra swaps; contract state is read through the FCD helper."""

    def __init__(self, helper_url: str | None) -> None:
        super().__init__()
        self.helper_url = helper_url
