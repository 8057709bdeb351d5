"""Near providers."""
from __future__ import annotations

from ..interfaces.chain import ChainProvider
from .base import BaseChainProvider, MnemonicWalletProvider, SwapProvider


class NearChainProvider(BaseChainProvider):
    """Near JSON-RPC chain provider."""

    async def get_block_height(self) -> int:
        block = await self.client.rpc_call("block", {"finality": "final"})
        return int(block["header"]["height"])


class NearWalletProvider(MnemonicWalletProvider):
    """Software Near wallet; the helper service resolves implicit accounts."""

    def __init__(
        self,
        chain_provider: ChainProvider,
        mnemonic: str,
        derivation_path: str,
        helper_url: str | None,
    ) -> None:
        super().__init__(chain_provider, mnemonic, derivation_path)
        self.helper_url = helper_url


class NearSwapProvider(SwapProvider):
    def __init__(self, helper_url: str | None) -> None:
        super().__init__()
        self.helper_url = helper_url
