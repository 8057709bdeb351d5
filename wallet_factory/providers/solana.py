"""Solana providers."""
from __future__ import annotations

from .base import BaseChainProvider, MnemonicWalletProvider


class SolanaChainProvider(BaseChainProvider):
    """Solana JSON-RPC chain provider."""

    async def get_block_height(self) -> int:
        return int(await self.client.rpc_call("getBlockHeight", []))


class SolanaWalletProvider(MnemonicWalletProvider):
    """Software Solana wallet. Solana has no swap provider."""
