"""EVM-family providers (Ethereum, Polygon, Rootstock, ...)."""
from __future__ import annotations

import logging
from typing import Any

from ..interfaces.fee import FeeProvider
from ..models import EvmSwapOptions, FeeDetails, NetworkDescriptor
from .base import BaseChainProvider, LedgerWalletProvider, MnemonicWalletProvider, SwapProvider

logger = logging.getLogger(__name__)

_WEI_PER_GWEI = 10**9

# Multipliers applied to the node gas price when no fee provider is set
_FEE_MULTIPLIERS = (1.0, 1.5, 2.0)


class EvmChainProvider(BaseChainProvider):
    """JSON-RPC chain provider for an EVM network."""

    def __init__(
        self,
        network: NetworkDescriptor,
        fee_provider: FeeProvider | None = None,
        multicall: bool = False,
        timeout: int = 30,
    ) -> None:
        super().__init__(network, timeout=timeout)
        self.fee_provider = fee_provider
        self.multicall = multicall

    async def get_block_height(self) -> int:
        return int(await self.client.rpc_call("eth_blockNumber", []), 16)

    async def get_chain_id(self) -> int:
        return int(await self.client.rpc_call("eth_chainId", []), 16)

    async def get_transaction(self, tx_hash: str) -> dict[str, Any] | None:
        return await self.client.rpc_call("eth_getTransactionByHash", [tx_hash])

    async def get_fees(self) -> FeeDetails:
        """Fees in gwei, from the fee provider if one was given."""
        if self.fee_provider is not None:
            return await self.fee_provider.get_fees()

        gas_price = int(await self.client.rpc_call("eth_gasPrice", []), 16) / _WEI_PER_GWEI
        logger.debug("Gas price on %s: %s gwei", self.network.name, gas_price)
        slow, average, fast = (gas_price * m for m in _FEE_MULTIPLIERS)
        return FeeDetails(slow=slow, average=average, fast=fast)


class EvmWalletProvider(MnemonicWalletProvider):
    """Software EVM wallet."""


class EvmLedgerProvider(LedgerWalletProvider):
    """Ledger-backed EVM wallet."""


class EvmSwapProvider(SwapProvider):
    """HTLC swaps on an EVM chain."""

    def __init__(self, swap_options: EvmSwapOptions) -> None:
        super().__init__()
        self.swap_options = swap_options

    async def get_transaction(self, tx_hash: str) -> dict[str, Any] | None:
        chain_provider = self._require_wallet().chain_provider
        return await chain_provider.get_transaction(tx_hash)
