"""Unit tests for the composed client handle and swap binding."""
from __future__ import annotations

import pytest

from wallet_factory.client import Client
from wallet_factory.config import OpenSeaConfig
from wallet_factory.errors import WalletNotBoundError
from wallet_factory.models import EvmSwapOptions
from wallet_factory.networks import get_network
from wallet_factory.providers import (
    EvmChainProvider,
    EvmLedgerProvider,
    EvmSwapProvider,
    EvmWalletProvider,
    OpenSeaNftProvider,
)


@pytest.fixture()
def wallet() -> EvmWalletProvider:
    chain = EvmChainProvider(get_network("ethereum", "mainnet"))
    return EvmWalletProvider(chain, "test mnemonic", "m/44'/60'/0'/0/0")


class TestSwapBinding:
    def test_unbound_swap_wallet_raises(self) -> None:
        swap = EvmSwapProvider(EvmSwapOptions())
        assert swap.is_bound is False
        with pytest.raises(WalletNotBoundError):
            swap.wallet

    def test_unbound_network_lookup_raises(self) -> None:
        with pytest.raises(WalletNotBoundError):
            EvmSwapProvider(EvmSwapOptions()).get_connected_network()

    @pytest.mark.asyncio
    async def test_unbound_async_operation_raises(self) -> None:
        swap = EvmSwapProvider(EvmSwapOptions())
        with pytest.raises(WalletNotBoundError):
            await swap.get_block_height()
        with pytest.raises(WalletNotBoundError):
            await swap.get_transaction("0xabc")

    def test_bound_swap(self, wallet: EvmWalletProvider) -> None:
        swap = EvmSwapProvider(EvmSwapOptions())
        swap.set_wallet(wallet)
        assert swap.wallet is wallet
        assert swap.get_connected_network().chain_id == 1


class TestClient:
    def test_connect_unbound_swap_refused(self) -> None:
        with pytest.raises(WalletNotBoundError):
            Client().connect(EvmSwapProvider(EvmSwapOptions()))

    def test_connect_chains(self, wallet: EvmWalletProvider) -> None:
        swap = EvmSwapProvider(EvmSwapOptions())
        swap.set_wallet(wallet)
        nft = OpenSeaNftProvider(wallet, OpenSeaConfig(api_key="k"))

        client = Client().connect(swap).connect(nft)

        assert client.swap is swap
        assert client.nft is nft
        assert client.wallet is None
        assert client.capabilities == frozenset({"swap", "nft"})

    def test_connect_wallet(self, wallet: EvmWalletProvider) -> None:
        client = Client().connect(wallet)
        assert client.capabilities == frozenset({"wallet"})

    def test_connect_unknown_provider(self) -> None:
        with pytest.raises(TypeError, match="object"):
            Client().connect(object())

    def test_close_releases_hardware_transport(self, transport_creator) -> None:
        chain = EvmChainProvider(get_network("ethereum", "mainnet"))
        transport = transport_creator.create_transport()
        ledger = EvmLedgerProvider(chain, "m/44'/60'/0'/0/0", transport)
        swap = EvmSwapProvider(EvmSwapOptions())
        swap.set_wallet(ledger)

        client = Client().connect(swap)
        client.close()
        client.close()

        assert transport.closed is True
        assert ledger.transport is None
