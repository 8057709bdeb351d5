"""Composed client handle."""
from __future__ import annotations

from typing import Any

from .errors import WalletNotBoundError
from .interfaces.nft import NftProvider
from .providers.base import BaseWalletProvider, SwapProvider


class Client:
    """Uniform handle over the capability providers connected to it.

    Providers are attached with :meth:`connect`, which returns the client so
    calls chain. Chain providers stay internal to the wallet they back.
    """

    def __init__(self) -> None:
        self._swap: SwapProvider | None = None
        self._nft: NftProvider | None = None
        self._wallet: BaseWalletProvider | None = None

    def connect(self, provider: Any) -> Client:
        if isinstance(provider, SwapProvider):
            if not provider.is_bound:
                raise WalletNotBoundError(
                    f"Cannot connect {type(provider).__name__} without a wallet"
                )
            self._swap = provider
        elif isinstance(provider, BaseWalletProvider):
            self._wallet = provider
        elif isinstance(provider, NftProvider):
            self._nft = provider
        else:
            raise TypeError(f"Unsupported provider type: {type(provider).__name__}")
        return self

    @property
    def swap(self) -> SwapProvider | None:
        return self._swap

    @property
    def nft(self) -> NftProvider | None:
        return self._nft

    @property
    def wallet(self) -> BaseWalletProvider | None:
        return self._wallet

    @property
    def capabilities(self) -> frozenset[str]:
        attached = {"swap": self._swap, "nft": self._nft, "wallet": self._wallet}
        return frozenset(name for name, p in attached.items() if p is not None)

    def close(self) -> None:
        """Release hardware sessions held by connected wallets."""
        if self._swap is not None:
            self._swap.close()
        if self._wallet is not None:
            self._wallet.close()
