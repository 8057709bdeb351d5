"""Wallet provider protocol — account material bound to a chain provider."""
from typing import Protocol

from ..models import NetworkDescriptor
from .chain import ChainProvider


class WalletProvider(Protocol):
    """Abstract interface shared by software and hardware wallets."""

    @property
    def chain_provider(self) -> ChainProvider: ...

    def get_connected_network(self) -> NetworkDescriptor: ...

    def close(self) -> None: ...
