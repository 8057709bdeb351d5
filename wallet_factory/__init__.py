"""Network registry and client factory for multi-chain wallet/swap clients."""
from .client import Client
from .config import AppConfig, load_config
from .errors import (
    ConfigurationError,
    DelegatedProviderError,
    UnknownNetworkError,
    UnsupportedAccountTypeError,
    WalletFactoryError,
    WalletNotBoundError,
)
from .factory import ClientFactory
from .models import MAINNET, NETWORKS, TESTNET, Account, NetworkDescriptor
from .networks import CHAIN_NETWORKS, derive_testnet, get_network

__all__ = [
    "Account",
    "AppConfig",
    "CHAIN_NETWORKS",
    "Client",
    "ClientFactory",
    "ConfigurationError",
    "DelegatedProviderError",
    "MAINNET",
    "NETWORKS",
    "NetworkDescriptor",
    "TESTNET",
    "UnknownNetworkError",
    "UnsupportedAccountTypeError",
    "WalletFactoryError",
    "WalletNotBoundError",
    "derive_testnet",
    "get_network",
    "load_config",
]
