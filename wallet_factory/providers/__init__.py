"""Capability providers per chain family."""
from .base import (
    BaseChainProvider,
    BaseWalletProvider,
    EndpointClient,
    LedgerWalletProvider,
    MnemonicWalletProvider,
    SwapProvider,
)
from .bitcoin import (
    BitcoinEsploraApiProvider,
    BitcoinFeeApiProvider,
    BitcoinHDWalletProvider,
    BitcoinLedgerProvider,
    BitcoinSwapEsploraProvider,
)
from .evm import EvmChainProvider, EvmLedgerProvider, EvmSwapProvider, EvmWalletProvider
from .near import NearChainProvider, NearSwapProvider, NearWalletProvider
from .nft import MoralisNftProvider, OpenSeaNftProvider
from .solana import SolanaChainProvider, SolanaWalletProvider
from .terra import TerraChainProvider, TerraSwapProvider, TerraWalletProvider

__all__ = [
    "BaseChainProvider",
    "BaseWalletProvider",
    "BitcoinEsploraApiProvider",
    "BitcoinFeeApiProvider",
    "BitcoinHDWalletProvider",
    "BitcoinLedgerProvider",
    "BitcoinSwapEsploraProvider",
    "EndpointClient",
    "EvmChainProvider",
    "EvmLedgerProvider",
    "EvmSwapProvider",
    "EvmWalletProvider",
    "LedgerWalletProvider",
    "MnemonicWalletProvider",
    "MoralisNftProvider",
    "NearChainProvider",
    "NearSwapProvider",
    "NearWalletProvider",
    "OpenSeaNftProvider",
    "SolanaChainProvider",
    "SolanaWalletProvider",
    "SwapProvider",
    "TerraChainProvider",
    "TerraSwapProvider",
    "TerraWalletProvider",
]
