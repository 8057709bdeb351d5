"""Protocol interfaces for capability providers."""
from .chain import ChainProvider
from .fee import FeeProvider
from .nft import NftProvider
from .transport import LedgerTransport, TransportCreator
from .wallet import WalletProvider

__all__ = [
    "ChainProvider",
    "FeeProvider",
    "LedgerTransport",
    "NftProvider",
    "TransportCreator",
    "WalletProvider",
]
