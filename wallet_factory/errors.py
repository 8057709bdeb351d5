"""Error taxonomy for client construction."""


class WalletFactoryError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(WalletFactoryError, ValueError):
    """Static configuration is inconsistent (registry overlay, config.yaml)."""


class UnknownNetworkError(WalletFactoryError, LookupError):
    """Requested chain/network pair is not in the registry."""

    def __init__(self, chain: str, network: str) -> None:
        super().__init__(f"Unknown network '{network}' for chain '{chain}'")
        self.chain = chain
        self.network = network


class UnsupportedAccountTypeError(WalletFactoryError, ValueError):
    """Hardware account-type tag is not in the supported-options table."""

    def __init__(self, account_type: str, chain: str) -> None:
        super().__init__(f"Account type {account_type} not an option for {chain}")
        self.account_type = account_type
        self.chain = chain


class WalletNotBoundError(WalletFactoryError, RuntimeError):
    """A swap provider was used before a wallet provider was attached."""


class DelegatedProviderError(WalletFactoryError, RuntimeError):
    """Failure raised by a capability provider (HTTP, RPC, endpoint exhaustion)."""
