"""Shared provider plumbing — HTTP/JSON-RPC access with endpoint fallback,
plus the base wallet and swap providers every chain family builds on."""
from __future__ import annotations

import logging
import ssl
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp
import certifi

from ..errors import ConfigurationError, DelegatedProviderError, WalletNotBoundError
from ..interfaces.chain import ChainProvider
from ..interfaces.transport import LedgerTransport
from ..models import NetworkDescriptor

logger = logging.getLogger(__name__)


def _join(base: str, path: str) -> str:
    if not path:
        return base
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class EndpointClient:
    """JSON-over-HTTP client with automatic fallback across ordered endpoints."""

    def __init__(
        self,
        endpoints: Sequence[str],
        timeout: int = 30,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        if not endpoints:
            raise ConfigurationError("At least one endpoint is required")
        self.endpoints = list(endpoints)
        self.timeout = timeout
        self.headers = dict(headers or {})
        self.current_index = 0

    async def request(
        self,
        path: str = "",
        payload: Any = None,
        params: Mapping[str, str] | None = None,
        rpc: bool = False,
    ) -> Any:
        """GET (or POST when ``payload`` is given) against each endpoint in turn.

        The endpoint that answers becomes the first one tried next time.
        With ``rpc=True`` the JSON-RPC envelope is unwrapped and an ``error``
        member counts as an endpoint failure.
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())

        last_error: Exception | None = None
        for attempt in range(len(self.endpoints)):
            index = (self.current_index + attempt) % len(self.endpoints)
            url = _join(self.endpoints[index], path)

            try:
                connector = aiohttp.TCPConnector(ssl=ssl_context)
                async with aiohttp.ClientSession(
                    connector=connector, headers=self.headers
                ) as session:
                    timeout = aiohttp.ClientTimeout(total=self.timeout)
                    if payload is None:
                        pending = session.get(url, params=params, timeout=timeout)
                    else:
                        pending = session.post(url, json=payload, timeout=timeout)
                    async with pending as response:
                        if response.status != 200:
                            raise DelegatedProviderError(
                                f"HTTP {response.status} from {url}"
                            )
                        result = await response.json(content_type=None)

                if rpc:
                    if "error" in result:
                        raise DelegatedProviderError(f"RPC Error: {result['error']}")
                    result = result.get("result")

                if index != self.current_index:
                    logger.info("Switched to endpoint: %s", self.endpoints[index])
                    self.current_index = index

                return result
            except Exception as e:
                last_error = e
                logger.warning("Endpoint %s failed: %s", url, e)
                continue

        raise DelegatedProviderError(f"All endpoints failed. Last error: {last_error}")

    async def rpc_call(self, method: str, params: Any) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        return await self.request(payload=payload, rpc=True)


class BaseChainProvider(ABC):
    """Chain provider bound to one network descriptor."""

    def __init__(
        self,
        network: NetworkDescriptor,
        endpoints: Sequence[str] | None = None,
        timeout: int = 30,
    ) -> None:
        self._network = network
        self.client = EndpointClient(endpoints or network.rpc_urls, timeout)

    @property
    def network(self) -> NetworkDescriptor:
        return self._network

    @abstractmethod
    async def get_block_height(self) -> int: ...


# ---------------------------------------------------------------------------
# Wallets
# ---------------------------------------------------------------------------


class BaseWalletProvider:
    """Account material bound to a chain provider; signing happens elsewhere."""

    def __init__(self, chain_provider: ChainProvider, derivation_path: str) -> None:
        self._chain_provider = chain_provider
        self.derivation_path = derivation_path

    @property
    def chain_provider(self) -> ChainProvider:
        return self._chain_provider

    def get_connected_network(self) -> NetworkDescriptor:
        return self._chain_provider.network

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(network={self.get_connected_network().name!r}, "
            f"derivation_path={self.derivation_path!r})"
        )


class MnemonicWalletProvider(BaseWalletProvider):
    """Software wallet derived from a seed phrase."""

    def __init__(
        self, chain_provider: ChainProvider, mnemonic: str, derivation_path: str
    ) -> None:
        super().__init__(chain_provider, derivation_path)
        self._mnemonic = mnemonic

    @property
    def mnemonic(self) -> str:
        return self._mnemonic


class LedgerWalletProvider(BaseWalletProvider):
    """Hardware wallet talking to a device over an open transport session."""

    def __init__(
        self,
        chain_provider: ChainProvider,
        derivation_path: str,
        transport: LedgerTransport,
    ) -> None:
        super().__init__(chain_provider, derivation_path)
        self._transport: LedgerTransport | None = transport

    @property
    def transport(self) -> LedgerTransport | None:
        return self._transport

    def close(self) -> None:
        if self._transport is not None:
            logger.info("Closing hardware transport for %s", type(self).__name__)
            self._transport.close()
            self._transport = None


# ---------------------------------------------------------------------------
# Swaps
# ---------------------------------------------------------------------------


class SwapProvider:
    """Swap capability; non-functional until a wallet is bound with set_wallet."""

    def __init__(self) -> None:
        self._wallet: BaseWalletProvider | None = None

    def set_wallet(self, wallet: BaseWalletProvider) -> None:
        self._wallet = wallet

    @property
    def is_bound(self) -> bool:
        return self._wallet is not None

    def _require_wallet(self) -> BaseWalletProvider:
        if self._wallet is None:
            raise WalletNotBoundError(f"{type(self).__name__} has no wallet bound")
        return self._wallet

    @property
    def wallet(self) -> BaseWalletProvider:
        return self._require_wallet()

    def get_connected_network(self) -> NetworkDescriptor:
        return self.wallet.get_connected_network()

    async def get_block_height(self) -> int:
        return await self.wallet.chain_provider.get_block_height()

    def close(self) -> None:
        if self._wallet is not None:
            self._wallet.close()
