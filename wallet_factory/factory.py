"""Client factory — wires providers into a client, one entry point per chain family.

Every ``create_*`` method follows the same order: resolve the network
descriptor, validate the account type, build the chain provider (plus fee
override), build the swap provider, bind the wallet to it and connect the
result to a :class:`Client`. Lookup and account-type failures are raised
before any provider exists; provider failures propagate unchanged.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType

from .client import Client
from .config import AppConfig
from .errors import ConfigurationError, UnknownNetworkError, UnsupportedAccountTypeError
from .interfaces.fee import FeeProvider
from .interfaces.nft import NftProvider
from .interfaces.transport import LedgerTransport, TransportCreator
from .ledger import (
    DEFAULT_ACCOUNT_TYPE,
    EVM_LEDGER_ACCOUNT_TYPES,
    LEDGER_BITCOIN_OPTIONS,
    hardware_session,
    is_hardware_account,
)
from .models import MAINNET, Account, EvmSwapOptions, NetworkDescriptor
from .networks import CHAIN_NETWORKS, get_network
from .providers import (
    BaseWalletProvider,
    BitcoinEsploraApiProvider,
    BitcoinFeeApiProvider,
    BitcoinHDWalletProvider,
    BitcoinLedgerProvider,
    BitcoinSwapEsploraProvider,
    EvmChainProvider,
    EvmLedgerProvider,
    EvmSwapProvider,
    EvmWalletProvider,
    MoralisNftProvider,
    NearChainProvider,
    NearSwapProvider,
    NearWalletProvider,
    OpenSeaNftProvider,
    SolanaChainProvider,
    SolanaWalletProvider,
    TerraChainProvider,
    TerraSwapProvider,
    TerraWalletProvider,
)
from .providers.nft import MORALIS, OPENSEA

logger = logging.getLogger(__name__)

NFT_PROVIDER_BY_CHAIN_ID: Mapping[int, str] = MappingProxyType(
    {
        1: OPENSEA,
        137: MORALIS,
        80001: MORALIS,
    }
)

# Registry of NFT provider factories keyed by vendor.
_NFT_PROVIDER_FACTORIES: Mapping[
    str, Callable[[BaseWalletProvider, AppConfig], NftProvider]
] = MappingProxyType(
    {
        OPENSEA: lambda wallet, cfg: OpenSeaNftProvider(
            wallet, cfg.nft.opensea, cfg.http_timeout
        ),
        MORALIS: lambda wallet, cfg: MoralisNftProvider(
            wallet, cfg.nft.moralis, cfg.http_timeout
        ),
    }
)


def nft_vendor_for(chain_id: int | None) -> str | None:
    """NFT vendor for an EVM chain id, or None when the chain has no NFT support."""
    if chain_id is None:
        return None
    return NFT_PROVIDER_BY_CHAIN_ID.get(chain_id)


class ClientFactory:
    """Builds composed clients from static network data and build config.

    Args:
        config: Build configuration (Esplora endpoints, fee API, NFT keys).
        transport_creator: Opens hardware sessions; required only for
            Ledger account types.
        registry: Network registry, :data:`CHAIN_NETWORKS` by default.
    """

    def __init__(
        self,
        config: AppConfig,
        transport_creator: TransportCreator | None = None,
        registry: Mapping[str, Mapping[str, NetworkDescriptor]] = CHAIN_NETWORKS,
    ) -> None:
        self._config = config
        self._transport_creator = transport_creator
        self._registry = registry

    # ------------------------------------------------------------------
    # Shared steps
    # ------------------------------------------------------------------

    def _check_account_type(
        self, account_type: str, supported: Collection[str], chain: str
    ) -> bool:
        """Return True for a supported hardware tag, False for software wallets."""
        if not is_hardware_account(account_type):
            return False
        if account_type not in supported:
            raise UnsupportedAccountTypeError(account_type, chain)
        if self._transport_creator is None:
            raise ConfigurationError(
                f"Account type {account_type} needs a hardware transport creator"
            )
        return True

    @contextmanager
    def _wallet_scope(self, hardware: bool) -> Iterator[LedgerTransport | None]:
        if not hardware or self._transport_creator is None:
            yield None
            return
        with hardware_session(self._transport_creator) as transport:
            yield transport

    def _nft_provider(
        self, wallet: BaseWalletProvider, network: NetworkDescriptor
    ) -> NftProvider | None:
        vendor = nft_vendor_for(network.chain_id)
        if vendor is None:
            return None
        return _NFT_PROVIDER_FACTORIES[vendor](wallet, self._config)

    # ------------------------------------------------------------------
    # Bitcoin
    # ------------------------------------------------------------------

    def create_btc_chain_provider(self, network: str) -> BitcoinEsploraApiProvider:
        """Esplora chain provider, with the fee API override on mainnet only."""
        descriptor = get_network("bitcoin", network, self._registry)
        btc_config = self._config.bitcoin
        timeout = self._config.http_timeout
        esplora = btc_config.esplora.get(network)
        esplora_url = esplora.url if esplora else descriptor.rpc_urls[0]
        batch_url = esplora.batch_url if esplora else esplora_url

        chain_provider = BitcoinEsploraApiProvider(
            descriptor,
            url=esplora_url,
            batch_url=batch_url,
            number_of_block_confirmation=btc_config.number_of_block_confirmation,
            timeout=timeout,
        )

        # Production fee-market data only makes sense on mainnet
        if network == MAINNET:
            chain_provider.set_fee_provider(
                BitcoinFeeApiProvider(btc_config.fee_api_url, timeout)
            )
        return chain_provider

    def create_btc_client(
        self,
        network: str,
        mnemonic: str,
        account_type: str,
        base_derivation_path: str,
        account: Account | None = None,
    ) -> Client:
        descriptor = get_network("bitcoin", network, self._registry)
        hardware = self._check_account_type(account_type, LEDGER_BITCOIN_OPTIONS, "bitcoin")

        chain_provider = self.create_btc_chain_provider(network)
        swap_provider = BitcoinSwapEsploraProvider(
            descriptor, chain_provider.client.endpoints[0], self._config.http_timeout
        )

        with self._wallet_scope(hardware) as transport:
            wallet: BaseWalletProvider
            if transport is not None:
                option = LEDGER_BITCOIN_OPTIONS[account_type]
                wallet = BitcoinLedgerProvider(
                    chain_provider,
                    base_derivation_path,
                    transport,
                    address_type=option.address_type,
                    base_public_key=account.public_key if account else None,
                    base_chain_code=account.chain_code if account else None,
                )
            else:
                wallet = BitcoinHDWalletProvider(chain_provider, mnemonic, base_derivation_path)
            swap_provider.set_wallet(wallet)
            client = Client().connect(swap_provider)

        logger.info("Created bitcoin client on %s (%s)", network, account_type)
        return client

    # ------------------------------------------------------------------
    # EVM
    # ------------------------------------------------------------------

    def create_evm_client(
        self,
        chain: str,
        network: str,
        mnemonic: str,
        account_type: str,
        derivation_path: str,
        swap_options: EvmSwapOptions,
        fee_provider: FeeProvider | None = None,
    ) -> Client:
        descriptor = get_network(chain, network, self._registry)
        # EVM networks are the ones carrying a numeric chain id
        if descriptor.chain_id is None:
            raise UnknownNetworkError(chain, network)
        hardware = self._check_account_type(account_type, EVM_LEDGER_ACCOUNT_TYPES, chain)

        # Multicall stays off until it is used consistently
        chain_provider = EvmChainProvider(
            descriptor, fee_provider, multicall=False, timeout=self._config.http_timeout
        )
        swap_provider = EvmSwapProvider(swap_options)

        with self._wallet_scope(hardware) as transport:
            wallet: BaseWalletProvider
            if transport is not None:
                wallet = EvmLedgerProvider(chain_provider, derivation_path, transport)
            else:
                wallet = EvmWalletProvider(chain_provider, mnemonic, derivation_path)
            swap_provider.set_wallet(wallet)

            client = Client().connect(swap_provider)
            nft_provider = self._nft_provider(wallet, descriptor)
            if nft_provider is not None:
                client.connect(nft_provider)

        logger.info(
            "Created %s client on %s (chain id %s, nft=%s)",
            chain,
            network,
            descriptor.chain_id,
            nft_vendor_for(descriptor.chain_id),
        )
        return client

    # ------------------------------------------------------------------
    # Near / Terra / Solana (software wallets only)
    # ------------------------------------------------------------------

    def create_near_client(
        self,
        network: str,
        mnemonic: str,
        derivation_path: str,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
    ) -> Client:
        descriptor = get_network("near", network, self._registry)
        self._check_account_type(account_type, (), "near")

        chain_provider = NearChainProvider(descriptor, timeout=self._config.http_timeout)
        wallet = NearWalletProvider(
            chain_provider, mnemonic, derivation_path, descriptor.helper_url
        )
        swap_provider = NearSwapProvider(descriptor.helper_url)
        swap_provider.set_wallet(wallet)

        logger.info("Created near client on %s", network)
        return Client().connect(swap_provider)

    def create_terra_client(
        self,
        network: str,
        mnemonic: str,
        derivation_path: str,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
    ) -> Client:
        descriptor = get_network("terra", network, self._registry)
        self._check_account_type(account_type, (), "terra")

        chain_provider = TerraChainProvider(descriptor, timeout=self._config.http_timeout)
        wallet = TerraWalletProvider(
            chain_provider, mnemonic, derivation_path, descriptor.helper_url
        )
        swap_provider = TerraSwapProvider(descriptor.helper_url)
        swap_provider.set_wallet(wallet)

        logger.info("Created terra client on %s", network)
        return Client().connect(swap_provider)

    def create_solana_client(
        self,
        network: str,
        mnemonic: str,
        derivation_path: str,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
    ) -> Client:
        """Solana has no swap provider, so the wallet itself is connected."""
        descriptor = get_network("solana", network, self._registry)
        self._check_account_type(account_type, (), "solana")

        chain_provider = SolanaChainProvider(descriptor, timeout=self._config.http_timeout)
        wallet = SolanaWalletProvider(chain_provider, mnemonic, derivation_path)

        logger.info("Created solana client on %s", network)
        return Client().connect(wallet)
