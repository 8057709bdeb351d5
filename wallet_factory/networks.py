"""Network registry — static descriptors per chain × network.

Testnet descriptors are derived from their mainnet counterpart with
:func:`derive_testnet`, so only the fields that actually differ are spelled
out. The registry is read-only once the module is imported.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import fields, replace
from types import MappingProxyType, NoneType, UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

from .errors import ConfigurationError, UnknownNetworkError
from .models import MAINNET, TESTNET, ExplorerView, NetworkDescriptor

_DESCRIPTOR_FIELDS = frozenset(f.name for f in fields(NetworkDescriptor))
_DESCRIPTOR_TYPES = get_type_hints(NetworkDescriptor)
# Set by derive_testnet itself, never through the overlay
_RESERVED_FIELDS = frozenset({"explorer_views"})


def _to_explorer_view(view: ExplorerView | Mapping[str, str]) -> ExplorerView:
    if isinstance(view, ExplorerView):
        return view
    return ExplorerView(tx=view["tx"], address=view["address"])


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def _matches(value: Any, hint: Any) -> bool:
    origin = get_origin(hint)
    if origin in (Union, UnionType):
        return any(_matches(value, arg) for arg in get_args(hint))
    if origin is tuple:
        item_type = get_args(hint)[0]
        return isinstance(value, tuple) and all(_matches(v, item_type) for v in value)
    if hint is NoneType:
        return value is None
    if hint is int and isinstance(value, bool):
        return False
    return isinstance(value, hint)


def derive_testnet(
    mainnet: NetworkDescriptor,
    overrides: Mapping[str, Any],
    explorer_views: Iterable[ExplorerView | Mapping[str, str]],
    wallet_url: str | None = None,
) -> NetworkDescriptor:
    """Build a testnet descriptor by overlaying fields onto a mainnet one.

    Overridden fields are replaced wholesale, never merged; every other field
    keeps the mainnet value. ``is_testnet`` is always forced to ``True``.

    Raises:
        ConfigurationError: an override names a field the descriptor lacks,
            names ``explorer_views`` (pass those separately), or carries a
            value of the wrong type.
    """
    reserved = set(overrides) & _RESERVED_FIELDS
    if reserved:
        raise ConfigurationError(
            f"Testnet overlay for '{mainnet.name}' may not set "
            f"{', '.join(sorted(reserved))}; pass them as arguments"
        )
    unknown = set(overrides) - _DESCRIPTOR_FIELDS
    if unknown:
        raise ConfigurationError(
            f"Unknown descriptor fields in testnet overlay for "
            f"'{mainnet.name}': {', '.join(sorted(unknown))}"
        )

    changes = {name: _freeze(value) for name, value in overrides.items()}
    for name, value in changes.items():
        hint = _DESCRIPTOR_TYPES[name]
        if not _matches(value, hint):
            raise ConfigurationError(
                f"Testnet overlay for '{mainnet.name}' sets '{name}' to "
                f"{value!r}, expected {hint}"
            )
    changes["explorer_views"] = tuple(_to_explorer_view(v) for v in explorer_views)
    if wallet_url is not None:
        changes["wallet_url"] = wallet_url
    changes["is_testnet"] = True
    return replace(mainnet, **changes)


# ---------------------------------------------------------------------------
# Mainnet definitions
# ---------------------------------------------------------------------------

BITCOIN = NetworkDescriptor(
    name="Bitcoin",
    network_id="mainnet",
    coin_type="0",
    rpc_urls=("https://blockstream.info/api",),
    scraper_urls=("https://blockstream.info/api",),
    explorer_views=(
        ExplorerView(
            tx="https://blockstream.info/tx/{hash}",
            address="https://blockstream.info/address/{address}",
        ),
    ),
)

ETHEREUM = NetworkDescriptor(
    name="Ethereum",
    network_id="mainnet",
    coin_type="60",
    chain_id=1,
    rpc_urls=("https://cloudflare-eth.com", "https://rpc.ankr.com/eth"),
    explorer_views=(
        ExplorerView(
            tx="https://etherscan.io/tx/{hash}",
            address="https://etherscan.io/address/{address}",
        ),
    ),
)

POLYGON = NetworkDescriptor(
    name="Polygon",
    network_id="mainnet",
    coin_type="60",
    chain_id=137,
    rpc_urls=("https://polygon-rpc.com", "https://rpc.ankr.com/polygon"),
    explorer_views=(
        ExplorerView(
            tx="https://polygonscan.com/tx/{hash}",
            address="https://polygonscan.com/address/{address}",
        ),
    ),
)

RSK = NetworkDescriptor(
    name="Rootstock",
    network_id="mainnet",
    coin_type="137",
    chain_id=30,
    rpc_urls=("https://public-node.rsk.co",),
    explorer_views=(
        ExplorerView(
            tx="https://explorer.rsk.co/tx/{hash}",
            address="https://explorer.rsk.co/address/{address}",
        ),
    ),
)

NEAR = NetworkDescriptor(
    name="Near",
    network_id="mainnet",
    coin_type="397",
    rpc_urls=("https://rpc.mainnet.near.org",),
    scraper_urls=("https://near-mainnet-api.liq-chainhub.net",),
    explorer_views=(
        ExplorerView(
            tx="https://explorer.near.org/transactions/{hash}",
            address="https://explorer.near.org/accounts/{address}",
        ),
    ),
    wallet_url="https://wallet.near.org/",
    helper_url="https://helper.mainnet.near.org",
)

TERRA = NetworkDescriptor(
    name="Terra",
    network_id="columbus-5",
    coin_type="330",
    rpc_urls=("https://lcd.terra.dev",),
    explorer_views=(
        ExplorerView(
            tx="https://finder.terra.money/mainnet/tx/{hash}",
            address="https://finder.terra.money/mainnet/address/{address}",
        ),
    ),
    helper_url="https://fcd.terra.dev",
)

SOLANA = NetworkDescriptor(
    name="Solana",
    network_id="mainnet-beta",
    coin_type="501",
    rpc_urls=("https://api.mainnet-beta.solana.com",),
    explorer_views=(
        ExplorerView(
            tx="https://explorer.solana.com/tx/{hash}",
            address="https://explorer.solana.com/address/{address}",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Testnet overlays
# ---------------------------------------------------------------------------

BITCOIN_TESTNET = derive_testnet(
    BITCOIN,
    {
        "name": "Bitcoin Testnet",
        "network_id": "testnet",
        "coin_type": "1",
        "rpc_urls": ["https://blockstream.info/testnet/api"],
        "scraper_urls": ["https://blockstream.info/testnet/api"],
    },
    [
        {
            "tx": "https://blockstream.info/testnet/tx/{hash}",
            "address": "https://blockstream.info/testnet/address/{address}",
        }
    ],
)

ETHEREUM_TESTNET = derive_testnet(
    ETHEREUM,
    {
        "name": "Ethereum Rinkeby",
        "network_id": "rinkeby",
        "coin_type": "1",
        "chain_id": 4,
        "rpc_urls": ["https://rpc.ankr.com/eth_rinkeby"],
    },
    [
        {
            "tx": "https://rinkeby.etherscan.io/tx/{hash}",
            "address": "https://rinkeby.etherscan.io/address/{address}",
        }
    ],
)

POLYGON_TESTNET = derive_testnet(
    POLYGON,
    {
        "name": "Polygon Mumbai",
        "network_id": "mumbai",
        "coin_type": "1",
        "chain_id": 80001,
        "rpc_urls": ["https://rpc-mumbai.maticvigil.com"],
    },
    [
        {
            "tx": "https://mumbai.polygonscan.com/tx/{hash}",
            "address": "https://mumbai.polygonscan.com/address/{address}",
        }
    ],
)

RSK_TESTNET = derive_testnet(
    RSK,
    {
        "name": "Rootstock Testnet",
        "network_id": "testnet",
        "coin_type": "37310",
        "chain_id": 31,
        "rpc_urls": ["https://public-node.testnet.rsk.co"],
    },
    [
        {
            "tx": "https://explorer.testnet.rsk.co/tx/{hash}",
            "address": "https://explorer.testnet.rsk.co/address/{address}",
        }
    ],
)

NEAR_TESTNET = derive_testnet(
    NEAR,
    {
        "name": "Near Testnet",
        "network_id": "testnet",
        "coin_type": "397",
        "rpc_urls": ["https://rpc.testnet.near.org"],
        "scraper_urls": ["https://near-testnet-api.liq-chainhub.net"],
        "helper_url": "https://helper.testnet.near.org",
    },
    [
        {
            "tx": "https://explorer.testnet.near.org/transactions/{hash}",
            "address": "https://explorer.testnet.near.org/accounts/{address}",
        }
    ],
    "https://wallet.testnet.near.org/",
)

TERRA_TESTNET = derive_testnet(
    TERRA,
    {
        "name": "Terra Testnet",
        "network_id": "bombay-12",
        "rpc_urls": ["https://bombay-lcd.terra.dev"],
        "helper_url": "https://bombay-fcd.terra.dev",
    },
    [
        {
            "tx": "https://finder.terra.money/testnet/tx/{hash}",
            "address": "https://finder.terra.money/testnet/address/{address}",
        }
    ],
)

SOLANA_TESTNET = derive_testnet(
    SOLANA,
    {
        "name": "Solana Devnet",
        "network_id": "devnet",
        "rpc_urls": ["https://api.devnet.solana.com"],
    },
    [
        {
            "tx": "https://explorer.solana.com/tx/{hash}?cluster=devnet",
            "address": "https://explorer.solana.com/address/{address}?cluster=devnet",
        }
    ],
)

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

CHAIN_NETWORKS: Mapping[str, Mapping[str, NetworkDescriptor]] = MappingProxyType(
    {
        chain: MappingProxyType({MAINNET: mainnet, TESTNET: testnet})
        for chain, mainnet, testnet in (
            ("bitcoin", BITCOIN, BITCOIN_TESTNET),
            ("ethereum", ETHEREUM, ETHEREUM_TESTNET),
            ("polygon", POLYGON, POLYGON_TESTNET),
            ("rsk", RSK, RSK_TESTNET),
            ("near", NEAR, NEAR_TESTNET),
            ("terra", TERRA, TERRA_TESTNET),
            ("solana", SOLANA, SOLANA_TESTNET),
        )
    }
)


def supported_chains(
    registry: Mapping[str, Mapping[str, NetworkDescriptor]] = CHAIN_NETWORKS,
) -> list[str]:
    return sorted(registry)


def get_network(
    chain: str,
    network: str,
    registry: Mapping[str, Mapping[str, NetworkDescriptor]] = CHAIN_NETWORKS,
) -> NetworkDescriptor:
    """Look up the descriptor for ``chain`` on ``network``.

    Raises:
        UnknownNetworkError: the chain or the network is not registered.
    """
    descriptor = registry.get(chain, {}).get(network)
    if descriptor is None:
        raise UnknownNetworkError(chain, network)
    return descriptor
