"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from wallet_factory.config import (
    AppConfig,
    BitcoinConfig,
    EsploraConfig,
    MoralisConfig,
    NftConfig,
    OpenSeaConfig,
)
from wallet_factory.factory import ClientFactory
from wallet_factory.models import EvmSwapOptions


# ---------------------------------------------------------------------------
# Hardware transport doubles
# ---------------------------------------------------------------------------


class FakeTransport:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


class FakeTransportCreator:
    def __init__(self) -> None:
        self.transports: list[FakeTransport] = []

    def create_transport(self) -> FakeTransport:
        transport = FakeTransport()
        self.transports.append(transport)
        return transport


@pytest.fixture()
def transport_creator() -> FakeTransportCreator:
    return FakeTransportCreator()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_bitcoin_config() -> BitcoinConfig:
    return BitcoinConfig(
        esplora={
            "mainnet": EsploraConfig(
                url="https://esplora.example.com/api",
                batch_url="https://batch.example.com/api",
            ),
            "testnet": EsploraConfig(
                url="https://esplora-testnet.example.com/api",
                batch_url="https://batch-testnet.example.com/api",
            ),
        },
        fee_api_url="https://fees.example.com/recommended",
    )


@pytest.fixture()
def sample_app_config(sample_bitcoin_config: BitcoinConfig) -> AppConfig:
    return AppConfig(
        bitcoin=sample_bitcoin_config,
        nft=NftConfig(
            opensea=OpenSeaConfig(url="https://opensea.example.com/api/v1/", api_key="os-key"),
            moralis=MoralisConfig(url="https://moralis.example.com/api/v2", api_key="mo-key"),
        ),
        http_timeout=10,
    )


@pytest.fixture()
def factory(sample_app_config: AppConfig, transport_creator: FakeTransportCreator) -> ClientFactory:
    return ClientFactory(sample_app_config, transport_creator=transport_creator)


@pytest.fixture()
def swap_options() -> EvmSwapOptions:
    return EvmSwapOptions(contract_address="0x133713371337133713371337133713371337Da7a")


@pytest.fixture()
def mnemonic() -> str:
    return (
        "diary wolf balcony magnet view mosquito settle gym slim target divert "
        "all rude shoe motor wheat purse fork bright glory ensure vocal clerk tape"
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    http_timeout: 15
    bitcoin:
      fee_api_url: "https://fees.example.com/recommended"
      number_of_block_confirmation: 3
      esplora:
        mainnet:
          url: "https://esplora.example.com/api"
          batch_url: "https://batch.example.com/api"
        testnet:
          url: "https://esplora-testnet.example.com/api"
    nft:
      opensea:
        url: "https://opensea.example.com/api/v1/"
        api_key: "os-key"
      moralis:
        url: "https://moralis.example.com/api/v2"
        api_key: "mo-key"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
