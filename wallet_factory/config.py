"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigurationError
from .models import NETWORKS

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EsploraConfig:
    url: str = ""
    batch_url: str = ""


@dataclass(frozen=True)
class BitcoinConfig:
    esplora: dict[str, EsploraConfig] = field(default_factory=dict)
    fee_api_url: str = "https://liquality.io/swap/mempool/v1/fees/recommended"
    number_of_block_confirmation: int = 2


@dataclass(frozen=True)
class OpenSeaConfig:
    url: str = "https://api.opensea.io/api/v1/"
    api_key: str = ""


@dataclass(frozen=True)
class MoralisConfig:
    url: str = "https://deep-index.moralis.io/api/v2"
    api_key: str = ""


@dataclass(frozen=True)
class NftConfig:
    opensea: OpenSeaConfig = field(default_factory=OpenSeaConfig)
    moralis: MoralisConfig = field(default_factory=MoralisConfig)


@dataclass(frozen=True)
class AppConfig:
    bitcoin: BitcoinConfig = field(default_factory=BitcoinConfig)
    nft: NftConfig = field(default_factory=NftConfig)
    http_timeout: int = 30


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_bitcoin(raw: dict[str, Any]) -> BitcoinConfig:
    esplora: dict[str, EsploraConfig] = {}
    for network, cfg in raw.get("esplora", {}).items():
        url = cfg.get("url", "")
        esplora[network] = EsploraConfig(url=url, batch_url=cfg.get("batch_url", url))
    return BitcoinConfig(
        esplora=esplora,
        fee_api_url=raw.get("fee_api_url", BitcoinConfig.fee_api_url),
        number_of_block_confirmation=int(raw.get("number_of_block_confirmation", 2)),
    )


def _build_nft(raw: dict[str, Any]) -> NftConfig:
    os_raw = raw.get("opensea", {})
    mo_raw = raw.get("moralis", {})
    return NftConfig(
        opensea=OpenSeaConfig(
            url=os_raw.get("url", OpenSeaConfig.url),
            api_key=os_raw.get("api_key", ""),
        ),
        moralis=MoralisConfig(
            url=mo_raw.get("url", MoralisConfig.url),
            api_key=mo_raw.get("api_key", ""),
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate build configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        bitcoin=_build_bitcoin(raw.get("bitcoin", {})),
        nft=_build_nft(raw.get("nft", {})),
        http_timeout=int(raw.get("http_timeout", 30)),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    for network in NETWORKS:
        esplora = cfg.bitcoin.esplora.get(network)
        if esplora is None or not esplora.url:
            raise ConfigurationError(f"No Esplora API configured for network '{network}'")

    if not cfg.bitcoin.fee_api_url:
        raise ConfigurationError("Bitcoin fee API URL must not be empty")

    if cfg.http_timeout <= 0:
        raise ConfigurationError("http_timeout must be positive")
