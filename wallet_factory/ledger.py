"""Account types and the hardware-wallet options table."""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType

from .interfaces.transport import LedgerTransport, TransportCreator

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_TYPE = "default"
BITCOIN_LEDGER_NATIVE_SEGWIT = "bitcoin_ledger_native_segwit"
BITCOIN_LEDGER_LEGACY = "bitcoin_ledger_legacy"
ETHEREUM_LEDGER = "ethereum_ledger"
RSK_LEDGER = "rsk_ledger"


@dataclass(frozen=True)
class LedgerOption:
    name: str
    label: str
    address_type: str


LEDGER_BITCOIN_OPTIONS: Mapping[str, LedgerOption] = MappingProxyType(
    {
        BITCOIN_LEDGER_NATIVE_SEGWIT: LedgerOption(
            name=BITCOIN_LEDGER_NATIVE_SEGWIT, label="Native Segwit", address_type="bech32"
        ),
        BITCOIN_LEDGER_LEGACY: LedgerOption(
            name=BITCOIN_LEDGER_LEGACY, label="Legacy", address_type="legacy"
        ),
    }
)

EVM_LEDGER_ACCOUNT_TYPES = frozenset({ETHEREUM_LEDGER, RSK_LEDGER})


def is_hardware_account(account_type: str) -> bool:
    return "_ledger" in account_type


@contextmanager
def hardware_session(creator: TransportCreator) -> Iterator[LedgerTransport]:
    """Open a transport session that is closed again if the block raises.

    On success the session is handed over to whatever provider the block
    built; closing it then is that provider's job.
    """
    transport = creator.create_transport()
    logger.info("Opened hardware transport session")
    try:
        yield transport
    except BaseException:
        logger.warning("Client construction failed, closing hardware transport")
        transport.close()
        raise
