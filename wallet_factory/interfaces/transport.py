"""Hardware transport protocols — injected by the caller."""
from typing import Protocol


class LedgerTransport(Protocol):
    """An open session with a hardware device."""

    def close(self) -> None: ...


class TransportCreator(Protocol):
    """Opens transport sessions; passed explicitly to the client factory."""

    def create_transport(self) -> LedgerTransport: ...
