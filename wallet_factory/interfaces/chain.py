"""Chain provider protocol — node/indexer access for one network."""
from typing import Protocol

from ..models import NetworkDescriptor


class ChainProvider(Protocol):
    """Abstract interface for reading chain state."""

    @property
    def network(self) -> NetworkDescriptor: ...

    async def get_block_height(self) -> int: ...
