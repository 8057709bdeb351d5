"""NFT provider protocol — vendor-backed NFT listing."""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NftProvider(Protocol):
    """Abstract interface for listing NFT assets owned by a wallet."""

    async def fetch(self, owner: str) -> list[dict[str, Any]]: ...
