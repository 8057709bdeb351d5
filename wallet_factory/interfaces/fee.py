"""Fee provider protocol — fee-market estimation."""
from typing import Protocol

from ..models import FeeDetails


class FeeProvider(Protocol):
    """Abstract interface for fetching fee estimates."""

    async def get_fees(self) -> FeeDetails: ...
