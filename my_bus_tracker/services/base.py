"""
Base class shared by the web service groups.

Each group only validates its arguments and lays out its query
parameters; building, sending and decoding requests is left to the
client that mixes the groups together.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable, Sequence, Tuple, TypeVar

T = TypeVar("T")


class WebService(ABC):
    """Abstract access to the request pipeline for service groups."""

    @abstractmethod
    async def _request(
        self,
        function: str,
        params: Sequence[Tuple[str, Any]],
        decoder: Callable[[Any], T],
    ) -> T:
        """Send ``function`` with ``params`` and decode the response."""
        pass

    @abstractmethod
    def _utc_today(self) -> date:
        """Current date in UTC, used for day offsets."""
        pass
