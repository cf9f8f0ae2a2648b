"""
My Bus Tracker API client.

This module ties the hourly key, the request builder and the HTTP
transport together behind the topological, disruptions and bus times
web service groups.
"""

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar

from ..managers.config_manager import ConfigData
from ..models.decoding import ModelDecodeError
from ..services.bus_times_service import BusTimesService
from ..services.disruptions_service import DisruptionsServices
from ..services.topological_service import TopologicalServices
from ..services.validation import to_utc_date
from .api_key import ApiKey, utc_now
from .exceptions import InternalException
from .http_client import AioHttpClient, HTTPClient
from .request_builder import BASE_URL, RequestBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MyBusTracker(TopologicalServices, DisruptionsServices, BusTimesService):
    """
    Instance of the My Bus Tracker API.

    Typically one instance is created for the whole application and used
    as an async context manager so its HTTP session gets closed. Calls on
    one instance may run concurrently; the hourly key is the only shared
    state and is guarded internally.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        http_client: Optional[HTTPClient] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the client.

        Args:
            api_key: Developer API key issued by My Bus Tracker
            base_url: Service endpoint
            http_client: Transport to use; an aiohttp client by default
            clock: Source of the current UTC time
        """
        self._clock = clock
        self._api_key = ApiKey(api_key, clock=clock)
        self._request_builder = RequestBuilder(self._api_key, base_url)
        self._http_client = http_client or AioHttpClient()
        logger.debug(f"MyBusTracker initialized for {base_url}")

    @classmethod
    def from_config(cls, config: ConfigData, **kwargs) -> "MyBusTracker":
        """Create a client from loaded configuration."""
        return cls(config.api.api_key, base_url=config.api.base_url, **kwargs)

    async def __aenter__(self):
        """Async context manager entry."""
        logger.info("MyBusTracker client opened")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Release the HTTP session."""
        await self._http_client.close()
        logger.info("MyBusTracker client closed")

    def _utc_today(self) -> date:
        return to_utc_date(self._clock())

    async def _request(
        self,
        function: str,
        params: Sequence[Tuple[str, Any]],
        decoder: Callable[[Any], T],
    ) -> T:
        """
        Perform one remote function call and decode its response.

        Raises:
            InternalException: URI could not be built, or the response
                does not match the expected model
            CommunicationException: Network failure
        """
        uri = self._request_builder.build_uri(function, params)
        data = await self._http_client.get_json(uri)

        try:
            return decoder(data)
        except ModelDecodeError as e:
            logger.error(f"Unexpected {function} response: {e}")
            raise InternalException(f"Failed to decode {function} response: {e}")
