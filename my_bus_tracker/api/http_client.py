"""
HTTP transport for the My Bus Tracker client.

Issues a single GET per call and decodes the JSON body. Network failures
and contract failures (unreadable body, malformed JSON) are reported as
different exceptions.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import aiohttp

from ..version import get_user_agent
from .exceptions import CommunicationException, InternalException

logger = logging.getLogger(__name__)


class HTTPClient(ABC):
    """Abstract HTTP client interface for dependency injection."""

    @abstractmethod
    async def get_json(self, url: str) -> Any:
        """Make HTTP GET request and return the decoded JSON body."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close HTTP client."""
        pass


class AioHttpClient(HTTPClient):
    """
    Concrete HTTP client implementation using aiohttp.

    No retries and no client-side timeout: each call is one attempt that
    lasts as long as the server takes.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            session: Existing session to use; it is then owned by the caller
            user_agent: Override for the client identification header
        """
        self._session = session
        self._owns_session = session is None
        self._user_agent = user_agent or get_user_agent()

    @property
    def user_agent(self) -> str:
        return self._user_agent

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=None),
                headers={"User-Agent": self._user_agent},
            )
            self._owns_session = True
        return self._session

    async def get_json(self, url: str) -> Any:
        """
        Perform the GET request and decode the body as JSON.

        The HTTP status is not interpreted; error pages surface as decode
        failures.

        Raises:
            CommunicationException: Connection or transport failure
            InternalException: Body could not be read or decoded
        """
        session = await self._ensure_session()

        try:
            async with session.get(
                url, headers={"User-Agent": self._user_agent}
            ) as response:
                try:
                    body = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    logger.error(f"Failed to read response body: {e}")
                    raise InternalException(f"Failed to read response body: {e}")
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Network error contacting MyBusTracker: {e}")
            raise CommunicationException(str(e) or type(e).__name__)

        logger.debug(f"Received {len(body)} bytes with status {status}")

        try:
            return json.loads(body)
        except (UnicodeDecodeError, ValueError) as e:
            logger.error(f"Invalid JSON in response (status {status}): {e}")
            raise InternalException(f"Invalid JSON in response: {e}")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            logger.debug("HTTP client session closed")
        self._session = None
