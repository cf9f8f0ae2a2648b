"""
Request URI construction for the My Bus Tracker web service.

All operations share one endpoint; the remote function and its arguments
travel in the query string after the authentication key.
"""

import logging
from typing import Any, Iterable, List, Sequence, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

from .api_key import ApiKey, mask_key
from .exceptions import InternalException

logger = logging.getLogger(__name__)

BASE_URL = "http://ws.mybustracker.co.uk/?module=json"

QueryParams = Sequence[Tuple[str, Any]]


class RequestBuilder:
    """Builds authenticated request URIs for named remote functions."""

    def __init__(self, api_key: ApiKey, base_url: str = BASE_URL):
        """
        Initialize request builder.

        Args:
            api_key: Key holder supplying the current hourly key
            base_url: Service endpoint, optionally with a static query
        """
        self._api_key = api_key
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_uri(self, function: str, params: QueryParams = ()) -> str:
        """
        Assemble the URI for ``function`` with ``params`` in the given order.

        Values are percent-encoded here; callers pass raw strings, integers
        or code enums whose ``str()`` is their wire form.

        Raises:
            InternalException: If the URI cannot be assembled
        """
        key = self._api_key.get_key()
        merged = [("key", key), ("function", function)]
        merged.extend(self._normalise(params))

        try:
            parts = urlsplit(self._base_url)
            if not parts.scheme or not parts.netloc:
                raise ValueError(f"not an absolute URL: {self._base_url!r}")
            query = urlencode(merged)
            if parts.query:
                query = f"{parts.query}&{query}"
            uri = urlunsplit((parts.scheme, parts.netloc, parts.path, query, ""))
        except (TypeError, ValueError) as e:
            raise InternalException(f"Could not build URI for {function}: {e}")

        logger.debug(f"Built URI for {function}: {uri.replace(key, mask_key(key))}")
        return uri

    @staticmethod
    def _normalise(params: Iterable[Tuple[str, Any]]) -> List[Tuple[str, str]]:
        normalised = []
        for name, value in params:
            if value is None:
                raise InternalException(f"Missing value for query parameter {name}")
            normalised.append((name, str(value)))
        return normalised
