"""
Hourly API key derivation for the My Bus Tracker web service.

The developer key issued by the council is never sent as-is. Each request
carries the MD5 hex digest of the developer key concatenated with the
current UTC time formatted as YYYYMMDDHH, so a derived key is only accepted
during the clock hour it was generated in.
"""

import hashlib
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

KEY_TIME_FORMAT = "%Y%m%d%H"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def truncate_to_hour(moment: datetime) -> datetime:
    """Drop minutes and below, normalising to UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.replace(minute=0, second=0, microsecond=0)


def generate_api_key(raw_api_key: str, moment: datetime) -> str:
    """
    Derive the key valid during the clock hour containing ``moment``.

    Args:
        raw_api_key: Developer key as issued
        moment: Any instant inside the target hour

    Returns:
        str: Lower-case hex MD5 digest
    """
    time_string = truncate_to_hour(moment).strftime(KEY_TIME_FORMAT)
    return hashlib.md5(f"{raw_api_key}{time_string}".encode("utf-8")).hexdigest()


def mask_key(key: str) -> str:
    """Short form of a key that is safe to write to logs."""
    if len(key) <= 4:
        return "****"
    return f"{key[:4]}****"


class ApiKey:
    """
    Holds the developer key and the key derived from it for the current hour.

    The derived key is regenerated lazily: the first call to ``get_key``
    after a UTC hour boundary recomputes it, every other call returns the
    stored value.
    """

    def __init__(self, raw_api_key: str, clock: Callable[[], datetime] = utc_now):
        """
        Initialize the key holder.

        Args:
            raw_api_key: Developer key issued by My Bus Tracker
            clock: Source of the current time, returning UTC datetimes
        """
        if not raw_api_key:
            raise ValueError("API key cannot be empty")

        self._raw_api_key = raw_api_key
        self._clock = clock
        self._key: Optional[str] = None
        self._generated: Optional[datetime] = None
        self._lock = threading.Lock()
        logger.debug(f"ApiKey initialized for developer key {mask_key(raw_api_key)}")

    @property
    def generated(self) -> Optional[datetime]:
        """Hour at which the stored key was generated, if any."""
        return self._generated

    def get_key(self) -> str:
        """
        Retrieve a key valid for the current UTC hour.

        System time must be correct for the returned key to be accepted.
        """
        current_hour = truncate_to_hour(self._clock())

        with self._lock:
            if self._key is None or self._generated != current_hour:
                self._key = generate_api_key(self._raw_api_key, current_hour)
                self._generated = current_hour
                logger.debug(
                    f"Generated API key {mask_key(self._key)} for "
                    f"{current_hour.strftime(KEY_TIME_FORMAT)}"
                )
            else:
                logger.debug("Reusing API key generated this hour")
            return self._key
