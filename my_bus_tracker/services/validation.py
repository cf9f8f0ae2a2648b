"""
Client-side validation of request arguments.

All checks run before a request is built, so a rejected call never
touches the network.
"""

from datetime import date, datetime, timezone
from typing import Optional, Sequence, Union

from ..api.exceptions import (
    DateOutOfBoundsException,
    TooManyDeparturesException,
    TooManyTimetablesException,
    ValidationException,
)

MAX_TIMETABLES = 5
MAX_DEPARTURES = 10
DEFAULT_DEPARTURES = 2
MAX_DAYS_AHEAD = 3

DayLike = Union[date, datetime]


def check_timetables(timetables: Sequence) -> None:
    """Reject batches larger than the service accepts. Empty is fine."""
    if len(timetables) > MAX_TIMETABLES:
        raise TooManyTimetablesException(len(timetables), MAX_TIMETABLES)


def check_departure_count(departure_count: int) -> None:
    if departure_count < 0:
        raise ValidationException(
            f"Departure count cannot be negative: {departure_count}"
        )
    if departure_count > MAX_DEPARTURES:
        raise TooManyDeparturesException(departure_count, MAX_DEPARTURES)


def to_utc_date(day: DayLike) -> date:
    """Calendar date of ``day`` in UTC; naive datetimes are taken as UTC."""
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(timezone.utc)
        return day.date()
    return day


def day_offset(day: Optional[DayLike], today: date) -> int:
    """
    Signed number of days from ``today`` to ``day``, as sent on the wire.

    Args:
        day: Requested day, or None for today
        today: Current UTC date

    Returns:
        int: Offset between 0 and MAX_DAYS_AHEAD inclusive

    Raises:
        DateOutOfBoundsException: If the day is in the past or too far ahead
    """
    if day is None:
        return 0

    offset = (to_utc_date(day) - today).days
    if offset < 0 or offset > MAX_DAYS_AHEAD:
        raise DateOutOfBoundsException(offset)
    return offset
