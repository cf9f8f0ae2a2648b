"""
Exceptions raised by the My Bus Tracker client.

Every public operation either returns its typed model or raises one of
the exceptions below. None of them are retried internally.
"""

from typing import Optional


class MyBusTrackerException(Exception):
    """Base exception for all My Bus Tracker errors."""

    pass


class ValidationException(MyBusTrackerException):
    """Request arguments rejected before any network access."""

    pass


class DateOutOfBoundsException(ValidationException):
    """Requested day is before today or more than three days ahead (UTC)."""

    def __init__(self, day_offset: Optional[int] = None):
        self.day_offset = day_offset
        message = "Date out of bounds"
        if day_offset is not None:
            message = f"Date out of bounds: {day_offset} days from today"
        super().__init__(message)


class TooManyTimetablesException(ValidationException):
    """More timetables requested than a single call accepts."""

    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Too many timetables requested: {requested} (maximum {limit})"
        )


class TooManyDeparturesException(ValidationException):
    """More departures per timetable requested than the service returns."""

    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Too many departures requested: {requested} (maximum {limit})"
        )


class InternalException(MyBusTrackerException):
    """
    Contract or environment defect.

    Covers URI construction failures, unreadable response bodies and
    responses that do not decode into the expected model.
    """

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Internal error: {cause}")


class CommunicationException(MyBusTrackerException):
    """Exception for network-related errors reaching the web service."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Error communicating with MyBusTracker: {cause}")
