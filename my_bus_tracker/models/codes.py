"""
Coded enumerations used by the My Bus Tracker web service.

Each member's value is its wire code. ``str(member)`` yields the code as
sent in query strings, and ``Member.from_code`` decodes a code received in
a response, rejecting anything not listed here.
"""

from enum import Enum
from typing import Any

from .decoding import decode_code


class WireCodeEnum(Enum):
    """Enum whose values are the codes used on the wire."""

    @classmethod
    def from_code(cls, code: Any) -> "WireCodeEnum":
        return decode_code(cls, code)

    def __str__(self) -> str:
        return str(self.value)


class Operator(WireCodeEnum):
    """Bus operator filter and identifier."""

    LOTHIAN_BUSES = "LB"
    ALL_OPERATORS = "0"

    @classmethod
    def _missing_(cls, value):
        # Responses may spell the wildcard operator out
        if value == "ALL":
            return cls.ALL_OPERATORS
        return None


class Reliability(WireCodeEnum):
    """Reliability of a departure time estimate."""

    DELAYED = "B"
    DELOCATED = "D"
    REAL_TIME_NOT_LOW_FLOOR_EQUIPPED = "F"
    REAL_TIME_LOW_FLOOR_EQUIPPED = "H"
    IMMOBILIZED = "I"
    NEUTRALIZED = "N"
    RADIO_FAULT = "R"
    ESTIMATED = "T"
    DIVERTED = "V"


class StopType(WireCodeEnum):
    """Role of a stop on a journey."""

    TERMINUS = "D"
    NORMAL = "N"
    PART_ROUTE = "P"
    REFERENCE = "R"


class Direction(WireCodeEnum):
    """Direction of travel for a destination."""

    INBOUND = "A"
    OUTBOUND = "R"


class DisruptionType(WireCodeEnum):
    """Scope of a disruption; also used as a request filter."""

    ALL = 0
    NETWORK = 1
    SERVICE = 2
    BUS_STOP = 3


class DisruptionLevel(WireCodeEnum):
    """Severity of a disruption."""

    INFORMATIVE = 1
    MINOR = 2
    MAJOR = 3


class JourneyTimeMode(WireCodeEnum):
    """Which stops of a journey to return."""

    ALL = 0
    NEXT_REFERENCE = 1
