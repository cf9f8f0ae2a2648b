"""
Data models for the My Bus Tracker client.

This module contains the coded enumerations and the immutable response
models returned by the topological, disruptions and bus times web
services, plus the request-side descriptions they take.
"""

from .codes import (
    Direction,
    DisruptionLevel,
    DisruptionType,
    JourneyTimeMode,
    Operator,
    Reliability,
    StopType,
    WireCodeEnum,
)
from .decoding import ModelDecodeError
from .topology import (
    BusStop,
    BusStops,
    Destination,
    Destinations,
    Service,
    ServicePoint,
    ServicePoints,
    Services,
    TopoId,
)
from .disruptions import (
    CancelledBusStop,
    Disruption,
    Disruptions,
    Diversion,
    DiversionPoint,
    DiversionPoints,
    Diversions,
    TemporaryBusStop,
)
from .bus_times import (
    BusId,
    BusTime,
    BusTimes,
    JourneyId,
    JourneyIdentifier,
    JourneyTime,
    JourneyTimeData,
    JourneyTimes,
    TimeData,
    Timetable,
)

__all__ = [
    "Direction",
    "DisruptionLevel",
    "DisruptionType",
    "JourneyTimeMode",
    "Operator",
    "Reliability",
    "StopType",
    "WireCodeEnum",
    "ModelDecodeError",
    "BusStop",
    "BusStops",
    "Destination",
    "Destinations",
    "Service",
    "ServicePoint",
    "ServicePoints",
    "Services",
    "TopoId",
    "CancelledBusStop",
    "Disruption",
    "Disruptions",
    "Diversion",
    "DiversionPoint",
    "DiversionPoints",
    "Diversions",
    "TemporaryBusStop",
    "BusId",
    "BusTime",
    "BusTimes",
    "JourneyId",
    "JourneyIdentifier",
    "JourneyTime",
    "JourneyTimeData",
    "JourneyTimes",
    "TimeData",
    "Timetable",
]
