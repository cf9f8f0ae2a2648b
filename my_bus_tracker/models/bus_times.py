"""
Bus times web service models.

Request-side descriptions of the timetables and journeys to look up, and
the departure and journey times returned by getBusTimes and
getJourneyTimes.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .codes import Operator, Reliability, StopType
from .decoding import (
    ensure_mapping,
    get_bool,
    get_code,
    get_int,
    get_list,
    get_optional_str,
    get_str,
    get_time_of_day,
)


@dataclass(frozen=True)
class Timetable:
    """A stop, service and destination whose next departures are wanted."""

    stop_id: str
    service_reference: str
    destination_reference: str
    operator_id: Operator = Operator.ALL_OPERATORS


@dataclass(frozen=True)
class JourneyId:
    """Journey identifier as found in ``TimeData.journey_id``."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BusId:
    """Bus fleet number."""

    value: str

    def __str__(self) -> str:
        return self.value


JourneyIdentifier = Union[JourneyId, BusId]


@dataclass(frozen=True)
class TimeData:
    """A single upcoming departure at a stop."""

    day: int
    time: str
    minutes: int
    reliability: Reliability
    stop_type: StopType
    terminus: str
    journey_id: str
    bus_id: Optional[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeData":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            day=get_int(data, "day"),
            time=get_str(data, "time"),
            minutes=get_int(data, "minutes"),
            reliability=get_code(data, "reliability", Reliability),
            stop_type=get_code(data, "type", StopType),
            terminus=get_str(data, "terminus"),
            journey_id=get_str(data, "journeyId"),
            bus_id=get_optional_str(data, "busId"),
        )

    @property
    def is_real_time(self) -> bool:
        """Whether the estimate comes from live vehicle tracking."""
        return self.reliability in (
            Reliability.REAL_TIME_LOW_FLOOR_EQUIPPED,
            Reliability.REAL_TIME_NOT_LOW_FLOOR_EQUIPPED,
        )


@dataclass(frozen=True)
class BusTime:
    """Departures for one requested timetable."""

    operator_id: Operator
    stop_id: str
    stop_name: str
    service_reference: str
    service_mnemonic: str
    service_name: str
    destination_reference: Optional[str]
    destination_name: Optional[str]
    times: List[TimeData]
    global_disruption: bool
    service_disruption: bool
    bus_stop_disruption: bool
    service_diversion: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusTime":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            operator_id=get_code(data, "operatorId", Operator),
            stop_id=get_str(data, "stopId"),
            stop_name=get_str(data, "stopName"),
            service_reference=get_str(data, "refService"),
            service_mnemonic=get_str(data, "mnemoService"),
            service_name=get_str(data, "nameService"),
            destination_reference=get_optional_str(data, "refDest"),
            destination_name=get_optional_str(data, "nameDest"),
            times=get_list(data, "timeDatas", TimeData.from_dict),
            global_disruption=get_bool(data, "globalDisruption"),
            service_disruption=get_bool(data, "serviceDisruption"),
            bus_stop_disruption=get_bool(data, "busStopDisruption"),
            service_diversion=get_bool(data, "serviceDiversion"),
        )


@dataclass(frozen=True)
class BusTimes:
    bus_times: List[BusTime]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusTimes":
        data = ensure_mapping(data, cls.__name__)
        return cls(bus_times=get_list(data, "busTimes", BusTime.from_dict))


@dataclass(frozen=True)
class JourneyTimeData:
    """A stop along a journey with its expected passing time."""

    order: int
    stop_id: str
    stop_name: str
    day: int
    time: datetime.time
    minutes: int
    reliability: Reliability
    stop_type: str
    disruption: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JourneyTimeData":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            order=get_int(data, "order"),
            stop_id=get_str(data, "stopId"),
            stop_name=get_str(data, "stopName"),
            day=get_int(data, "day"),
            time=get_time_of_day(data, "time"),
            minutes=get_int(data, "minutes"),
            reliability=get_code(data, "reliability", Reliability),
            stop_type=get_str(data, "type"),
            disruption=get_bool(data, "busStopDisruption"),
        )

    def format_time(self) -> str:
        """Format passing time for display (HH:MM)."""
        return self.time.strftime("%H:%M")


@dataclass(frozen=True)
class JourneyTime:
    journey_id: str
    bus_id: Optional[str]
    operator_id: Operator
    service_reference: str
    service_mnemonic: str
    service_name: str
    destination_reference: str
    destination_name: str
    journey_times: List[JourneyTimeData]
    global_disruption: bool
    service_disruption: bool
    service_diversion: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JourneyTime":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            journey_id=get_str(data, "journeyId"),
            bus_id=get_optional_str(data, "busId"),
            operator_id=get_code(data, "operatorId", Operator),
            service_reference=get_str(data, "refService"),
            service_mnemonic=get_str(data, "mnemoService"),
            service_name=get_str(data, "nameService"),
            destination_reference=get_str(data, "refDest"),
            destination_name=get_str(data, "nameDest"),
            journey_times=get_list(
                data, "journeyTimeDatas", JourneyTimeData.from_dict
            ),
            global_disruption=get_bool(data, "globalDisruption"),
            service_disruption=get_bool(data, "serviceDisruption"),
            service_diversion=get_bool(data, "serviceDiversion"),
        )


@dataclass(frozen=True)
class JourneyTimes:
    journey_times: List[JourneyTime]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JourneyTimes":
        data = ensure_mapping(data, cls.__name__)
        return cls(journey_times=get_list(data, "journeyTimes", JourneyTime.from_dict))
