"""
Disruptions web service models.

Disruption notices, planned diversions and diversion routes, as returned
by getDisruptions, getDiversions and getDiversionPoints.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .codes import DisruptionLevel, DisruptionType, Operator
from .decoding import (
    ensure_mapping,
    get_code,
    get_float,
    get_int,
    get_list,
    get_optional_timestamp,
    get_str,
    get_str_list,
    get_timestamp,
)


@dataclass(frozen=True)
class Disruption:
    """
    A disruption notice.

    ``targets`` holds network, service or stop identifiers depending on
    ``disruption_type``. ``valid_until`` is None for open-ended notices.
    """

    id: str
    operator_id: Operator
    level: DisruptionLevel
    disruption_type: DisruptionType
    targets: List[str]
    valid_until: Optional[datetime]
    message: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Disruption":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            id=get_str(data, "id"),
            operator_id=get_code(data, "operatorId", Operator),
            level=get_code(data, "level", DisruptionLevel),
            disruption_type=get_code(data, "type", DisruptionType),
            targets=get_str_list(data, "targets"),
            valid_until=get_optional_timestamp(data, "validUntil"),
            message=get_str(data, "message"),
        )

    @property
    def is_major(self) -> bool:
        return self.level == DisruptionLevel.MAJOR


@dataclass(frozen=True)
class Disruptions:
    disruptions: List[Disruption]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Disruptions":
        data = ensure_mapping(data, cls.__name__)
        return cls(disruptions=get_list(data, "disruptions", Disruption.from_dict))


@dataclass(frozen=True)
class CancelledBusStop:
    stop_id: str
    stop_name: str
    replaced_stop_id: str
    replaced_stop_name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CancelledBusStop":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            stop_id=get_str(data, "stopId"),
            stop_name=get_str(data, "stopName"),
            replaced_stop_id=get_str(data, "replacedStopId"),
            replaced_stop_name=get_str(data, "replacedStopName"),
        )


@dataclass(frozen=True)
class TemporaryBusStop:
    stop_id: str
    stop_name: str
    stop_number: int
    stop_type: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TemporaryBusStop":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            stop_id=get_str(data, "stopId"),
            stop_name=get_str(data, "stopName"),
            stop_number=get_int(data, "num"),
            stop_type=get_str(data, "type"),
        )


@dataclass(frozen=True)
class Diversion:
    """
    A planned diversion of a service between two stops.

    ``days`` is the provider's day-of-week mask string; ``time_shift`` is
    the delay in minutes the diversion adds to the timetable.
    """

    diversion_reference: str
    diversion_id: str
    operator_id: Operator
    service_reference: str
    start_stop_id: str
    start_stop_name: str
    start_date: datetime
    end_stop_id: str
    end_stop_name: str
    end_date: datetime
    days: str
    length: int
    time_shift: int
    cancelled_bus_stops: List[CancelledBusStop]
    temporary_bus_stops: List[TemporaryBusStop]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diversion":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            diversion_reference=get_str(data, "ref"),
            diversion_id=get_str(data, "diversionId"),
            operator_id=get_code(data, "operatorId", Operator),
            service_reference=get_str(data, "refService"),
            start_stop_id=get_str(data, "startStopId"),
            start_stop_name=get_str(data, "startStopName"),
            start_date=get_timestamp(data, "startDate"),
            end_stop_id=get_str(data, "endStopId"),
            end_stop_name=get_str(data, "endStopName"),
            end_date=get_timestamp(data, "endDate"),
            days=get_str(data, "days"),
            length=get_int(data, "length"),
            time_shift=get_int(data, "timeShift"),
            cancelled_bus_stops=get_list(
                data, "cancelledBusStops", CancelledBusStop.from_dict
            ),
            temporary_bus_stops=get_list(
                data, "temporaryBusStops", TemporaryBusStop.from_dict
            ),
        )


@dataclass(frozen=True)
class Diversions:
    diversions: List[Diversion]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diversions":
        data = ensure_mapping(data, cls.__name__)
        return cls(diversions=get_list(data, "diversions", Diversion.from_dict))


@dataclass(frozen=True)
class DiversionPoint:
    order: int
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiversionPoint":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            order=get_int(data, "order"),
            latitude=get_float(data, "x"),
            longitude=get_float(data, "y"),
        )


@dataclass(frozen=True)
class DiversionPoints:
    diversion_points: List[DiversionPoint]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiversionPoints":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            diversion_points=get_list(
                data, "diversionPoints", DiversionPoint.from_dict
            )
        )
