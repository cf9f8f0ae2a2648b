"""
Topological web service models.

Services, routes, destinations and stops making up the network, as
returned by getTopoId, getServices, getServicePoints, getDests and
getBusStops.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .codes import Direction, Operator
from .decoding import (
    ensure_mapping,
    get_code,
    get_float,
    get_int,
    get_list,
    get_str,
    get_str_list,
)


@dataclass(frozen=True)
class TopoId:
    """Identifier of the topology version currently in use."""

    topo_id: str
    operator_id: Operator

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TopoId":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            topo_id=get_str(data, "topoId"),
            operator_id=get_code(data, "operatorId", Operator),
        )


@dataclass(frozen=True)
class Service:
    """A bus service (route) in operation."""

    reference: str
    operator_id: Operator
    mnemonic: str
    name: str
    destinations: List[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Service":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            reference=get_str(data, "ref"),
            operator_id=get_code(data, "operatorId", Operator),
            mnemonic=get_str(data, "mnemo"),
            name=get_str(data, "name"),
            destinations=get_str_list(data, "dests"),
        )


@dataclass(frozen=True)
class Services:
    services: List[Service]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Services":
        data = ensure_mapping(data, cls.__name__)
        return cls(services=get_list(data, "services", Service.from_dict))

    def find(self, reference: str) -> Optional[Service]:
        """Return the service with the given reference, or None."""
        return next((s for s in self.services if s.reference == reference), None)


@dataclass(frozen=True)
class ServicePoint:
    """A point along a service route, for plotting on a map."""

    chainage: int
    order: int
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServicePoint":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            chainage=get_int(data, "chainage"),
            order=get_int(data, "order"),
            latitude=get_float(data, "x"),
            longitude=get_float(data, "y"),
        )


@dataclass(frozen=True)
class ServicePoints:
    service_reference: str
    operator_id: Operator
    service_points: List[ServicePoint]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServicePoints":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            service_reference=get_str(data, "ref"),
            operator_id=get_code(data, "operatorId", Operator),
            service_points=get_list(data, "servicePoints", ServicePoint.from_dict),
        )


@dataclass(frozen=True)
class Destination:
    reference: str
    operator_id: Operator
    name: str
    direction: Direction
    service: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Destination":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            reference=get_str(data, "ref"),
            operator_id=get_code(data, "operatorId", Operator),
            name=get_str(data, "name"),
            direction=get_code(data, "direction", Direction),
            service=get_str(data, "service"),
        )


@dataclass(frozen=True)
class Destinations:
    destinations: List[Destination]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Destinations":
        data = ensure_mapping(data, cls.__name__)
        return cls(destinations=get_list(data, "dests", Destination.from_dict))


@dataclass(frozen=True)
class BusStop:
    """
    A bus stop with its location and the services calling at it.

    ``orientation`` is the compass heading (degrees) a bus faces at the stop.
    """

    operator_id: Operator
    stop_id: str
    name: str
    latitude: float
    longitude: float
    orientation: int
    services: List[str]
    destinations: List[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusStop":
        data = ensure_mapping(data, cls.__name__)
        return cls(
            operator_id=get_code(data, "operatorId", Operator),
            stop_id=get_str(data, "stopId"),
            name=get_str(data, "name"),
            latitude=get_float(data, "x"),
            longitude=get_float(data, "y"),
            orientation=get_int(data, "cap"),
            services=get_str_list(data, "services"),
            destinations=get_str_list(data, "dests"),
        )


@dataclass(frozen=True)
class BusStops:
    bus_stops: List[BusStop]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusStops":
        data = ensure_mapping(data, cls.__name__)
        return cls(bus_stops=get_list(data, "busStops", BusStop.from_dict))
