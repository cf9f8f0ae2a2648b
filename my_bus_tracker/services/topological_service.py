"""
Topological web service.

Services, routes, destinations and stops of the network. For full
documentation see Section IV.2 of the My Bus Tracker API Guide (Version F).
"""

import logging

from ..models.codes import Operator
from ..models.topology import BusStops, Destinations, ServicePoints, Services, TopoId
from .base import WebService

logger = logging.getLogger(__name__)

GET_TOPO_ID = "getTopoId"
GET_SERVICES = "getServices"
GET_SERVICE_POINTS = "getServicePoints"
GET_DESTINATIONS = "getDests"
GET_BUS_STOPS = "getBusStops"


class TopologicalServices(WebService):
    """Topological web service operations."""

    async def get_topo_id(self, operator: Operator = Operator.ALL_OPERATORS) -> TopoId:
        """
        Get the ID of the topology version in use.

        The ID is generated once per day server-side and only changes when
        the topology does. It is not cached: each call hits the service.
        """
        logger.debug(f"Getting topology ID for operator {operator}")
        return await self._request(
            GET_TOPO_ID, [("operatorId", operator)], TopoId.from_dict
        )

    async def get_services(self, operator: Operator = Operator.ALL_OPERATORS) -> Services:
        """Get a list of services in operation."""
        logger.debug(f"Getting services for operator {operator}")
        return await self._request(
            GET_SERVICES, [("operatorId", operator)], Services.from_dict
        )

    async def get_service_points(
        self, service_reference: str, operator: Operator = Operator.ALL_OPERATORS
    ) -> ServicePoints:
        """Get the route of a service for plotting on a map."""
        logger.debug(
            f"Getting service points for service {service_reference}, "
            f"operator {operator}"
        )
        return await self._request(
            GET_SERVICE_POINTS,
            [("operatorId", operator), ("ref", service_reference)],
            ServicePoints.from_dict,
        )

    async def get_destinations(
        self, operator: Operator = Operator.ALL_OPERATORS
    ) -> Destinations:
        """Get a list of service destinations."""
        logger.debug(f"Getting destinations for operator {operator}")
        return await self._request(
            GET_DESTINATIONS, [("operatorId", operator)], Destinations.from_dict
        )

    async def get_bus_stops(self, operator: Operator = Operator.ALL_OPERATORS) -> BusStops:
        """Get a list of bus stops."""
        logger.debug(f"Getting bus stops for operator {operator}")
        return await self._request(
            GET_BUS_STOPS, [("operatorId", operator)], BusStops.from_dict
        )
