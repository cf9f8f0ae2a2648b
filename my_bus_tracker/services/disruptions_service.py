"""
Disruptions web service.

Ongoing disruptions and planned diversions. For full documentation see
Section IV.3 of the My Bus Tracker API Guide (Version F).
"""

import logging
from typing import Optional

from ..models.codes import DisruptionType, Operator
from ..models.disruptions import DiversionPoints, Diversions, Disruptions
from .base import WebService
from .validation import DayLike, day_offset

logger = logging.getLogger(__name__)

GET_DISRUPTIONS = "getDisruptions"
GET_DIVERSIONS = "getDiversions"
GET_DIVERSION_POINTS = "getDiversionPoints"

# refService value selecting diversions on every service
ALL_SERVICES = "0"


class DisruptionsServices(WebService):
    """Disruptions web service operations."""

    async def get_disruptions(
        self,
        disruption_type: Optional[DisruptionType] = None,
        operator: Operator = Operator.ALL_OPERATORS,
    ) -> Disruptions:
        """
        Get a list of ongoing disruptions.

        Args:
            disruption_type: Restrict to one kind of disruption; all kinds
                are returned when omitted
            operator: Operator filter
        """
        logger.debug(
            f"Getting disruptions of type {disruption_type} for operator {operator}"
        )
        if disruption_type is None:
            disruption_type = DisruptionType.ALL

        return await self._request(
            GET_DISRUPTIONS,
            [("operatorId", operator), ("type", disruption_type)],
            Disruptions.from_dict,
        )

    async def get_diversions(
        self,
        service_reference: Optional[str] = None,
        day: Optional[DayLike] = None,
        operator: Operator = Operator.ALL_OPERATORS,
    ) -> Diversions:
        """
        Get a list of ongoing diversions.

        Args:
            service_reference: Restrict to one service; all services when omitted
            day: Day to look at, up to three days ahead; today when omitted
            operator: Operator filter

        Raises:
            DateOutOfBoundsException: If ``day`` is outside the accepted window
        """
        logger.debug(
            f"Getting diversions for service {service_reference}, day {day}, "
            f"operator {operator}"
        )
        offset = day_offset(day, self._utc_today())

        return await self._request(
            GET_DIVERSIONS,
            [
                ("operatorId", operator),
                ("refService", service_reference or ALL_SERVICES),
                ("day", offset),
            ],
            Diversions.from_dict,
        )

    async def get_diversion_points(
        self, diversion_id: str, operator: Operator = Operator.ALL_OPERATORS
    ) -> DiversionPoints:
        """Get the route of a diversion for plotting on a map."""
        logger.debug(
            f"Getting diversion points for diversion {diversion_id}, "
            f"operator {operator}"
        )
        return await self._request(
            GET_DIVERSION_POINTS,
            [("operatorId", operator), ("diversionId", diversion_id)],
            DiversionPoints.from_dict,
        )
