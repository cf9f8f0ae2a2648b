"""
Bus times web service.

Departure times at stops and passing times along journeys. For full
documentation see Section IV.4 of the My Bus Tracker API Guide (Version F).
"""

import logging
from datetime import time
from typing import Any, List, Optional, Sequence, Tuple

from ..api.exceptions import ValidationException
from ..models.bus_times import (
    BusId,
    BusTimes,
    JourneyId,
    JourneyIdentifier,
    JourneyTimes,
    Timetable,
)
from ..models.codes import JourneyTimeMode, Operator
from .base import WebService
from .validation import (
    DEFAULT_DEPARTURES,
    DayLike,
    check_departure_count,
    check_timetables,
    day_offset,
)

logger = logging.getLogger(__name__)

GET_BUS_TIMES = "getBusTimes"
GET_JOURNEY_TIMES = "getJourneyTimes"

DEPARTURE_TIME_FORMAT = "%H:%M"


class BusTimesService(WebService):
    """Bus times web service operations."""

    async def get_bus_times(
        self,
        timetables: Sequence[Timetable],
        departure_count: int = DEFAULT_DEPARTURES,
        departure_day: Optional[DayLike] = None,
        departure_time: Optional[time] = None,
    ) -> BusTimes:
        """
        Get the next departures for up to five timetables.

        Args:
            timetables: Stop, service and destination combinations (at most 5)
            departure_count: Departures per timetable (at most 10)
            departure_day: Day to look at, up to three days ahead; today
                when omitted
            departure_time: Earliest departure; now when omitted

        Raises:
            TooManyTimetablesException: More than five timetables
            TooManyDeparturesException: More than ten departures
            DateOutOfBoundsException: Day outside the accepted window
        """
        logger.debug(
            f"Getting bus times for {len(timetables)} timetables, "
            f"{departure_count} departures, day {departure_day}, "
            f"time {departure_time}"
        )
        check_timetables(timetables)
        check_departure_count(departure_count)
        offset = day_offset(departure_day, self._utc_today())

        params: List[Tuple[str, Any]] = []
        for index, timetable in enumerate(timetables, start=1):
            params.extend(
                [
                    (f"stopId{index}", timetable.stop_id),
                    (f"refService{index}", timetable.service_reference),
                    (f"refDest{index}", timetable.destination_reference),
                ]
            )
        params.append(("nb", departure_count))
        params.append(("day", offset))
        if departure_time is not None:
            params.append(("time", departure_time.strftime(DEPARTURE_TIME_FORMAT)))

        return await self._request(GET_BUS_TIMES, params, BusTimes.from_dict)

    async def get_journey_times(
        self,
        journey_id: JourneyIdentifier,
        stop_id: Optional[str] = None,
        operator: Operator = Operator.ALL_OPERATORS,
        day: Optional[DayLike] = None,
        mode: JourneyTimeMode = JourneyTimeMode.ALL,
    ) -> JourneyTimes:
        """
        Get passing times along a journey.

        Args:
            journey_id: Either a ``JourneyId`` or a ``BusId`` (fleet number)
            stop_id: Stop to start from; the service requires it when
                ``journey_id`` is a ``JourneyId``
            operator: Operator filter
            day: Day to look at, up to three days ahead; today when omitted
            mode: Return every stop, or only up to the next reference stop

        Raises:
            DateOutOfBoundsException: Day outside the accepted window
        """
        logger.debug(
            f"Getting journey times for {journey_id!r}, stop {stop_id}, "
            f"operator {operator}, day {day}, mode {mode}"
        )
        if isinstance(journey_id, JourneyId):
            identifier = ("journeyId", journey_id.value)
        elif isinstance(journey_id, BusId):
            identifier = ("busId", journey_id.value)
        else:
            raise ValidationException(
                f"Journey identifier must be a JourneyId or BusId, got {journey_id!r}"
            )

        offset = day_offset(day, self._utc_today())

        params: List[Tuple[str, Any]] = []
        if stop_id is not None:
            params.append(("stopId", stop_id))
        params.append(identifier)
        params.extend([("operator", operator), ("day", offset), ("mode", mode)])

        return await self._request(GET_JOURNEY_TIMES, params, JourneyTimes.from_dict)
