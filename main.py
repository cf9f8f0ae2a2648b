"""
Example program exercising every My Bus Tracker web service call.

Reads the developer API key from the configuration file or from the
BUSNOTIFIER_MYBUSTRACKER_APIKEY environment variable, then walks the
topological, disruptions and bus times services, printing each result.
"""

import asyncio
import logging
import sys
from datetime import datetime, timezone

from my_bus_tracker import MyBusTracker, MyBusTrackerException
from my_bus_tracker.managers import ConfigData, ConfigManager, ConfigurationError
from my_bus_tracker.models import JourneyId, JourneyTimeMode, Operator, Timetable

logger = logging.getLogger("my_bus_tracker.example")


def setup_logging(config: ConfigData):
    """Setup console logging from configuration."""
    logging.basicConfig(level=config.logging.level, format=config.logging.format)


async def run(tracker: MyBusTracker) -> None:
    topo_id = await tracker.get_topo_id(Operator.ALL_OPERATORS)
    print(topo_id)

    services = await tracker.get_services(Operator.ALL_OPERATORS)
    print(services)
    if not services.services:
        raise RuntimeError("No services found")

    first_service = services.services[0]
    service_points = await tracker.get_service_points(
        first_service.reference, first_service.operator_id
    )
    print(service_points)

    destinations = await tracker.get_destinations(Operator.ALL_OPERATORS)
    print(destinations)

    bus_stops = await tracker.get_bus_stops(Operator.ALL_OPERATORS)
    print(bus_stops)

    disruptions = await tracker.get_disruptions(None, Operator.ALL_OPERATORS)
    print(disruptions)

    diversions = await tracker.get_diversions(None, None, Operator.ALL_OPERATORS)
    print(diversions)

    if diversions.diversions:
        diversion_points = await tracker.get_diversion_points(
            diversions.diversions[0].diversion_id, Operator.ALL_OPERATORS
        )
        print(diversion_points)
    else:
        logger.info("No diversions found, skipping diversion points")

    stop = next((s for s in bus_stops.bus_stops if s.services), None)
    if stop is None:
        raise RuntimeError("No bus stop with services found")
    service = services.find(stop.services[0])
    if service is None or not service.destinations:
        raise RuntimeError(f"Non-existent service referenced: {stop.services[0]}")

    timetable = Timetable(
        stop_id=stop.stop_id,
        service_reference=service.reference,
        destination_reference=service.destinations[0],
        operator_id=Operator.ALL_OPERATORS,
    )
    bus_times = await tracker.get_bus_times([timetable], departure_count=1)
    print(bus_times)

    if not bus_times.bus_times or not bus_times.bus_times[0].times:
        logger.info("No departures found, skipping journey times")
        return

    journey_times = await tracker.get_journey_times(
        JourneyId(bus_times.bus_times[0].times[0].journey_id),
        stop_id=stop.stop_id,
        operator=Operator.ALL_OPERATORS,
        day=datetime.now(timezone.utc).date(),
        mode=JourneyTimeMode.ALL,
    )
    print(journey_times)


def main() -> int:
    """Main entry point."""
    try:
        config = ConfigManager().load_config()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config)
    logger.info("Launching Bus Notifier")

    async def _main() -> None:
        async with MyBusTracker.from_config(config) as tracker:
            await run(tracker)

    try:
        asyncio.run(_main())
    except (MyBusTrackerException, RuntimeError) as e:
        logger.error(f"Error running example: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
