"""
Global pytest configuration and fixtures.
"""

import json
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from my_bus_tracker.api.api_manager import MyBusTracker
from my_bus_tracker.api.http_client import HTTPClient
from my_bus_tracker.managers.config_manager import APIConfig, ConfigData

TEST_API_KEY = "test_developer_key"


class FixedClock:
    """Controllable replacement for the UTC clock."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    """Clock fixed at 2024-03-10 14:25 UTC."""
    return FixedClock(datetime(2024, 3, 10, 14, 25, 0, tzinfo=timezone.utc))


@pytest.fixture
def http_client():
    """HTTP client double returning an empty JSON object by default."""
    client = AsyncMock(spec=HTTPClient)
    client.get_json.return_value = {}
    return client


@pytest.fixture
def tracker(http_client, clock):
    """Client wired to the HTTP double and the fixed clock."""
    return MyBusTracker(TEST_API_KEY, http_client=http_client, clock=clock)


@pytest.fixture
def test_config():
    """Provide a test configuration."""
    return ConfigData(api=APIConfig(api_key=TEST_API_KEY))


@pytest.fixture
def temp_config_file():
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        json.dump(
            {
                "api": {
                    "api_key": "file_key",
                    "base_url": "http://localhost:8080/?module=json",
                },
                "logging": {"level": "debug"},
            },
            f,
            indent=2,
        )
        temp_path = f.name

    yield temp_path

    Path(temp_path).unlink(missing_ok=True)


@pytest.fixture
def test_api_responses():
    """Provide sample payloads for each web service function."""
    return {
        "topo_id": {"topoId": "201803151223", "operatorId": "LB"},
        "services": {
            "services": [
                {
                    "ref": "LB-22",
                    "operatorId": "LB",
                    "mnemo": "22",
                    "name": "Ocean Terminal - Gyle Centre",
                    "dests": ["LB-OCT", "LB-GYL"],
                },
                {
                    "ref": "LB-X1",
                    "operatorId": "0",
                    "mnemo": "X1",
                    "name": "Express",
                    "dests": [],
                },
            ]
        },
        "service_points": {
            "ref": "LB-22",
            "operatorId": "LB",
            "servicePoints": [
                {"chainage": 0, "order": 1, "x": 55.9804, "y": -3.1781},
                {"chainage": 125, "order": 2, "x": 55.9797, "y": -3.1795},
            ],
        },
        "destinations": {
            "dests": [
                {
                    "ref": "LB-OCT",
                    "operatorId": "LB",
                    "name": "Ocean Terminal",
                    "direction": "A",
                    "service": "LB-22",
                },
                {
                    "ref": "LB-GYL",
                    "operatorId": "LB",
                    "name": "Gyle Centre",
                    "direction": "R",
                    "service": "LB-22",
                },
            ]
        },
        "bus_stops": {
            "busStops": [
                {
                    "operatorId": "LB",
                    "stopId": "36232845",
                    "name": "Princes Street",
                    "x": 55.9519,
                    "y": -3.1962,
                    "cap": 270,
                    "services": ["LB-22"],
                    "dests": ["LB-OCT"],
                }
            ]
        },
        "disruptions": {
            "disruptions": [
                {
                    "id": "D-1",
                    "operatorId": "LB",
                    "level": 3,
                    "type": 2,
                    "targets": ["LB-22"],
                    "validUntil": "2024-03-11T18:00:00Z",
                    "message": "Roadworks on Leith Walk",
                },
                {
                    "id": "D-2",
                    "operatorId": "ALL",
                    "level": 1,
                    "type": 1,
                    "targets": [],
                    "message": "Festival timetable in place",
                },
            ]
        },
        "diversions": {
            "diversions": [
                {
                    "ref": "DIV-1",
                    "diversionId": "1042",
                    "operatorId": "LB",
                    "refService": "LB-22",
                    "startStopId": "36232845",
                    "startStopName": "Princes Street",
                    "startDate": "2024-03-09T06:00:00+00:00",
                    "endStopId": "36232846",
                    "endStopName": "Waverley Bridge",
                    "endDate": "2024-03-12T23:59:00+00:00",
                    "days": "1111100",
                    "length": 850,
                    "timeShift": 4,
                    "cancelledBusStops": [
                        {
                            "stopId": "36232900",
                            "stopName": "North Bridge",
                            "replacedStopId": "36232901",
                            "replacedStopName": "Market Street",
                        }
                    ],
                    "temporaryBusStops": [
                        {
                            "stopId": "T1",
                            "stopName": "Temporary Stop",
                            "num": 1,
                            "type": "T",
                        }
                    ],
                }
            ]
        },
        "diversion_points": {
            "diversionPoints": [
                {"order": 1, "x": 55.95, "y": -3.19},
                {"order": 2, "x": 55.96, "y": -3.18},
            ]
        },
        "bus_times": {
            "busTimes": [
                {
                    "operatorId": "LB",
                    "stopId": "36232845",
                    "stopName": "Princes Street",
                    "refService": "LB-22",
                    "mnemoService": "22",
                    "nameService": "Ocean Terminal - Gyle Centre",
                    "refDest": "LB-OCT",
                    "nameDest": "Ocean Terminal",
                    "timeDatas": [
                        {
                            "day": 0,
                            "time": "14:32",
                            "minutes": 7,
                            "reliability": "H",
                            "type": "N",
                            "terminus": "LB-OCT",
                            "journeyId": "4567",
                            "busId": "912",
                        },
                        {
                            "day": 0,
                            "time": "14:44",
                            "minutes": 19,
                            "reliability": "T",
                            "type": "D",
                            "terminus": "LB-OCT",
                            "journeyId": "4568",
                        },
                    ],
                    "globalDisruption": False,
                    "serviceDisruption": True,
                    "busStopDisruption": False,
                    "serviceDiversion": False,
                }
            ]
        },
        "journey_times": {
            "journeyTimes": [
                {
                    "journeyId": "12345",
                    "busId": "912",
                    "operatorId": "LB",
                    "refService": "LB-22",
                    "mnemoService": "22",
                    "nameService": "Ocean Terminal - Gyle Centre",
                    "refDest": "LB-OCT",
                    "nameDest": "Ocean Terminal",
                    "journeyTimeDatas": [
                        {
                            "order": 1,
                            "stopId": "36232845",
                            "stopName": "Princes Street",
                            "day": 0,
                            "time": "14:32",
                            "minutes": 7,
                            "reliability": "H",
                            "type": "R",
                            "busStopDisruption": False,
                        },
                        {
                            "order": 2,
                            "stopId": "36232846",
                            "stopName": "Waverley Bridge",
                            "day": 0,
                            "time": "14:36",
                            "minutes": 11,
                            "reliability": "T",
                            "type": "N",
                            "busStopDisruption": True,
                        },
                    ],
                    "globalDisruption": False,
                    "serviceDisruption": False,
                    "serviceDiversion": False,
                }
            ]
        },
    }
