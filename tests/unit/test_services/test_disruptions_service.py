"""
Unit tests for the disruptions web service calls.
"""

from datetime import date
from urllib.parse import parse_qsl, urlsplit

import pytest

from my_bus_tracker.api.exceptions import DateOutOfBoundsException
from my_bus_tracker.models.codes import DisruptionType, Operator


def sent_params(http_client) -> list:
    url = http_client.get_json.call_args[0][0]
    return [
        (name, value)
        for name, value in parse_qsl(urlsplit(url).query)
        if name not in ("module", "key")
    ]


class TestDisruptions:
    @pytest.mark.asyncio
    async def test_defaults_to_all_types(self, tracker, http_client, test_api_responses):
        http_client.get_json.return_value = test_api_responses["disruptions"]

        disruptions = await tracker.get_disruptions()

        assert len(disruptions.disruptions) == 2
        assert sent_params(http_client) == [
            ("function", "getDisruptions"),
            ("operatorId", "0"),
            ("type", "0"),
        ]

    @pytest.mark.asyncio
    async def test_type_filter(self, tracker, http_client):
        http_client.get_json.return_value = {"disruptions": []}

        await tracker.get_disruptions(DisruptionType.BUS_STOP, Operator.LOTHIAN_BUSES)

        assert sent_params(http_client)[1:] == [("operatorId", "LB"), ("type", "3")]


class TestDiversions:
    @pytest.mark.asyncio
    async def test_defaults_to_all_services_today(
        self, tracker, http_client, test_api_responses
    ):
        http_client.get_json.return_value = test_api_responses["diversions"]

        diversions = await tracker.get_diversions()

        assert diversions.diversions[0].diversion_id == "1042"
        assert sent_params(http_client) == [
            ("function", "getDiversions"),
            ("operatorId", "0"),
            ("refService", "0"),
            ("day", "0"),
        ]

    @pytest.mark.asyncio
    async def test_service_and_day(self, tracker, http_client):
        http_client.get_json.return_value = {"diversions": []}

        await tracker.get_diversions("LB-22", date(2024, 3, 12))

        assert sent_params(http_client)[2:] == [("refService", "LB-22"), ("day", "2")]

    @pytest.mark.asyncio
    async def test_day_out_of_window(self, tracker, http_client):
        with pytest.raises(DateOutOfBoundsException):
            await tracker.get_diversions(day=date(2024, 3, 9))

        http_client.get_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_diversion_points(self, tracker, http_client, test_api_responses):
        http_client.get_json.return_value = test_api_responses["diversion_points"]

        points = await tracker.get_diversion_points("1042")

        assert len(points.diversion_points) == 2
        assert sent_params(http_client) == [
            ("function", "getDiversionPoints"),
            ("operatorId", "0"),
            ("diversionId", "1042"),
        ]
