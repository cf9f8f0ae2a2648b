"""
Unit tests for the MyBusTracker client.

Exercises the request pipeline shared by every web service call: URI
building, transport, decoding and error propagation.
"""

from urllib.parse import parse_qsl, urlsplit

import pytest

from my_bus_tracker.api.api_key import generate_api_key
from my_bus_tracker.api.api_manager import MyBusTracker
from my_bus_tracker.api.exceptions import (
    CommunicationException,
    InternalException,
    MyBusTrackerException,
)
from my_bus_tracker.api.http_client import AioHttpClient, HTTPClient
from my_bus_tracker.api.request_builder import BASE_URL
from my_bus_tracker.managers.config_manager import APIConfig, ConfigData
from my_bus_tracker.models.codes import Operator
from my_bus_tracker.models.topology import TopoId

TEST_API_KEY = "test_developer_key"


def sent_query(http_client) -> dict:
    url = http_client.get_json.call_args[0][0]
    return dict(parse_qsl(urlsplit(url).query))


class TestMyBusTrackerInitialization:
    """Test construction and context management."""

    def test_default_transport_is_aiohttp(self):
        tracker = MyBusTracker(TEST_API_KEY)
        assert isinstance(tracker._http_client, AioHttpClient)

    def test_empty_api_key_rejected(self):
        with pytest.raises(ValueError):
            MyBusTracker("")

    def test_from_config(self, http_client):
        config = ConfigData(
            api=APIConfig(api_key="abc", base_url="http://localhost/?module=json")
        )
        tracker = MyBusTracker.from_config(config, http_client=http_client)

        assert tracker._request_builder.base_url == "http://localhost/?module=json"

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, http_client, clock):
        async with MyBusTracker(
            TEST_API_KEY, http_client=http_client, clock=clock
        ) as tracker:
            assert isinstance(tracker, MyBusTracker)

        http_client.close.assert_awaited_once()

    def test_utc_today_uses_clock(self, tracker, clock):
        assert tracker._utc_today() == clock().date()


class TestMyBusTrackerRequests:
    """Test the shared request pipeline."""

    @pytest.mark.asyncio
    async def test_request_sends_authenticated_uri(
        self, tracker, http_client, clock, test_api_responses
    ):
        http_client.get_json.return_value = test_api_responses["topo_id"]

        result = await tracker.get_topo_id(Operator.LOTHIAN_BUSES)

        assert result == TopoId(topo_id="201803151223", operator_id=Operator.LOTHIAN_BUSES)
        url = http_client.get_json.call_args[0][0]
        assert url.startswith(BASE_URL)
        assert sent_query(http_client)["key"] == generate_api_key(TEST_API_KEY, clock())

    @pytest.mark.asyncio
    async def test_decode_failure_raises_internal_error(self, tracker, http_client):
        http_client.get_json.return_value = {"unexpected": "shape"}

        with pytest.raises(InternalException) as exc_info:
            await tracker.get_topo_id()

        assert "getTopoId" in exc_info.value.cause
        assert "topoId" in exc_info.value.cause

    @pytest.mark.asyncio
    async def test_non_object_response_raises_internal_error(self, tracker, http_client):
        http_client.get_json.return_value = ["not", "an", "object"]

        with pytest.raises(InternalException):
            await tracker.get_services()

    @pytest.mark.asyncio
    async def test_unknown_code_raises_internal_error(self, tracker, http_client):
        http_client.get_json.return_value = {"topoId": "1", "operatorId": "XX"}

        with pytest.raises(InternalException) as exc_info:
            await tracker.get_topo_id()

        assert "Operator" in exc_info.value.cause

    @pytest.mark.asyncio
    async def test_communication_error_propagates(self, tracker, http_client):
        http_client.get_json.side_effect = CommunicationException("Connection reset")

        with pytest.raises(CommunicationException):
            await tracker.get_services()

    @pytest.mark.asyncio
    async def test_all_errors_share_base_class(self, tracker, http_client):
        http_client.get_json.side_effect = InternalException("Invalid JSON")

        with pytest.raises(MyBusTrackerException):
            await tracker.get_bus_stops()

    @pytest.mark.asyncio
    async def test_single_attempt_per_call(self, tracker, http_client):
        http_client.get_json.side_effect = CommunicationException("timeout")

        with pytest.raises(CommunicationException):
            await tracker.get_destinations()

        assert http_client.get_json.await_count == 1

    @pytest.mark.asyncio
    async def test_token_refreshes_between_calls_across_hour(
        self, tracker, http_client, clock, test_api_responses
    ):
        http_client.get_json.return_value = test_api_responses["services"]

        await tracker.get_services()
        first_key = sent_query(http_client)["key"]
        clock.advance(hours=1)
        await tracker.get_services()
        second_key = sent_query(http_client)["key"]

        assert first_key != second_key
        assert second_key == generate_api_key(TEST_API_KEY, clock())

    @pytest.mark.asyncio
    async def test_custom_transport_implementation(self, clock, test_api_responses):
        class StaticHTTPClient(HTTPClient):
            def __init__(self):
                self.urls = []

            async def get_json(self, url):
                self.urls.append(url)
                return test_api_responses["topo_id"]

            async def close(self):
                pass

        transport = StaticHTTPClient()
        async with MyBusTracker(TEST_API_KEY, http_client=transport, clock=clock) as tracker:
            topo_id = await tracker.get_topo_id()

        assert topo_id.topo_id == "201803151223"
        assert len(transport.urls) == 1
