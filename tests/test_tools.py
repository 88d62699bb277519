"""Tests for the tool handlers."""
import json

import pytest

from konnect_mcp.tools import analytics, configuration, control_planes, dev_portal
from konnect_mcp.tools.parameters import PARAMETERS

SAMPLE_REQUESTS = {
    "meta": {"size": 3, "time_range": {"start": "2024-01-01T00:00:00Z", "end": "2024-01-01T01:00:00Z"}},
    "results": [
        {
            "request_id": "r1",
            "request_start": "2024-01-01T00:10:00Z",
            "http_method": "GET",
            "request_uri": "/pets",
            "status_code": 200,
            "consumer": "c1",
            "gateway_service": "svc-a",
            "route": "rt-1",
            "latencies_response_ms": 10,
        },
        {
            "request_id": "r2",
            "http_method": "POST",
            "request_uri": "/pets",
            "status_code": 500,
            "consumer": "c1",
            "gateway_service": "svc-a",
            "latencies_response_ms": 30,
        },
        {
            "request_id": "r3",
            "http_method": "GET",
            "request_uri": "/owners",
            "status_code": 201,
            "consumer": "c1",
            "gateway_service": "svc-b",
        },
    ],
}


def _params(method, **kwargs):
    return PARAMETERS[method].model_validate(kwargs)


class TestAnalyticsHandlers:
    @pytest.mark.asyncio
    async def test_query_api_requests_builds_filters(self, recording_api):
        recording_api.response = SAMPLE_REQUESTS
        params = _params(
            "query_api_requests",
            timeRange="24H",
            statusCodes=[500, 502],
            httpMethods=["POST"],
            serviceIds=["svc-a"],
            maxResults=10,
        )
        result = json.loads(await analytics.query_api_requests(recording_api, params))

        endpoint, method, body = recording_api.calls[0]
        assert (endpoint, method) == ("/api-requests", "POST")
        assert body["time_range"] == {"type": "relative", "time_range": "24H"}
        assert body["size"] == 10
        assert body["filters"] == [
            {"field": "status_code", "operator": "in", "value": [500, 502]},
            {"field": "http_method", "operator": "in", "value": ["POST"]},
            {"field": "gateway_service", "operator": "in", "value": ["svc-a"]},
        ]
        assert result["metadata"]["totalRequests"] == 3
        assert result["requests"][1]["statusCode"] == 500
        assert result["requests"][0]["latency"]["totalMs"] == 10

    @pytest.mark.asyncio
    async def test_query_api_requests_absolute_range(self, recording_api):
        params = _params("query_api_requests", startTime="2024-01-01T00:00:00Z", endTime="2024-01-02T00:00:00Z")
        await analytics.query_api_requests(recording_api, params)
        body = recording_api.calls[0][2]
        assert body["time_range"] == {"type": "absolute", "start": "2024-01-01T00:00:00Z", "end": "2024-01-02T00:00:00Z"}
        assert body["filters"] == []

    @pytest.mark.asyncio
    async def test_get_consumer_requests_statistics(self, recording_api):
        recording_api.response = SAMPLE_REQUESTS
        result = json.loads(await analytics.get_consumer_requests(recording_api, _params("get_consumer_requests", consumerId="c1")))

        body = recording_api.calls[0][2]
        assert body["filters"] == [{"field": "consumer", "operator": "in", "value": ["c1"]}]
        stats = result["statistics"]
        assert stats["totalRequests"] == 3
        assert stats["successRate"] == "66.67%"
        assert stats["averageLatencyMs"] == 20
        assert stats["statusCodeDistribution"] == {"200": 1, "500": 1, "201": 1}
        assert stats["serviceBreakdown"] == {"svc-a": 2, "svc-b": 1}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "flags, groups",
        [({"successOnly": True}, ["2XX"]), ({"failureOnly": True}, ["4XX", "5XX"])],
    )
    async def test_get_consumer_requests_status_groups(self, recording_api, flags, groups):
        await analytics.get_consumer_requests(recording_api, _params("get_consumer_requests", consumerId="c1", **flags))
        filters = recording_api.calls[0][2]["filters"]
        assert filters[-1] == {"field": "status_code_grouped", "operator": "in", "value": groups}

    def test_statistics_of_nothing(self):
        stats = analytics.consumer_statistics([])
        assert stats["totalRequests"] == 0
        assert stats["successRate"] == "0.00%"
        assert stats["averageLatencyMs"] is None


class TestPassthroughHandlers:
    @pytest.mark.asyncio
    async def test_list_services(self, recording_api):
        recording_api.response = {"data": [{"id": "s1"}], "offset": "next"}
        out = await configuration.list_services(recording_api, _params("list_services", controlPlaneId="cp-1", offset="o1"))
        assert json.loads(out) == {"data": [{"id": "s1"}], "offset": "next"}
        assert recording_api.calls[0][0] == "/control-planes/cp-1/core-entities/services?size=100&offset=o1"

    @pytest.mark.asyncio
    async def test_list_control_planes(self, recording_api):
        await control_planes.list_control_planes(recording_api, _params("list_control_planes", filterName="prod", pageNumber=2))
        assert recording_api.calls[0][0] == "/control-planes?page[size]=10&page[number]=2&filter[name][contains]=prod"

    @pytest.mark.asyncio
    async def test_dev_portal_ignores_control_plane_id(self, recording_api):
        params = _params("generate_api_key", controlPlaneId="cp-1", subscriptionId="sub-1", name="k", expiresIn=60)
        await dev_portal.generate_api_key(recording_api, params)
        endpoint, method, body = recording_api.calls[0]
        assert (endpoint, method) == ("/v3/api-keys", "POST")
        assert "cp-1" not in json.dumps(body)
        assert body == {"name": "k", "subscription": {"id": "sub-1"}, "expires_in": 60}

    @pytest.mark.asyncio
    async def test_list_subscriptions(self, recording_api):
        await dev_portal.list_subscriptions(recording_api, _params("list_subscriptions", apiId="api-1"))
        assert recording_api.calls[0][0] == "/v3/subscriptions?page[size]=10&filter[api.id][eq]=api-1"


def test_every_catalog_method_has_exactly_one_handler():
    modules = [analytics, configuration, control_planes, dev_portal]
    methods = [m for mod in modules for m in mod.get_tools()]
    assert len(methods) == len(set(methods))
    assert set(methods) == set(PARAMETERS)
