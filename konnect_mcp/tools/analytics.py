from collections import Counter
from typing import Any

from konnect_mcp.core.api import KonnectApi, TimeRange, filters_from
from konnect_mcp.tools.parameters import GetConsumerRequestsParams, QueryApiRequestsParams
from konnect_mcp.utils import format_result


def _summarize_request(req: dict[str, Any]) -> dict[str, Any]:
    return {
        "requestId": req.get("request_id"),
        "timestamp": req.get("request_start"),
        "httpMethod": req.get("http_method"),
        "uri": req.get("request_uri"),
        "statusCode": req.get("status_code") or req.get("response_http_status"),
        "consumerId": req.get("consumer"),
        "serviceId": req.get("gateway_service"),
        "routeId": req.get("route"),
        "latency": {
            "totalMs": req.get("latencies_response_ms"),
            "gatewayMs": req.get("latencies_kong_gateway_ms"),
            "upstreamMs": req.get("latencies_upstream_ms"),
        },
        "clientIp": req.get("client_ip"),
        "apiProduct": req.get("api_product"),
    }


def _results(data: Any) -> list[dict[str, Any]]:
    if isinstance(data, dict):
        return [r for r in data.get("results") or [] if isinstance(r, dict)]
    return []


async def query_api_requests(api: KonnectApi, params: QueryApiRequestsParams) -> str:
    """Query request analytics with optional status, method and entity filters."""
    if params.start_time and params.end_time:
        time_range = TimeRange.absolute(params.start_time, params.end_time)
    else:
        time_range = TimeRange.relative(params.time_range)

    filters = filters_from([
        ("status_code", "in", params.status_codes),
        ("status_code", "not_in", params.exclude_status_codes),
        ("http_method", "in", params.http_methods),
        ("consumer", "in", params.consumer_ids),
        ("gateway_service", "in", params.service_ids),
        ("route", "in", params.route_ids),
    ])

    data = await api.query_api_requests(time_range, filters, params.max_results)
    meta = data.get("meta", {}) if isinstance(data, dict) else {}
    requests = [_summarize_request(r) for r in _results(data)]
    return format_result({
        "metadata": {
            "totalRequests": meta.get("size", len(requests)),
            "timeRange": meta.get("time_range", time_range.to_dict()),
            "filters": [f.to_dict() for f in filters],
        },
        "requests": requests,
    })


def consumer_statistics(requests: list[dict[str, Any]]) -> dict[str, Any]:
    total = len(requests)
    status_codes = Counter(str(r["statusCode"]) for r in requests if r.get("statusCode") is not None)
    services = Counter(r["serviceId"] for r in requests if r.get("serviceId"))
    successes = sum(1 for r in requests if isinstance(r.get("statusCode"), int) and 200 <= r["statusCode"] < 300)
    latencies = [r["latency"]["totalMs"] for r in requests if isinstance(r["latency"].get("totalMs"), (int, float))]
    return {
        "totalRequests": total,
        "successRate": f"{(successes / total * 100):.2f}%" if total else "0.00%",
        "averageLatencyMs": round(sum(latencies) / len(latencies), 2) if latencies else None,
        "statusCodeDistribution": dict(status_codes),
        "serviceBreakdown": dict(services),
    }


async def get_consumer_requests(api: KonnectApi, params: GetConsumerRequestsParams) -> str:
    """Fetch one consumer's requests and summarize them."""
    status_groups = None
    if params.success_only:
        status_groups = ["2XX"]
    elif params.failure_only:
        status_groups = ["4XX", "5XX"]

    filters = filters_from([
        ("consumer", "in", [params.consumer_id]),
        ("status_code_grouped", "in", status_groups),
    ])

    data = await api.query_api_requests(TimeRange.relative(params.time_range), filters, params.max_results)
    requests = [_summarize_request(r) for r in _results(data)]
    return format_result({
        "consumerId": params.consumer_id,
        "timeRange": params.time_range,
        "statistics": consumer_statistics(requests),
        "requests": requests,
    })


def get_tools() -> dict[str, Any]:
    return {
        "query_api_requests": query_api_requests,
        "get_consumer_requests": get_consumer_requests,
    }
