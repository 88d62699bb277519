"""Kong Konnect API client.

`KonnectApi.request` is the single chokepoint for outbound calls: it resolves
the URL (including the /v3 alternate-version rule), injects the bearer token,
decodes the response and classifies failures into the `KonnectError` kinds.
The remaining methods only build an endpoint and body for one operation.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import httpx

from konnect_mcp.core.config import KonnectSettings
from konnect_mcp.core.errors import KonnectAPIError, KonnectNetworkError, KonnectRequestError
from konnect_mcp.utils import QueryParam, error_detail, path_segment, resolve_url, robust_parse_text, with_query

logger = logging.getLogger(__name__)

RESPONSE_LOG_EXCERPT = 500

# Transport failures after the request left the client
_NO_RESPONSE_ERRORS = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


@dataclass(frozen=True)
class QueryFilter:
    """One analytics filter; a list of them is combined with AND."""

    field: str
    operator: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "operator": self.operator, "value": self.value}


@dataclass(frozen=True)
class TimeRange:
    """Analytics time window, forwarded verbatim.

    Relative ranges carry a duration token such as "1H" or "7D"; absolute
    ranges carry ISO-8601 `start`/`end` bounds.
    """

    time_range: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @classmethod
    def relative(cls, time_range: str) -> "TimeRange":
        return cls(time_range=time_range)

    @classmethod
    def absolute(cls, start: str, end: str) -> "TimeRange":
        return cls(start=start, end=end)

    @property
    def type(self) -> str:
        return "relative" if self.time_range is not None else "absolute"

    def to_dict(self) -> dict[str, Any]:
        if self.time_range is not None:
            return {"type": "relative", "time_range": self.time_range}
        return {"type": "absolute", "start": self.start, "end": self.end}


def _filter_dict(f: QueryFilter | dict[str, Any]) -> dict[str, Any]:
    return f.to_dict() if isinstance(f, QueryFilter) else dict(f)


class KonnectApi:
    def __init__(
        self,
        api_key: Optional[str] = None,
        region: Optional[str] = None,
        settings: Optional[KonnectSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or KonnectSettings.resolve(api_key=api_key, region=region)
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def url_for(self, endpoint: str) -> str:
        return resolve_url(
            self.base_url,
            endpoint,
            api_version=self.settings.api_version,
            alternate_prefix=self.settings.alternate_version_prefix,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        """Send an authenticated request and return the decoded JSON body.

        Raises:
            KonnectAPIError: Konnect answered with a non-2xx status.
            KonnectNetworkError: no response was received.
            KonnectRequestError: the request could not be built or sent.
        """
        url = self.url_for(endpoint)
        method = method.upper()
        logger.info(f"Making request to: {method} {url}")

        kwargs: dict[str, Any] = {"headers": self._headers()}
        if body is not None:
            kwargs["json"] = body

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.settings.timeout) as client:
                resp = await client.request(method, url, **kwargs)
        except _NO_RESPONSE_ERRORS as e:
            logger.error(f"No response from {url}: {e!r}")
            raise KonnectNetworkError() from e
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as e:
            logger.error(f"Could not send request to {url}: {e}")
            raise KonnectRequestError(str(e) or type(e).__name__) from e

        logger.info(f"Received response with status: {resp.status_code}")

        if not resp.is_success:
            try:
                error_body = resp.json()
            except ValueError:
                error_body = resp.text
            err = KonnectAPIError(resp.status_code, error_detail(error_body), error_body)
            logger.error(f"API request error: {err}")
            raise err

        if not resp.content:
            return None
        try:
            data = resp.json()
        except ValueError as e:
            data = robust_parse_text(resp.text)
            logger.warning(f"Failed to decode JSON from {url}: {e}; returning parsed fallback")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Response data: {json.dumps(data, default=str)[:RESPONSE_LOG_EXCERPT]}...")
        return data

    # Analytics

    async def query_api_requests(
        self,
        time_range: TimeRange | str,
        filters: Iterable[QueryFilter | dict[str, Any]] = (),
        max_results: int = 100,
    ) -> Any:
        if isinstance(time_range, str):
            time_range = TimeRange.relative(time_range)
        body = {
            "time_range": time_range.to_dict(),
            "filters": [_filter_dict(f) for f in filters],
            "size": max_results,
        }
        return await self.request("/api-requests", "POST", body)

    # Control planes

    async def list_control_planes(
        self,
        page_size: int = 10,
        page_number: Optional[int] = None,
        filter_name: Optional[str] = None,
        filter_cluster_type: Optional[str] = None,
        filter_cloud_gateway: Optional[bool] = None,
        labels: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> Any:
        endpoint = with_query("/control-planes", [
            QueryParam("page[size]", page_size),
            QueryParam("page[number]", page_number),
            QueryParam("filter[name][contains]", filter_name, True),
            QueryParam("filter[cluster_type][eq]", filter_cluster_type, True),
            QueryParam("filter[cloud_gateway]", filter_cloud_gateway),
            QueryParam("labels", labels, True),
            QueryParam("sort", sort, True),
        ])
        return await self.request(endpoint)

    async def get_control_plane(self, control_plane_id: str) -> Any:
        return await self.request(f"/control-planes/{path_segment(control_plane_id)}")

    async def list_control_plane_group_memberships(
        self, group_id: str, page_size: int = 10, page_after: Optional[str] = None
    ) -> Any:
        endpoint = with_query(f"/control-planes/{path_segment(group_id)}/group-memberships", [
            QueryParam("page[size]", page_size),
            QueryParam("page[after]", page_after, True),
        ])
        return await self.request(endpoint)

    async def check_control_plane_group_membership(self, control_plane_id: str) -> Any:
        return await self.request(f"/control-planes/{path_segment(control_plane_id)}/group-member-status")

    # Configuration (core entities)

    async def _list_core_entities(
        self, entity: str, control_plane_id: str, size: int = 100, offset: Optional[str] = None
    ) -> Any:
        endpoint = with_query(f"/control-planes/{path_segment(control_plane_id)}/core-entities/{entity}", [
            QueryParam("size", size),
            QueryParam("offset", offset, True),
        ])
        return await self.request(endpoint)

    async def list_services(self, control_plane_id: str, size: int = 100, offset: Optional[str] = None) -> Any:
        return await self._list_core_entities("services", control_plane_id, size, offset)

    async def list_routes(self, control_plane_id: str, size: int = 100, offset: Optional[str] = None) -> Any:
        return await self._list_core_entities("routes", control_plane_id, size, offset)

    async def list_consumers(self, control_plane_id: str, size: int = 100, offset: Optional[str] = None) -> Any:
        return await self._list_core_entities("consumers", control_plane_id, size, offset)

    async def list_plugins(self, control_plane_id: str, size: int = 100, offset: Optional[str] = None) -> Any:
        return await self._list_core_entities("plugins", control_plane_id, size, offset)

    # Dev portal (v3)

    async def list_dev_portal_apis(
        self,
        page_size: int = 10,
        page_number: Optional[int] = None,
        filter_name: Optional[str] = None,
        filter_published: Optional[bool] = None,
        sort: Optional[str] = None,
    ) -> Any:
        endpoint = with_query("/v3/apis", [
            QueryParam("page[size]", page_size),
            QueryParam("page[number]", page_number),
            QueryParam("filter[name][contains]", filter_name, True),
            QueryParam("filter[published]", filter_published),
            QueryParam("sort", sort, True),
        ])
        return await self.request(endpoint)

    async def list_dev_portal_portals(self, page_size: int = 10, page_number: Optional[int] = None) -> Any:
        endpoint = with_query("/v3/portals", [
            QueryParam("page[size]", page_size),
            QueryParam("page[number]", page_number),
        ])
        return await self.request(endpoint)

    async def list_dev_portal_applications(
        self,
        page_size: int = 10,
        page_number: Optional[int] = None,
        filter_name: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> Any:
        endpoint = with_query("/v3/applications", [
            QueryParam("page[size]", page_size),
            QueryParam("page[number]", page_number),
            QueryParam("filter[name][contains]", filter_name, True),
            QueryParam("sort", sort, True),
        ])
        return await self.request(endpoint)

    async def create_dev_portal_application(self, name: str, description: str) -> Any:
        return await self.request("/v3/applications", "POST", {"name": name, "description": description})

    async def list_dev_portal_subscriptions(
        self,
        application_id: Optional[str] = None,
        api_id: Optional[str] = None,
        page_size: int = 10,
        page_number: Optional[int] = None,
        status: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> Any:
        endpoint = with_query("/v3/subscriptions", [
            QueryParam("page[size]", page_size),
            QueryParam("page[number]", page_number),
            QueryParam("filter[application.id][eq]", application_id),
            QueryParam("filter[api.id][eq]", api_id),
            QueryParam("filter[status][eq]", status),
            QueryParam("sort", sort, True),
        ])
        return await self.request(endpoint)

    async def create_dev_portal_subscription(self, api_id: str, application_id: str) -> Any:
        body = {
            "api": {"id": api_id},
            "application": {"id": application_id},
        }
        return await self.request("/v3/subscriptions", "POST", body)

    async def create_dev_portal_api_key(
        self, subscription_id: str, name: str, expires_in: Optional[int] = None
    ) -> Any:
        body: dict[str, Any] = {
            "name": name,
            "subscription": {"id": subscription_id},
        }
        if expires_in is not None:
            body["expires_in"] = expires_in
        return await self.request("/v3/api-keys", "POST", body)


def filters_from(criteria: Sequence[tuple[str, str, Optional[Sequence[Any]]]]) -> list[QueryFilter]:
    """Build filters from (field, operator, values) triples, skipping empty value lists."""
    return [QueryFilter(field, operator, list(values)) for field, operator, values in criteria if values]
