"""Parameter schemas for the Konnect tools, one pydantic model per tool.

Field names are snake_case; the camelCase aliases are what MCP clients send
and what the published input schema shows.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

TimeRangeToken = Literal["15M", "1H", "6H", "12H", "24H", "7D"]


class ToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


class PageParams(ToolParams):
    page_size: int = Field(10, alias="pageSize", ge=1, le=1000, description="Number of items per page")
    page_number: Optional[int] = Field(None, alias="pageNumber", ge=1, description="Page number to retrieve")


class DevPortalParams(ToolParams):
    control_plane_id: Optional[str] = Field(
        None,
        alias="controlPlaneId",
        description="Control plane ID. Accepted for compatibility; dev portal resources are organization-wide.",
    )


class CoreEntityListParams(ToolParams):
    control_plane_id: str = Field(
        alias="controlPlaneId",
        description="Control plane ID (obtainable from list_control_planes)",
    )
    size: int = Field(100, ge=1, le=1000, description="Number of entities to return")
    offset: Optional[str] = Field(None, description="Offset token for pagination (from a previous response)")


# Analytics

class QueryApiRequestsParams(ToolParams):
    time_range: TimeRangeToken = Field(
        "1H",
        alias="timeRange",
        description="Relative time range to query (15M = last 15 minutes, 1H = last hour, ... 7D = last 7 days)",
    )
    start_time: Optional[str] = Field(
        None, alias="startTime", description="ISO-8601 start of an absolute range. Overrides timeRange when set with endTime"
    )
    end_time: Optional[str] = Field(
        None, alias="endTime", description="ISO-8601 end of an absolute range. Requires startTime"
    )
    status_codes: Optional[list[int]] = Field(
        None, alias="statusCodes", description="Only include requests with these HTTP status codes"
    )
    exclude_status_codes: Optional[list[int]] = Field(
        None, alias="excludeStatusCodes", description="Exclude requests with these HTTP status codes"
    )
    http_methods: Optional[list[str]] = Field(
        None, alias="httpMethods", description="Only include these HTTP methods (e.g. GET, POST, DELETE)"
    )
    consumer_ids: Optional[list[str]] = Field(None, alias="consumerIds", description="Only include these consumer IDs")
    service_ids: Optional[list[str]] = Field(None, alias="serviceIds", description="Only include these gateway service IDs")
    route_ids: Optional[list[str]] = Field(None, alias="routeIds", description="Only include these route IDs")
    max_results: int = Field(100, alias="maxResults", ge=1, le=1000, description="Maximum number of requests to return")

    @model_validator(mode="after")
    def check_absolute_range(self):
        if (self.start_time is None) != (self.end_time is None):
            raise ValueError("startTime and endTime must be given together")
        for code in (self.status_codes or []) + (self.exclude_status_codes or []):
            if not 100 <= code <= 599:
                raise ValueError(f"invalid HTTP status code: {code}")
        return self


class GetConsumerRequestsParams(ToolParams):
    consumer_id: str = Field(alias="consumerId", description="Consumer ID to analyze (obtainable from list_consumers)")
    time_range: TimeRangeToken = Field("1H", alias="timeRange", description="Relative time range to query")
    success_only: bool = Field(False, alias="successOnly", description="Only include successful (2XX) requests")
    failure_only: bool = Field(False, alias="failureOnly", description="Only include failed (4XX and 5XX) requests")
    max_results: int = Field(100, alias="maxResults", ge=1, le=1000, description="Maximum number of requests to return")

    @model_validator(mode="after")
    def check_exclusive(self):
        if self.success_only and self.failure_only:
            raise ValueError("successOnly and failureOnly are mutually exclusive")
        return self


# Configuration

class ListServicesParams(CoreEntityListParams):
    pass


class ListRoutesParams(CoreEntityListParams):
    pass


class ListConsumersParams(CoreEntityListParams):
    pass


class ListPluginsParams(CoreEntityListParams):
    pass


# Control planes

class ListControlPlanesParams(PageParams):
    filter_name: Optional[str] = Field(None, alias="filterName", description="Only control planes whose name contains this text")
    filter_cluster_type: Optional[str] = Field(
        None,
        alias="filterClusterType",
        description="Cluster type, e.g. CLUSTER_TYPE_CONTROL_PLANE, CLUSTER_TYPE_K8S_INGRESS_CONTROLLER, "
        "CLUSTER_TYPE_CONTROL_PLANE_GROUP, CLUSTER_TYPE_SERVERLESS",
    )
    filter_cloud_gateway: Optional[bool] = Field(
        None, alias="filterCloudGateway", description="Only control planes with (true) or without (false) cloud gateway support"
    )
    labels: Optional[str] = Field(None, description="Label filter in key:value form")
    sort: Optional[str] = Field(None, description="Sort field and direction, e.g. 'name' or 'created_at desc'")


class GetControlPlaneParams(ToolParams):
    control_plane_id: str = Field(alias="controlPlaneId", description="Control plane ID to retrieve")


class ListControlPlaneGroupMembershipsParams(ToolParams):
    group_id: str = Field(alias="groupId", description="Control plane group ID")
    page_size: int = Field(10, alias="pageSize", ge=1, le=1000, description="Number of members per page")
    page_after: Optional[str] = Field(None, alias="pageAfter", description="Cursor from a previous response")


class CheckControlPlaneGroupMembershipParams(ToolParams):
    control_plane_id: str = Field(alias="controlPlaneId", description="Control plane ID to check")


# Dev portal

class ListApisParams(DevPortalParams, PageParams):
    filter_name: Optional[str] = Field(None, alias="filterName", description="Only APIs whose name contains this text")
    filter_published: Optional[bool] = Field(None, alias="filterPublished", description="Only published (true) or unpublished (false) APIs")
    sort: Optional[str] = Field(None, description="Sort field and direction")


class ListPortalsParams(PageParams):
    pass


class SubscribeToApiParams(DevPortalParams):
    api_id: str = Field(alias="apiId", description="API ID to subscribe to (obtainable from list_apis)")
    application_id: str = Field(alias="applicationId", description="Application ID that subscribes (obtainable from list_applications)")


class GenerateApiKeyParams(DevPortalParams):
    subscription_id: str = Field(alias="subscriptionId", description="Subscription ID the key is issued for")
    name: str = Field(min_length=1, description="Name of the API key")
    expires_in: Optional[int] = Field(None, alias="expiresIn", ge=1, description="Lifetime of the key in seconds")


class ListApplicationsParams(DevPortalParams, PageParams):
    filter_name: Optional[str] = Field(None, alias="filterName", description="Only applications whose name contains this text")
    sort: Optional[str] = Field(None, description="Sort field and direction")


class ListSubscriptionsParams(DevPortalParams, PageParams):
    application_id: Optional[str] = Field(None, alias="applicationId", description="Only subscriptions of this application")
    api_id: Optional[str] = Field(None, alias="apiId", description="Only subscriptions to this API")
    status: Optional[str] = Field(None, description="Subscription status, e.g. pending, approved, rejected, revoked")
    sort: Optional[str] = Field(None, description="Sort field and direction")


class CreateApplicationParams(DevPortalParams):
    name: str = Field(min_length=1, description="Application name")
    description: str = Field("", description="Application description")


PARAMETERS: dict[str, type[ToolParams]] = {
    "query_api_requests": QueryApiRequestsParams,
    "get_consumer_requests": GetConsumerRequestsParams,
    "list_services": ListServicesParams,
    "list_routes": ListRoutesParams,
    "list_consumers": ListConsumersParams,
    "list_plugins": ListPluginsParams,
    "list_control_planes": ListControlPlanesParams,
    "get_control_plane": GetControlPlaneParams,
    "list_control_plane_group_memberships": ListControlPlaneGroupMembershipsParams,
    "check_control_plane_group_membership": CheckControlPlaneGroupMembershipParams,
    "list_apis": ListApisParams,
    "list_portals": ListPortalsParams,
    "subscribe_to_api": SubscribeToApiParams,
    "generate_api_key": GenerateApiKeyParams,
    "list_applications": ListApplicationsParams,
    "list_subscriptions": ListSubscriptionsParams,
    "create_application": CreateApplicationParams,
}


def parameters_for(method: str) -> type[ToolParams]:
    """Return the parameter model for a tool; KeyError for unknown methods."""
    return PARAMETERS[method]
