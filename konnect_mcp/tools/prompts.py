"""Tool descriptions shown to the agent, keyed by method identifier."""

PROMPTS: dict[str, str] = {
    "query_api_requests": """
Query and analyze Kong API Gateway requests with filters.
Use this to investigate traffic patterns, error rates and latency.

INPUT:
  - timeRange: relative window (15M, 1H, 6H, 12H, 24H, 7D), or startTime/endTime for an absolute window
  - statusCodes / excludeStatusCodes: HTTP status codes to include or exclude
  - httpMethods: HTTP methods to include
  - consumerIds / serviceIds / routeIds: narrow to specific entities
  - maxResults: maximum number of requests to return (1-1000)

OUTPUT:
  - metadata: total request count, time range and the applied filters
  - requests: one entry per request with timestamp, method, path, status, latencies,
    client IP and the service, route and consumer it was routed through
""",
    "get_consumer_requests": """
Retrieve and summarize the requests made by one consumer.

INPUT:
  - consumerId: consumer to analyze
  - timeRange: relative window (15M, 1H, 6H, 12H, 24H, 7D)
  - successOnly / failureOnly: restrict to 2XX, or to 4XX and 5XX responses
  - maxResults: maximum number of requests to return (1-1000)

OUTPUT:
  - statistics: total requests, success rate, average latency, breakdown by status code and by service
  - requests: the matching requests
""",
    "list_services": """
List the gateway services configured in a control plane.
Services are the upstream APIs Kong proxies to.

INPUT:
  - controlPlaneId, size, offset (pagination token from a previous call)

OUTPUT:
  - data: services with id, name, host, port, protocol, path and tags
  - offset: token for the next page, if any
""",
    "list_routes": """
List the routes configured in a control plane.
Routes decide which requests are sent to which service.

INPUT:
  - controlPlaneId, size, offset

OUTPUT:
  - data: routes with id, name, paths, methods, hosts, protocols and the owning service
  - offset: token for the next page, if any
""",
    "list_consumers": """
List the consumers configured in a control plane.

INPUT:
  - controlPlaneId, size, offset

OUTPUT:
  - data: consumers with id, username, custom_id and tags
  - offset: token for the next page, if any
""",
    "list_plugins": """
List the plugins configured in a control plane, including the service,
route or consumer each one is scoped to.

INPUT:
  - controlPlaneId, size, offset

OUTPUT:
  - data: plugins with id, name, enabled flag, scope and configuration
  - offset: token for the next page, if any
""",
    "list_control_planes": """
List the control planes in the organization. Control plane IDs returned here
are needed by most configuration and analytics tools.

INPUT:
  - pageSize, pageNumber
  - filterName, filterClusterType, filterCloudGateway, labels
  - sort

OUTPUT:
  - data: control planes with id, name, description, labels and configuration
  - meta: pagination information
""",
    "get_control_plane": """
Get the details of one control plane.

INPUT:
  - controlPlaneId

OUTPUT:
  - id, name, description, labels, cluster type, endpoints and timestamps
""",
    "list_control_plane_group_memberships": """
List the control planes that belong to a control plane group.

INPUT:
  - groupId, pageSize, pageAfter (cursor from a previous call)

OUTPUT:
  - data: member control planes
  - meta: pagination cursor
""",
    "check_control_plane_group_membership": """
Check whether a control plane is a member of a control plane group.

INPUT:
  - controlPlaneId

OUTPUT:
  - membership status and, when a member, the group it belongs to
""",
    "list_apis": """
List the APIs published in the Dev Portal.

INPUT:
  - pageSize, pageNumber
  - filterName, filterPublished
  - sort

OUTPUT:
  - data: APIs with id, name, description, version and publication state
  - meta: pagination information
""",
    "list_portals": """
List the Dev Portals in the organization.

INPUT:
  - pageSize, pageNumber

OUTPUT:
  - data: portals with id, name, domain and settings
  - meta: pagination information
""",
    "subscribe_to_api": """
Subscribe a Dev Portal application to an API.

INPUT:
  - apiId: API to subscribe to
  - applicationId: application requesting access

OUTPUT:
  - the created subscription with its id and status
""",
    "generate_api_key": """
Generate an API key for a Dev Portal subscription.
The key value is only returned once; store it safely.

INPUT:
  - subscriptionId, name
  - expiresIn: lifetime in seconds (optional)

OUTPUT:
  - the created key with id, name, value and expiry
""",
    "list_applications": """
List the Dev Portal applications.

INPUT:
  - pageSize, pageNumber
  - filterName
  - sort

OUTPUT:
  - data: applications with id, name, description and timestamps
  - meta: pagination information
""",
    "list_subscriptions": """
List Dev Portal subscriptions, optionally narrowed to one application, one
API or one status.

INPUT:
  - applicationId, apiId, status
  - pageSize, pageNumber, sort

OUTPUT:
  - data: subscriptions with id, API, application and status
  - meta: pagination information
""",
    "create_application": """
Create a Dev Portal application that can then subscribe to APIs.

INPUT:
  - name, description

OUTPUT:
  - the created application with its id
""",
}


def prompt_for(method: str) -> str:
    return PROMPTS[method].strip()
