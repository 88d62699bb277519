from typing import Any

from konnect_mcp.core.api import KonnectApi
from konnect_mcp.tools.parameters import (
    ListConsumersParams,
    ListPluginsParams,
    ListRoutesParams,
    ListServicesParams,
)
from konnect_mcp.utils import format_result


async def list_services(api: KonnectApi, params: ListServicesParams) -> str:
    """List gateway services of a control plane."""
    data = await api.list_services(params.control_plane_id, params.size, params.offset)
    return format_result(data)


async def list_routes(api: KonnectApi, params: ListRoutesParams) -> str:
    data = await api.list_routes(params.control_plane_id, params.size, params.offset)
    return format_result(data)


async def list_consumers(api: KonnectApi, params: ListConsumersParams) -> str:
    data = await api.list_consumers(params.control_plane_id, params.size, params.offset)
    return format_result(data)


async def list_plugins(api: KonnectApi, params: ListPluginsParams) -> str:
    data = await api.list_plugins(params.control_plane_id, params.size, params.offset)
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "list_services": list_services,
        "list_routes": list_routes,
        "list_consumers": list_consumers,
        "list_plugins": list_plugins,
    }
