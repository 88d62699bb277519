from typing import Any

from konnect_mcp.core.api import KonnectApi
from konnect_mcp.tools.parameters import (
    CheckControlPlaneGroupMembershipParams,
    GetControlPlaneParams,
    ListControlPlaneGroupMembershipsParams,
    ListControlPlanesParams,
)
from konnect_mcp.utils import format_result


async def list_control_planes(api: KonnectApi, params: ListControlPlanesParams) -> str:
    """List control planes, optionally filtered by name, cluster type, cloud gateway or labels."""
    data = await api.list_control_planes(
        page_size=params.page_size,
        page_number=params.page_number,
        filter_name=params.filter_name,
        filter_cluster_type=params.filter_cluster_type,
        filter_cloud_gateway=params.filter_cloud_gateway,
        labels=params.labels,
        sort=params.sort,
    )
    return format_result(data)


async def get_control_plane(api: KonnectApi, params: GetControlPlaneParams) -> str:
    data = await api.get_control_plane(params.control_plane_id)
    return format_result(data)


async def list_control_plane_group_memberships(api: KonnectApi, params: ListControlPlaneGroupMembershipsParams) -> str:
    data = await api.list_control_plane_group_memberships(params.group_id, params.page_size, params.page_after)
    return format_result(data)


async def check_control_plane_group_membership(api: KonnectApi, params: CheckControlPlaneGroupMembershipParams) -> str:
    data = await api.check_control_plane_group_membership(params.control_plane_id)
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "list_control_planes": list_control_planes,
        "get_control_plane": get_control_plane,
        "list_control_plane_group_memberships": list_control_plane_group_memberships,
        "check_control_plane_group_membership": check_control_plane_group_membership,
    }
