"""Dev Portal tools.

Dev Portal resources live on the v3 API and are organization-wide, so the
`controlPlaneId` these tools accept is never sent to Konnect.
"""
import logging
from typing import Any

from konnect_mcp.core.api import KonnectApi
from konnect_mcp.tools.parameters import (
    CreateApplicationParams,
    DevPortalParams,
    GenerateApiKeyParams,
    ListApisParams,
    ListApplicationsParams,
    ListPortalsParams,
    ListSubscriptionsParams,
    SubscribeToApiParams,
)
from konnect_mcp.utils import format_result

logger = logging.getLogger(__name__)


def _note_unscoped(tool: str, params: DevPortalParams) -> None:
    if params.control_plane_id:
        logger.debug(f"{tool}: ignoring controlPlaneId={params.control_plane_id}; dev portal resources are not control-plane scoped")


async def list_apis(api: KonnectApi, params: ListApisParams) -> str:
    _note_unscoped("list_apis", params)
    data = await api.list_dev_portal_apis(
        page_size=params.page_size,
        page_number=params.page_number,
        filter_name=params.filter_name,
        filter_published=params.filter_published,
        sort=params.sort,
    )
    return format_result(data)


async def list_portals(api: KonnectApi, params: ListPortalsParams) -> str:
    data = await api.list_dev_portal_portals(params.page_size, params.page_number)
    return format_result(data)


async def subscribe_to_api(api: KonnectApi, params: SubscribeToApiParams) -> str:
    _note_unscoped("subscribe_to_api", params)
    data = await api.create_dev_portal_subscription(params.api_id, params.application_id)
    return format_result(data)


async def generate_api_key(api: KonnectApi, params: GenerateApiKeyParams) -> str:
    _note_unscoped("generate_api_key", params)
    data = await api.create_dev_portal_api_key(params.subscription_id, params.name, params.expires_in)
    return format_result(data)


async def list_applications(api: KonnectApi, params: ListApplicationsParams) -> str:
    _note_unscoped("list_applications", params)
    data = await api.list_dev_portal_applications(
        page_size=params.page_size,
        page_number=params.page_number,
        filter_name=params.filter_name,
        sort=params.sort,
    )
    return format_result(data)


async def list_subscriptions(api: KonnectApi, params: ListSubscriptionsParams) -> str:
    _note_unscoped("list_subscriptions", params)
    data = await api.list_dev_portal_subscriptions(
        application_id=params.application_id,
        api_id=params.api_id,
        page_size=params.page_size,
        page_number=params.page_number,
        status=params.status,
        sort=params.sort,
    )
    return format_result(data)


async def create_application(api: KonnectApi, params: CreateApplicationParams) -> str:
    _note_unscoped("create_application", params)
    data = await api.create_dev_portal_application(params.name, params.description)
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "list_apis": list_apis,
        "list_portals": list_portals,
        "subscribe_to_api": subscribe_to_api,
        "generate_api_key": generate_api_key,
        "list_applications": list_applications,
        "list_subscriptions": list_subscriptions,
        "create_application": create_application,
    }
