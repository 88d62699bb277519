"""Static catalog of the Konnect tools.

`tools()` returns the ordered tool descriptors. Descriptions and parameter
schemas are looked up by method identifier through the `prompt_for` and
`parameters_for` providers; the catalog itself only fixes names, categories
and order. Entries of one category are contiguous.
"""
from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from konnect_mcp.tools.parameters import ToolParams, parameters_for as default_parameters_for
from konnect_mcp.tools.prompts import prompt_for as default_prompt_for


class ToolCategory(str, Enum):
    ANALYTICS = "analytics"
    CONFIGURATION = "configuration"
    CONTROL_PLANES = "control_planes"
    DEV_PORTAL = "dev_portal"


@dataclass(frozen=True)
class Tool:
    method: str
    name: str
    description: str
    parameters: type[ToolParams]
    category: ToolCategory

    def input_schema(self) -> dict:
        return self.parameters.model_json_schema(by_alias=True)


# (method, display name, category), in catalog order
_ENTRIES: tuple[tuple[str, str, ToolCategory], ...] = (
    ("query_api_requests", "Query API Requests", ToolCategory.ANALYTICS),
    ("get_consumer_requests", "Get Consumer Requests", ToolCategory.ANALYTICS),

    ("list_services", "List Services", ToolCategory.CONFIGURATION),
    ("list_routes", "List Routes", ToolCategory.CONFIGURATION),
    ("list_consumers", "List Consumers", ToolCategory.CONFIGURATION),
    ("list_plugins", "List Plugins", ToolCategory.CONFIGURATION),

    ("list_control_planes", "List Control Planes", ToolCategory.CONTROL_PLANES),
    ("get_control_plane", "Get Control Plane", ToolCategory.CONTROL_PLANES),
    ("list_control_plane_group_memberships", "List Control Plane Group Memberships", ToolCategory.CONTROL_PLANES),
    ("check_control_plane_group_membership", "Check Control Plane Group Membership", ToolCategory.CONTROL_PLANES),

    ("list_apis", "List APIs", ToolCategory.DEV_PORTAL),
    ("list_portals", "List Portals", ToolCategory.DEV_PORTAL),
    ("subscribe_to_api", "Subscribe to API", ToolCategory.DEV_PORTAL),
    ("generate_api_key", "Generate API Key", ToolCategory.DEV_PORTAL),
    ("list_applications", "List Applications", ToolCategory.DEV_PORTAL),
    ("list_subscriptions", "List Subscriptions", ToolCategory.DEV_PORTAL),
    ("create_application", "Create Application", ToolCategory.DEV_PORTAL),
)


def tools(
    prompt_for: Callable[[str], str] = default_prompt_for,
    parameters_for: Callable[[str], type[ToolParams]] = default_parameters_for,
) -> tuple[Tool, ...]:
    """Build the tool catalog. Pure: every call returns a new, equal tuple."""
    return tuple(
        Tool(
            method=method,
            name=name,
            description=prompt_for(method),
            parameters=parameters_for(method),
            category=category,
        )
        for method, name, category in _ENTRIES
    )


def get_tool(method: str) -> Tool:
    for tool in tools():
        if tool.method == method:
            return tool
    raise KeyError(f"Unknown tool: {method}")


def tools_by_category() -> "OrderedDict[ToolCategory, list[Tool]]":
    grouped: OrderedDict[ToolCategory, list[Tool]] = OrderedDict()
    for tool in tools():
        grouped.setdefault(tool.category, []).append(tool)
    return grouped
