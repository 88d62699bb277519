"""Tests for MCP server wiring."""
import inspect
import json

import httpx
import pytest
from mcp.server.fastmcp.exceptions import ToolError

from konnect_mcp.server import build_server, discover_handlers, make_wrapper, signature_for
from konnect_mcp.tools.catalog import get_tool, tools
from konnect_mcp.tools.parameters import PARAMETERS


def test_discover_handlers_covers_catalog():
    handlers = discover_handlers()
    assert set(handlers) == {t.method for t in tools()}


def test_signature_uses_aliases_and_defaults():
    sig = signature_for(PARAMETERS["list_services"])
    assert list(sig.parameters) == ["controlPlaneId", "size", "offset"]
    assert sig.parameters["controlPlaneId"].default is inspect.Parameter.empty
    assert sig.parameters["size"].default == 100
    assert sig.parameters["offset"].default is None
    assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in sig.parameters.values())


class TestBuildServer:
    @pytest.mark.asyncio
    async def test_registers_catalog_in_order(self, recording_api):
        mcp = build_server(api=recording_api)
        listed = await mcp.list_tools()
        assert [t.name for t in listed] == [t.method for t in tools()]

    @pytest.mark.asyncio
    async def test_input_schema_matches_parameters(self, recording_api):
        mcp = build_server(api=recording_api)
        listed = {t.name: t for t in await mcp.list_tools()}
        schema = listed["list_subscriptions"].inputSchema
        assert {"controlPlaneId", "applicationId", "apiId", "pageSize", "pageNumber", "status", "sort"} <= set(schema["properties"])
        assert "required" not in schema or schema["required"] == []
        assert listed["get_control_plane"].inputSchema["required"] == ["controlPlaneId"]

    @pytest.mark.asyncio
    async def test_missing_handler_is_skipped(self, recording_api):
        handlers = discover_handlers()
        handlers.pop("list_portals")
        mcp = build_server(api=recording_api, handlers=handlers)
        names = [t.name for t in await mcp.list_tools()]
        assert "list_portals" not in names
        assert len(names) == len(tools()) - 1


class TestWrapper:
    @pytest.mark.asyncio
    async def test_validates_and_calls_handler(self, recording_api):
        handlers = discover_handlers()
        tool = get_tool("get_control_plane")
        wrapper = make_wrapper(handlers[tool.method], tool, recording_api)

        out = await wrapper(controlPlaneId="cp-9")
        assert json.loads(out) == {"data": []}
        assert recording_api.calls == [("/control-planes/cp-9", "GET", None)]

    @pytest.mark.asyncio
    async def test_invalid_arguments_never_reach_the_api(self, recording_api):
        tool = get_tool("list_services")
        wrapper = make_wrapper(discover_handlers()[tool.method], tool, recording_api)
        with pytest.raises(ToolError, match="Invalid arguments for list_services"):
            await wrapper(controlPlaneId="cp", size=0)
        assert recording_api.calls == []

    @pytest.mark.asyncio
    async def test_client_errors_become_tool_errors(self, make_api):
        api = make_api(lambda request: httpx.Response(404, json={"message": "not found"}))
        tool = get_tool("get_control_plane")
        wrapper = make_wrapper(discover_handlers()[tool.method], tool, api)
        with pytest.raises(ToolError, match=r"API Error \(Status 404\): not found"):
            await wrapper(controlPlaneId="missing")
