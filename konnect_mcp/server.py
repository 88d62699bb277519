import inspect
import logging
import pkgutil
import sys
from importlib import import_module
from typing import Annotated, Any, Awaitable, Callable, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field, ValidationError

from konnect_mcp.core.api import KonnectApi
from konnect_mcp.core.errors import KonnectError
from konnect_mcp.core.logging_config import setup_logging
from konnect_mcp.tools.catalog import Tool, tools
from konnect_mcp.tools.parameters import ToolParams

logger = logging.getLogger(__name__)

SERVER_NAME = "kong-konnect"
TOOLS_PACKAGE = "konnect_mcp.tools"

Handler = Callable[[KonnectApi, ToolParams], Awaitable[str]]


def discover_handlers(package: str = TOOLS_PACKAGE) -> dict[str, Handler]:
    """Import every module of `package` that exposes get_tools() and merge their handlers."""
    pkg = import_module(package)
    handlers: dict[str, Handler] = {}
    for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if name.startswith("_"):
            continue
        module_name = f"{package}.{name}"
        mod = import_module(module_name)
        if not hasattr(mod, "get_tools"):
            continue
        logger.info(f"Imported tools module: {module_name}")
        for method, func in mod.get_tools().items():
            if method in handlers:
                logger.warning(f"Handler for {method} in {module_name} shadows an earlier one")
            handlers[method] = func
    return handlers


def signature_for(params_model: type[ToolParams]) -> inspect.Signature:
    """Expose the parameter model's fields, by alias, as keyword-only arguments.

    FastMCP derives each tool's input schema from the callable's signature, so
    this keeps the published schema equal to the catalog schema.
    """
    parameters = []
    for name, info in params_model.model_fields.items():
        annotation = Annotated[(info.annotation, *info.metadata, Field(description=info.description))]
        default = inspect.Parameter.empty if info.is_required() else info.default
        parameters.append(
            inspect.Parameter(info.alias or name, inspect.Parameter.KEYWORD_ONLY, default=default, annotation=annotation)
        )
    return inspect.Signature(parameters=parameters, return_annotation=str)


def make_wrapper(handler: Handler, tool: Tool, api: KonnectApi):
    """Wrap a handler so it takes the tool's arguments as keywords and reports failures as tool errors."""

    async def _wrapped(**call_kwargs: Any) -> str:
        try:
            params = tool.parameters.model_validate(call_kwargs)
        except ValidationError as e:
            raise ToolError(f"Invalid arguments for {tool.method}: {e}") from e
        logger.info(f"Calling tool {tool.method}")
        try:
            return await handler(api, params)
        except KonnectError as e:
            logger.error(f"Tool {tool.method} failed: {e}")
            raise ToolError(str(e)) from e

    _wrapped.__name__ = tool.method
    _wrapped.__doc__ = tool.description
    _wrapped.__signature__ = signature_for(tool.parameters)
    return _wrapped


def build_server(api: Optional[KonnectApi] = None, handlers: Optional[dict[str, Handler]] = None) -> FastMCP:
    api = api or KonnectApi()
    handlers = handlers if handlers is not None else discover_handlers()

    mcp = FastMCP(SERVER_NAME)
    logger.info("MCP server instance created.")

    registered_tool_names: list[str] = []
    for tool in tools():
        handler = handlers.get(tool.method)
        if handler is None:
            logger.warning(f"Tool {tool.method} has no handler; skipping")
            continue
        mcp.add_tool(make_wrapper(handler, tool, api), name=tool.method, title=tool.name, description=tool.description)
        registered_tool_names.append(tool.method)

    unknown = sorted(set(handlers) - set(registered_tool_names))
    if unknown:
        logger.warning(f"Handlers without a catalog entry were not registered: {unknown}")
    logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")
    return mcp


def main() -> None:
    setup_logging()
    logger.info("Starting MCP server...")
    try:
        mcp = build_server()
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/ for details.", file=sys.stderr)
        sys.exit(-1)


if __name__ == "__main__":
    main()
