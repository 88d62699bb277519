"""MCP server for the Kong Konnect API."""

__version__ = "0.1.0"
