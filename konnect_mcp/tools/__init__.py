# tools package for the Konnect MCP server
# Handler modules expose `get_tools() -> dict[str, handler]`, keyed by catalog method id.
# The server imports every module here that has get_tools() and pairs handlers with catalog entries.
__all__ = []
