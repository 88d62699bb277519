from konnect_mcp.utils.endpoint import resolve_url, path_segment
from konnect_mcp.utils.query import QueryParam, build_query, with_query
from konnect_mcp.utils.response_utils import robust_parse_text, error_detail, format_result

__all__ = [
    "QueryParam",
    "build_query",
    "with_query",
    "resolve_url",
    "path_segment",
    "robust_parse_text",
    "error_detail",
    "format_result",
]
