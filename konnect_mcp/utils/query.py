"""Query-string assembly shared by every list/filter operation.

Each operation describes its optional arguments as an ordered list of
`QueryParam`s; `build_query` folds them into a query string so omission and
encoding behave the same way for every endpoint.
"""
from __future__ import annotations

from typing import Any, Iterable, NamedTuple
from urllib.parse import quote

# Characters encodeURIComponent leaves alone
_FREE_TEXT_SAFE = "-_.!~*'()"


class QueryParam(NamedTuple):
    name: str
    value: Any
    free_text: bool = False


def _render(value: Any, free_text: bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if free_text:
        return quote(text, safe=_FREE_TEXT_SAFE)
    return text


def build_query(params: Iterable[QueryParam | tuple]) -> str:
    """Return `k1=v1&k2=v2` for every param whose value is not None, in input order."""
    pairs = []
    for param in params:
        param = QueryParam(*param)
        if param.value is None:
            continue
        pairs.append(f"{param.name}={_render(param.value, param.free_text)}")
    return "&".join(pairs)


def with_query(path: str, params: Iterable[QueryParam | tuple]) -> str:
    query = build_query(params)
    return f"{path}?{query}" if query else path
