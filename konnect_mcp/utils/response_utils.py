"""Utilities for decoding Konnect response bodies.

Provides `robust_parse_text` to handle:
- Normal JSON (json.loads)
- NDJSON (newline-delimited JSON, returns list or single object)
- Text containing a JSON object plus extra data (uses json.JSONDecoder().raw_decode)
- Falls back to returning the original text if parsing fails

and `error_detail`, which turns a decoded error body into the short detail
string carried by `KonnectAPIError`.
"""
from __future__ import annotations

import json
from typing import Any, Optional

ERROR_EXCERPT_LENGTH = 200


def robust_parse_text(text: str) -> Any:
    """Try to parse text as JSON. If it fails, try NDJSON (one JSON per line), then raw_decode the first JSON object, else return raw text.

    Returns the parsed Python object (dict/list/primitive) or the original text string if parsing failed.
    """
    try:
        return json.loads(text)
    except ValueError:
        pass

    try:
        lines = [ln for ln in text.splitlines() if ln.strip()]
        objs = [json.loads(ln) for ln in lines]
        if objs:
            return objs if len(objs) > 1 else objs[0]
    except ValueError:
        pass

    try:
        decoder = json.JSONDecoder()
        obj, _ = decoder.raw_decode(text.lstrip())
        return obj
    except ValueError:
        pass

    return text


def error_detail(body: Any) -> Optional[str]:
    """Summarise an error body.

    Objects and arrays yield their `message` field when present, otherwise
    their JSON serialisation. Text yields at most ERROR_EXCERPT_LENGTH characters.
    """
    if body is None:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return message if isinstance(message, str) else json.dumps(message)
        return json.dumps(body)
    if isinstance(body, list):
        return json.dumps(body)
    text = str(body)
    return text[:ERROR_EXCERPT_LENGTH] or None


def format_result(data: Any) -> str:
    """Render a tool result as indented JSON text for the agent."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)
