# -*- coding: utf-8 -*-
"""
Serverless relays for the browser build.

Each module exposes ``handler(event, context)`` taking an API-gateway style
event and returning ``{"statusCode", "headers", "body"}``.
"""

import json
from typing import Any, Dict, Optional

CORS_ORIGIN = {"Access-Control-Allow-Origin": "*"}


def response(status: int, body: Any, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Build a handler response. ``body`` is sent as-is when it is a string,
    otherwise JSON-encoded.
    """
    merged = dict(CORS_ORIGIN)
    merged.update(headers if headers is not None else {"Content-Type": "application/json"})
    return {
        "statusCode": status,
        "headers": merged,
        "body": body if isinstance(body, str) else json.dumps(body, ensure_ascii=False),
    }


def error_response(status: int, error: str, description: Optional[str] = None) -> Dict[str, Any]:
    body = {"error": error}
    if description is not None:
        body["error_description"] = description
    return response(status, body)


def header(event: Dict[str, Any], name: str) -> Optional[str]:
    """Case-insensitive request header lookup."""
    wanted = name.lower()
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == wanted:
            return value
    return None
