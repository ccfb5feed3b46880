# -*- coding: utf-8 -*-
"""
Read-only WorkflowMax API relay.

Forwards GET requests with the caller's bearer token and returns the
upstream status and body unchanged.
"""

import requests

from app.config import Config
from utils.logger import get_logger

from . import error_response, header, response

logger = get_logger(__name__)

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
}


def handler(event, context):
    method = event.get("httpMethod")
    if method == "OPTIONS":
        return response(200, "", headers=PREFLIGHT_HEADERS)

    if method != "GET":
        return error_response(405, "Only GET requests allowed (read-only)")

    endpoint = (event.get("queryStringParameters") or {}).get("endpoint")
    authorization = header(event, "Authorization")

    if not endpoint:
        return error_response(400, "Missing endpoint parameter")

    if not authorization or not authorization.startswith("Bearer "):
        return error_response(401, "Missing or invalid authorization header")

    try:
        upstream = requests.get(
            f"{Config.WFM_PROXY_UPSTREAM}{endpoint}",
            headers={
                "Authorization": authorization,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=Config.API_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"WorkflowMax API proxy error: {e}")
        return error_response(500, "Proxy error", str(e))

    logger.info(f"[PROXY] {upstream.status_code} GET {endpoint}")
    return response(upstream.status_code, upstream.text)
