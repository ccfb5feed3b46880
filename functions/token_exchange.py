# -*- coding: utf-8 -*-
"""
OAuth token exchange relay.

Forwards an authorization-code or refresh-token grant to the Xero identity
provider so the browser never calls it directly. Tokens are passed through,
never stored.
"""

import json
from typing import Any, Dict

import requests

from app.config import Config
from utils.logger import get_logger

from . import error_response, response

logger = get_logger(__name__)

_AUTHORIZATION_CODE_FIELDS = ("code", "redirect_uri", "code_verifier")


def build_token_form(body: Dict[str, Any]) -> Dict[str, str]:
    """Form fields for the identity provider, in the order it expects them."""
    form = {"grant_type": body["grant_type"], "client_id": body["client_id"]}
    if body.get("client_secret"):
        form["client_secret"] = body["client_secret"]
    if body["grant_type"] == "authorization_code":
        for name in _AUTHORIZATION_CODE_FIELDS:
            form[name] = body[name]
    elif body["grant_type"] == "refresh_token":
        form["refresh_token"] = body["refresh_token"]
    return form


def handler(event, context):
    if event.get("httpMethod") != "POST":
        return response(
            405,
            {"error": "Method not allowed"},
            headers={"Access-Control-Allow-Headers": "Content-Type"},
        )

    try:
        raw = event.get("body") or "{}"
        body = json.loads(raw) if isinstance(raw, str) else dict(raw)

        if not body.get("grant_type") or not body.get("client_id"):
            return error_response(400, "Missing required fields")

        grant_type = body["grant_type"]
        if grant_type == "authorization_code":
            if not all(body.get(name) for name in _AUTHORIZATION_CODE_FIELDS):
                return error_response(400, "Missing authorization code parameters")
        elif grant_type == "refresh_token":
            if not body.get("refresh_token"):
                return error_response(400, "Missing refresh token")

        token_response = requests.post(
            Config.WFM_TOKEN_ENDPOINT,
            data=build_token_form(body),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=Config.API_TIMEOUT,
        )
        token_data = token_response.json()

        if not token_response.ok:
            logger.error(f"Token exchange failed: {token_data}")
            return error_response(
                token_response.status_code,
                token_data.get("error") or "Token exchange failed",
                token_data.get("error_description") or "Unknown error",
            )

        logger.info(f"Token relay succeeded ({grant_type})")
        return response(200, token_data)

    except Exception as e:
        logger.exception(f"Token relay error: {e}")
        return error_response(500, "Internal server error", str(e))
