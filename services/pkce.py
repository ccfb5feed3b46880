# -*- coding: utf-8 -*-
"""
PKCE helpers for the OAuth authorization code flow (RFC 7636).
"""

import base64
import hashlib
import secrets
import string

from utils.helpers import to_base36

# Unreserved characters allowed in a code verifier
VERIFIER_CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-._~"
VERIFIER_LENGTH = 128


def generate_code_verifier(length: int = VERIFIER_LENGTH) -> str:
    """Random code verifier of ``length`` unreserved characters."""
    return "".join(secrets.choice(VERIFIER_CHARSET) for _ in range(length))


def base64url_encode(data: bytes) -> str:
    """Base64url without padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def generate_code_challenge(verifier: str) -> str:
    """S256 challenge for ``verifier``."""
    return base64url_encode(hashlib.sha256(verifier.encode("ascii")).digest())


def generate_state(length: int = 26) -> str:
    """Random base36 ``state`` value for CSRF protection."""
    return "".join(to_base36(secrets.randbelow(36)) for _ in range(length))
