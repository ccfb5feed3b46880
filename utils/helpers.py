# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

import re
from typing import Optional

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def snake_to_camel(name: str) -> str:
    """
    Convert a snake_case attribute name to its camelCase JSON key.

    Example:
        >>> snake_to_camel("project_information")
        'projectInformation'
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def camel_to_snake(name: str) -> str:
    """
    Convert a camelCase JSON key to a snake_case attribute name.

    Runs of capitals are kept together ("softwareIT" -> "software_it").
    """
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def to_base36(value: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def truncate_text(text: Optional[str], max_length: int = 50, suffix: str = "...") -> str:
    """
    Truncate text to maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if not text:
        return ""

    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix


def or_default(value: Optional[str], default: str = "-") -> str:
    """Return ``value`` unless it is empty, in which case return ``default``."""
    return value if value else default
