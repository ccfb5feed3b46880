# -*- coding: utf-8 -*-
"""
DateTime Utilities

Every timestamp the BEP generator stores is a timezone-aware UTC datetime.
On the wire they travel as ISO-8601 strings (documents) or epoch
milliseconds (OAuth token expiry, record ids).
"""

from datetime import datetime, timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """Current time as an aware UTC datetime. Default clock for the reducer."""
    return datetime.now(timezone.utc)


def to_isoformat(value: Optional[datetime]) -> str:
    """
    Convert a datetime to an ISO-8601 string.

    Naive values are assumed to be UTC.

    Args:
        value: datetime or None

    Returns:
        ISO format string, or "" for None

    Examples:
        >>> to_isoformat(datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc))
        '2025-01-15T10:30:00+00:00'
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def from_isoformat(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware datetime.

    Accepts the trailing "Z" that browsers emit from Date.toISOString().

    Args:
        value: ISO string, datetime, or None

    Returns:
        Aware datetime, or None for empty input

    Raises:
        ValueError: if the string is not ISO-8601
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_epoch_ms(value: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def from_epoch_ms(value: Union[int, str]) -> datetime:
    """Aware UTC datetime from epoch milliseconds (int or numeric string)."""
    return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
