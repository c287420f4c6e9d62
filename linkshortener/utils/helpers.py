"""Helper utilities shared by the store, the service layer and the HTTP API.

Functions:
    utcnow() -> datetime
        Current time as a timezone-aware UTC datetime
    to_iso8601(dt: datetime) -> str
        Serialize a datetime as ISO-8601 UTC with millisecond precision
    new_id() -> str
        Generate an opaque unique identifier
    get_short_url(shortcode: str, base_url: str) -> str
        Get string representation of short URL for a given shortcode

Example:
    >>> from datetime import datetime, UTC
    >>> to_iso8601(datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC))
    '2025-10-15T12:00:00.000Z'
    >>> get_short_url('abc123', 'http://localhost:3001/')
    'http://localhost:3001/abc123'
"""

import uuid
from datetime import datetime, UTC


def utcnow() -> datetime:
    return datetime.now(UTC)


def to_iso8601(dt: datetime) -> str:
    """Serialize a datetime as ISO-8601 UTC with millisecond precision

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt (datetime): datetime to serialize

    Returns:
        str: e.g. "2025-10-15T12:00:00.000Z"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    # fmt: off
    return dt.astimezone(UTC) \
             .isoformat(timespec='milliseconds') \
             .replace('+00:00', 'Z')
    # fmt: on


def new_id() -> str:
    return str(uuid.uuid4())


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the service

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{shortcode}'
