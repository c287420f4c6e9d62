from dataclasses import dataclass, field
from datetime import datetime

from linkshortener.utils.helpers import new_id, to_iso8601


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        target (str):
            The original long URL that the short code redirects to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        created_at (datetime):
            Creation time (UTC).
        expires_at (datetime):
            Time after which the short URL is no longer resolvable. Fixed at
            creation, never extended.
        id (str):
            Opaque unique identifier, generated when omitted.
        is_active (bool):
            Reserved flag. No operation deactivates a link, so it is always True.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> url = ShortURLModel(
        ...     target="https://example.com/article/123",
        ...     shortcode="abc123",
        ...     created_at=now,
        ...     expires_at=now + timedelta(minutes=30),
        ... )
        >>> url.target
        'https://example.com/article/123'
        >>> url.is_expired(now)
        False
    """

    target: str
    shortcode: str
    created_at: datetime
    expires_at: datetime
    id: str = field(default_factory=new_id)
    is_active: bool = True

    def is_expired(self, now: datetime) -> bool:
        """Return True once `now` reaches `expires_at`."""
        return self.expires_at <= now

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'originalUrl': self.target,
            'shortcode': self.shortcode,
            'createdAt': to_iso8601(self.created_at),
            'expiresAt': to_iso8601(self.expires_at),
            'isActive': self.is_active,
        }
