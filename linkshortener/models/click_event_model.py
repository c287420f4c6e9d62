from dataclasses import dataclass, field
from datetime import datetime

from linkshortener.constants import ClickDefaults
from linkshortener.utils.helpers import new_id, to_iso8601


# fmt: off
@dataclass(frozen=True)
class ClickEventModel:
    shortcode: str                              # Back-reference to the clicked short URL
    timestamp: datetime                         # Time of the redirect (UTC)
    referrer: str = ClickDefaults.REFERRER      # Referer header, "Direct" when absent
    user_agent: str = ClickDefaults.USER_AGENT  # User-Agent header
    ip: str = ClickDefaults.IP                  # Resolved client IP address
    country: str = ClickDefaults.COUNTRY
    city: str = ClickDefaults.CITY
    id: str = field(default_factory=new_id)     # Unique per click
# fmt: on

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'shortcode': self.shortcode,
            'timestamp': to_iso8601(self.timestamp),
            'referrer': self.referrer,
            'userAgent': self.user_agent,
            'ip': self.ip,
            'country': self.country,
            'city': self.city,
        }
