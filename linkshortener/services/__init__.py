from linkshortener.services.short_url_service import ShortURLService
from linkshortener.services.sweeper import ExpirySweeper


__all__ = [
    'ShortURLService',
    'ExpirySweeper',
]
