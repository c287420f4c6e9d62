from linkshortener.models.short_url_model import ShortURLModel
from linkshortener.models.click_event_model import ClickEventModel


__all__ = [
    'ShortURLModel',
    'ClickEventModel',
]
