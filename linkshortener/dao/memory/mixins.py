"""In-memory mixin providing shared state initialization for memory-backed DAOs.

Responsibilities:
    - Initialize the record, shortcode index and click log maps
    - Initialize the lock guarding them
    - Provide the DAO's notion of "now"

Classes:
    - InMemoryStoreMixin: Base mixin to inject in-memory maps, locking & clock.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLMemoryDAO(InMemoryStoreMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLMemoryDAO()
        >>> dao.now()
        datetime.datetime(2025, 10, 15, 12, 0, tzinfo=datetime.UTC)
"""

import threading
from datetime import datetime
from typing import Optional

from linkshortener.models import ShortURLModel, ClickEventModel
from linkshortener.types import Clock
from linkshortener.utils.helpers import utcnow


class InMemoryStoreMixin:
    """Mixin in-memory state setup for memory-backed DAOs.

    Attributes:
        short_urls (dict[str, ShortURLModel]):
            Stored short URLs keyed by their id.

        shortcode_index (dict[str, str]):
            Shortcode to short URL id mapping.

        click_logs (dict[str, list[ClickEventModel]]):
            Click logs keyed by short URL id.

        lock (threading.RLock):
            Lock held by every DAO operation (see `synchronized`).

    Methods:
        now() -> datetime:
            Current time according to the configured clock.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """Initialize an empty in-memory store

        Args:
            clock (Optional[Clock]):
                Callable returning the current UTC datetime. Defaults to
                `datetime.now(UTC)`.
        """
        self.short_urls: dict[str, ShortURLModel] = {}
        self.shortcode_index: dict[str, str] = {}
        self.click_logs: dict[str, list[ClickEventModel]] = {}
        self.lock = threading.RLock()
        self._clock = clock or utcnow

    def now(self) -> datetime:
        return self._clock()
