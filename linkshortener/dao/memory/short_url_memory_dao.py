"""Data Access Object (DAO) implementation for managing shortened URLs in process memory

This module provides an in-memory implementation of ShortURLBaseDAO for
ShortURLModel instances and their click logs.

Responsibilities:
    - Insert and retrieve short URLs;
    - Enforce shortcode uniqueness with an atomic insert-if-absent;
    - Hide expired short URLs from lookups before they are swept;
    - Append and read per-link click logs;
    - Purge expired short URLs and their click logs.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.insert(short_url)
    <ShortURLMemoryDAO>

    >>> dao.get("abc123").target
    'https://example.com/page'
    >>> dao.is_available("abc123")
    False

    >>> dao.sweep()
    0
"""

import logging
from datetime import datetime

from beartype import beartype

from linkshortener.models import ShortURLModel, ClickEventModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory.mixins import InMemoryStoreMixin
from linkshortener.dao.memory.helpers import synchronized
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from linkshortener.utils.helpers import to_iso8601


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(InMemoryStoreMixin, ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface on top of plain
    dictionaries. Every method holds the DAO lock, so a lookup never observes
    a short URL which is half-way through insertion or deletion.

    Attributes (see InMemoryStoreMixin):
        short_urls (dict[str, ShortURLModel]):
            Stored short URLs keyed by id.
        shortcode_index (dict[str, str]):
            Shortcode to id mapping.
        click_logs (dict[str, list[ClickEventModel]]):
            Click logs keyed by id.

    Example:
        >>> dao = ShortURLMemoryDAO()
        >>> dao.insert(short_url).get("abc123").shortcode
        'abc123'
        >>> dao.add_click("abc123", click)
        True
    """

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @synchronized
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping if its shortcode is free

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode is still stored.
        """
        if short_url.shortcode in self.shortcode_index:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")

        self.short_urls[short_url.id] = short_url
        self.shortcode_index[short_url.shortcode] = short_url.id
        self.click_logs[short_url.id] = []

        logger.info(
            'Short URL created.',
            extra={
                'shortcode': short_url.shortcode,
                'original_url': short_url.target,
                'expires_at': to_iso8601(short_url.expires_at),
            },
        )
        return self

    @synchronized
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve an unexpired short URL mapping by shortcode

        Expiry is checked on every lookup, so a short URL is unreachable the
        moment it expires, whether or not the sweeper already removed it.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist or is expired.
        """
        short_url_id = self.shortcode_index.get(shortcode)
        short_url = self.short_urls.get(short_url_id) if short_url_id is not None else None

        if short_url is None:
            logger.debug('Short URL not found.', extra={'shortcode': shortcode})
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        if short_url.is_expired(self.now()):
            logger.debug(
                'Short URL expired.',
                extra={'shortcode': shortcode, 'expires_at': to_iso8601(short_url.expires_at)},
            )
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return short_url

    @synchronized
    @beartype
    def is_available(self, shortcode: str, **kwargs) -> bool:
        return shortcode not in self.shortcode_index

    @synchronized
    @beartype
    def add_click(self, shortcode: str, click: ClickEventModel, **kwargs) -> bool:
        """Append a click event to the short URL's click log

        NOTE: the click is recorded even when the short URL expired after the
              redirect resolved it. Only an unknown (or swept) shortcode is skipped.

        Args:
            shortcode (str):
                The shortcode of the clicked short URL.
            click (ClickEventModel):
                Click event to append.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool:
                True if the click was recorded, False if the shortcode is unknown.
        """
        short_url_id = self.shortcode_index.get(shortcode)
        if short_url_id is None:
            logger.error('Cannot add click - shortcode not found.', extra={'shortcode': shortcode})
            return False

        self.click_logs.setdefault(short_url_id, []).append(click)
        logger.info(
            'Click recorded.',
            extra={
                'shortcode': shortcode,
                'click_id': click.id,
                'referrer': click.referrer,
                'ip': click.ip,
            },
        )
        return True

    @synchronized
    @beartype
    def clicks(self, shortcode: str, **kwargs) -> list[ClickEventModel]:
        short_url_id = self.shortcode_index.get(shortcode)
        if short_url_id is None:
            return []
        return list(self.click_logs.get(short_url_id, []))

    @synchronized
    @beartype
    def sweep(self, now: datetime | None = None, **kwargs) -> int:
        """Purge expired short URLs together with their shortcodes and click logs

        Args:
            now (datetime | None):
                Reference time. Defaults to the DAO's clock.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int:
                Number of purged short URLs.

        Example:
            >>> dao.sweep()
            3
        """
        now = now or self.now()
        expired = [short_url for short_url in self.short_urls.values() if short_url.expires_at < now]

        for short_url in expired:
            del self.short_urls[short_url.id]
            self.click_logs.pop(short_url.id, None)
            if self.shortcode_index.get(short_url.shortcode) == short_url.id:
                del self.shortcode_index[short_url.shortcode]

        if expired:
            logger.info('Cleaned up expired short URLs.', extra={'count': len(expired)})
        return len(expired)

    @synchronized
    def count(self, **kwargs) -> int:
        return len(self.short_urls)
