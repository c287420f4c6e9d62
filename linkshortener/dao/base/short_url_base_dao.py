"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Own the append-only click log of every stored short URL.
    - Purge expired short URLs together with their click logs.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> dao.insert(short_url)
        <ShortURLMemoryDAO>

        >>> retrieved = dao.get("a1b2c3")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> dao.add_click("a1b2c3", click)
        True
        >>> len(dao.clicks("a1b2c3"))
        1
"""

from abc import ABC, abstractmethod
from datetime import datetime

from linkshortener.models import ShortURLModel, ClickEventModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Atomically insert a new ShortURLModel if its shortcode is free.
            Raises ShortURLAlreadyExistsError if the shortcode is taken.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve an unexpired ShortURLModel by shortcode.
            Raises ShortURLNotFoundError if it does not exist or is expired.

        is_available(shortcode: str, **kwargs) -> bool:
            Report whether a shortcode is free for a new short URL.

        add_click(shortcode: str, click: ClickEventModel, **kwargs) -> bool:
            Append a click event to the short URL's click log.

        clicks(shortcode: str, **kwargs) -> list[ClickEventModel]:
            Return the click log of a short URL.

        sweep(now: datetime | None = None, **kwargs) -> int:
            Delete expired short URLs and their click logs.

        count(**kwargs) -> int:
            Return the number of stored short URLs.

        now() -> datetime:
            Return the current time according to the data store.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLMemoryDAO) must
        extend this class and implement all abstract methods.

    NOTE:
        - A shortcode stays taken until its short URL is swept, even when
          the short URL has already expired.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        The shortcode check and the insertion form a single atomic operation.
        An empty click log is created together with the short URL.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same shortcode is still stored
                (expired or not).
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve an unexpired ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists, or it
                has expired. Both cases are reported identically.
        """
        pass

    @abstractmethod
    def is_available(self, shortcode: str, **kwargs) -> bool:
        """Report whether no short URL is stored under the shortcode.

        Expired short URLs that were not swept yet keep their shortcode taken.

        Args:
            shortcode (str):
                The shortcode to check.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the shortcode is free.
        """
        pass

    @abstractmethod
    def add_click(self, shortcode: str, click: ClickEventModel, **kwargs) -> bool:
        """Append a click event to a short URL's click log.

        Never raises for unknown shortcodes: the redirect path must not fail
        because a click could not be recorded.

        Args:
            shortcode (str):
                The shortcode of the clicked short URL.

            click (ClickEventModel):
                The click event to append.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the click was recorded, False if the shortcode is unknown.
        """
        pass

    @abstractmethod
    def clicks(self, shortcode: str, **kwargs) -> list[ClickEventModel]:
        """Return the click log of a short URL in insertion order.

        Args:
            shortcode (str):
                The shortcode of the short URL.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[ClickEventModel]: click events, empty if the shortcode is unknown.
        """
        pass

    @abstractmethod
    def sweep(self, now: datetime | None = None, **kwargs) -> int:
        """Delete every short URL with `expires_at < now`, its shortcode mapping and its click log.

        Args:
            now (datetime | None):
                Reference time. Defaults to the data store's current time.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: number of purged short URLs.
        """
        pass

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time (UTC) according to the data store.

        Expiry checks, sweeps and new short URLs all use this clock.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored short URLs, including expired but unswept ones.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: stored short URL count.
        """
        pass
