"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the data store, or is expired.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a ShortURLModel whose shortcode is taken.

Example:
    >>> from linkshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortURLModel that already exists in the data store."""

    pass
