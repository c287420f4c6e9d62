"""Validation of client-supplied URLs and validity periods.

Functions:
    is_valid_url(url) -> bool
        Accept absolute http(s) URLs only
    is_valid_validity(minutes) -> bool
        Accept a positive whole number of minutes of at most one year

Example:
    >>> is_valid_url('https://example.com/page')
    True
    >>> is_valid_url('ftp://example.com/file')
    False
    >>> is_valid_validity(30.0)
    True
    >>> is_valid_validity(525601)
    False
"""

import logging

from pydantic import HttpUrl, TypeAdapter, ValidationError as PydanticValidationError

from linkshortener.constants import Validity


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({'http', 'https'})

HTTP_URL_ADAPTER = TypeAdapter(HttpUrl)


def is_valid_url(url: object) -> bool:
    if not isinstance(url, str):
        logger.warning('Invalid URL format.', extra={'url': repr(url), 'reason': 'not a string'})
        return False

    try:
        parsed = HTTP_URL_ADAPTER.validate_python(url)
    except PydanticValidationError as e:
        logger.warning('Invalid URL format.', extra={'url': url, 'reason': e.errors()[0]['msg']})
        return False

    if parsed.scheme not in ALLOWED_SCHEMES:
        logger.warning('Invalid URL protocol.', extra={'url': url, 'protocol': parsed.scheme})
        return False

    return True


def is_valid_validity(minutes: object) -> bool:
    """Check a validity period expressed in minutes.

    Args:
        minutes (object):
            A whole number of minutes within [1, 525600]. Integral floats
            (e.g. 30.0) are accepted; booleans and None are rejected.

    Returns:
        bool: True if the validity is acceptable.
    """
    if isinstance(minutes, bool):
        is_valid = False
    elif isinstance(minutes, int):
        is_valid = 0 < minutes <= Validity.MAX
    elif isinstance(minutes, float):
        is_valid = minutes.is_integer() and 0 < minutes <= Validity.MAX
    else:
        is_valid = False

    if not is_valid:
        logger.warning('Invalid validity period.', extra={'validity': repr(minutes)})
    return is_valid
