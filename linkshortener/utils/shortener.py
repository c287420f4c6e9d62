"""Shortcode generation and validation utilities

This module provides helpers for generating random Base62 shortcodes and
validating shortcodes supplied by clients.

Functions:
    generate_shortcode(length=6):
        Generate a random alphanumeric shortcode.
    validate_shortcode(shortcode):
        Check a client-supplied shortcode against the allowed format.

Example:
    >>> from linkshortener.utils import generate_shortcode, validate_shortcode
    >>> code = generate_shortcode()
    >>> len(code)
    6
    >>> validate_shortcode(code)
    True
    >>> validate_shortcode('no')
    False
"""

import logging
import re
import secrets
import string

from linkshortener.constants import Shortcode


logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
BASE = len(ALPHABET)  # 26 uppercase + 26 lowercase + 10 digits

SHORTCODE_PATTERN = re.compile(rf'[A-Za-z0-9]{{{Shortcode.MIN_LENGTH},{Shortcode.MAX_LENGTH}}}')


def generate_shortcode(length: int = Shortcode.DEFAULT_LENGTH) -> str:
    """Generate a random Base62 shortcode.

    Every character is drawn independently and uniformly from the 62
    character alphabet using the `secrets` module.

    Args:
        length (int, optional):
            Length of the resulting shortcode. Defaults to 6.

    Returns:
        str: A random alphanumeric shortcode.

    Example:
        >>> generate_shortcode(8)
        'x9QbT2mA'

    NOTE:
        - Uniqueness is not guaranteed. Callers must insert the shortcode
          atomically and retry on collision.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    shortcode = ''.join(secrets.choice(ALPHABET) for _ in range(length))
    logger.debug('Generated shortcode.', extra={'shortcode': shortcode, 'length': length})
    return shortcode


def validate_shortcode(shortcode: object) -> bool:
    """Check that a shortcode is 3-20 alphanumeric characters.

    Args:
        shortcode (object):
            Client-supplied shortcode. Non-string values are rejected.

    Returns:
        bool: True if the shortcode matches `^[A-Za-z0-9]{3,20}$`.
    """
    is_valid = isinstance(shortcode, str) and SHORTCODE_PATTERN.fullmatch(shortcode) is not None
    if not is_valid:
        logger.warning('Invalid shortcode format.', extra={'shortcode': repr(shortcode)})
    return is_valid
