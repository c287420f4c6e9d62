"""Short URL use cases: creation, redirection and statistics.

The service is the single place where client input is validated and where
store-level DAO errors are translated to API errors.

Classes:
    ShortURLService:
        Orchestrates validators, the shortcode generator and a ShortURLBaseDAO.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO
    >>> service = ShortURLService(ShortURLMemoryDAO())
    >>> service.create_short_url('https://example.com', validity=5, shortcode='abc123',
    ...                          base_url='http://localhost:3001')
    {'shortLink': 'http://localhost:3001/abc123', 'expiry': '2025-10-15T12:05:00.000Z'}
    >>> service.redirect('abc123', ip='203.0.113.7', referrer=None, user_agent=None)
    'https://example.com'
"""

import logging
from datetime import timedelta
from collections.abc import Callable

from linkshortener.constants import Validity, Shortcode, ClickDefaults
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from linkshortener.exceptions import ValidationError, ConflictError, NotFoundError, InternalServerError
from linkshortener.models import ShortURLModel, ClickEventModel
from linkshortener.types import JSONBody
from linkshortener.utils import (
    generate_shortcode,
    validate_shortcode,
    is_valid_url,
    is_valid_validity,
    get_short_url,
    to_iso8601,
)


logger = logging.getLogger(__name__)

URL_REQUIRED = 'URL is required'
INVALID_URL = 'Invalid URL format'
INVALID_VALIDITY = f'Validity must be a positive integer (max {Validity.MAX} minutes)'
INVALID_SHORTCODE = f'Shortcode must be {Shortcode.MIN_LENGTH}-{Shortcode.MAX_LENGTH} alphanumeric characters'
SHORTCODE_TAKEN = 'Shortcode already exists'
SHORT_URL_NOT_FOUND = 'Short URL not found or expired'
SHORTCODE_GENERATION_FAILED = 'Failed to generate a unique shortcode'

# Marks a validity omitted by the client; an explicit None is invalid
DEFAULT_VALIDITY = object()


class ShortURLService:
    """Application service for short URLs

    Attributes:
        dao (ShortURLBaseDAO):
            Store holding short URLs and their click logs.
        default_validity_minutes (int):
            Validity applied when a request omits it.
        public_base_url (str | None):
            Base URL for short links. Falls back to the per-request base URL.
    """

    def __init__(
        self,
        dao: ShortURLBaseDAO,
        default_validity_minutes: int = Validity.DEFAULT,
        public_base_url: str | None = None,
    ):
        self.dao = dao
        self.default_validity_minutes = default_validity_minutes
        self.public_base_url = public_base_url

    def create_short_url(
        self,
        url: object,
        validity: object = DEFAULT_VALIDITY,
        shortcode: object = None,
        *,
        base_url: str,
    ) -> JSONBody:
        """Create a short URL

        Procedure:
        - Step 1: Validate URL (required, absolute http/https)
        - Step 2: Validate validity period (minutes)
        - Step 3: Validate the custom shortcode, or generate one
        - Step 4: Store the short URL (atomic insert-if-absent)
        - Step 5: Return the short link and its expiry

        Args:
            url (object):
                Original URL, as sent by the client.
            validity (object):
                Validity period in whole minutes. Omit it to apply the default.
            shortcode (object):
                Custom shortcode. Empty or None generates a random one.
            base_url (str):
                Base URL of the current request.

        Returns:
            dict: {"shortLink": <absolute short URL>, "expiry": <ISO-8601 expiry>}

        Raises:
            ValidationError:
                If the URL, validity or custom shortcode is malformed.
            ConflictError:
                If the custom shortcode is already taken.
            InternalServerError:
                If no free shortcode could be generated.
        """
        # 1- Validate URL
        if not url:
            logger.info('Create short URL failed - missing URL.')
            raise ValidationError(URL_REQUIRED)
        if not is_valid_url(url):
            logger.info('Create short URL failed - invalid URL format.', extra={'url': repr(url)})
            raise ValidationError(INVALID_URL)

        # 2- Validate validity period
        if validity is DEFAULT_VALIDITY:
            minutes = self.default_validity_minutes
        elif is_valid_validity(validity):
            minutes = int(validity)
        else:
            logger.info('Create short URL failed - invalid validity.', extra={'validity': repr(validity)})
            raise ValidationError(INVALID_VALIDITY)

        created_at = self.dao.now()

        def build(code: str) -> ShortURLModel:
            return ShortURLModel(
                target=url,
                shortcode=code,
                created_at=created_at,
                expires_at=created_at + timedelta(minutes=minutes),
            )

        # 3/4- Custom shortcode, or generate one
        if shortcode:
            short_url = self._insert_custom(shortcode, build)
        else:
            short_url = self._insert_generated(build)

        # 5- Respond with short link and expiry
        short_link = get_short_url(short_url.shortcode, self.public_base_url or base_url)
        logger.info(
            'Short URL created successfully.',
            extra={'shortcode': short_url.shortcode, 'original_url': url, 'validity': minutes},
        )
        return {
            'shortLink': short_link,
            'expiry': to_iso8601(short_url.expires_at),
        }

    def _insert_custom(self, shortcode: object, build: Callable[[str], ShortURLModel]) -> ShortURLModel:
        if not validate_shortcode(shortcode):
            logger.info('Create short URL failed - invalid shortcode format.', extra={'shortcode': repr(shortcode)})
            raise ValidationError(INVALID_SHORTCODE)

        if not self.dao.is_available(shortcode):
            logger.info('Create short URL failed - shortcode conflict.', extra={'shortcode': shortcode})
            raise ConflictError(SHORTCODE_TAKEN)

        short_url = build(shortcode)
        try:
            self.dao.insert(short_url)
        except ShortURLAlreadyExistsError as e:
            # Taken by a concurrent request after the availability check
            logger.info('Create short URL failed - shortcode conflict.', extra={'shortcode': shortcode})
            raise ConflictError(SHORTCODE_TAKEN) from e
        return short_url

    def _insert_generated(self, build: Callable[[str], ShortURLModel]) -> ShortURLModel:
        """Insert a short URL under a freshly generated shortcode

        Tries `Shortcode.MAX_ATTEMPTS` random codes per length, starting at the
        default length and growing by `Shortcode.LENGTH_STEP` characters up to
        the maximum shortcode length.

        Raises:
            InternalServerError:
                If every attempt collided with an existing shortcode.
        """
        length = Shortcode.DEFAULT_LENGTH
        while length <= Shortcode.MAX_LENGTH:
            for attempt in range(1, Shortcode.MAX_ATTEMPTS + 1):
                short_url = build(generate_shortcode(length))
                try:
                    self.dao.insert(short_url)
                except ShortURLAlreadyExistsError:
                    logger.warning(
                        'Generated shortcode collision. Retrying.',
                        extra={'shortcode': short_url.shortcode, 'attempt': attempt, 'length': length},
                    )
                    continue
                return short_url
            length += Shortcode.LENGTH_STEP

        logger.error('Exhausted shortcode generation attempts.')
        raise InternalServerError(SHORTCODE_GENERATION_FAILED)

    def resolve(self, shortcode: str) -> ShortURLModel:
        """Return the unexpired short URL for a shortcode

        Raises:
            NotFoundError: If the shortcode is unknown or expired.
        """
        try:
            return self.dao.get(shortcode)
        except ShortURLNotFoundError as e:
            raise NotFoundError(SHORT_URL_NOT_FOUND) from e

    def redirect(self, shortcode: str, *, ip: str, referrer: str | None, user_agent: str | None) -> str:
        """Resolve a shortcode, record the click and return the target URL

        Args:
            shortcode (str):
                Requested shortcode.
            ip (str):
                Resolved client IP address.
            referrer (str | None):
                Referer header value. "Direct" when absent.
            user_agent (str | None):
                User-Agent header value. "Unknown" when absent.

        Returns:
            str: original URL to redirect to.

        Raises:
            NotFoundError: If the shortcode is unknown or expired.
        """
        try:
            short_url = self.resolve(shortcode)
        except NotFoundError:
            logger.info('Redirect failed - shortcode not found.', extra={'shortcode': shortcode})
            raise

        click = ClickEventModel(
            shortcode=shortcode,
            timestamp=self.dao.now(),
            referrer=referrer or ClickDefaults.REFERRER,
            user_agent=user_agent or ClickDefaults.USER_AGENT,
            ip=ip,
        )
        if not self.dao.add_click(shortcode, click):
            logger.warning('Redirecting without a recorded click.', extra={'shortcode': shortcode})

        logger.info(
            'Redirect successful.',
            extra={'shortcode': shortcode, 'original_url': short_url.target, 'click_id': click.id},
        )
        return short_url.target

    def statistics(self, shortcode: str) -> JSONBody:
        """Return statistics and the full click log of a short URL

        Raises:
            NotFoundError: If the shortcode is unknown or expired.
        """
        try:
            short_url = self.resolve(shortcode)
        except NotFoundError:
            logger.info('Statistics request failed - shortcode not found.', extra={'shortcode': shortcode})
            raise

        clicks = self.dao.clicks(shortcode)
        logger.info('Statistics retrieved successfully.', extra={'shortcode': shortcode, 'total_clicks': len(clicks)})
        return {
            'shortcode': short_url.shortcode,
            'originalUrl': short_url.target,
            'createdAt': to_iso8601(short_url.created_at),
            'expiresAt': to_iso8601(short_url.expires_at),
            'totalClicks': len(clicks),
            'clicks': [click.to_dict() for click in clicks],
        }
