from enum import StrEnum


class Validity:
    """Short URL validity bounds in minutes."""

    DEFAULT = 30
    MAX = 525_600  # 60 * 24 * 365


class Shortcode:
    """Shortcode generation and format parameters."""

    ALPHABET_SIZE = 62  # 26 uppercase + 26 lowercase + 10 digits
    DEFAULT_LENGTH = 6
    MIN_LENGTH = 3
    MAX_LENGTH = 20
    # Generation attempts per length before falling back to a longer code
    MAX_ATTEMPTS = 5
    LENGTH_STEP = 2


class Sweep:
    """Expiry sweeper defaults."""

    INTERVAL_SECONDS = 300  # 5 minutes


class ClickDefaults:
    """Fallback values for click metadata missing from the request."""

    REFERRER = 'Direct'
    USER_AGENT = 'Unknown'
    IP = '127.0.0.1'
    # No geo lookup is performed
    COUNTRY = 'Local'
    CITY = 'Local'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_FILE = 'LINKSHORTENER_CONFIG'

    class Server(StrEnum):
        HOST = 'HOST'
        PORT = 'PORT'
        ALLOWED_ORIGINS = 'ALLOWED_ORIGINS'
        FRONTEND_URL = 'FRONTEND_URL'
        PUBLIC_BASE_URL = 'PUBLIC_BASE_URL'

    class Links(StrEnum):
        DEFAULT_VALIDITY_MINUTES = 'DEFAULT_VALIDITY_MINUTES'
        SWEEP_INTERVAL_SECONDS = 'SWEEP_INTERVAL_SECONDS'


# Error kinds reported in the `error` field of API error bodies
VALIDATION_ERROR = 'ValidationError'
CONFLICT_ERROR = 'ConflictError'
NOT_FOUND_ERROR = 'NotFoundError'
INTERNAL_SERVER_ERROR = 'InternalServerError'
