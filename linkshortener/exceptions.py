from linkshortener.constants import (
    VALIDATION_ERROR,
    CONFLICT_ERROR,
    NOT_FOUND_ERROR,
    INTERNAL_SERVER_ERROR,
)


class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class APIError(LinkShortenerError):
    """Base exception for errors reported to HTTP clients.

    Every subclass maps to one HTTP status code and one error kind. The
    response body is always `{"error": <kind>, "message": <str>, "statusCode": <int>}`.
    """

    error_code = 'api:api_error'
    error = INTERNAL_SERVER_ERROR
    status_code = 500
    default_message = 'An unexpected error occurred'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            'error': self.error,
            'message': self.message,
            'statusCode': self.status_code,
        }


class ValidationError(APIError):
    """Raised when client input is malformed."""

    error_code = 'api:validation_error'
    error = VALIDATION_ERROR
    status_code = 400
    default_message = 'Invalid request'


class ConflictError(APIError):
    """Raised when a requested shortcode is already taken."""

    error_code = 'api:conflict_error'
    error = CONFLICT_ERROR
    status_code = 409
    default_message = 'Shortcode already exists'


class NotFoundError(APIError):
    """Raised when a shortcode is unknown or expired."""

    error_code = 'api:not_found_error'
    error = NOT_FOUND_ERROR
    status_code = 404
    default_message = 'Short URL not found or expired'


class InternalServerError(APIError):
    """Raised when the server fails in an unexpected way."""

    error_code = 'api:internal_server_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class MissingConfigurationFileError(ConfigurationError):
    """Raised when the configured YAML settings file does not exist."""

    error_code = 'config:missing_configuration_file_error'
