from linkshortener.utils.config import Settings, load_settings, load_yaml
from linkshortener.utils.helpers import utcnow, to_iso8601, new_id, get_short_url
from linkshortener.utils.shortener import generate_shortcode, validate_shortcode
from linkshortener.utils.validators import is_valid_url, is_valid_validity
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'Settings',
    'load_settings',
    'load_yaml',
    'utcnow',
    'to_iso8601',
    'new_id',
    'get_short_url',
    'generate_shortcode',
    'validate_shortcode',
    'is_valid_url',
    'is_valid_validity',
    'initialize_logging',
]
