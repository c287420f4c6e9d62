"""Utility functions for application configuration management.

Settings are read once at process start. Values come from, in increasing
order of precedence:

    1. built-in defaults;
    2. an optional YAML file whose path is given by `LINKSHORTENER_CONFIG`;
    3. environment variables.

The YAML file uses the lower-case setting names as keys:

    port: 3001
    allowed_origins:
      - http://localhost:3000
    frontend_url: http://localhost:3000
    default_validity_minutes: 30
    sweep_interval_seconds: 300

Functions:
    load_yaml(path: Path) -> dict
        Load a YAML settings document, {} for empty files.

    load_settings(environ: Mapping[str, str] | None = None) -> Settings
        Build validated Settings from defaults, YAML file and environment.

Example:
    >>> from linkshortener.utils.config import load_settings
    >>> settings = load_settings({'PORT': '8080'})
    >>> settings.port
    8080
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from collections.abc import Mapping

import yaml

from linkshortener.constants import ENV, Validity, Sweep
from linkshortener.exceptions import BadConfigurationError, MissingConfigurationFileError
from linkshortener.types import SettingsDocument


logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ORIGINS = ('http://localhost:3000', 'http://127.0.0.1:3000')


@dataclass(frozen=True)
class Settings:
    """Process-wide application settings.

    Attributes:
        host (str): interface the HTTP server binds to.
        port (int): TCP port the HTTP server listens on.
        allowed_origins (tuple[str, ...]): origins allowed to make cross-origin requests.
        frontend_url (str): base URL of the browser frontend.
        public_base_url (str | None): base URL used to build short links. The
            request's own scheme and host are used when unset.
        default_validity_minutes (int): validity applied when a request omits it.
        sweep_interval_seconds (int): period of the expired short URL sweep.
        log_level (str): root logging level.
        app_env (str): application environment name.
    """

    host: str = '0.0.0.0'  # noqa: S104
    port: int = 3001
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)
    frontend_url: str = 'http://localhost:3000'
    public_base_url: str | None = None
    default_validity_minutes: int = Validity.DEFAULT
    sweep_interval_seconds: int = Sweep.INTERVAL_SECONDS
    log_level: str = 'INFO'
    app_env: str = 'local'


def load_yaml(path: Path) -> SettingsDocument:
    """Load a YAML settings file into a Python dictionary.

    Args:
        path (Path):
            Path to a YAML file.

    Returns:
        dict[str, Any]:
            Parsed YAML document. Returns {} for empty files.

    Raises:
        MissingConfigurationFileError:
            If the file does not exist.
        BadConfigurationError:
            If the document is not a YAML mapping.
    """
    if not path.is_file():
        raise MissingConfigurationFileError(f'Settings file not found: {path}')
    with path.open('r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Settings file {path} is not valid YAML.') from e

    data = data or {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Settings file {path} must contain a mapping (given type: {type(data).__name__}).')
    return data


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise BadConfigurationError(f"Setting '{name}' must be an integer (given value: {value!r}).")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f"Setting '{name}' must be an integer (given value: {value!r}).") from e


def _to_origins(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, (list, tuple)):
        raise BadConfigurationError(f"Setting 'allowed_origins' must be a list or a comma-separated string (given value: {value!r}).")
    return tuple(str(origin).strip() for origin in value if str(origin).strip())


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build validated application settings

    Args:
        environ (Mapping[str, str] | None):
            Environment to read. Defaults to `os.environ`.

    Returns:
        Settings:
            Frozen settings instance.

    Raises:
        MissingConfigurationFileError:
            If `LINKSHORTENER_CONFIG` points to a missing file.
        BadConfigurationError:
            If any value is malformed or out of range.
    """
    environ = os.environ if environ is None else environ

    raw: SettingsDocument = {}
    config_file = environ.get(ENV.App.CONFIG_FILE)
    if config_file:
        logger.debug('Loading settings file %s.', config_file)
        raw.update(load_yaml(Path(config_file)))

    # fmt: off
    env_overrides = {
        'host':                     environ.get(ENV.Server.HOST),
        'port':                     environ.get(ENV.Server.PORT),
        'allowed_origins':          environ.get(ENV.Server.ALLOWED_ORIGINS),
        'frontend_url':             environ.get(ENV.Server.FRONTEND_URL),
        'public_base_url':          environ.get(ENV.Server.PUBLIC_BASE_URL),
        'default_validity_minutes': environ.get(ENV.Links.DEFAULT_VALIDITY_MINUTES),
        'sweep_interval_seconds':   environ.get(ENV.Links.SWEEP_INTERVAL_SECONDS),
        'log_level':                environ.get(ENV.App.LOG_LEVEL),
        'app_env':                  environ.get(ENV.App.APP_ENV),
    }
    # fmt: on
    raw.update({key: value for key, value in env_overrides.items() if value})

    unknown = set(raw) - set(Settings.__dataclass_fields__)
    if unknown:
        raise BadConfigurationError(f'Unknown settings: {", ".join(sorted(unknown))}.')

    defaults = Settings()
    port = _to_int('port', raw.get('port', defaults.port))
    if not 0 < port < 65536:
        raise BadConfigurationError(f"Setting 'port' must be within 1-65535 (given value: {port}).")

    validity = _to_int('default_validity_minutes', raw.get('default_validity_minutes', defaults.default_validity_minutes))
    if not 0 < validity <= Validity.MAX:
        raise BadConfigurationError(f"Setting 'default_validity_minutes' must be within 1-{Validity.MAX} (given value: {validity}).")

    interval = _to_int('sweep_interval_seconds', raw.get('sweep_interval_seconds', defaults.sweep_interval_seconds))
    if interval <= 0:
        raise BadConfigurationError(f"Setting 'sweep_interval_seconds' must be positive (given value: {interval}).")

    public_base_url = raw.get('public_base_url') or None

    return Settings(
        host=str(raw.get('host', defaults.host)),
        port=port,
        allowed_origins=_to_origins(raw.get('allowed_origins', defaults.allowed_origins)),
        frontend_url=str(raw.get('frontend_url', defaults.frontend_url)),
        public_base_url=str(public_base_url).rstrip('/') if public_base_url else None,
        default_validity_minutes=validity,
        sweep_interval_seconds=interval,
        log_level=str(raw.get('log_level', defaults.log_level)).upper(),
        app_env=str(raw.get('app_env', defaults.app_env)).lower(),
    )
