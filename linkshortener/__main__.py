"""Run the URL shortener HTTP server.

Usage:
    python -m linkshortener
"""

import logging

import uvicorn

from linkshortener.api import create_app
from linkshortener.utils import initialize_logging, load_settings


logger = logging.getLogger('linkshortener')


def main() -> None:
    settings = load_settings()
    initialize_logging(settings.log_level)
    logger.debug('Loaded settings.', extra={'settings': repr(settings)})

    # log_config=None keeps the JSON logging configured above
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == '__main__':
    main()
