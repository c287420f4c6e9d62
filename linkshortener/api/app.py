"""FastAPI application factory.

`create_app()` wires the explicitly constructed ShortURLService (and the
store it owns) into request handlers, registers the uniform error handlers
and ties the expiry sweeper to the application lifespan.

HTTP surface:
    POST /shorturls               create a short URL
    GET  /shorturls/{shortcode}   statistics of a short URL
    GET  /health                  liveness probe
    GET  /{shortcode}             redirect to the original URL

Example:
    >>> from linkshortener.api import create_app
    >>> from linkshortener.utils import load_settings
    >>> app = create_app(load_settings())
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from linkshortener.api.helpers import error_response
from linkshortener.api.middleware import log_requests
from linkshortener.api.routes import health, shorturls, redirect
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.exceptions import APIError, ValidationError, NotFoundError, InternalServerError
from linkshortener.services import ShortURLService, ExpirySweeper
from linkshortener.utils import Settings


logger = logging.getLogger(__name__)


async def handle_api_error(request: Request, exc: APIError):
    return error_response(exc)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    logger.info('Request body rejected.', extra={'path': request.url.path, 'errors': str(exc.errors())})
    return error_response(ValidationError('Invalid request body'))


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # Routing errors only (unknown path or method); handlers raise APIError
    logger.warning('Route not found.', extra={'method': request.method, 'path': request.url.path})
    return error_response(NotFoundError('Route not found'))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        'Unhandled error.',
        exc_info=exc,
        extra={'method': request.method, 'path': request.url.path},
    )
    return error_response(InternalServerError())


def create_app(settings: Settings | None = None, dao: ShortURLBaseDAO | None = None) -> FastAPI:
    """Build the URL shortener application

    Args:
        settings (Settings | None):
            Application settings. Defaults to `Settings()`.
        dao (ShortURLBaseDAO | None):
            Store for short URLs. Defaults to a new ShortURLMemoryDAO.

    Returns:
        FastAPI: configured application. `app.state.service` holds the
        ShortURLService, `app.state.sweeper` the ExpirySweeper.
    """
    settings = settings or Settings()
    dao = dao or ShortURLMemoryDAO()

    service = ShortURLService(
        dao,
        default_validity_minutes=settings.default_validity_minutes,
        public_base_url=settings.public_base_url,
    )
    sweeper = ExpirySweeper(dao, interval_seconds=settings.sweep_interval_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper.start()
        logger.info(
            'Server started successfully.',
            extra={
                'port': settings.port,
                'environment': settings.app_env,
                'frontend_url': settings.frontend_url,
            },
        )
        try:
            yield
        finally:
            sweeper.stop()

    app = FastAPI(title='URL Shortener', version='1.0.0', lifespan=lifespan)
    app.state.settings = settings
    app.state.service = service
    app.state.sweeper = sweeper
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type'],
    )
    app.middleware('http')(log_requests)

    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(health.router, tags=['health'])
    app.include_router(shorturls.router, prefix='/shorturls', tags=['shorturls'])
    # Must come last: catches every single-segment path
    app.include_router(redirect.router, tags=['redirect'])

    return app
