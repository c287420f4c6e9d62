"""HTTP middleware logging every request and its outcome."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from linkshortener.api.helpers import client_ip


logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    start = time.perf_counter()
    details = {
        'method': request.method,
        'path': request.url.path,
        'ip': client_ip(request),
        'user_agent': request.headers.get('user-agent'),
    }
    logger.info('Request received.', extra=details)

    try:
        response = await call_next(request)
    except Exception:
        logger.exception('Request error occurred.', extra=details)
        raise

    logger.info(
        'Request completed.',
        extra={
            **details,
            'status_code': response.status_code,
            'response_time_ms': round((time.perf_counter() - start) * 1000, 3),
        },
    )
    return response
