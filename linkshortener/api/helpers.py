"""Helper utilities for HTTP request handling.

Functions:
    client_ip(request: Request) -> str
        Resolve the client IP address of a request
    request_base_url(request: Request) -> str
        Public base URL of the current request
    error_response(error: APIError) -> JSONResponse
        Uniform JSON error response

Example:
    >>> client_ip(request)  # direct connection from 203.0.113.7
    '203.0.113.7'
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from linkshortener.constants import ClickDefaults
from linkshortener.exceptions import APIError


def client_ip(request: Request) -> str:
    """Resolve the client IP address of a request

    Precedence: direct connection address, then the first `X-Forwarded-For`
    entry, then `X-Real-IP`, then the loopback address.

    Args:
        request (Request): incoming request

    Returns:
        str: client IP address
    """
    if request.client and request.client.host:
        return request.client.host

    forwarded_for = request.headers.get('x-forwarded-for', '').split(',')[0].strip()
    if forwarded_for:
        return forwarded_for

    real_ip = request.headers.get('x-real-ip', '').strip()
    if real_ip:
        return real_ip

    return ClickDefaults.IP


def request_base_url(request: Request) -> str:
    return str(request.base_url).rstrip('/')


def error_response(error: APIError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())
