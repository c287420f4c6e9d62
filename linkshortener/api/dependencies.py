from fastapi import Request

from linkshortener.services import ShortURLService


def get_service(request: Request) -> ShortURLService:
    """Return the ShortURLService created with the application."""
    return request.app.state.service
