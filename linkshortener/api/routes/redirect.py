from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from linkshortener.api.dependencies import get_service
from linkshortener.api.helpers import client_ip
from linkshortener.api.schemas import ErrorResponse
from linkshortener.services import ShortURLService


router = APIRouter()


@router.get(
    '/{shortcode}',
    status_code=302,
    response_class=RedirectResponse,
    responses={404: {'model': ErrorResponse}},
)
def redirect(shortcode: str, request: Request, service: ShortURLService = Depends(get_service)) -> RedirectResponse:
    """Redirect to the original URL and record the click

    HTTP responses:
        302: Location header set to the original URL
        404: shortcode unknown or expired
    """
    target_url = service.redirect(
        shortcode,
        ip=client_ip(request),
        referrer=request.headers.get('referer') or request.headers.get('referrer'),
        user_agent=request.headers.get('user-agent'),
    )
    return RedirectResponse(url=target_url, status_code=302)
