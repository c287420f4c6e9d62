from fastapi import APIRouter, Depends, Request, status

from linkshortener.api.dependencies import get_service
from linkshortener.api.helpers import request_base_url
from linkshortener.api.schemas import CreateShortURLRequest, ShortLinkResponse, StatisticsResponse, ErrorResponse
from linkshortener.services import ShortURLService


router = APIRouter()


@router.post(
    '',
    status_code=status.HTTP_201_CREATED,
    response_model=ShortLinkResponse,
    responses={400: {'model': ErrorResponse}, 409: {'model': ErrorResponse}},
)
def create_short_url(
    request: Request,
    payload: CreateShortURLRequest | None = None,
    service: ShortURLService = Depends(get_service),
) -> dict:
    """Create a short URL

    HTTP responses:
        201: {shortLink, expiry}
        400: missing/invalid url, invalid validity, malformed shortcode
        409: shortcode already exists
    """
    payload = payload or CreateShortURLRequest()
    # An explicit "validity": null is forwarded and rejected
    options = {'validity': payload.validity} if 'validity' in payload.model_fields_set else {}
    return service.create_short_url(
        payload.url,
        shortcode=payload.shortcode,
        base_url=request_base_url(request),
        **options,
    )


@router.get(
    '/{shortcode}',
    response_model=StatisticsResponse,
    responses={404: {'model': ErrorResponse}},
)
def get_statistics(shortcode: str, service: ShortURLService = Depends(get_service)) -> dict:
    """Return statistics and the click log of an unexpired short URL."""
    return service.statistics(shortcode)
