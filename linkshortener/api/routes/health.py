import time

from fastapi import APIRouter, Request

from linkshortener.api.schemas import HealthResponse
from linkshortener.utils import utcnow, to_iso8601


router = APIRouter()


@router.get('/health', response_model=HealthResponse)
def health(request: Request) -> dict:
    return {
        'status': 'OK',
        'timestamp': to_iso8601(utcnow()),
        'uptime': round(time.monotonic() - request.app.state.started_at, 3),
    }
