from typing import Any

from pydantic import BaseModel, ConfigDict


class CreateShortURLRequest(BaseModel):
    """Body of POST /shorturls.

    Fields are deliberately untyped: type and range checks happen in the
    service layer so that every malformed value yields a uniform 400 body.
    """

    model_config = ConfigDict(extra='ignore')

    url: Any = None
    validity: Any = None
    shortcode: Any = None


class ShortLinkResponse(BaseModel):
    shortLink: str
    expiry: str


class ClickResponse(BaseModel):
    id: str
    shortcode: str
    timestamp: str
    referrer: str
    userAgent: str
    ip: str
    country: str
    city: str


class StatisticsResponse(BaseModel):
    shortcode: str
    originalUrl: str
    createdAt: str
    expiresAt: str
    totalClicks: int
    clicks: list[ClickResponse]


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    uptime: float


class ErrorResponse(BaseModel):
    error: str
    message: str
    statusCode: int
