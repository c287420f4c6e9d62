from datetime import datetime, timedelta, UTC

import pytest

from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.models import ShortURLModel, ClickEventModel


class MutableClock:
    """Callable clock whose current time is moved explicitly by tests."""

    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(now) -> MutableClock:
    return MutableClock(now)


@pytest.fixture
def dao(clock) -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO(clock=clock)


@pytest.fixture
def make_short_url(now):
    """Build ShortURLModel instances valid for `minutes` from the test's `now`."""

    def _make(shortcode: str = 'abc123', target: str = 'https://example.com/test', minutes: int = 30) -> ShortURLModel:
        return ShortURLModel(
            target=target,
            shortcode=shortcode,
            created_at=now,
            expires_at=now + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def make_click(now):
    def _make(shortcode: str = 'abc123', **kwargs) -> ClickEventModel:
        return ClickEventModel(shortcode=shortcode, timestamp=kwargs.pop('timestamp', now), **kwargs)

    return _make
