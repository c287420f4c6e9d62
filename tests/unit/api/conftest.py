import pytest
from fastapi.testclient import TestClient

from linkshortener.api import create_app
from linkshortener.utils import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(allowed_origins=('http://localhost:3000',), sweep_interval_seconds=3600)


@pytest.fixture
def app(settings, dao):
    return create_app(settings, dao=dao)


@pytest.fixture
def client(app):
    with TestClient(app, base_url='http://localhost:3001') as client:
        yield client
