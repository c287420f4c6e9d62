"""Unit tests for the HTTP application in api/app.py.

Test coverage includes:

1. POST /shorturls
   - Ensures short URLs are created with 201 and malformed bodies get 400.
   - Ensures taken shortcodes get 409.

2. GET /{shortcode}
   - Ensures redirects are 302 to the original URL and record exactly one click.
   - Ensures unknown and expired shortcodes get 404.

3. GET /shorturls/{shortcode}
   - Ensures statistics include the click log.

4. GET /health, unmatched routes, unexpected errors and CORS.
"""

import pytest
from fastapi.testclient import TestClient

from linkshortener.api import create_app
from linkshortener.utils import Settings


def _create(client, **body):
    return client.post('/shorturls', json={'url': 'https://example.com/test', **body})


# -------------------------------
# 1. POST /shorturls
# -------------------------------


def test_create_short_url(client):
    response = _create(client, validity=5, shortcode='abc123')

    assert response.status_code == 201
    assert response.json() == {
        'shortLink': 'http://localhost:3001/abc123',
        'expiry': '2025-10-15T12:05:00.000Z',
    }


def test_create_short_url_with_generated_shortcode(client):
    response = _create(client)

    assert response.status_code == 201
    assert response.json()['shortLink'].startswith('http://localhost:3001/')
    assert response.json()['expiry'] == '2025-10-15T12:30:00.000Z'


def test_create_short_url_uses_public_base_url(dao):
    app = create_app(Settings(public_base_url='https://sho.rt'), dao=dao)
    with TestClient(app) as client:
        response = _create(client, shortcode='abc123')
    assert response.json()['shortLink'] == 'https://sho.rt/abc123'


def test_create_short_url_with_whole_float_validity(client):
    response = _create(client, validity=30.0, shortcode='abc123')

    assert response.status_code == 201
    assert response.json()['expiry'] == '2025-10-15T12:30:00.000Z'


@pytest.mark.parametrize(
    'body, message',
    [
        ({}, 'URL is required'),
        ({'url': 'not-a-url'}, 'Invalid URL format'),
        ({'url': 'https://example.com', 'validity': 'ten'}, 'Validity must be a positive integer (max 525600 minutes)'),
        ({'url': 'https://example.com', 'validity': None}, 'Validity must be a positive integer (max 525600 minutes)'),
        ({'url': 'https://<script>/'}, 'Invalid URL format'),
        ({'url': 'https://example.com', 'shortcode': 'a!'}, 'Shortcode must be 3-20 alphanumeric characters'),
    ],
)
def test_create_short_url_with_invalid_body(client, body, message):
    response = client.post('/shorturls', json=body)

    assert response.status_code == 400
    assert response.json() == {'error': 'ValidationError', 'message': message, 'statusCode': 400}


def test_create_short_url_without_body(client):
    response = client.post('/shorturls')

    assert response.status_code == 400
    assert response.json()['message'] == 'URL is required'


def test_create_short_url_with_malformed_json(client):
    response = client.post('/shorturls', content=b'{"url": ', headers={'Content-Type': 'application/json'})

    assert response.status_code == 400
    assert response.json()['message'] == 'Invalid request body'


def test_create_short_url_with_taken_shortcode(client):
    _create(client, shortcode='abc123')
    response = _create(client, shortcode='abc123')

    assert response.status_code == 409
    assert response.json() == {'error': 'ConflictError', 'message': 'Shortcode already exists', 'statusCode': 409}


# -------------------------------
# 2. GET /{shortcode}
# -------------------------------


def test_redirect(client, dao):
    _create(client, shortcode='abc123')

    response = client.get(
        '/abc123',
        headers={'Referer': 'https://news.example.org/', 'User-Agent': 'pytest-agent'},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers['location'] == 'https://example.com/test'
    [click] = dao.clicks('abc123')
    assert click.referrer == 'https://news.example.org/'
    assert click.user_agent == 'pytest-agent'


def test_redirect_with_unknown_shortcode(client):
    response = client.get('/nope42', follow_redirects=False)

    assert response.status_code == 404
    assert response.json() == {'error': 'NotFoundError', 'message': 'Short URL not found or expired', 'statusCode': 404}


def test_redirect_with_expired_shortcode(client, clock):
    _create(client, validity=1, shortcode='abc123')
    clock.advance(seconds=61)

    assert client.get('/abc123', follow_redirects=False).status_code == 404
    assert client.get('/shorturls/abc123').status_code == 404


# -------------------------------
# 3. GET /shorturls/{shortcode}
# -------------------------------


def test_statistics(client):
    _create(client, shortcode='abc123')
    client.get('/abc123', headers={'User-Agent': 'pytest-agent'}, follow_redirects=False)

    response = client.get('/shorturls/abc123')

    assert response.status_code == 200
    body = response.json()
    assert body['shortcode'] == 'abc123'
    assert body['originalUrl'] == 'https://example.com/test'
    assert body['createdAt'] == '2025-10-15T12:00:00.000Z'
    assert body['expiresAt'] == '2025-10-15T12:30:00.000Z'
    assert body['totalClicks'] == 1
    [click] = body['clicks']
    assert click['userAgent'] == 'pytest-agent'
    assert click['referrer'] == 'Direct'
    assert set(click) == {'id', 'shortcode', 'timestamp', 'referrer', 'userAgent', 'ip', 'country', 'city'}


def test_statistics_do_not_record_clicks(client, dao):
    _create(client, shortcode='abc123')
    client.get('/shorturls/abc123')
    assert dao.clicks('abc123') == []


def test_statistics_with_unknown_shortcode(client):
    response = client.get('/shorturls/nope42')

    assert response.status_code == 404
    assert response.json()['message'] == 'Short URL not found or expired'


# -------------------------------
# 4. Health, routing, errors and CORS
# -------------------------------


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    body = response.json()
    assert body['status'] == 'OK'
    assert body['timestamp'].endswith('Z')
    assert body['uptime'] >= 0


@pytest.mark.parametrize('method, path', [('GET', '/'), ('GET', '/a/b'), ('DELETE', '/abc123'), ('PUT', '/shorturls')])
def test_unmatched_route(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {'error': 'NotFoundError', 'message': 'Route not found', 'statusCode': 404}


def test_unexpected_error(app, monkeypatch):
    def _fail(shortcode):
        raise RuntimeError('boom')

    monkeypatch.setattr(app.state.service, 'statistics', _fail)
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get('/shorturls/abc123')

    assert response.status_code == 500
    assert response.json() == {
        'error': 'InternalServerError',
        'message': 'An unexpected error occurred',
        'statusCode': 500,
    }


def test_cors_allowed_origin(client):
    response = client.get('/health', headers={'Origin': 'http://localhost:3000'})

    assert response.headers['access-control-allow-origin'] == 'http://localhost:3000'
    assert response.headers['access-control-allow-credentials'] == 'true'


def test_cors_unknown_origin(client):
    response = client.get('/health', headers={'Origin': 'https://evil.example.com'})
    assert 'access-control-allow-origin' not in response.headers


def test_lifespan_runs_sweeper(app):
    with TestClient(app):
        assert app.state.sweeper.running
    assert not app.state.sweeper.running
