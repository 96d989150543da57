"""Unit tests for HTTP utilities.

This module tests the transport builder, response wrapper and
rate-limit header parsing.
"""

import asyncio

import httpx
import pytest

from mailerlite.config.settings import MailerLiteSettings
from mailerlite.utils.http import (
    RateLimit,
    Response,
    build_async_client,
    create_limits,
    create_timeout,
    parse_rate_limit,
)


def test_create_timeout_defaults():
    """Only the read phase follows the argument; the rest are fixed."""
    timeout = create_timeout()
    assert timeout.connect == 5.0
    assert timeout.read == 30.0
    assert timeout.write == 10.0
    assert timeout.pool == 5.0
    assert create_timeout(12.0).read == 12.0
    assert create_timeout(12.0).connect == 5.0


def test_create_limits_keeps_half_the_pool_alive():
    limits = create_limits()
    assert limits.max_connections == 20
    assert limits.max_keepalive_connections == 10
    assert limits.keepalive_expiry == 30.0
    assert create_limits(8).max_keepalive_connections == 4


def test_build_async_client_uses_settings_timeout():
    client = build_async_client(MailerLiteSettings(timeout=12.5))
    try:
        assert client.timeout.read == 12.5
        assert client.timeout.connect == 5.0
        assert client.follow_redirects is True
    finally:
        asyncio.run(client.aclose())


@pytest.mark.parametrize(
    "headers, expected",
    [
        ({"X-RateLimit-Limit": "60", "X-RateLimit-Remaining": "0"}, RateLimit(60, 0)),
        ({"X-RateLimit-Limit": "60"}, None),
        ({"X-RateLimit-Limit": "many", "X-RateLimit-Remaining": "1"}, None),
        ({}, None),
    ],
)
def test_parse_rate_limit(headers, expected):
    assert parse_rate_limit(httpx.Headers(headers)) == expected


def test_response_status_helpers():
    request = httpx.Request("GET", "https://api.mailerlite.com/api/v2/stats")
    ok = Response(httpx.Response(204, request=request))
    missing = Response(httpx.Response(404, request=request))
    broken = Response(httpx.Response(503, request=request))

    assert ok.is_success() and not ok.is_client_error()
    assert missing.is_client_error() and not missing.is_success()
    assert broken.is_server_error()
    assert ok.request is request


def test_response_json_is_cached():
    response = Response(httpx.Response(200, json={"subscribed": 1}))
    first = response.json()
    assert first == {"subscribed": 1}
    assert response.json() is first
