"""Tests for the search.ch HTTP client."""

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from chsearch_trips.adapters.api_rate_limiter import ApiRateLimiter
from chsearch_trips.adapters.search_ch.http_client import SearchChHttpClient
from chsearch_trips.domain.errors import QuotaExceededError, TransportError


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Each test starts with fresh limiters."""
    ApiRateLimiter._instances.clear()
    ApiRateLimiter._registry_lock = None


def _session_returning(status: int, body: str) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.headers = {"Server": "test"}
    response.text = AsyncMock(return_value=body)
    session = MagicMock()
    session.get.return_value.__aenter__.return_value = response
    return session


@pytest.mark.asyncio
async def test_get_text_returns_body() -> None:
    """Given a 200 response, when fetching, then the body is returned."""
    session = _session_returning(200, '{"count": 0}')
    client = SearchChHttpClient(session, route_min_delay_seconds=0)

    body = await client.get_text("route.json", {"from": "Bern", "to": "Thun"})

    assert body == '{"count": 0}'
    args, kwargs = session.get.call_args
    assert args[0] == "https://timetable.search.ch/api/route.json"
    assert kwargs["params"] == {"from": "Bern", "to": "Thun"}
    assert kwargs["headers"]["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_base_url_trailing_slash_is_ignored() -> None:
    session = _session_returning(200, "[]")
    client = SearchChHttpClient(session, base_url="http://localhost:8080/api/")

    await client.get_text("completion.json", {"term": "x"})

    assert session.get.call_args[0][0] == "http://localhost:8080/api/completion.json"


@pytest.mark.asyncio
async def test_non_200_raises_transport_error() -> None:
    """Given a server error, when fetching, then TransportError carries the status."""
    client = SearchChHttpClient(_session_returning(503, "busy"), route_min_delay_seconds=0)

    with pytest.raises(TransportError) as exc_info:
        await client.get_text("route.json", {})

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_client_error_is_wrapped() -> None:
    """Given a connection failure, when fetching, then it surfaces as TransportError."""
    session = MagicMock()
    session.get.side_effect = aiohttp.ClientConnectionError("connection refused")
    client = SearchChHttpClient(session, route_min_delay_seconds=0)

    with pytest.raises(TransportError, match="connection refused"):
        await client.get_text("route.json", {})


@pytest.mark.asyncio
async def test_timeout_is_wrapped() -> None:
    session = MagicMock()
    session.get.side_effect = TimeoutError()
    client = SearchChHttpClient(session, route_min_delay_seconds=0)

    with pytest.raises(TransportError, match="Timeout"):
        await client.get_text("route.json", {})


@pytest.mark.asyncio
async def test_route_quota_is_enforced() -> None:
    """Given a spent route quota, when fetching, then no request is sent."""
    session = _session_returning(200, "{}")
    client = SearchChHttpClient(session, route_min_delay_seconds=0, route_daily_quota=1)

    await client.get_text("route.json", {})
    with pytest.raises(QuotaExceededError):
        await client.get_text("route.json", {})

    assert session.get.call_count == 1
