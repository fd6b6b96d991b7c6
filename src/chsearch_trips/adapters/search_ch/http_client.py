"""HTTP client for timetable.search.ch requests.

API Documentation: https://timetable.search.ch/api/help
"""

import logging
from typing import TYPE_CHECKING

import aiohttp

from chsearch_trips.adapters.api_rate_limiter import ApiRateLimiter
from chsearch_trips.adapters.api_request_logger import log_api_request, log_api_response
from chsearch_trips.adapters.search_ch.constants import (
    COMPLETION_DAILY_QUOTA,
    COMPLETION_ENDPOINT,
    DEFAULT_HEADERS,
    ROUTE_DAILY_QUOTA,
    ROUTE_ENDPOINT,
    SEARCH_CH_BASE_URL,
)
from chsearch_trips.domain.errors import TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

# Minimum delay between route requests (in seconds); 1000 per day is the quota
ROUTE_MIN_DELAY_SECONDS = 1.0


class SearchChHttpClient:
    """HTTP transport for the timetable.search.ch API.

    Failures surface as ``TransportError``; nothing is retried here.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = SEARCH_CH_BASE_URL,
        timeout_seconds: float = 10,
        route_min_delay_seconds: float = ROUTE_MIN_DELAY_SECONDS,
        route_daily_quota: int = ROUTE_DAILY_QUOTA,
        completion_daily_quota: int = COMPLETION_DAILY_QUOTA,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API base URL without trailing slash.
            timeout_seconds: Total timeout per request.
            route_min_delay_seconds: Minimum spacing of route queries.
            route_daily_quota: Route queries allowed per day.
            completion_daily_quota: Completion queries allowed per day.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._limits = {
            ROUTE_ENDPOINT: (route_min_delay_seconds, route_daily_quota),
            COMPLETION_ENDPOINT: (0.0, completion_daily_quota),
        }

    async def _get_rate_limiter(self, endpoint: str) -> ApiRateLimiter:
        min_delay, quota = self._limits.get(endpoint, (0.0, None))
        return await ApiRateLimiter.get_instance(f"search_ch:{endpoint}", min_delay, quota)

    async def _read_response(self, response: "ClientResponse", url: str) -> str:
        body = await response.text()
        log_api_response(url, response.status, body)
        if response.status != 200:
            server = response.headers.get("Server", "unknown")
            logger.error(
                f"search.ch API returned status {response.status} for {url}: "
                f"{body[:500] or '(empty response body)'} (Server: {server})"
            )
            raise TransportError(
                f"search.ch API returned status {response.status}", status_code=response.status
            )
        return body

    async def get_text(self, endpoint: str, params: dict[str, str]) -> str:
        """GET an API endpoint and return the response body.

        Args:
            endpoint: Endpoint file name, e.g. "route.json".
            params: Query parameters.

        Raises:
            QuotaExceededError: The endpoint's daily quota is used up.
            TransportError: The request failed or returned a non-200 status.
        """
        url = f"{self._base_url}/{endpoint}"
        rate_limiter = await self._get_rate_limiter(endpoint)
        await rate_limiter.acquire()

        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)
        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._read_response(response, url)
        except TimeoutError as e:
            logger.warning(f"Timeout requesting {url}")
            raise TransportError(f"Timeout requesting {url}") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error requesting {url}: {e}")
            raise TransportError(f"Error requesting {url}: {e}") from e
