"""Rate limiter for outgoing API requests.

timetable.search.ch grants a fixed number of requests per endpoint and day.
Each endpoint gets one shared limiter that spaces requests out and refuses
them once the day's quota is spent.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from datetime import date
from typing import ClassVar

from chsearch_trips.domain.errors import QuotaExceededError

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Minimum delay between requests plus a daily request quota.

    Async-safe using asyncio.Lock.
    """

    # Class-level registry of rate limiters by endpoint name
    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(
        self,
        api_name: str,
        min_delay_seconds: float = 0.0,
        daily_quota: int | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the endpoint (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
            daily_quota: Requests allowed per calendar day, None for unlimited.
            today: Clock for the quota day, replaceable in tests.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self.daily_quota = daily_quota
        self._today = today
        self._last_request_time: float | None = None
        self._quota_day = today()
        self._used_today = 0
        self._lock = asyncio.Lock()

    @classmethod
    async def get_instance(
        cls, api_name: str, min_delay_seconds: float = 0.0, daily_quota: int | None = None
    ) -> ApiRateLimiter:
        """Get or create the shared rate limiter for an endpoint.

        The first call for a name fixes its limits. Later calls with different
        limits get the existing limiter and a warning.
        """
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            if api_name not in cls._instances:
                cls._instances[api_name] = cls(api_name, min_delay_seconds, daily_quota)
                logger.info(
                    f"Created rate limiter for {api_name} with {min_delay_seconds}s minimum "
                    f"delay and a daily quota of {daily_quota or 'unlimited'}"
                )
            else:
                existing = cls._instances[api_name]
                if (existing.min_delay_seconds, existing.daily_quota) != (
                    min_delay_seconds,
                    daily_quota,
                ):
                    logger.warning(
                        f"Rate limiter for {api_name} already exists with "
                        f"{existing.min_delay_seconds}s delay and quota {existing.daily_quota}; "
                        f"ignoring {min_delay_seconds}s and {daily_quota}"
                    )
            return cls._instances[api_name]

    @property
    def remaining_today(self) -> int | None:
        if self.daily_quota is None:
            return None
        if self._today() != self._quota_day:
            return self.daily_quota
        return max(self.daily_quota - self._used_today, 0)

    def _consume_quota(self) -> None:
        today = self._today()
        if today != self._quota_day:
            self._quota_day = today
            self._used_today = 0

        if self.daily_quota is not None and self._used_today >= self.daily_quota:
            raise QuotaExceededError(
                f"{self.api_name}: daily quota of {self.daily_quota} requests exhausted"
            )
        self._used_today += 1

    async def acquire(self) -> None:
        """Acquire permission to make a request.

        Blocks until enough time has passed since the last request.

        Raises:
            QuotaExceededError: The daily quota is used up.
        """
        async with self._lock:
            self._consume_quota()

            if self._last_request_time is not None:
                wait_time = self.min_delay_seconds - (time.monotonic() - self._last_request_time)
                if wait_time > 0:
                    logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                    await asyncio.sleep(wait_time)

            self._last_request_time = time.monotonic()

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        pass
