"""Logging of API requests and responses when CHT_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "CHT_LOG_REQUESTS"
_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}
_MAX_BODY_CHARS = 2000


def should_log_requests() -> bool:
    """Check whether request logging is enabled via the environment."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def build_url(url: str, params: dict[str, Any] | None) -> str:
    """Full URL with (sorted, encoded) query parameters."""
    if not params:
        return url
    query = urlencode(sorted(params.items()))
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        k: "***REDACTED***" if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing request if enabled."""
    if not should_log_requests():
        return

    log_parts = [f"{method} {build_url(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")
    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, body: str) -> None:
    """Log a response status and the start of its body if enabled."""
    if not should_log_requests():
        return

    shown = body if len(body) <= _MAX_BODY_CHARS else f"{body[:_MAX_BODY_CHARS]}..."
    logger.info(f"API Response {status} for {url}:\n{shown}")
