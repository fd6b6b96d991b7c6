"""HTTP transport port."""

from typing import Protocol


class HttpTransport(Protocol):
    """Port for fetching a URL as text.

    Implementations raise ``TransportError`` on failure; retrying is up to them.
    """

    async def get_text(self, endpoint: str, params: dict[str, str]) -> str:
        """Perform a GET against an API endpoint and return the body."""
        ...
