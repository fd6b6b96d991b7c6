"""Location repository adapter using timetable.search.ch completion."""

import logging

from chsearch_trips.adapters.search_ch.constants import COMPLETION_ENDPOINT
from chsearch_trips.adapters.search_ch.location_parser import LocationParser
from chsearch_trips.adapters.search_ch.request_builder import (
    build_nearby_params,
    build_suggest_params,
)
from chsearch_trips.domain.models.location import Location, Point
from chsearch_trips.domain.ports.http_transport import HttpTransport
from chsearch_trips.domain.ports.location_repository import LocationRepository

logger = logging.getLogger(__name__)


class SearchChLocationRepository(LocationRepository):
    """Adapter for location lookup against timetable.search.ch."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    async def suggest_locations(self, term: str, max_locations: int = 10) -> list[Location]:
        """Autocomplete a free-text location name.

        Args:
            term: Text typed so far.
            max_locations: Maximum number of locations to return.

        Returns:
            Matching locations, best first.
        """
        if not term.strip():
            return []
        body = await self._transport.get_text(COMPLETION_ENDPOINT, build_suggest_params(term))
        locations = LocationParser.parse_locations(body, max_locations)
        logger.debug(f"{len(locations)} suggestion(s) for '{term}'")
        return locations

    async def nearby_locations(
        self, point: Point, max_distance: int = 1000, max_locations: int = 10
    ) -> list[Location]:
        """Find locations around a coordinate.

        Args:
            point: Center of the search.
            max_distance: Search radius in meters.
            max_locations: Maximum number of locations to return.

        Returns:
            Locations near the point.
        """
        body = await self._transport.get_text(
            COMPLETION_ENDPOINT, build_nearby_params(point, max_distance)
        )
        return LocationParser.parse_locations(body, max_locations)
