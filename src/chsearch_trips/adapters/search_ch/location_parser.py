"""Parser for timetable.search.ch completion.json responses."""

import json
import logging
from typing import Any

from chsearch_trips.domain.errors import TripDecodeError
from chsearch_trips.domain.models.location import Location, LocationType, Point

logger = logging.getLogger(__name__)

_ADDRESS_ICON_MARKER = "adr"


class LocationParser:
    """Parses completion responses into Location objects."""

    @staticmethod
    def parse_locations(text: str, limit: int) -> list[Location]:
        """Parse up to ``limit`` locations from a completion response body.

        Raises:
            TripDecodeError: The body is not a JSON array.
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise TripDecodeError(f"Completion response is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise TripDecodeError("Completion response must be a list")

        results = []
        for entry in data:
            if len(results) >= limit:
                break
            if not isinstance(entry, dict):
                logger.debug(f"Skipping non-object completion entry: {entry!r}")
                continue
            location = LocationParser._parse_location(entry)
            if location:
                results.append(location)
        return results

    @staticmethod
    def _parse_coord(entry: dict[str, Any]) -> Point | None:
        lat, lon = entry.get("lat"), entry.get("lon")
        if lat is None or lon is None:
            return None
        try:
            return Point(lat=float(lat), lon=float(lon))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _parse_location(entry: dict[str, Any]) -> Location | None:
        label = entry.get("label")
        if not label:
            return None

        station_id = entry.get("id")
        icon = str(entry.get("iconclass", ""))
        is_address = _ADDRESS_ICON_MARKER in icon or not station_id
        return Location(
            type=LocationType.ADDRESS if is_address else LocationType.STATION,
            id=str(station_id) if station_id else None,
            coord=LocationParser._parse_coord(entry),
            name=str(label),
        )
