"""Query parameters for timetable.search.ch requests."""

from datetime import tzinfo

from chsearch_trips.adapters.search_ch.constants import (
    DEFAULT_TIMEZONE,
    QUERY_DATE_FORMAT,
    QUERY_TIME_FORMAT,
    TRANSPORTATION_TYPE_BY_PRODUCT,
)
from chsearch_trips.domain.models.location import Location, Point
from chsearch_trips.domain.models.trip_query import TripQuery


def location_param(location: Location) -> str:
    """Render a location the way the API accepts it: id, name or "lat,lon"."""
    if location.id:
        return location.id
    if location.name:
        return location.name
    if location.coord is not None:
        return str(location.coord)
    raise ValueError(f"Location has neither id, name nor coordinate: {location}")


def build_trip_query_params(
    query: TripQuery, timezone: tzinfo = DEFAULT_TIMEZONE
) -> dict[str, str]:
    """Build the route.json parameters for a trip query.

    Aware query times are converted to ``timezone``, the zone the API reads
    dates and times in. Naive times are sent as they are.
    """
    when = query.time
    if when.tzinfo is not None:
        when = when.astimezone(timezone)
    params: dict[str, str | None] = {
        "from": location_param(query.origin),
        "to": location_param(query.destination),
        "via": location_param(query.via) if query.via is not None else None,
        "date": when.strftime(QUERY_DATE_FORMAT),
        "time": when.strftime(QUERY_TIME_FORMAT),
        "time_type": "depart" if query.departure else "arrival",
        "show_delays": "1",
        "show_trackchanges": "1",
    }

    options = query.options
    if options.num_trips is not None:
        params["num"] = str(options.num_trips)
    if options.products:
        types = {
            TRANSPORTATION_TYPE_BY_PRODUCT[product]
            for product in options.products
            if product in TRANSPORTATION_TYPE_BY_PRODUCT
        }
        if types:
            params["transportation_types"] = ",".join(sorted(types))

    return {key: value for key, value in params.items() if value is not None}


def build_suggest_params(term: str) -> dict[str, str]:
    """Build the completion.json parameters for a text search."""
    return {"term": term, "show_ids": "1", "show_coordinates": "1"}


def build_nearby_params(point: Point, max_distance: int) -> dict[str, str]:
    """Build the completion.json parameters for a coordinate search."""
    return {
        "latlon": str(point),
        "accuracy": str(max_distance),
        "show_ids": "1",
        "show_coordinates": "1",
    }
