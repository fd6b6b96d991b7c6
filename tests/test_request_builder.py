"""Tests for request parameter construction."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from chsearch_trips.adapters.search_ch.request_builder import (
    build_nearby_params,
    build_suggest_params,
    build_trip_query_params,
    location_param,
)
from chsearch_trips.domain.models import (
    Location,
    LocationType,
    Point,
    Product,
    TripOptions,
    TripQuery,
)

ZURICH_HB = Location(type=LocationType.STATION, id="8503000", name="Zürich HB")
BERN = Location(type=LocationType.STATION, id="8507000", name="Bern")


def test_trip_params_for_departure_query() -> None:
    """Given a departure query, when building params, then date, time and flags are set."""
    query = TripQuery(origin=ZURICH_HB, destination=BERN, time=datetime(2024, 3, 1, 8, 5))

    params = build_trip_query_params(query)

    assert params == {
        "from": "8503000",
        "to": "8507000",
        "date": "03/01/2024",
        "time": "08:05",
        "time_type": "depart",
        "show_delays": "1",
        "show_trackchanges": "1",
    }


def test_aware_time_is_sent_in_zurich_time() -> None:
    """Given a UTC query time, when building params, then date and time are local to Zurich."""
    query = TripQuery(
        origin=ZURICH_HB, destination=BERN, time=datetime(2024, 3, 1, 7, 0, tzinfo=UTC)
    )

    params = build_trip_query_params(query)

    assert params["date"] == "03/01/2024"
    assert params["time"] == "08:00"


def test_aware_time_crossing_midnight_changes_date() -> None:
    query = TripQuery(
        origin=ZURICH_HB, destination=BERN, time=datetime(2024, 6, 30, 22, 30, tzinfo=UTC)
    )

    params = build_trip_query_params(query, ZoneInfo("Europe/Zurich"))

    assert (params["date"], params["time"]) == ("07/01/2024", "00:30")


def test_trip_params_for_arrival_query_with_via_and_options() -> None:
    """Given via and options, when building params, then they are included."""
    query = TripQuery(
        origin=ZURICH_HB,
        destination=BERN,
        via=Location(type=LocationType.ANY, name="Olten"),
        time=datetime(2024, 12, 24, 18, 30),
        departure=False,
        options=TripOptions(num_trips=6, products=frozenset({Product.BUS, Product.TRAM})),
    )

    params = build_trip_query_params(query)

    assert params["via"] == "Olten"
    assert params["time_type"] == "arrival"
    assert params["num"] == "6"
    assert params["transportation_types"] == "bus,tram"


def test_location_param_prefers_id_then_name_then_coordinate() -> None:
    """Locations are sent as id, else name, else "lat,lon"."""
    assert location_param(ZURICH_HB) == "8503000"
    assert location_param(Location(type=LocationType.ANY, name="Basel")) == "Basel"
    assert (
        location_param(Location(type=LocationType.ADDRESS, coord=Point(47.1, 8.2)))
        == "47.1,8.2"
    )


def test_location_param_rejects_empty_location() -> None:
    """Given a location with nothing to send, when rendering, then it is rejected."""
    with pytest.raises(ValueError):
        location_param(Location(type=LocationType.ANY))


def test_completion_params() -> None:
    """Completion requests always ask for ids and coordinates."""
    assert build_suggest_params("haupt") == {
        "term": "haupt",
        "show_ids": "1",
        "show_coordinates": "1",
    }
    assert build_nearby_params(Point(46.95, 7.44), 500) == {
        "latlon": "46.95,7.44",
        "accuracy": "500",
        "show_ids": "1",
        "show_coordinates": "1",
    }
