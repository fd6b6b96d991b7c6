"""Tests for leg classification and construction."""

from datetime import timedelta

import pytest

from chsearch_trips.adapters.search_ch.leg_builder import build_leg, classify_leg, product_for
from chsearch_trips.adapters.search_ch.raw_records import RawLeg, RawRouteResult
from chsearch_trips.adapters.search_ch.response_decoder import decode_route_response
from chsearch_trips.domain.errors import ColorDecodeError
from chsearch_trips.domain.models import (
    LegKind,
    LocationType,
    Product,
    Shape,
    TransitLeg,
    WalkingLeg,
)
from tests.factories import (
    BERN,
    HOME,
    OLTEN,
    ZURICH_HB,
    connection,
    route_response,
    terminal_leg,
    transit_leg,
    walk_leg,
)


def _raw_leg(leg: dict) -> RawLeg:
    decoded = decode_route_response(route_response(connection([leg])))
    assert isinstance(decoded, RawRouteResult)
    return decoded.connections[0].legs[0]


def _transit(**extra: object) -> RawLeg:
    return _raw_leg(
        transit_leg(ZURICH_HB, "2024-03-01 08:02:00", BERN, "2024-03-01 09:00:00", **extra)
    )


class TestClassification:
    """Tests for classify_leg."""

    def test_leg_without_exit_is_terminal(self) -> None:
        """Given the trailing pseudo-leg, when classifying, then it is terminal."""
        raw = _raw_leg(terminal_leg(BERN, "2024-03-01 09:00:00"))

        assert classify_leg(raw) is LegKind.TERMINAL
        assert build_leg(raw) is None

    def test_walk_type_is_walking(self) -> None:
        """Given a walk leg, when classifying, then it is walked."""
        raw = _raw_leg(walk_leg(HOME, "2024-03-01 07:40:00", ZURICH_HB, "2024-03-01 07:58:00"))

        assert classify_leg(raw) is LegKind.WALK

    def test_other_types_are_transit(self) -> None:
        """Given any non-walk leg with an exit, when classifying, then it is ridden."""
        assert classify_leg(_transit(type="bus")) is LegKind.TRANSIT


class TestWalkingLeg:
    """Tests for walking leg construction."""

    def test_walk_from_address_to_station(self) -> None:
        """Given a walk from an address, when building, then endpoints carry their types."""
        raw = _raw_leg(walk_leg(HOME, "2024-03-01 07:40:00", ZURICH_HB, "2024-03-01 07:58:00"))

        leg = build_leg(raw)

        assert isinstance(leg, WalkingLeg)
        assert leg.kind is LegKind.WALK
        assert leg.departure.type is LocationType.ADDRESS
        assert leg.departure.id is None
        assert leg.departure.name == "Dorfstrasse 10, Dällikon"
        assert leg.arrival.type is LocationType.STATION
        assert leg.arrival.id == "8503000"
        assert leg.departure_time is not None
        assert leg.arrival_time is not None
        assert leg.arrival_time - leg.departure_time == timedelta(minutes=18)


class TestTransitLeg:
    """Tests for transit leg construction."""

    def test_line_identity_and_style(self) -> None:
        """Given a train leg, when building, then the line is derived from its codes."""
        leg = build_leg(_transit())

        assert isinstance(leg, TransitLeg)
        assert leg.line.label == "IC 1"
        assert leg.line.trip_number == "712"
        assert leg.line.operator == "SBB"
        assert leg.line.product is Product.HIGH_SPEED_TRAIN
        assert leg.line.style.shape is Shape.RECT
        assert leg.line.style.foreground_color == 0xFFFFFF
        assert leg.line.style.background_color == 0xEB0000
        assert leg.destination == "St. Gallen"

    def test_line_without_codes_has_no_label(self) -> None:
        """Given neither line nor category, when building, then the label stays empty."""
        leg = build_leg(_transit(line=None, **{"*G": None}))

        assert isinstance(leg, TransitLeg)
        assert leg.line.label is None
        assert leg.departure_stop.location.name == "Zürich HB"

    def test_category_labels_line_without_line_name(self) -> None:
        leg = build_leg(_transit(line=None))

        assert isinstance(leg, TransitLeg)
        assert leg.line.label == "IC"

    def test_stops_carry_times_and_tracks(self) -> None:
        """Given delays and tracks, when building, then stops have planned and expected times."""
        leg = build_leg(_transit(dep_delay="3", exit_extra={"arr_delay": "5"}))

        assert isinstance(leg, TransitLeg)
        dep, arr = leg.departure_stop, leg.arrival_stop
        assert dep.location.id == "8503000"
        assert dep.position == "31"
        assert dep.expected_time == dep.planned_time + timedelta(minutes=3)
        assert dep.delay_minutes == 3
        assert arr.location.id == "8507000"
        assert arr.position == "7"
        assert arr.expected_time == arr.planned_time + timedelta(minutes=5)

    def test_no_delay_means_expected_equals_planned(self) -> None:
        """Given no delays, when building, then expected times equal planned times."""
        leg = build_leg(_transit())

        assert isinstance(leg, TransitLeg)
        assert leg.departure_stop.expected_time == leg.departure_stop.planned_time
        assert leg.arrival_stop.expected_time == leg.arrival_stop.planned_time

    def test_missing_tracks_are_absent(self) -> None:
        """Given a rural stop without track, when building, then there is no position."""
        raw = _raw_leg(
            {
                "type": "bus",
                **OLTEN,
                "departure": "2024-03-01 08:00:00",
                "*G": "B",
                "line": "503",
                "exit": {**ZURICH_HB, "arrival": "2024-03-01 08:20:00"},
            }
        )

        leg = build_leg(raw)

        assert isinstance(leg, TransitLeg)
        assert leg.departure_stop.position is None
        assert leg.arrival_stop.position is None
        assert leg.line.product is Product.BUS
        assert leg.line.style.background_color is None

    def test_cancelled_flag_with_zero_delay_is_preserved(self) -> None:
        """Given a cancelled leg without delay, when building, then it stays cancelled."""
        leg = build_leg(_transit(cancelled=True))

        assert isinstance(leg, TransitLeg)
        assert leg.departure_stop.cancelled is True
        assert leg.arrival_stop.cancelled is True
        assert leg.departure_stop.expected_time == leg.departure_stop.planned_time

    def test_cancellation_sentinel_marks_arrival_cancelled(self) -> None:
        """Given the "X" arrival delay, when building, then the arrival is cancelled at 0 delay."""
        leg = build_leg(_transit(exit_extra={"arr_delay": "X"}))

        assert isinstance(leg, TransitLeg)
        assert leg.arrival_stop.cancelled is True
        assert leg.arrival_stop.delay_minutes == 0

    def test_leg_arrival_sentinel_cancels_only_the_arrival(self) -> None:
        """Given a leg arr_delay of "X", when building, then only the arrival is cancelled."""
        leg = build_leg(_transit(arr_delay="X"))

        assert isinstance(leg, TransitLeg)
        assert leg.departure_stop.cancelled is False
        assert leg.arrival_stop.cancelled is True
        assert leg.arrival_stop.delay_minutes == 0

    def test_special_stops_are_excluded(self) -> None:
        """Given a tunnel waypoint among the stops, when building, then it is left out."""
        leg = build_leg(
            _transit(
                stops=[
                    {**OLTEN, "arrival": "2024-03-01 08:31:00", "departure": "2024-03-01 08:33:00"},
                    {"stopid": "0", "name": "Tunnel", "lat": 47.2, "lon": 7.8},
                ]
            )
        )

        assert isinstance(leg, TransitLeg)
        assert [stop.location.name for stop in leg.intermediate_stops] == ["Olten"]
        olten = leg.intermediate_stops[0]
        assert olten.planned_departure - olten.planned_arrival == timedelta(minutes=2)

    def test_info_combines_infotext_and_disruptions(self) -> None:
        """Given info texts and a disruption, when building, then both end up in the info."""
        leg = build_leg(
            _transit(
                infotext=["Reservation recommended"],
                disruptions={
                    "https://www.sbb.ch/d/9": {"header": "Works", "lead": "Slow running"}
                },
            )
        )

        assert isinstance(leg, TransitLeg)
        assert leg.info == "Reservation recommended\nWorks: Slow running"
        assert [d.key for d in leg.disruptions] == ["https://www.sbb.ch/d/9"]

    def test_no_info_is_none(self) -> None:
        """Given neither info text nor disruption, when building, then there is no info."""
        leg = build_leg(_transit())

        assert isinstance(leg, TransitLeg)
        assert leg.info is None

    def test_bad_color_fails(self) -> None:
        """Given a color of invalid width, when building, then the error surfaces."""
        with pytest.raises(ColorDecodeError):
            build_leg(_transit(bgcolor="ffff"))


class TestProductMapping:
    """Tests for product_for."""

    @pytest.mark.parametrize(
        ("category", "leg_type", "expected"),
        [
            ("IC", None, Product.HIGH_SPEED_TRAIN),
            ("S", "strain", Product.REGIONAL_TRAIN),
            ("T", None, Product.TRAM),
            ("B", None, Product.BUS),
            ("cablecar", None, Product.CABLECAR),
            (None, "ship", Product.FERRY),
            ("ZZZ", "tram", Product.TRAM),
        ],
    )
    def test_known_codes(
        self, category: str | None, leg_type: str | None, expected: Product
    ) -> None:
        """Given known codes, when mapping, then the product is found."""
        assert product_for(category, leg_type) is expected

    def test_unknown_codes_map_to_unknown(self) -> None:
        """Given unmapped codes, when mapping, then the product is unknown instead of failing."""
        assert product_for("ZZZ", "hovercraft") is Product.UNKNOWN
        assert product_for(None, None) is Product.UNKNOWN
