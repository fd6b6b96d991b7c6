"""Classification of raw legs and construction of domain legs."""

import logging

from chsearch_trips.adapters.search_ch.color import decode_color
from chsearch_trips.adapters.search_ch.constants import (
    PRODUCT_BY_CATEGORY,
    PRODUCT_BY_TYPE,
    WALK_TYPE,
)
from chsearch_trips.adapters.search_ch.delay import apply_delay
from chsearch_trips.adapters.search_ch.disruption_extractor import format_disruption
from chsearch_trips.adapters.search_ch.raw_records import RawExit, RawLeg, RawStop
from chsearch_trips.domain.models.leg import Leg, LegKind, TransitLeg, WalkingLeg
from chsearch_trips.domain.models.line import Line, LineStyle, Product, Shape
from chsearch_trips.domain.models.location import Location, LocationType, Point
from chsearch_trips.domain.models.stop import IntermediateStop, Stop

logger = logging.getLogger(__name__)


def classify_leg(raw: RawLeg) -> LegKind:
    """Decide whether a raw leg is walked, ridden or the trailing pseudo-leg."""
    if raw.exit is None:
        return LegKind.TERMINAL
    if raw.type == WALK_TYPE:
        return LegKind.WALK
    return LegKind.TRANSIT


def product_for(category: str | None, leg_type: str | None) -> Product:
    """Map upstream category and type codes to a product."""
    if category and category in PRODUCT_BY_CATEGORY:
        return PRODUCT_BY_CATEGORY[category]
    if leg_type and leg_type in PRODUCT_BY_TYPE:
        return PRODUCT_BY_TYPE[leg_type]
    logger.debug(f"Unknown product codes category={category!r} type={leg_type!r}")
    return Product.UNKNOWN


def _location(
    stop_id: str | None, coord: Point | None, name: str | None, is_address: bool
) -> Location:
    return Location(
        type=LocationType.ADDRESS if is_address else LocationType.STATION,
        id=stop_id,
        coord=coord,
        name=name,
    )


def _departure_location(raw: RawLeg) -> Location:
    return _location(raw.stop_id, raw.coord, raw.name, raw.is_address)


def _arrival_location(exit_: RawExit) -> Location:
    return _location(exit_.stop_id, exit_.coord, exit_.name, exit_.is_address)


def _build_line(raw: RawLeg) -> Line:
    return Line(
        trip_number=raw.trip_number,
        operator=raw.operator,
        product=product_for(raw.category, raw.type),
        label=raw.line or raw.category,
        style=LineStyle(
            shape=Shape.RECT,
            background_color=decode_color(raw.bg_color),
            foreground_color=decode_color(raw.fg_color),
        ),
    )


def _build_intermediate_stop(raw: RawStop) -> IntermediateStop:
    return IntermediateStop(
        location=_location(raw.stop_id, raw.coord, raw.name, is_address=False),
        planned_arrival=raw.arrival,
        expected_arrival=apply_delay(raw.arrival, raw.arr_delay),
        planned_departure=raw.departure,
        expected_departure=apply_delay(raw.departure, raw.dep_delay),
        cancelled=raw.cancelled,
    )


def _build_info(raw: RawLeg) -> str | None:
    lines = list(raw.infotext)
    for disruption in raw.disruptions:
        summary = format_disruption(disruption)
        if summary:
            lines.append(summary)
    return "\n".join(lines) if lines else None


def _build_walking_leg(raw: RawLeg, exit_: RawExit) -> WalkingLeg:
    return WalkingLeg(
        departure=_departure_location(raw),
        arrival=_arrival_location(exit_),
        departure_time=raw.departure,
        arrival_time=exit_.arrival or raw.arrival,
    )


def _build_transit_leg(raw: RawLeg, exit_: RawExit) -> TransitLeg:
    planned_arrival = exit_.arrival or raw.arrival
    arrival_delay = exit_.arr_delay or raw.arr_delay

    departure_stop = Stop(
        location=_departure_location(raw),
        planned_time=raw.departure,
        expected_time=apply_delay(raw.departure, raw.dep_delay),
        position=raw.track,
        cancelled=raw.cancelled,
    )
    arrival_stop = Stop(
        location=_arrival_location(exit_),
        planned_time=planned_arrival,
        expected_time=apply_delay(planned_arrival, arrival_delay),
        position=exit_.track,
        cancelled=raw.cancelled or raw.arrival_cancelled or exit_.cancelled,
    )
    return TransitLeg(
        line=_build_line(raw),
        departure_stop=departure_stop,
        arrival_stop=arrival_stop,
        destination=raw.terminal,
        intermediate_stops=tuple(
            _build_intermediate_stop(stop) for stop in raw.stops if not stop.is_special
        ),
        info=_build_info(raw),
        disruptions=raw.disruptions,
    )


def build_leg(raw: RawLeg) -> Leg | None:
    """Build the domain leg for a raw leg, or None for the trailing pseudo-leg.

    Raises:
        ColorDecodeError: A line color is malformed.
    """
    kind = classify_leg(raw)
    if kind is LegKind.TERMINAL or raw.exit is None:
        return None
    if kind is LegKind.WALK:
        return _build_walking_leg(raw, raw.exit)
    return _build_transit_leg(raw, raw.exit)
