"""Assembly of built legs into trips."""

import uuid
from collections.abc import Callable, Sequence

from chsearch_trips.adapters.search_ch.raw_records import RawConnection
from chsearch_trips.domain.errors import TripAssemblyError
from chsearch_trips.domain.models.leg import Leg, TransitLeg
from chsearch_trips.domain.models.trip import Trip

IdFactory = Callable[[], str]


def generate_trip_id() -> str:
    """Random trip identifier; upstream connections carry none."""
    return f"generated-{uuid.uuid4()}"


def count_transfers(legs: Sequence[Leg]) -> int:
    """Number of changes between rides. Walks do not count."""
    transfers = -1
    for leg in legs:
        if isinstance(leg, TransitLeg):
            transfers += 1
    return transfers


def check_contiguity(legs: Sequence[Leg]) -> None:
    """Ensure every leg starts where the previous one ended."""
    for index, (current, following) in enumerate(zip(legs, legs[1:], strict=False)):
        if not current.arrival_location.same_place(following.departure_location):
            raise TripAssemblyError(
                f"Leg {index} ends at {current.arrival_location.name!r} but leg {index + 1} "
                f"starts at {following.departure_location.name!r}"
            )


def assemble_trip(
    connection: RawConnection,
    legs: Sequence[Leg],
    id_factory: IdFactory = generate_trip_id,
) -> Trip:
    """Fold the legs of one connection into a trip.

    Raises:
        TripAssemblyError: There are no legs, no ride at all, or a gap between legs.
    """
    if not legs:
        raise TripAssemblyError(
            f"Connection {connection.from_name!r} -> {connection.to_name!r} has no legs"
        )

    transfers = count_transfers(legs)
    if transfers < 0:
        raise TripAssemblyError(
            f"Connection {connection.from_name!r} -> {connection.to_name!r} has no transit leg"
        )

    check_contiguity(legs)

    return Trip(
        id=id_factory(),
        origin=legs[0].departure_location,
        destination=legs[-1].arrival_location,
        legs=tuple(legs),
        transfers=transfers,
        duration_seconds=int(connection.duration),
        disruptions=connection.disruptions,
    )
