"""Maps route.json responses to trip query results."""

import logging
from datetime import tzinfo

from chsearch_trips.adapters.search_ch.leg_builder import build_leg
from chsearch_trips.adapters.search_ch.raw_records import RawConnection
from chsearch_trips.adapters.search_ch.response_decoder import (
    DEFAULT_TIMEZONE,
    RouteResponseDecoder,
)
from chsearch_trips.adapters.search_ch.trip_assembler import (
    IdFactory,
    assemble_trip,
    generate_trip_id,
)
from chsearch_trips.domain.errors import TripAssemblyError
from chsearch_trips.domain.models.leg import Leg
from chsearch_trips.domain.models.query_trips_result import (
    NoResult,
    QueryTripsResult,
    ResultStatus,
)
from chsearch_trips.domain.models.trip import Trip
from chsearch_trips.domain.models.trip_query import TripQuery

logger = logging.getLogger(__name__)


class TripResponseMapper:
    """Runs a response through decoding, leg building and trip assembly."""

    def __init__(
        self, timezone: tzinfo = DEFAULT_TIMEZONE, id_factory: IdFactory = generate_trip_id
    ) -> None:
        self._decoder = RouteResponseDecoder(timezone)
        self._id_factory = id_factory

    def map_response(self, text: str, query: TripQuery) -> QueryTripsResult:
        """Turn a response body into a result for ``query``.

        Connections that cannot be assembled are skipped and reported in
        ``anomalies``; the remaining ones are still returned.

        Raises:
            TripDecodeError: The response is structurally malformed.
        """
        decoded = self._decoder.decode(text)
        if isinstance(decoded, NoResult):
            logger.info(f"No trips found: {decoded.reason}")
            return QueryTripsResult.no_trips(query, decoded.reason)

        trips: list[Trip] = []
        anomalies: list[str] = []
        for index, connection in enumerate(decoded.connections):
            try:
                trips.append(self._build_trip(connection))
            except TripAssemblyError as e:
                logger.warning(f"Skipping connection {index}: {e}")
                anomalies.append(f"connection {index}: {e}")

        if not trips:
            return QueryTripsResult.no_trips(
                query, "No connections found", anomalies=tuple(anomalies)
            )
        return QueryTripsResult(
            status=ResultStatus.OK,
            query=query,
            trips=tuple(trips),
            anomalies=tuple(anomalies),
        )

    def _build_trip(self, connection: RawConnection) -> Trip:
        legs: list[Leg] = []
        for raw_leg in connection.legs:
            leg = build_leg(raw_leg)
            if leg is not None:
                legs.append(leg)
        return assemble_trip(connection, legs, self._id_factory)
