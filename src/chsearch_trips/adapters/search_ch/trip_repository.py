"""Trip repository adapter using timetable.search.ch route queries."""

import logging
from datetime import tzinfo

from chsearch_trips.adapters.search_ch.constants import ROUTE_ENDPOINT
from chsearch_trips.adapters.search_ch.request_builder import build_trip_query_params
from chsearch_trips.adapters.search_ch.response_decoder import DEFAULT_TIMEZONE
from chsearch_trips.adapters.search_ch.trip_assembler import IdFactory, generate_trip_id
from chsearch_trips.adapters.search_ch.trip_mapper import TripResponseMapper
from chsearch_trips.domain.models.query_trips_result import QueryTripsResult
from chsearch_trips.domain.models.trip_query import TripQuery
from chsearch_trips.domain.ports.http_transport import HttpTransport
from chsearch_trips.domain.ports.trip_repository import TripRepository

logger = logging.getLogger(__name__)


class SearchChTripRepository(TripRepository):
    """Adapter for trip searches against timetable.search.ch."""

    def __init__(
        self,
        transport: HttpTransport,
        timezone: tzinfo = DEFAULT_TIMEZONE,
        id_factory: IdFactory = generate_trip_id,
    ) -> None:
        """Initialize with a transport.

        Args:
            transport: Performs the HTTP GET.
            timezone: Zone of the API's local timestamps.
            id_factory: Produces trip identifiers.
        """
        self._transport = transport
        self._timezone = timezone
        self._mapper = TripResponseMapper(timezone=timezone, id_factory=id_factory)

    async def query_trips(self, query: TripQuery) -> QueryTripsResult:
        """Search trips for a query.

        Raises:
            TransportError: The request failed.
            TripDecodeError: The response could not be decoded.
        """
        params = build_trip_query_params(query, self._timezone)
        logger.debug(f"Querying trips {params['from']} -> {params['to']} at {query.time}")
        body = await self._transport.get_text(ROUTE_ENDPOINT, params)
        result = self._mapper.map_response(body, query)
        logger.debug(f"Found {len(result.trips)} trip(s), status {result.status}")
        return result
