"""Application services (use cases) for trip planning."""

import dataclasses
import logging
from typing import TYPE_CHECKING

from chsearch_trips.application.pagination import derive_context, next_query
from chsearch_trips.domain.errors import NoMoreTripsError
from chsearch_trips.domain.models import (
    PaginationContext,
    QueryTripsResult,
    ResultStatus,
    TripQuery,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from chsearch_trips.domain.ports import TripRepository


class TripPlanningService:
    """Service for searching trips and paging through them in time."""

    def __init__(self, trip_repository: "TripRepository") -> None:
        """Initialize with a trip repository."""
        self._trip_repository = trip_repository

    async def query_trips(self, query: TripQuery) -> QueryTripsResult:
        """Search trips and attach the pagination context for the found page.

        A page without trips carries no context; the caller cannot page on.
        """
        result = await self._trip_repository.query_trips(query)
        if result.status is not ResultStatus.OK:
            return result

        context = derive_context(result.trips, query)
        return dataclasses.replace(result, context=context)

    async def query_more_trips(
        self, context: PaginationContext, later: bool
    ) -> QueryTripsResult:
        """Re-issue the context's query one step later or earlier in time."""
        try:
            query = next_query(context, later)
        except NoMoreTripsError as e:
            logger.info(str(e))
            return QueryTripsResult.no_trips(context.query, "No more trips")

        logger.debug(f"Paging {'later' if later else 'earlier'} from {query.time}")
        return await self.query_trips(query)
