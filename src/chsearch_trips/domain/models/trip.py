"""Trip domain model."""

from dataclasses import dataclass
from datetime import datetime

from chsearch_trips.domain.models.disruption import Disruption
from chsearch_trips.domain.models.leg import Leg, TransitLeg
from chsearch_trips.domain.models.location import Location


@dataclass(frozen=True)
class Trip:
    """A complete journey from origin to destination."""

    id: str
    origin: Location
    destination: Location
    legs: tuple[Leg, ...]
    transfers: int
    duration_seconds: int = 0
    disruptions: tuple[Disruption, ...] = ()

    @property
    def transit_legs(self) -> list[TransitLeg]:
        return [leg for leg in self.legs if isinstance(leg, TransitLeg)]

    @property
    def first_departure_time(self) -> datetime | None:
        """Planned departure of the first ride."""
        transit = self.transit_legs
        return transit[0].departure_stop.planned_time if transit else None

    @property
    def last_arrival_time(self) -> datetime | None:
        """Planned arrival of the last ride."""
        transit = self.transit_legs
        return transit[-1].arrival_stop.planned_time if transit else None
