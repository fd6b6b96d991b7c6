"""Stop domain models."""

from dataclasses import dataclass
from datetime import datetime

from chsearch_trips.domain.models.location import Location


@dataclass(frozen=True)
class Stop:
    """Departure or arrival event at one end of a leg."""

    location: Location
    planned_time: datetime | None
    expected_time: datetime | None
    position: str | None = None  # track, platform or stand
    cancelled: bool = False

    @property
    def delay_minutes(self) -> int:
        if self.planned_time is None or self.expected_time is None:
            return 0
        return int((self.expected_time - self.planned_time).total_seconds() // 60)


@dataclass(frozen=True)
class IntermediateStop:
    """A stop a transit leg passes through between its departure and arrival."""

    location: Location
    planned_arrival: datetime | None
    expected_arrival: datetime | None
    planned_departure: datetime | None
    expected_departure: datetime | None
    cancelled: bool = False
