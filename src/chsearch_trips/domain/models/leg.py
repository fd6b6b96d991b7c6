"""Leg domain models.

A trip leg is either a walk or a ride. The two variants share no mutable base;
code that needs to tell them apart checks ``kind`` (or ``isinstance``).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from chsearch_trips.domain.models.disruption import Disruption
from chsearch_trips.domain.models.line import Line
from chsearch_trips.domain.models.location import Location
from chsearch_trips.domain.models.stop import IntermediateStop, Stop


class LegKind(StrEnum):
    """Outcome of classifying a raw upstream leg."""

    WALK = "walk"
    TRANSIT = "transit"
    TERMINAL = "terminal"  # trailing pseudo-leg without an exit, never emitted


@dataclass(frozen=True)
class WalkingLeg:
    """Segment travelled on foot."""

    kind: ClassVar[LegKind] = LegKind.WALK

    departure: Location
    arrival: Location
    departure_time: datetime | None
    arrival_time: datetime | None

    @property
    def departure_location(self) -> Location:
        return self.departure

    @property
    def arrival_location(self) -> Location:
        return self.arrival


@dataclass(frozen=True)
class TransitLeg:
    """Segment travelled aboard one public transport service."""

    kind: ClassVar[LegKind] = LegKind.TRANSIT

    line: Line
    departure_stop: Stop
    arrival_stop: Stop
    destination: str | None = None
    intermediate_stops: tuple[IntermediateStop, ...] = ()
    info: str | None = None
    disruptions: tuple[Disruption, ...] = field(default=())

    @property
    def departure_location(self) -> Location:
        return self.departure_stop.location

    @property
    def arrival_location(self) -> Location:
        return self.arrival_stop.location


Leg = WalkingLeg | TransitLeg
