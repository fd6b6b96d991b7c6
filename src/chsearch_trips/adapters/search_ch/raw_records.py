"""Typed intermediate records decoded from a route.json response.

Every optional upstream field is an explicit attribute with a stated default,
so nothing downstream has to probe the JSON for presence.
"""

from dataclasses import dataclass
from datetime import datetime

from chsearch_trips.domain.models.disruption import Disruption
from chsearch_trips.domain.models.location import Point


@dataclass(frozen=True)
class RawStop:
    """An intermediate stop of a leg."""

    stop_id: str | None
    name: str | None
    coord: Point | None
    arrival: datetime | None
    departure: datetime | None
    arr_delay: int = 0
    dep_delay: int = 0
    cancelled: bool = False

    @property
    def is_special(self) -> bool:
        """Waypoints such as tunnels carry no times at all."""
        return self.arrival is None and self.departure is None


@dataclass(frozen=True)
class RawExit:
    """Where and when a leg ends."""

    stop_id: str | None
    name: str | None
    coord: Point | None
    arrival: datetime | None
    track: str | None = None
    arr_delay: int = 0
    cancelled: bool = False
    is_address: bool = False
    wait_time: float = 0.0


@dataclass(frozen=True)
class RawLeg:
    """One leg of a connection as sent by the API."""

    type: str | None
    name: str | None
    stop_id: str | None
    coord: Point | None
    departure: datetime | None
    arrival: datetime | None
    trip_number: str | None = None  # "*Z"
    category: str | None = None  # "*G"
    line: str | None = None
    operator: str | None = None
    terminal: str | None = None
    fg_color: str | None = None
    bg_color: str | None = None
    track: str | None = None
    dep_delay: int = 0
    arr_delay: int = 0
    cancelled: bool = False
    arrival_cancelled: bool = False  # "X" in the leg's own arr_delay
    is_address: bool = False
    running_time: float = 0.0
    infotext: tuple[str, ...] = ()
    stops: tuple[RawStop, ...] = ()
    disruptions: tuple[Disruption, ...] = ()
    exit: RawExit | None = None


@dataclass(frozen=True)
class RawConnection:
    """One connection (candidate trip) of a route response."""

    from_name: str | None
    to_name: str | None
    departure: datetime | None
    arrival: datetime | None
    duration: float = 0.0
    legs: tuple[RawLeg, ...] = ()
    disruptions: tuple[Disruption, ...] = ()


@dataclass(frozen=True)
class RawRouteResult:
    """Connections found by a route query."""

    count: int
    connections: tuple[RawConnection, ...]
