"""Trip query domain models."""

from dataclasses import dataclass, field
from datetime import datetime

from chsearch_trips.domain.models.line import Product
from chsearch_trips.domain.models.location import Location


@dataclass(frozen=True)
class TripOptions:
    """Optional knobs passed through to the upstream trip search."""

    num_trips: int | None = None
    products: frozenset[Product] | None = None


@dataclass(frozen=True)
class TripQuery:
    """Everything needed to (re-)issue a trip search."""

    origin: Location
    destination: Location
    time: datetime
    departure: bool = True  # False means ``time`` is the latest arrival
    via: Location | None = None
    options: TripOptions = field(default_factory=TripOptions)
