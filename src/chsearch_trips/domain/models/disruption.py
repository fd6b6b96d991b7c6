"""Disruption domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeRange:
    """Validity window of a disruption."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class Disruption:
    """A service alert attached to a connection or a leg."""

    key: str  # reference URL the upstream keys the alert by
    id: str | None
    header: str | None
    lead: str | None
    text: str | None
    time_range: TimeRange | None = None
