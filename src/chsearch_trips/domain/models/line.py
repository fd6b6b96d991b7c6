"""Line domain model."""

from dataclasses import dataclass, field
from enum import StrEnum


class Product(StrEnum):
    """Mode of a public transport service."""

    HIGH_SPEED_TRAIN = "high_speed_train"
    REGIONAL_TRAIN = "regional_train"
    SUBURBAN_TRAIN = "suburban_train"
    SUBWAY = "subway"
    TRAM = "tram"
    BUS = "bus"
    FERRY = "ferry"
    CABLECAR = "cablecar"
    ON_DEMAND = "on_demand"
    UNKNOWN = "unknown"


class Shape(StrEnum):
    """Shape of a line badge."""

    RECT = "rect"
    ROUNDED = "rounded"
    CIRCLE = "circle"


@dataclass(frozen=True)
class LineStyle:
    """How a line badge is drawn. Colors are 0xRRGGBB integers."""

    shape: Shape = Shape.RECT
    background_color: int | None = None
    foreground_color: int | None = None


@dataclass(frozen=True)
class Line:
    """Identity of a public transport service."""

    trip_number: str | None
    operator: str | None
    product: Product
    label: str | None
    style: LineStyle = field(default_factory=LineStyle)
