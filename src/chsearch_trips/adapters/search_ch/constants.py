"""Constants for the timetable.search.ch adapter.

API Documentation: https://timetable.search.ch/api/help
Terms of use: https://timetable.search.ch/api/terms

Quota: 1000 route queries and 5000 departure/completion queries per day.
No authentication required.
"""

from types import MappingProxyType
from zoneinfo import ZoneInfo

from chsearch_trips.domain.models.line import Product

SEARCH_CH_BASE_URL = "https://timetable.search.ch/api"
ROUTE_ENDPOINT = "route.json"
COMPLETION_ENDPOINT = "completion.json"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

ROUTE_DAILY_QUOTA = 1000
COMPLETION_DAILY_QUOTA = 5000

# Zone the API reads query times in and writes its local timestamps in
DEFAULT_TIMEZONE = ZoneInfo("Europe/Zurich")

# Upstream timestamps, e.g. "2024-03-01 08:02:00"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Request formats
QUERY_DATE_FORMAT = "%m/%d/%Y"
QUERY_TIME_FORMAT = "%H:%M"

# Disruption time ranges come in German or English notation, tried in order
DISRUPTION_TIME_FORMATS = (
    "%d.%m.%Y %H:%M",
    "%m/%d/%Y %H:%M",
)

# Undocumented delay value sent for cancelled services
CANCELLATION_SENTINEL = "X"

WALK_TYPE = "walk"

# Category code ("*G") -> product
PRODUCT_BY_CATEGORY = MappingProxyType(
    {
        "ICE": Product.HIGH_SPEED_TRAIN,
        "TGV": Product.HIGH_SPEED_TRAIN,
        "RJX": Product.HIGH_SPEED_TRAIN,
        "EC": Product.HIGH_SPEED_TRAIN,
        "IC": Product.HIGH_SPEED_TRAIN,
        "IR": Product.REGIONAL_TRAIN,
        "RE": Product.REGIONAL_TRAIN,
        "R": Product.REGIONAL_TRAIN,
        "PE": Product.REGIONAL_TRAIN,
        "S": Product.REGIONAL_TRAIN,
        "SN": Product.SUBURBAN_TRAIN,
        "M": Product.SUBWAY,
        "T": Product.TRAM,
        "B": Product.BUS,
        "NFB": Product.BUS,
        "EXB": Product.BUS,
        "BAT": Product.FERRY,
        "FAE": Product.FERRY,
        "FUN": Product.CABLECAR,
        "GB": Product.CABLECAR,
        "PB": Product.CABLECAR,
        "SL": Product.CABLECAR,
        "cablecar": Product.CABLECAR,
        "RUF": Product.ON_DEMAND,
    }
)

# Leg type -> product, used when the category code is missing or unknown
PRODUCT_BY_TYPE = MappingProxyType(
    {
        "express_train": Product.HIGH_SPEED_TRAIN,
        "train": Product.REGIONAL_TRAIN,
        "strain": Product.SUBURBAN_TRAIN,
        "metro": Product.SUBWAY,
        "tram": Product.TRAM,
        "bus": Product.BUS,
        "post": Product.BUS,
        "night_bus": Product.BUS,
        "ship": Product.FERRY,
        "cablecar": Product.CABLECAR,
        "gondola": Product.CABLECAR,
        "chairlift": Product.CABLECAR,
        "funicular": Product.CABLECAR,
        "taxi": Product.ON_DEMAND,
    }
)

# Product -> value of the ``transportation_types`` request parameter
TRANSPORTATION_TYPE_BY_PRODUCT = MappingProxyType(
    {
        Product.HIGH_SPEED_TRAIN: "train",
        Product.REGIONAL_TRAIN: "train",
        Product.SUBURBAN_TRAIN: "train",
        Product.SUBWAY: "tram",
        Product.TRAM: "tram",
        Product.BUS: "bus",
        Product.FERRY: "ship",
        Product.CABLECAR: "cableway",
    }
)
