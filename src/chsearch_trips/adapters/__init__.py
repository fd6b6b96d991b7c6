"""Adapters layer - external system integrations."""

from chsearch_trips.adapters.config import AppConfig
from chsearch_trips.adapters.search_ch import (
    SearchChHttpClient,
    SearchChLocationRepository,
    SearchChTripRepository,
)

__all__ = [
    "AppConfig",
    "SearchChHttpClient",
    "SearchChLocationRepository",
    "SearchChTripRepository",
]
