"""Application layer - use cases built on the domain ports."""

from chsearch_trips.application.services import TripPlanningService

__all__ = ["TripPlanningService"]
