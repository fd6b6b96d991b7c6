"""Errors raised across the trip planning layers."""


class TransportError(Exception):
    """The HTTP request to the upstream API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuotaExceededError(TransportError):
    """The daily request quota for an endpoint is used up."""


class TripDecodeError(ValueError):
    """The upstream response is not structured the way it has to be."""


class ColorDecodeError(TripDecodeError):
    """A line color is neither a 3- nor a 6-digit hex string."""


class TripAssemblyError(TripDecodeError):
    """A connection cannot be turned into a ridable trip."""


class NoMoreTripsError(Exception):
    """A pagination context has no bound in the requested direction."""
