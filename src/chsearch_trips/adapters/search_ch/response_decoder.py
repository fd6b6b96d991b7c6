"""Decoder for timetable.search.ch route.json responses."""

import json
import logging
from datetime import datetime, tzinfo
from typing import Any

from chsearch_trips.adapters.search_ch.constants import DEFAULT_TIMEZONE, TIMESTAMP_FORMAT
from chsearch_trips.adapters.search_ch.delay import is_cancellation_sentinel, parse_delay
from chsearch_trips.adapters.search_ch.disruption_extractor import extract_disruptions
from chsearch_trips.adapters.search_ch.raw_records import (
    RawConnection,
    RawExit,
    RawLeg,
    RawRouteResult,
    RawStop,
)
from chsearch_trips.domain.errors import TripDecodeError
from chsearch_trips.domain.models.location import Point
from chsearch_trips.domain.models.query_trips_result import NoResult

logger = logging.getLogger(__name__)


def _get_str(node: dict[str, Any], key: str) -> str | None:
    value = node.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _get_float(node: dict[str, Any], key: str) -> float:
    value = node.get(key)
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug(f"Non-numeric {key!r}: {value!r}, using 0")
        return 0.0


def _get_int(node: dict[str, Any], key: str) -> int:
    return int(_get_float(node, key))


def _get_bool(node: dict[str, Any], key: str) -> bool:
    value = node.get(key)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true")
    return bool(value)


def _get_coord(node: dict[str, Any]) -> Point | None:
    lat, lon = node.get("lat"), node.get("lon")
    if lat is None or lon is None:
        return None
    try:
        return Point(lat=float(lat), lon=float(lon))
    except (TypeError, ValueError):
        logger.debug(f"Invalid coordinate {lat!r},{lon!r}, dropping it")
        return None


def _get_object_list(node: dict[str, Any], key: str, what: str) -> list[dict[str, Any]]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TripDecodeError(f"{what}: {key!r} must be a list")
    for item in value:
        if not isinstance(item, dict):
            raise TripDecodeError(f"{what}: entries of {key!r} must be objects")
    return value


def _get_texts(node: dict[str, Any], key: str) -> tuple[str, ...]:
    value = node.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return ()

    texts = []
    for entry in value:
        if isinstance(entry, dict):
            entry = entry.get("text")
        if isinstance(entry, str) and entry.strip():
            texts.append(entry.strip())
    return tuple(texts)


class RouteResponseDecoder:
    """Turns route.json response text into raw records or a NoResult."""

    def __init__(self, timezone: tzinfo = DEFAULT_TIMEZONE) -> None:
        """Initialize the decoder.

        Args:
            timezone: Zone the upstream local timestamps are expressed in.
        """
        self._timezone = timezone

    def decode(self, text: str) -> RawRouteResult | NoResult:
        """Decode a response body.

        Raises:
            TripDecodeError: The body is not JSON or has none of the known shapes.
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise TripDecodeError(f"Route response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise TripDecodeError(f"Route response must be an object, got {type(data).__name__}")

        if data.get("error"):
            return NoResult(reason=str(data["error"]))

        if "connections" in data or "count" in data:
            connections = _get_object_list(data, "connections", "route")
            return RawRouteResult(
                count=_get_int(data, "count"),
                connections=tuple(self._decode_connection(c) for c in connections),
            )

        if "messages" in data:
            messages = _get_texts(data, "messages")
            return NoResult(reason=" ".join(messages) if messages else "No connections found")

        raise TripDecodeError(
            f"Route response has neither error, connections nor messages: {sorted(data)}"
        )

    def _parse_timestamp(self, value: Any) -> datetime | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise TripDecodeError(f"Timestamp must be a string, got {value!r}")
        try:
            parsed = datetime.strptime(value.strip(), TIMESTAMP_FORMAT)
        except ValueError as e:
            raise TripDecodeError(f"Invalid timestamp {value!r}") from e
        return parsed.replace(tzinfo=self._timezone)

    def _decode_connection(self, node: dict[str, Any]) -> RawConnection:
        return RawConnection(
            from_name=_get_str(node, "from"),
            to_name=_get_str(node, "to"),
            departure=self._parse_timestamp(node.get("departure")),
            arrival=self._parse_timestamp(node.get("arrival")),
            duration=_get_float(node, "duration"),
            legs=tuple(
                self._decode_leg(leg) for leg in _get_object_list(node, "legs", "connection")
            ),
            disruptions=tuple(extract_disruptions(node, self._timezone)),
        )

    def _decode_leg(self, node: dict[str, Any]) -> RawLeg:
        # A leg may carry only one of its times; the other one falls back to it
        departure = self._parse_timestamp(node.get("departure"))
        arrival = self._parse_timestamp(node.get("arrival"))
        exit_node = node.get("exit")
        if exit_node is not None and not isinstance(exit_node, dict):
            raise TripDecodeError("leg: 'exit' must be an object")

        return RawLeg(
            type=_get_str(node, "type"),
            name=_get_str(node, "name"),
            stop_id=_get_str(node, "stopid"),
            coord=_get_coord(node),
            departure=departure or arrival,
            arrival=arrival or departure,
            trip_number=_get_str(node, "*Z"),
            category=_get_str(node, "*G"),
            line=_get_str(node, "line"),
            operator=_get_str(node, "operator"),
            terminal=_get_str(node, "terminal"),
            fg_color=_get_str(node, "fgcolor"),
            bg_color=_get_str(node, "bgcolor"),
            track=_get_str(node, "track"),
            dep_delay=parse_delay(node.get("dep_delay")),
            arr_delay=parse_delay(node.get("arr_delay")),
            cancelled=(
                _get_bool(node, "cancelled") or is_cancellation_sentinel(node.get("dep_delay"))
            ),
            arrival_cancelled=is_cancellation_sentinel(node.get("arr_delay")),
            is_address=_get_bool(node, "isaddress"),
            running_time=_get_float(node, "runningtime"),
            infotext=_get_texts(node, "infotext"),
            stops=tuple(self._decode_stop(stop) for stop in _get_object_list(node, "stops", "leg")),
            disruptions=tuple(extract_disruptions(node, self._timezone)),
            exit=self._decode_exit(exit_node) if exit_node is not None else None,
        )

    def _decode_exit(self, node: dict[str, Any]) -> RawExit:
        return RawExit(
            stop_id=_get_str(node, "stopid"),
            name=_get_str(node, "name"),
            coord=_get_coord(node),
            arrival=self._parse_timestamp(node.get("arrival")),
            track=_get_str(node, "track"),
            arr_delay=parse_delay(node.get("arr_delay")),
            cancelled=(
                _get_bool(node, "cancelled") or is_cancellation_sentinel(node.get("arr_delay"))
            ),
            is_address=_get_bool(node, "isaddress"),
            wait_time=_get_float(node, "waittime"),
        )

    def _decode_stop(self, node: dict[str, Any]) -> RawStop:
        # First stops lack an arrival and last stops a departure
        departure = self._parse_timestamp(node.get("departure"))
        arrival = self._parse_timestamp(node.get("arrival"))
        return RawStop(
            stop_id=_get_str(node, "stopid"),
            name=_get_str(node, "name"),
            coord=_get_coord(node),
            arrival=arrival or departure,
            departure=departure or arrival,
            arr_delay=parse_delay(node.get("arr_delay")),
            dep_delay=parse_delay(node.get("dep_delay")),
            cancelled=(
                _get_bool(node, "cancelled")
                or is_cancellation_sentinel(node.get("arr_delay"))
                or is_cancellation_sentinel(node.get("dep_delay"))
            ),
        )


def decode_route_response(
    text: str, timezone: tzinfo = DEFAULT_TIMEZONE
) -> RawRouteResult | NoResult:
    """Decode a route.json response body. See ``RouteResponseDecoder.decode``."""
    return RouteResponseDecoder(timezone).decode(text)
