"""Command line helper for searching locations and trips on timetable.search.ch."""

import asyncio
import dataclasses
import json
import logging
import sys
from datetime import datetime
from typing import Any

import aiohttp

from chsearch_trips.adapters.config import AppConfig
from chsearch_trips.adapters.search_ch import (
    SearchChHttpClient,
    SearchChLocationRepository,
    SearchChTripRepository,
)
from chsearch_trips.application import TripPlanningService
from chsearch_trips.domain.models import (
    Location,
    LocationType,
    Point,
    QueryTripsResult,
    ResultStatus,
    TransitLeg,
    Trip,
    TripOptions,
    TripQuery,
    WalkingLeg,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _parse_location_arg(value: str) -> Location:
    """Treat numeric input as a station id and anything else as a name."""
    if value.isdigit():
        return Location(type=LocationType.STATION, id=value)
    return Location(type=LocationType.ANY, name=value)


def _format_time(value: datetime | None) -> str:
    return value.strftime("%H:%M") if value else "--:--"


def _format_delay(planned: datetime | None, expected: datetime | None) -> str:
    if planned is None or expected is None or planned == expected:
        return ""
    minutes = int((expected - planned).total_seconds() // 60)
    return f" ({minutes:+d})"


def format_trip(trip: Trip) -> str:
    """Human readable multi-line rendering of a trip."""
    changes = "change" if trip.transfers == 1 else "changes"
    lines = [
        f"{_format_time(trip.first_departure_time)} -> {_format_time(trip.last_arrival_time)}"
        f"  {trip.origin.name} -> {trip.destination.name}  ({trip.transfers} {changes})"
    ]
    for leg in trip.legs:
        if isinstance(leg, WalkingLeg):
            lines.append(f"  walk  {leg.departure.name} -> {leg.arrival.name}")
            continue

        dep, arr = leg.departure_stop, leg.arrival_stop
        cancelled = "  CANCELLED" if dep.cancelled or arr.cancelled else ""
        lines.append(
            f"  {leg.line.label or '?'}  "
            f"{_format_time(dep.planned_time)}{_format_delay(dep.planned_time, dep.expected_time)} "
            f"{dep.location.name}"
            f"{f' [{dep.position}]' if dep.position else ''} -> "
            f"{_format_time(arr.planned_time)}{_format_delay(arr.planned_time, arr.expected_time)} "
            f"{arr.location.name}"
            f"{f' [{arr.position}]' if arr.position else ''}{cancelled}"
        )
        if leg.info:
            lines.extend(f"      ! {info_line}" for info_line in leg.info.splitlines())
    return "\n".join(lines)


def _leg_to_dict(leg: WalkingLeg | TransitLeg) -> dict[str, Any]:
    return {"kind": str(leg.kind), **dataclasses.asdict(leg)}


def result_to_dict(result: QueryTripsResult) -> dict[str, Any]:
    """JSON-ready representation of a query result."""
    return {
        "status": str(result.status),
        "reason": result.reason,
        "anomalies": list(result.anomalies),
        "trips": [
            {
                **{k: v for k, v in dataclasses.asdict(trip).items() if k != "legs"},
                "legs": [_leg_to_dict(leg) for leg in trip.legs],
            }
            for trip in result.trips
        ],
    }


def _print_result(result: QueryTripsResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result_to_dict(result), indent=2, default=str, ensure_ascii=False))
        return
    if result.status is not ResultStatus.OK:
        print(f"No trips: {result.reason}")
        return
    for trip in result.trips:
        print(format_trip(trip))
        print()


def _print_locations(locations: list[Location], as_json: bool) -> None:
    if as_json:
        print(
            json.dumps(
                [dataclasses.asdict(loc) for loc in locations], indent=2, ensure_ascii=False
            )
        )
        return
    if not locations:
        print("No locations found")
    for loc in locations:
        print(f"{loc.id or '-':>10}  {loc.name}  ({loc.type})")


async def _handle_trip_command(
    service: TripPlanningService, args: Any, config: AppConfig
) -> None:
    when = datetime.fromisoformat(args.at) if args.at else datetime.now(config.zone)
    query = TripQuery(
        origin=_parse_location_arg(args.origin),
        destination=_parse_location_arg(args.destination),
        via=_parse_location_arg(args.via) if args.via else None,
        time=when,
        departure=not args.arrival,
        options=TripOptions(num_trips=config.trips_per_query),
    )
    result = await service.query_trips(query)
    _print_result(result, args.json)

    later = args.later > 0
    for _ in range(args.later or args.earlier):
        if result.context is None:
            break
        result = await service.query_more_trips(result.context, later=later)
        _print_result(result, args.json)


async def _execute_command(args: Any, config: AppConfig) -> None:
    """Execute the appropriate command based on args."""
    async with aiohttp.ClientSession() as session:
        client = SearchChHttpClient(
            session,
            base_url=config.api_base_url,
            timeout_seconds=config.api_timeout_seconds,
            route_min_delay_seconds=config.route_min_delay_seconds,
            route_daily_quota=config.route_daily_quota,
            completion_daily_quota=config.completion_daily_quota,
        )
        if args.command == "search":
            locations = await SearchChLocationRepository(client).suggest_locations(
                args.term, args.limit
            )
            _print_locations(locations, args.json)
        elif args.command == "nearby":
            locations = await SearchChLocationRepository(client).nearby_locations(
                Point(lat=args.lat, lon=args.lon), args.distance, args.limit
            )
            _print_locations(locations, args.json)
        elif args.command == "trip":
            service = TripPlanningService(SearchChTripRepository(client, timezone=config.zone))
            await _handle_trip_command(service, args, config)


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="timetable.search.ch trip search helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations
  chsearch-trips search "Zürich HB"

  # Stations around a coordinate
  chsearch-trips nearby 46.948 7.439

  # Trips, then two more pages of later trips
  chsearch-trips trip 8503000 8507785 --later 2

API: https://timetable.search.ch/api/help (1000 route queries/day, no auth)
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for locations")
    search_parser.add_argument("term", help="Location name to search for")
    search_parser.add_argument("--limit", type=int, default=10, help="Maximum results")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="Locations around a coordinate")
    nearby_parser.add_argument("lat", type=float, help="Latitude")
    nearby_parser.add_argument("lon", type=float, help="Longitude")
    nearby_parser.add_argument("--distance", type=int, default=1000, help="Radius in meters")
    nearby_parser.add_argument("--limit", type=int, default=10, help="Maximum results")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    trip_parser = subparsers.add_parser("trip", help="Search trips")
    trip_parser.add_argument("origin", help="Station id or name")
    trip_parser.add_argument("destination", help="Station id or name")
    trip_parser.add_argument("--via", help="Station id or name to travel via")
    trip_parser.add_argument("--at", help="ISO date-time (default: now)")
    trip_parser.add_argument(
        "--arrival", action="store_true", help="Treat --at as latest arrival"
    )
    paging = trip_parser.add_mutually_exclusive_group()
    paging.add_argument("--later", type=int, default=0, help="Pages of later trips to fetch")
    paging.add_argument("--earlier", type=int, default=0, help="Pages of earlier trips to fetch")
    trip_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.verbose)
    try:
        config = AppConfig()
        config.load_toml_overrides()
        await _execute_command(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
