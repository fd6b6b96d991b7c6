"""Extraction of service disruptions from connection and leg nodes."""

import logging
import re
from datetime import datetime, tzinfo
from typing import Any

from chsearch_trips.adapters.search_ch.constants import DISRUPTION_TIME_FORMATS
from chsearch_trips.domain.errors import TripDecodeError
from chsearch_trips.domain.models.disruption import Disruption, TimeRange

logger = logging.getLogger(__name__)

_RANGE_SEPARATOR = re.compile(r"\s+-\s+")


def extract_disruptions(node: dict[str, Any], timezone: tzinfo | None = None) -> list[Disruption]:
    """Extract the disruptions of a connection or leg node.

    Upstream keys each disruption by its own reference URL, so the value is an
    object whose keys are enumerated, not a list.
    """
    raw = node.get("disruptions")
    if not raw:
        return []
    if not isinstance(raw, dict):
        raise TripDecodeError(f"'disruptions' must be an object, got {type(raw).__name__}")

    disruptions = []
    for key, entry in raw.items():
        if not isinstance(entry, dict):
            raise TripDecodeError(f"Disruption {key!r} must be an object")
        disruptions.append(_build_disruption(key, entry, timezone))
    return disruptions


def _optional_text(entry: dict[str, Any], key: str) -> str | None:
    value = entry.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_disruption(key: str, entry: dict[str, Any], timezone: tzinfo | None) -> Disruption:
    timerange = entry.get("timerange")
    return Disruption(
        key=key,
        id=_optional_text(entry, "id"),
        header=_optional_text(entry, "header"),
        lead=_optional_text(entry, "lead"),
        text=_optional_text(entry, "text"),
        time_range=parse_time_range(timerange, timezone) if isinstance(timerange, str) else None,
    )


def _split_range(raw: str) -> tuple[str, str] | None:
    parts = _RANGE_SEPARATOR.split(raw.strip())
    if len(parts) != 2:
        parts = raw.strip().split("-")
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def _parse_time(value: str, timezone: tzinfo | None) -> datetime | None:
    for fmt in DISRUPTION_TIME_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone) if timezone else parsed
    return None


def parse_time_range(raw: str, timezone: tzinfo | None = None) -> TimeRange | None:
    """Parse a "<start>-<end>" range in German or English notation.

    Returns None when the range cannot be read in any known notation.
    """
    bounds = _split_range(raw)
    if bounds is None:
        logger.debug(f"Disruption time range without separator: {raw!r}")
        return None

    start = _parse_time(bounds[0], timezone)
    end = _parse_time(bounds[1], timezone)
    if start is None or end is None:
        logger.debug(f"Unrecognised disruption time range: {raw!r}")
        return None
    return TimeRange(start=start, end=end)


def format_disruption(disruption: Disruption) -> str | None:
    """One-line summary of a disruption for a leg's info text."""
    parts = [part for part in (disruption.header, disruption.lead) if part]
    if not parts:
        return disruption.text
    return ": ".join(parts)
