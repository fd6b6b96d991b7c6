"""Delay parsing and expected-time arithmetic."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from chsearch_trips.adapters.search_ch.constants import CANCELLATION_SENTINEL

logger = logging.getLogger(__name__)


def is_cancellation_sentinel(raw: Any) -> bool:
    """Check whether a raw delay value marks a cancelled service."""
    return isinstance(raw, str) and raw.strip() == CANCELLATION_SENTINEL


def parse_delay(raw: Any) -> int:
    """Parse an upstream delay value into minutes.

    Integers, whole floats and integer strings ("7", "+3") are taken as is. The cancellation
    sentinel and anything unparseable count as no delay; the latter is logged.
    """
    if raw is None or is_cancellation_sentinel(raw):
        return 0
    if isinstance(raw, bool):
        logger.warning(f"Unparseable delay value: {raw!r}")
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        logger.warning(f"Unparseable delay value: {raw!r}")
        return 0
    try:
        return int(str(raw).strip())
    except ValueError:
        logger.warning(f"Unparseable delay value: {raw!r}")
        return 0


def apply_delay(planned: datetime | None, minutes: int) -> datetime | None:
    """Shift a planned time by a delay in minutes.

    Aware times are shifted as instants, so the result is correct across DST
    changes; naive times are shifted as they are.
    """
    if planned is None:
        return None
    delta = timedelta(minutes=minutes)
    if planned.tzinfo is None:
        return planned + delta
    return (planned.astimezone(UTC) + delta).astimezone(planned.tzinfo)
