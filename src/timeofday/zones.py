"""Zone-offset resolution.

The core arithmetic never looks at zone rules itself. It asks an
``OffsetResolver`` for the signed whole-hour offset of a zone at a reference
instant, which is where daylight-saving transitions get accounted for.

The default resolver reads the IANA database through ``zoneinfo``. Callers
without a zone database (or tests that want a fixed offset) can pass
``fixed_offset_resolver(hours)`` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from .utils.time import ensure_utc

logger = logging.getLogger(__name__)

ZoneId = str | tzinfo
OffsetResolver = Callable[[datetime, ZoneId], int]

# Well-known IANA names
EASTERN = "America/New_York"
CENTRAL = "America/Chicago"
MOUNTAIN = "America/Denver"
PACIFIC = "America/Los_Angeles"
UTC_ZONE = "UTC"

COMMON_ZONES: tuple[str, ...] = (EASTERN, CENTRAL, MOUNTAIN, PACIFIC, UTC_ZONE)

_ONE_HOUR = timedelta(hours=1)


def get_zone(zone: ZoneId) -> tzinfo:
    """Return a tzinfo for an IANA name, or the tzinfo itself if one is given.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If the name is not in the IANA database.
        ValueError: If the name is not a valid zone key.
    """
    if isinstance(zone, tzinfo):
        return zone
    return ZoneInfo(zone)


def resolve_offset_hours(reference_utc: datetime, zone: ZoneId) -> int:
    """Return the signed whole-hour UTC offset of ``zone`` at ``reference_utc``.

    Positive for zones ahead of UTC. Sub-hour offsets are truncated toward
    zero (e.g. +5:30 resolves to 5, -3:30 to -3).

    Args:
        reference_utc: Instant at which the offset is evaluated. Naive values
            are read as UTC.
        zone: IANA zone name or tzinfo.

    Returns:
        Offset in whole hours, daylight saving included.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If the zone name is unknown.
        ValueError: If the tzinfo reports no offset for the instant.
    """
    tz = get_zone(zone)
    instant = ensure_utc(reference_utc)
    offset = instant.astimezone(tz).utcoffset()
    if offset is None:
        raise ValueError(f"Zone {zone!r} reports no UTC offset at {instant.isoformat()}")

    hours = int(offset / _ONE_HOUR)
    logger.debug("Resolved offset for %s at %s: %+d h", zone, instant.isoformat(), hours)
    return hours


def fixed_offset_resolver(hours: int) -> OffsetResolver:
    """Build a resolver that ignores its arguments and always returns ``hours``."""

    def _resolve(reference_utc: datetime, zone: ZoneId) -> int:
        return hours

    return _resolve
