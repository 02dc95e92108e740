"""Parsing and instant helpers shared by the core and the CLI.

This module covers the textual edges of the package:
- Canonical UTC instant strings: YYYY-MM-DDTHH:MM:SSZ (seconds-only, UTC)
- Clock strings for time-of-day values: [-]H:MM[:SS]
- Compact duration strings: 1h30m, 90s, 1500ms, 1y35d
- IANA zone validation

Internal operations use tz-aware datetimes and timedeltas; strings only appear
at the boundaries.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Canonical ts_utc format: exactly 20 characters, YYYY-MM-DDTHH:MM:SSZ
TS_UTC_LENGTH = 20
TS_UTC_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")

CLOCK_PATTERN = re.compile(r"^(?P<sign>-)?(?P<h>\d{1,3}):(?P<m>\d{2})(?::(?P<s>\d{2}))?$")
DURATION_PATTERN = re.compile(r"^(?P<sign>-)?(?:\d+(?:ms|[ydhms]))+$")
DURATION_TOKEN = re.compile(r"(\d+)(ms|[ydhms])")

_UNIT_DELTAS: dict[str, timedelta] = {
    "y": timedelta(days=365),
    "d": timedelta(days=1),
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
    "ms": timedelta(milliseconds=1),
}


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Return ``dt`` as a UTC-aware datetime.

    Naive datetimes are read as UTC; aware ones are converted.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_ts_utc_z(dt: datetime) -> str:
    """Format a datetime as canonical UTC instant string (YYYY-MM-DDTHH:MM:SSZ).

    Raises:
        ValueError: If dt is naive (no timezone).
    """
    if dt.tzinfo is None:
        raise ValueError(f"Cannot format naive datetime {dt}. Provide timezone context.")

    return dt.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_ts_utc(s: str) -> datetime:
    """Parse a UTC instant string (...Z or ...+00:00) to tz-aware UTC datetime.

    Strings with any other explicit offset are accepted and converted.

    Raises:
        ValueError: If string format is invalid or has no offset.
    """
    text = s[:-1] + "+00:00" if s.endswith("Z") else s
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid timestamp format: {s}") from e

    if dt.tzinfo is None:
        raise ValueError(f"Timestamp {s} is naive. Provide UTC timestamp with Z or +00:00.")
    return dt.astimezone(UTC)


def parse_date_or_datetime(s: str) -> datetime:
    """Parse a date (YYYY-MM-DD) or datetime string to a tz-aware UTC datetime.

    Date-only strings mean midnight UTC. Datetimes without an offset are
    read as UTC.

    Raises:
        ValueError: If string format is invalid.
    """
    if not isinstance(s, str) or not s.strip():
        raise ValueError(f"Expected non-empty string, got: {s!r}")

    s = s.strip()

    if len(s) == TS_UTC_LENGTH and TS_UTC_PATTERN.match(s):
        return parse_ts_utc(s)

    try:
        dt = datetime.fromisoformat(s[:-1] + "+00:00" if s.endswith("Z") else s)
    except ValueError as e:
        raise ValueError(
            f"Invalid date/datetime format: {s}. "
            "Expected YYYY-MM-DD or YYYY-MM-DDTHH:MM:SSZ"
        ) from e
    return ensure_utc(dt)


def assert_iana_zone(s: str) -> None:
    """Check that ``s`` names a zone in the IANA database.

    Used by the CLI to reject a bad ``--tz`` while options are parsed, before
    any conversion runs.

    Raises:
        ValueError: If ``s`` is not a string, is not a valid zone key, or is
            not present in the database.
    """
    if not isinstance(s, str):
        raise ValueError(f"Expected string, got {type(s).__name__}: {s}")

    try:
        ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(f"Invalid IANA timezone: {s!r}") from e


def parse_time_of_day(s: str) -> timedelta:
    """Parse a clock string ``[-]H:MM[:SS]`` into a time-of-day value.

    Hours are not limited to 0-23 so that rollover values such as ``25:45``
    or ``-1:15`` can be expressed; minutes and seconds must be below 60.

    Args:
        s: Clock string, e.g. ``"13:30"``, ``"0:05:30"``, ``"-1:15"``.

    Returns:
        Signed timedelta.

    Raises:
        ValueError: If the string is not a clock string.
    """
    match = CLOCK_PATTERN.match(s.strip())
    if match is None:
        raise ValueError(f"Invalid clock time (expected [-]H:MM[:SS]): {s}")

    minutes = int(match["m"])
    seconds = int(match["s"] or 0)
    if minutes >= 60 or seconds >= 60:
        raise ValueError(f"Minutes and seconds must be below 60: {s}")

    span = timedelta(hours=int(match["h"]), minutes=minutes, seconds=seconds)
    return -span if match["sign"] else span


def format_time_of_day(time_span: timedelta) -> str:
    """Format a time-of-day value as a 24-hour ``HH:MM:SS`` string.

    Negative spans are prefixed with ``-``; sub-second parts are dropped.
    """
    sign = "-" if time_span < timedelta(0) else ""
    total_seconds = int(abs(time_span) / timedelta(seconds=1))
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_duration(s: str) -> timedelta:
    """Parse a compact duration (``1h30m``, ``90s``, ``1500ms``) or a clock string.

    Units: y (365 days), d, h, m, s, ms. Whitespace between parts is ignored
    and a leading ``-`` negates the whole duration.

    Raises:
        ValueError: If the string is neither a compact duration nor a clock string.
    """
    text = "".join(s.split())
    if ":" in text:
        return parse_time_of_day(text)

    if not text or not DURATION_PATTERN.match(text):
        raise ValueError(
            f"Invalid duration: {s!r} (expected e.g. '1h30m', '90s', '1500ms' or H:MM[:SS])"
        )

    total = sum(
        (int(amount) * _UNIT_DELTAS[unit] for amount, unit in DURATION_TOKEN.findall(text)),
        timedelta(0),
    )
    return -total if text.startswith("-") else total
