"""Time-of-day arithmetic on ``timedelta`` values.

A time-of-day value is a ``timedelta`` read as "elapsed since midnight". Inputs
may be negative or exceed 24 hours; the formatting and zone conversions wrap
them onto the 24-hour wheel, while ``is_between`` compares them as given.

All functions here are pure: no I/O, no shared state, safe to call from any
thread.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from .global_config import DAYS_PER_YEAR, HOURS_PER_DAY
from .zones import OffsetResolver, ZoneId, resolve_offset_hours

_DAY = timedelta(hours=HOURS_PER_DAY)
_ONE_HOUR = timedelta(hours=1)
_ONE_MINUTE = timedelta(minutes=1)
_ONE_SECOND = timedelta(seconds=1)
_ONE_MILLISECOND = timedelta(milliseconds=1)
_ZERO = timedelta(0)


def normalize_time_of_day(time_span: timedelta) -> timedelta:
    """Wrap a time-of-day value onto ``[0, 24h)``.

    Python's modulo takes the sign of the divisor, so a single ``%`` already
    maps negative spans forward from midnight (-1h -> 23h).
    """
    return time_span % _DAY


def to_short_time(time_span: timedelta) -> str:
    """Format a time-of-day value as a 12-hour clock string.

    The value is wrapped onto the 24-hour wheel first, so 24h reads as
    midnight and -1h15m reads as 10:45 PM. Seconds are dropped (floored to
    the minute). Hours are never padded; minutes always are.

    Args:
        time_span: Elapsed time since midnight.

    Returns:
        String such as ``"1:05 AM"`` or ``"12:00 PM"``.
    """
    total_minutes = normalize_time_of_day(time_span) // _ONE_MINUTE
    hours, minutes = divmod(total_minutes, 60)

    display_hours = hours % 12
    if display_hours == 0:
        display_hours = 12

    am_pm = "AM" if hours < 12 else "PM"
    return f"{display_hours}:{minutes:02d} {am_pm}"


def is_between(time_span: timedelta, start: timedelta, end: timedelta) -> bool:
    """Check whether ``time_span`` falls in ``[start, end)``.

    When ``start > end`` the range crosses midnight (e.g. 22:00-02:00) and
    membership means "at or after start, or before end". Equal bounds form an
    empty range. Values are compared as given; pass normalized times.
    """
    if start <= end:
        return start <= time_span < end

    return start <= time_span or time_span < end


def to_utc_from_tz(
    time_span: timedelta,
    reference_utc: datetime,
    zone: ZoneId,
    *,
    resolver: OffsetResolver = resolve_offset_hours,
) -> timedelta:
    """Convert a local time-of-day in ``zone`` to a UTC time-of-day.

    The zone's offset is resolved at ``reference_utc`` so the result follows
    whichever daylight-saving rule is in force at that instant.

    Args:
        time_span: Local time since midnight.
        reference_utc: Instant used to pick the zone's offset.
        zone: IANA zone name or tzinfo, passed through to ``resolver``.
        resolver: Zone-offset lookup returning whole hours.

    Returns:
        UTC time-of-day in ``[0, 24h)``.

    Raises:
        Whatever ``resolver`` raises for an unknown zone (for the default
        resolver, ``zoneinfo.ZoneInfoNotFoundError``).
    """
    offset_hours = resolver(reference_utc, zone)
    return normalize_time_of_day(time_span - offset_hours * _ONE_HOUR)


def to_tz_from_utc(
    time_span: timedelta,
    reference_utc: datetime,
    zone: ZoneId,
    *,
    resolver: OffsetResolver = resolve_offset_hours,
) -> timedelta:
    """Convert a UTC time-of-day to the local time-of-day in ``zone``.

    Inverse of ``to_utc_from_tz`` for the same ``reference_utc`` and ``zone``.

    Returns:
        Local time-of-day in ``[0, 24h)``.
    """
    offset_hours = resolver(reference_utc, zone)
    return normalize_time_of_day(time_span + offset_hours * _ONE_HOUR)


def _count(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def to_display_format(duration: timedelta, compact: bool = True) -> str:
    """Render a duration as a coarse elapsed-time string.

    Picks the single coarsest unit pair the duration reaches:

        < 1 ms    -> "0s"
        < 1 s     -> "500ms"      / "500 milliseconds"
        < 1 min   -> "42s"        / "42 seconds"
        < 1 h     -> "1m 30s"     / "1 minute, 30 seconds"
        < 1 day   -> "5h 12m"     / "5 hours, 12 minutes"
        < 365 d   -> "1d 1h"      / "1 day, 1 hour"
        otherwise -> "1y 35d"     / "1 year, 35 days"

    Each part is the remainder within its parent unit and is truncated, never
    rounded. A year is a flat 365 days. Negative durations render their
    magnitude with a leading "-" (but never "-0s").

    Args:
        duration: Elapsed time.
        compact: Use unit letters instead of spelled-out, pluralized units.

    Returns:
        Human-readable string.
    """
    if duration < _ZERO:
        text = to_display_format(-duration, compact)
        return text if text == "0s" else f"-{text}"

    if duration < _ONE_MILLISECOND:
        return "0s"

    if duration < _ONE_SECOND:
        millis = duration // _ONE_MILLISECOND
        return f"{millis}ms" if compact else f"{millis} milliseconds"

    days = duration.days
    hours, rest = divmod(duration.seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    if duration < _ONE_MINUTE:
        return f"{seconds}s" if compact else _count(seconds, "second")

    if duration < _ONE_HOUR:
        if compact:
            return f"{minutes}m {seconds}s"
        return f"{_count(minutes, 'minute')}, {_count(seconds, 'second')}"

    if duration < _DAY:
        if compact:
            return f"{hours}h {minutes}m"
        return f"{_count(hours, 'hour')}, {_count(minutes, 'minute')}"

    if days < DAYS_PER_YEAR:
        if compact:
            return f"{days}d {hours}h"
        return f"{_count(days, 'day')}, {_count(hours, 'hour')}"

    years, days = divmod(days, DAYS_PER_YEAR)
    if compact:
        return f"{years}y {days}d"
    return f"{_count(years, 'year')}, {_count(days, 'day')}"
