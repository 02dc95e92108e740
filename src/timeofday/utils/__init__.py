"""Utility modules.

This package provides shared parsing and instant helpers used across the codebase.
"""

from .time import (
    assert_iana_zone,
    ensure_utc,
    format_time_of_day,
    format_ts_utc_z,
    parse_date_or_datetime,
    parse_duration,
    parse_time_of_day,
    parse_ts_utc,
    utc_now,
)

__all__ = [
    # Instants
    "ensure_utc",
    "format_ts_utc_z",
    "parse_date_or_datetime",
    "parse_ts_utc",
    "utc_now",
    # Zones
    "assert_iana_zone",
    # Time-of-day and durations
    "format_time_of_day",
    "parse_duration",
    "parse_time_of_day",
]
