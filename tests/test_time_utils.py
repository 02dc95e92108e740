"""Tests for parsing and instant utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from timeofday.utils.time import (
    assert_iana_zone,
    ensure_utc,
    format_time_of_day,
    format_ts_utc_z,
    parse_date_or_datetime,
    parse_duration,
    parse_time_of_day,
    parse_ts_utc,
)

pytestmark = pytest.mark.unit


class TestParseTimeOfDay:
    """Clock strings [-]H:MM[:SS]."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0:00", timedelta(0)),
            ("13:30", timedelta(hours=13, minutes=30)),
            ("07:05:09", timedelta(hours=7, minutes=5, seconds=9)),
            ("25:45", timedelta(hours=25, minutes=45)),
            ("-1:15", -timedelta(hours=1, minutes=15)),
            (" 9:00 ", timedelta(hours=9)),
        ],
    )
    def test_accepts(self, text: str, expected: timedelta) -> None:
        assert parse_time_of_day(text) == expected

    @pytest.mark.parametrize("text", ["", "13", "1:5", "13:60", "13:30:60", "ab:cd", "1:30pm"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_time_of_day(text)


class TestFormatTimeOfDay:
    def test_pads_all_fields(self) -> None:
        assert format_time_of_day(timedelta(hours=1, minutes=5, seconds=3)) == "01:05:03"

    def test_drops_subseconds(self) -> None:
        assert format_time_of_day(timedelta(hours=23, seconds=59, microseconds=999999)) == "23:00:59"

    def test_negative(self) -> None:
        assert format_time_of_day(-timedelta(hours=1, minutes=15)) == "-01:15:00"

    def test_over_a_day(self) -> None:
        assert format_time_of_day(timedelta(hours=25, minutes=45)) == "25:45:00"


class TestParseDuration:
    """Compact durations and clock strings."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("90s", timedelta(seconds=90)),
            ("1500ms", timedelta(milliseconds=1500)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1h 30m", timedelta(hours=1, minutes=30)),
            ("2m5ms", timedelta(minutes=2, milliseconds=5)),
            ("25h", timedelta(hours=25)),
            ("400d", timedelta(days=400)),
            ("1y35d", timedelta(days=400)),
            ("-90s", -timedelta(seconds=90)),
            ("1:30", timedelta(hours=1, minutes=30)),
            ("0s", timedelta(0)),
        ],
    )
    def test_accepts(self, text: str, expected: timedelta) -> None:
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "10", "10x", "h", "1.5h", "--1s", "1h-30m"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_duration(text)


class TestInstants:
    def test_parse_ts_utc_z(self) -> None:
        assert parse_ts_utc("2024-01-20T12:30:00Z") == datetime(2024, 1, 20, 12, 30, tzinfo=UTC)

    def test_parse_ts_utc_offset_is_converted(self) -> None:
        assert parse_ts_utc("2024-01-20T07:30:00-05:00") == datetime(2024, 1, 20, 12, 30, tzinfo=UTC)

    def test_parse_ts_utc_rejects_naive(self) -> None:
        with pytest.raises(ValueError, match="naive"):
            parse_ts_utc("2024-01-20T12:30:00")

    def test_parse_ts_utc_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="Invalid timestamp"):
            parse_ts_utc("yesterday")

    def test_format_ts_utc_z(self) -> None:
        dt = datetime(2024, 6, 20, 8, 0, 0, 123456, tzinfo=timezone(timedelta(hours=-4)))
        assert format_ts_utc_z(dt) == "2024-06-20T12:00:00Z"

    def test_format_ts_utc_z_rejects_naive(self) -> None:
        with pytest.raises(ValueError, match="naive"):
            format_ts_utc_z(datetime(2024, 6, 20))

    def test_parse_date_is_midnight_utc(self) -> None:
        assert parse_date_or_datetime("2024-06-20") == datetime(2024, 6, 20, tzinfo=UTC)

    def test_parse_datetime(self) -> None:
        assert parse_date_or_datetime("2024-06-20T05:00:00Z") == datetime(2024, 6, 20, 5, tzinfo=UTC)

    def test_parse_date_or_datetime_rejects(self) -> None:
        with pytest.raises(ValueError):
            parse_date_or_datetime("20/06/2024")
        with pytest.raises(ValueError):
            parse_date_or_datetime("  ")

    def test_ensure_utc(self) -> None:
        assert ensure_utc(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=UTC)
        aware = datetime(2024, 1, 1, 9, tzinfo=timezone(timedelta(hours=9)))
        assert ensure_utc(aware) == datetime(2024, 1, 1, tzinfo=UTC)
        assert ensure_utc(aware).tzinfo is UTC


class TestAssertIanaZone:
    def test_valid(self) -> None:
        assert_iana_zone("America/New_York")

    @pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "", "../etc/passwd", "America"])
    def test_invalid(self, zone: str) -> None:
        with pytest.raises(ValueError, match="Invalid IANA timezone"):
            assert_iana_zone(zone)

    def test_non_string(self) -> None:
        with pytest.raises(ValueError, match="Expected string"):
            assert_iana_zone(42)  # type: ignore[arg-type]
