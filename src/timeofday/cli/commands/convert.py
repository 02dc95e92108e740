"""Zone conversion commands for time-of-day values."""

from __future__ import annotations

from typing import Annotated

import typer

from ...core import to_short_time, to_tz_from_utc, to_utc_from_tz
from ...global_config import DEFAULT_TZ
from ...utils.time import format_time_of_day, format_ts_utc_z, parse_time_of_day
from ...zones import resolve_offset_hours
from ..base import BaseCLI
from .options import AtOption, ZoneOption, resolve_reference


def to_utc_command(
    time: Annotated[str, typer.Argument(help="Local time of day as H:MM[:SS]")],
    tz: ZoneOption = DEFAULT_TZ,
    at: AtOption = None,
) -> None:
    """Convert a local time of day in --tz to UTC.

    The zone's offset is taken at --at, so daylight saving follows the
    reference instant rather than today's date.
    """
    cli = BaseCLI("convert")

    def _to_utc() -> dict:
        reference = resolve_reference(at)
        local = parse_time_of_day(time)
        utc = to_utc_from_tz(local, reference, tz)
        return {
            "local": format_time_of_day(local),
            "zone": tz,
            "at": format_ts_utc_z(reference),
            "offset_hours": f"{resolve_offset_hours(reference, tz):+d}",
            "utc": f"{format_time_of_day(utc)} ({to_short_time(utc)})",
        }

    cli.handle_cli_operation(operation="to-utc", op_callable=_to_utc)


def to_tz_command(
    time: Annotated[str, typer.Argument(help="UTC time of day as H:MM[:SS]")],
    tz: ZoneOption = DEFAULT_TZ,
    at: AtOption = None,
) -> None:
    """Convert a UTC time of day to local time in --tz."""
    cli = BaseCLI("convert")

    def _to_tz() -> dict:
        reference = resolve_reference(at)
        utc = parse_time_of_day(time)
        local = to_tz_from_utc(utc, reference, tz)
        return {
            "utc": format_time_of_day(utc),
            "zone": tz,
            "at": format_ts_utc_z(reference),
            "offset_hours": f"{resolve_offset_hours(reference, tz):+d}",
            "local": f"{format_time_of_day(local)} ({to_short_time(local)})",
        }

    cli.handle_cli_operation(operation="to-tz", op_callable=_to_tz)
