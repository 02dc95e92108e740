"""CLI command listing zone offsets at a reference instant."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ...core import to_short_time, to_tz_from_utc
from ...utils.time import format_ts_utc_z
from ...zones import COMMON_ZONES, resolve_offset_hours
from ..base import get_logger, handle_errors
from .options import AtOption, resolve_reference

logger = get_logger(__name__)


def build_zone_table(zones: list[str], at: str | None) -> Table:
    """Build a table of whole-hour offsets and local clock times.

    Args:
        zones: IANA zone names, in display order.
        at: Reference instant string, or None for now.

    Returns:
        Rich table with one row per zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If any zone is unknown.
    """
    reference = resolve_reference(at)
    utc_time_of_day = reference - reference.replace(hour=0, minute=0, second=0, microsecond=0)

    table = Table(title=f"Zone offsets at {format_ts_utc_z(reference)}")
    table.add_column("Zone", style="cyan")
    table.add_column("Offset", justify="right")
    table.add_column("Local time (whole hours)", justify="right", style="green")

    for zone in zones:
        offset = resolve_offset_hours(reference, zone)
        local = to_tz_from_utc(utc_time_of_day, reference, zone)
        table.add_row(zone, f"{offset:+d}h", to_short_time(local))

    logger.debug("Built zone table for %d zones", len(zones))
    return table


def zones_command(
    zones: Annotated[
        list[str] | None,
        typer.Argument(help="IANA zones to show (defaults to common US zones and UTC)"),
    ] = None,
    at: AtOption = None,
) -> None:
    """Show each zone's whole-hour UTC offset and local time at --at.

    Offsets are truncated to whole hours, so zones with a 30 or 45 minute
    offset (e.g. Asia/Kolkata) show a local time off by that many minutes.
    """
    with handle_errors("zones", logger=logger):
        table = build_zone_table(list(zones or COMMON_ZONES), at)

    Console().print(table)
