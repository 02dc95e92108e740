"""Option types and parsers shared by several commands."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import typer

from ...utils.time import assert_iana_zone, parse_date_or_datetime, utc_now


def validate_zone(value: str) -> str:
    """Reject an unknown ``--tz`` before the command body runs."""
    try:
        assert_iana_zone(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    return value


ZoneOption = Annotated[
    str,
    typer.Option(
        "--tz",
        "-z",
        callback=validate_zone,
        help="IANA time zone (e.g. America/New_York)",
    ),
]

AtOption = Annotated[
    str | None,
    typer.Option(
        "--at",
        help="Reference instant for the zone offset (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SSZ). Defaults to now.",
    ),
]


def resolve_reference(at: str | None) -> datetime:
    """Return the reference instant for ``--at``, or the current UTC time."""
    if at is None:
        return utc_now()
    return parse_date_or_datetime(at)
