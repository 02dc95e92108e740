"""Clock formatting and range membership commands."""

from __future__ import annotations

from typing import Annotated

import typer

from ...core import is_between, to_short_time
from ...utils.time import format_time_of_day, parse_time_of_day
from ..base import BaseCLI


def short_time_command(
    time: Annotated[
        str,
        typer.Argument(help="Time of day as [-]H:MM[:SS]; wraps past 24h and below 0"),
    ],
) -> None:
    """Print a time of day as a 12-hour clock string (e.g. 1:30 PM)."""
    cli = BaseCLI("clock")

    def _short_time() -> str:
        return to_short_time(parse_time_of_day(time))

    cli.handle_cli_operation(operation="short-time", op_callable=_short_time)


def between_command(
    time: Annotated[str, typer.Argument(help="Candidate time as H:MM[:SS]")],
    start: Annotated[str, typer.Argument(help="Range start (inclusive)")],
    end: Annotated[str, typer.Argument(help="Range end (exclusive); before start means the range crosses midnight")],
) -> None:
    """Check whether a time falls in [START, END).

    A range whose end is earlier than its start wraps past midnight
    (e.g. 22:00 to 2:00). Equal start and end form an empty range.
    """
    cli = BaseCLI("clock")

    def _between() -> dict:
        candidate = parse_time_of_day(time)
        start_span = parse_time_of_day(start)
        end_span = parse_time_of_day(end)
        return {
            "time": format_time_of_day(candidate),
            "range": f"[{format_time_of_day(start_span)}, {format_time_of_day(end_span)})",
            "crosses_midnight": start_span > end_span,
            "in_range": is_between(candidate, start_span, end_span),
        }

    cli.handle_cli_operation(operation="between", op_callable=_between)
