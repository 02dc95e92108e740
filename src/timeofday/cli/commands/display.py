"""Elapsed-time display command."""

from __future__ import annotations

from typing import Annotated

import typer

from ...core import to_display_format
from ...utils.time import parse_duration
from ..base import BaseCLI


def display_command(
    duration: Annotated[
        str,
        typer.Argument(help="Duration such as 90s, 1h30m, 1500ms, 400d or H:MM[:SS]"),
    ],
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Spell out units (1 minute, 30 seconds)"),
    ] = False,
) -> None:
    """Render a duration as a coarse human-readable string."""
    cli = BaseCLI("display")

    def _display() -> str:
        return to_display_format(parse_duration(duration), compact=not verbose)

    cli.handle_cli_operation(operation="display", op_callable=_display)
