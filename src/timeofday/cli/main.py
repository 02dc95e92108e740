from __future__ import annotations

from typing import Annotated

import typer

from ..global_config import PROJECT_NAME
from .base import configure_logging, get_version
from .commands.clock import between_command, short_time_command
from .commands.convert import to_tz_command, to_utc_command
from .commands.display import display_command
from .commands.zones import zones_command

configure_logging()
app = typer.Typer(
    help="Time-of-day arithmetic: 12-hour formatting, midnight-wrapping ranges, zone conversion and elapsed-time display",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)

app.command("short-time")(short_time_command)
app.command("between")(between_command)
app.command("to-utc")(to_utc_command)
app.command("to-tz")(to_tz_command)
app.command("display")(display_command)
app.command("zones")(zones_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROJECT_NAME} {get_version()}")
        raise typer.Exit()


@app.callback()
def root(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the installed version and exit",
        ),
    ] = False,
) -> None:
    """Time-of-day arithmetic utilities."""


def main() -> None:
    """Console-script entry point; runs the Typer app."""
    app()


if __name__ == "__main__":
    main()
