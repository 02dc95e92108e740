from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError, version
from typing import Any

import typer

from ..global_config import PACKAGE_NAME

_LOGGING_CONFIGURED = False


def get_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure CLI-wide logging once; later calls are no-ops.

    WARNING is the default so command output is not interleaved with the
    DEBUG lines the library emits while resolving offsets.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration."""
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Turn any failure inside the block into a red message and exit code 1.

    The traceback goes to the log; the user sees ``✗ {operation} failed:
    {exc}``. ``typer.Exit`` passes through untouched.
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(1) from exc


def format_result(result: Any, *, operation: str | None = None) -> str:
    """Render a command result (None, bool, str, list or dict) as CLI text.

    Strings print as ``{operation}: {result}``; dicts print an icon line
    followed by one indented ``key: value`` line per entry.
    """
    op_label = operation or "Result"

    if result is None:
        return f"✓ {op_label}"

    if isinstance(result, bool):
        icon = "✓" if result else "✗"
        return f"{icon} {op_label}"

    if isinstance(result, str):
        return f"{op_label}: {result}"

    if isinstance(result, list):
        rendered_items = "\n".join(f"  • {item}" for item in result)
        return f"{op_label}:\n{rendered_items}" if rendered_items else f"{op_label}: []"

    if isinstance(result, dict):
        return _format_result_dict(result, op_label)

    return f"{op_label}: {result!r}"


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], Any],
    ) -> Any:
        """Run ``op_callable`` under ``handle_errors`` and echo its formatted result."""
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        self.logger.debug("%s %s -> %r", self.domain, operation, result)
        typer.echo(format_result(result, operation=operation))
        return result


def _format_result_dict(result: dict[str, Any], op_label: str) -> str:
    """Format a dictionary result into CLI-friendly text.

    The optional ``success`` key picks the icon and ``message`` is shown as
    a note; every other key is rendered as an indented ``key: value`` line
    in insertion order.
    """
    icon = "✓" if result.get("success", True) else "✗"
    lines = [f"{icon} {op_label}"]

    for key, value in result.items():
        if key in ("success", "message") or value is None:
            continue
        if isinstance(value, bool):
            value = "yes" if value else "no"
        lines.append(f"  {key}: {value}")

    message = result.get("message")
    if message:
        lines.append(f"  ℹ {message}")

    return "\n".join(lines)
