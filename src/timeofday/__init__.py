"""
timeofday core package.

This package currently provides:
- Pure time-of-day arithmetic (`timeofday.core`)
- Zone-offset resolution backed by `zoneinfo` (`timeofday.zones`)
- Parsing helpers for clock strings, durations and UTC instants (`timeofday.utils`)
- A minimal Typer-based CLI (`timeofday.cli`)

Configuration:
- Shared, project-wide constants live in `timeofday.global_config`.
"""
