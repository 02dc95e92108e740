"""Command-line interface for timeofday."""
