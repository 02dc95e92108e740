from __future__ import annotations

from datetime import UTC, datetime

import pytest


@pytest.fixture
def winter_utc() -> datetime:
    """
    Reference instant in standard time for US zones (Eastern is UTC-5).
    """
    return datetime(2024, 1, 20, tzinfo=UTC)


@pytest.fixture
def summer_utc() -> datetime:
    """
    Reference instant in daylight-saving time for US zones (Eastern is UTC-4).
    """
    return datetime(2024, 6, 20, tzinfo=UTC)
