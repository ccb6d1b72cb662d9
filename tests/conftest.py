"""Root test fixtures shared across all test types.

Database fixtures live in tests/integration/conftest.py.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator
from datetime import date

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.tracker.core.clock import FixedClock
from src.tracker.core.config import get_settings
from src.tracker.core.logging import clear_log_context

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def y2k_clock() -> FixedClock:
    return FixedClock.at_start_of_day(date(2000, 1, 1))


@pytest.fixture
def leap_day_clock() -> FixedClock:
    return FixedClock.at_start_of_day(date(2004, 2, 29))


@pytest.fixture
def capturing_logger() -> Generator[CapturingLogger]:
    """Route structlog output into a CapturingLogger for assertions."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_log_context()
    yield cap_logger
    clear_log_context()
    structlog.configure(**old_config)
