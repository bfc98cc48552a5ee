"""
Test Configuration and Fixtures

This module provides:
- Test environment variables, set before any application module reads settings
- Unit tests (marked `unit`) run against in-memory fakes in test/service/venue_booking/fakes.py
- Integration tests (marked `integration`) need a running PostgreSQL and skip without one
"""

# =============================================================================
# Environment setup MUST happen before any other imports
# Settings and the log sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'venue_booking_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'venue_booking_test_db_{worker_id}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')
    os.environ.setdefault('VENUE_TIMEZONE', 'Asia/Kolkata')
    os.environ.setdefault('SHOW_GRACE_WINDOW_MINUTES', '30')


_early_setup_test_environment()

from collections.abc import Iterator  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from src.platform.metrics.booking_metrics import BookingMetrics  # noqa: E402


@pytest.fixture
def mock_metrics() -> Iterator[MagicMock]:
    """Metrics double; the real collectors register globally and cannot be built twice"""
    yield MagicMock(spec=BookingMetrics)
