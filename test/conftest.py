"""
Test Configuration and Fixtures

This module provides:
- Environment setup before application imports (memory seat store, test log dir)
- A fresh in-memory seat store per test
- A TestClient running the real app lifespan against that store

Architecture:
- Unit tests (test/**/unit/): use stores and mocks directly, no app
- Integration tests: drive the HTTP API in-process through TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the logger read the environment at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ['SEAT_STORE_BACKEND'] = 'memory'
    os.environ['TOTAL_SEATS'] = '80'
    os.environ['SEATS_PER_ROW'] = '7'
    os.environ['MAX_ALLOCATION_ATTEMPTS'] = '3'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import cleanup, container  # noqa: E402
from src.service.seat_booking.driven_adapter.state.in_memory_seat_store import (  # noqa: E402
    InMemorySeatStore,
)
from test.constants import SEATS_PER_ROW, TOTAL_SEATS  # noqa: E402


@pytest.fixture
def seat_store() -> InMemorySeatStore:
    return InMemorySeatStore(total_seats=TOTAL_SEATS, seats_per_row=SEATS_PER_ROW)


@pytest.fixture
def client(seat_store: InMemorySeatStore) -> Generator[TestClient, None, None]:
    from src.main import app

    container.seat_store.override(seat_store)
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.seat_store.reset_override()
        cleanup()
