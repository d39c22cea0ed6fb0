"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest
from tests.helpers import SAMPLE_LOG, FakeClock

from loglens.adapters.storage.indexed import create_catalog
from loglens.core.catalog import LogCatalog


@pytest.fixture
def sample_log() -> str:
    """The seven sample log lines as one text blob."""
    return SAMPLE_LOG


@pytest.fixture
def catalog(sample_log: str) -> LogCatalog:
    """Catalog with the sample log already ingested."""
    catalog = create_catalog()
    catalog.ingest(sample_log)
    return catalog


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock that only moves when advanced."""
    return FakeClock()


@pytest.fixture
def ticking_target(fake_clock: FakeClock) -> Callable[[float], float]:
    """Target function that advances the fake clock by its argument (ms)."""

    def target(ms: float) -> float:
        fake_clock.advance(ms / 1000)
        return ms

    return target
