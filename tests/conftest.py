"""Shared pytest fixtures."""

from collections.abc import Generator

import pytest

from buildcfg.features.fetch.metrics import FetchConfigMetrics
from buildcfg.features.stats.metrics import StatsMetrics


@pytest.fixture(autouse=True)
def reset_metrics() -> Generator[None, None, None]:
    """Reset metrics singletons around every test."""
    FetchConfigMetrics.reset()
    StatsMetrics.reset()
    yield
    FetchConfigMetrics.reset()
    StatsMetrics.reset()
