"""Unit tests for the fetch and analytics metrics singletons."""

from buildcfg.features.fetch.metrics import FetchConfigMetrics
from buildcfg.features.fetch.models import ConfigOutcome
from buildcfg.features.stats.metrics import StatsMetrics


class TestFetchConfigMetrics:
    """Tests for FetchConfigMetrics."""

    def test_singleton(self) -> None:
        """Test that get_instance returns the same object until reset."""
        first = FetchConfigMetrics.get_instance()

        assert FetchConfigMetrics.get_instance() is first
        FetchConfigMetrics.reset()
        assert FetchConfigMetrics.get_instance() is not first

    def test_to_dict(self) -> None:
        """Test the exported counters."""
        metrics = FetchConfigMetrics.get_instance()
        metrics.record_request(200)
        metrics.record_request(404)
        metrics.record_transport_error()
        metrics.record_outcome(ConfigOutcome.CONFIGURED)
        metrics.record_outcome(ConfigOutcome.NOT_FOUND)
        metrics.record_outcome(ConfigOutcome.NOT_FOUND)

        assert metrics.to_dict() == {
            "provider_requests_total": {200: 1, 404: 1},
            "transport_errors_total": 1,
            "outcomes_total": {"configured": 1, "not_found": 2},
            "fetch_duration_ms_total": 0.0,
            "fetch_count": 0,
        }

    def test_avg_duration(self) -> None:
        """Test the average over recorded durations."""
        metrics = FetchConfigMetrics.get_instance()
        assert metrics.avg_duration_ms == 0.0

        metrics.record_duration(10.0)
        metrics.record_duration(30.0)

        assert metrics.avg_duration_ms == 20.0


class TestStatsMetrics:
    """Tests for StatsMetrics."""

    def test_to_dict(self) -> None:
        """Test the exported counters."""
        metrics = StatsMetrics.get_instance()
        metrics.record_enqueued("ruby")
        metrics.record_enqueued("default")
        metrics.record_delivered()
        metrics.record_delivery_failure()

        assert metrics.to_dict() == {
            "payloads_enqueued": 2,
            "payloads_delivered": 1,
            "delivery_failures": 1,
            "languages_total": {"ruby": 1, "default": 1},
        }
