"""Metrics collection for build configuration retrieval."""

from dataclasses import dataclass, field
from typing import ClassVar

from buildcfg.features.fetch.models import ConfigOutcome


@dataclass
class FetchConfigMetrics:
    """Metrics for configuration fetch runs.

    Singleton class that tracks provider requests, outcomes, and
    request durations.
    """

    provider_requests_total: dict[int, int] = field(default_factory=dict)
    transport_errors_total: int = 0
    outcomes_total: dict[str, int] = field(default_factory=dict)
    fetch_duration_ms_total: float = 0.0
    fetch_count: int = 0

    _instance: ClassVar["FetchConfigMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "FetchConfigMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, status_code: int) -> None:
        """Record a provider response.

        Args:
            status_code: HTTP status code.
        """
        self.provider_requests_total[status_code] = (
            self.provider_requests_total.get(status_code, 0) + 1
        )

    def record_transport_error(self) -> None:
        """Record a request that produced no response."""
        self.transport_errors_total += 1

    def record_outcome(self, outcome: ConfigOutcome) -> None:
        """Record the classified outcome of a run.

        Args:
            outcome: Outcome tag merged into the document.
        """
        key = outcome.value
        self.outcomes_total[key] = self.outcomes_total.get(key, 0) + 1

    def record_duration(self, duration_ms: float) -> None:
        """Record fetch duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.fetch_duration_ms_total += duration_ms
        self.fetch_count += 1

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "provider_requests_total": dict(self.provider_requests_total),
            "transport_errors_total": self.transport_errors_total,
            "outcomes_total": dict(self.outcomes_total),
            "fetch_duration_ms_total": self.fetch_duration_ms_total,
            "fetch_count": self.fetch_count,
        }

    @property
    def avg_duration_ms(self) -> float:
        """Calculate average fetch duration."""
        if self.fetch_count == 0:
            return 0.0
        return self.fetch_duration_ms_total / self.fetch_count
