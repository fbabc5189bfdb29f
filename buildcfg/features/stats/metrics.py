"""Metrics collection for usage analytics."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class StatsMetrics:
    """Metrics for analytics extraction and delivery.

    Attributes:
        payloads_enqueued: Payloads handed to the queue.
        payloads_delivered: Payloads accepted by the collection service.
        delivery_failures: Failed delivery attempts.
        languages_total: Extracted ``language`` values and their counts.
    """

    payloads_enqueued: int = 0
    payloads_delivered: int = 0
    delivery_failures: int = 0
    languages_total: dict[str, int] = field(default_factory=dict)

    _instance: ClassVar["StatsMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "StatsMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_enqueued(self, language: str) -> None:
        """Record a payload placed on the queue."""
        self.payloads_enqueued += 1
        self.languages_total[language] = self.languages_total.get(language, 0) + 1

    def record_delivered(self) -> None:
        """Record a payload accepted by the collection service."""
        self.payloads_delivered += 1

    def record_delivery_failure(self) -> None:
        """Record a failed delivery attempt."""
        self.delivery_failures += 1

    def to_dict(self) -> dict[str, int | dict[str, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "payloads_enqueued": self.payloads_enqueued,
            "payloads_delivered": self.payloads_delivered,
            "delivery_failures": self.delivery_failures,
            "languages_total": dict(self.languages_total),
        }
