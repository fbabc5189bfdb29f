"""Publisher handing analytics payloads to the job queue."""

from typing import Protocol, runtime_checkable

import structlog

from buildcfg.features.stats.constants import ANALYTICS_QUEUE, FIELD_LANGUAGE
from buildcfg.features.stats.job_queue import JobQueue
from buildcfg.features.stats.metrics import StatsMetrics
from buildcfg.features.stats.models import AnalyticsPayload


logger = structlog.get_logger()


@runtime_checkable
class PayloadPublisher(Protocol):
    """Protocol for fire-and-forget analytics publishers."""

    def enqueue(self, payload: AnalyticsPayload) -> None:
        """Schedule a payload for asynchronous delivery.

        Args:
            payload: Analytics payload; ownership passes to the publisher.
        """
        ...


class StatsPublisher:
    """Places analytics payloads on the dedicated analytics queue.

    Delivery, retries, and ordering belong to the queue and its
    consumers. Queue failures propagate to the caller.
    """

    def __init__(self, job_queue: JobQueue, queue_name: str = ANALYTICS_QUEUE) -> None:
        """Initialize the publisher.

        Args:
            job_queue: Queue receiving the jobs.
            queue_name: Name of the analytics queue.
        """
        self._job_queue = job_queue
        self._queue_name = queue_name
        self._metrics = StatsMetrics.get_instance()
        self._log = logger.bind(component="stats", queue=queue_name)

    @property
    def queue_name(self) -> str:
        """Get the target queue name."""
        return self._queue_name

    def enqueue(self, payload: AnalyticsPayload) -> None:
        """Place a payload on the analytics queue.

        Args:
            payload: Analytics payload.

        Raises:
            QueueUnavailableError: If the queue cannot accept the job.
        """
        self._job_queue.push(self._queue_name, payload)
        self._metrics.record_enqueued(str(payload.get(FIELD_LANGUAGE)))
        self._log.debug("stats_payload_enqueued")
