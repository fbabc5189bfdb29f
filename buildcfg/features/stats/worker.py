"""Consumer delivering queued analytics payloads."""

import structlog

from buildcfg.features.stats.client import AnalyticsClient
from buildcfg.features.stats.constants import ANALYTICS_EVENT_STREAM, ANALYTICS_QUEUE
from buildcfg.features.stats.errors import AnalyticsDeliveryError
from buildcfg.features.stats.job_queue import JobQueue
from buildcfg.features.stats.metrics import StatsMetrics
from buildcfg.features.stats.models import AnalyticsPayload


logger = structlog.get_logger()


class AnalyticsDeliveryWorker:
    """Publishes payloads from the analytics queue to the collection service.

    A payload whose delivery fails is pushed back onto the queue before
    the error is re-raised, so delivery is at-least-once and the service
    must tolerate duplicates.
    """

    def __init__(
        self,
        job_queue: JobQueue,
        client: AnalyticsClient,
        queue_name: str = ANALYTICS_QUEUE,
        stream: str = ANALYTICS_EVENT_STREAM,
    ) -> None:
        """Initialize the worker.

        Args:
            job_queue: Queue holding analytics jobs.
            client: Collection service client.
            queue_name: Queue to consume.
            stream: Event stream the payloads are published to.
        """
        self._job_queue = job_queue
        self._client = client
        self._queue_name = queue_name
        self._stream = stream
        self._metrics = StatsMetrics.get_instance()
        self._log = logger.bind(component="stats", subcomponent="worker")

    def perform(self, payload: AnalyticsPayload) -> None:
        """Deliver one payload.

        Args:
            payload: Analytics payload.

        Raises:
            AnalyticsDeliveryError: If the collection service rejects it.
        """
        try:
            self._client.publish(self._stream, payload)
        except AnalyticsDeliveryError as exc:
            self._metrics.record_delivery_failure()
            self._log.warning(
                "analytics_delivery_failed",
                error=str(exc),
                status_code=exc.status_code,
            )
            raise
        self._metrics.record_delivered()

    def drain(self, max_jobs: int | None = None) -> int:
        """Deliver queued payloads until the queue is empty.

        Args:
            max_jobs: Optional cap on the number of jobs processed.

        Returns:
            Number of payloads delivered.

        Raises:
            AnalyticsDeliveryError: After requeueing the failed payload.
        """
        delivered = 0
        while max_jobs is None or delivered < max_jobs:
            payload = self._job_queue.pop(self._queue_name)
            if payload is None:
                break
            try:
                self.perform(payload)
            except AnalyticsDeliveryError:
                self._job_queue.push(self._queue_name, payload)
                raise
            delivered += 1

        self._log.info("analytics_queue_drained", delivered=delivered)
        return delivered
