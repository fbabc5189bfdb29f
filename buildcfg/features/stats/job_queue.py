"""Job queue boundary for analytics payloads."""

import json
import queue
import threading
from typing import Any, Protocol, runtime_checkable

from buildcfg.features.stats.errors import QueueUnavailableError


@runtime_checkable
class JobQueue(Protocol):
    """Protocol for a durable, named job queue."""

    def push(self, queue_name: str, payload: dict[str, Any]) -> None:
        """Place a job on a named queue.

        Args:
            queue_name: Target queue.
            payload: JSON-serializable job payload.

        Raises:
            QueueUnavailableError: If the queue cannot accept the job.
        """
        ...

    def pop(self, queue_name: str, timeout: float | None = None) -> dict[str, Any] | None:
        """Take the next job from a named queue.

        Args:
            queue_name: Source queue.
            timeout: Seconds to wait; None returns immediately.

        Returns:
            The job payload, or None if the queue is empty.
        """
        ...


class InMemoryJobQueue:
    """Named FIFO queues held in process memory.

    Payloads are stored JSON-encoded so that jobs cross the boundary the
    same way they would through an external queue.
    """

    def __init__(self, max_size: int = 0) -> None:
        """Initialize the queues.

        Args:
            max_size: Per-queue capacity; 0 means unbounded.
        """
        self._max_size = max_size
        self._lock = threading.Lock()
        self._queues: dict[str, queue.Queue[str]] = {}

    def _queue(self, queue_name: str) -> "queue.Queue[str]":
        with self._lock:
            if queue_name not in self._queues:
                self._queues[queue_name] = queue.Queue(maxsize=self._max_size)
            return self._queues[queue_name]

    def push(self, queue_name: str, payload: dict[str, Any]) -> None:
        encoded = json.dumps(payload, sort_keys=True)
        try:
            self._queue(queue_name).put_nowait(encoded)
        except queue.Full as e:
            msg = f"Queue '{queue_name}' is full ({self._max_size} jobs)"
            raise QueueUnavailableError(msg) from e

    def pop(self, queue_name: str, timeout: float | None = None) -> dict[str, Any] | None:
        try:
            if timeout is None:
                encoded = self._queue(queue_name).get_nowait()
            else:
                encoded = self._queue(queue_name).get(timeout=timeout)
        except queue.Empty:
            return None
        payload: dict[str, Any] = json.loads(encoded)
        return payload

    def size(self, queue_name: str) -> int:
        """Return the number of jobs waiting on a queue."""
        return self._queue(queue_name).qsize()
