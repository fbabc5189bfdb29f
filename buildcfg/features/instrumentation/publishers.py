"""Instrumentation publishers."""

import threading

import structlog

from buildcfg.features.instrumentation.models import InstrumentationEvent
from buildcfg.features.instrumentation.serialize import json_safe


logger = structlog.get_logger()


class MemoryEventPublisher:
    """Collects events in memory, in publication order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: list[InstrumentationEvent] = []

    @property
    def events(self) -> list[InstrumentationEvent]:
        """Get a snapshot of published events."""
        with self._lock:
            return list(self._events)

    def publish(self, event: InstrumentationEvent) -> None:
        with self._lock:
            self._events.append(event)

    def clear(self) -> None:
        """Drop all collected events."""
        with self._lock:
            self._events.clear()


class LogEventPublisher:
    """Writes events to the structured log."""

    def __init__(self) -> None:
        self._log = logger.bind(component="instrumentation")

    def publish(self, event: InstrumentationEvent) -> None:
        self._log.info(
            "instrumentation_event",
            event_name=event.event,
            message=event.message,
            result=json_safe(event.result),
            data=json_safe(event.data),
        )
