"""Instrumentation events emitted by pipeline services."""

from buildcfg.features.instrumentation.models import (
    COMPLETED_MARKER,
    InstrumentationEvent,
)
from buildcfg.features.instrumentation.protocols import EventPublisher
from buildcfg.features.instrumentation.publishers import (
    LogEventPublisher,
    MemoryEventPublisher,
)
from buildcfg.features.instrumentation.serialize import json_safe


__all__ = [
    "COMPLETED_MARKER",
    "EventPublisher",
    "InstrumentationEvent",
    "LogEventPublisher",
    "MemoryEventPublisher",
    "json_safe",
]
