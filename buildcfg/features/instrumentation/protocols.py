"""Protocol interface for instrumentation publishers."""

from typing import Protocol, runtime_checkable

from buildcfg.features.instrumentation.models import InstrumentationEvent


@runtime_checkable
class EventPublisher(Protocol):
    """Protocol for instrumentation event sinks."""

    def publish(self, event: InstrumentationEvent) -> None:
        """Publish one instrumentation event.

        Args:
            event: The event to publish.
        """
        ...
