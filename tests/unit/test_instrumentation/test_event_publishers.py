"""Unit tests for instrumentation events and publishers."""

import io
import json
from collections.abc import Generator

import pytest
import structlog
from pydantic import ValidationError

from buildcfg.features.instrumentation.models import InstrumentationEvent
from buildcfg.features.instrumentation.protocols import EventPublisher
from buildcfg.features.instrumentation.publishers import (
    LogEventPublisher,
    MemoryEventPublisher,
)
from buildcfg.features.observability.logging import configure_logging


def _event(name: str = "buildcfg.fetch_config.run:completed") -> InstrumentationEvent:
    return InstrumentationEvent(
        event=name,
        message="FetchConfigService#run:completed {}",
        result={".result": "configured"},
    )


class TestInstrumentationEvent:
    """Tests for the event model."""

    def test_marker(self) -> None:
        """Test that the trailing marker is exposed."""
        assert _event().marker == "completed"

    def test_rejects_name_without_marker(self) -> None:
        """Test that event names must end in a marker."""
        with pytest.raises(ValidationError):
            _event("buildcfg.fetch_config.run")

    def test_is_frozen(self) -> None:
        """Test that events are immutable."""
        event = _event()

        with pytest.raises(ValidationError):
            event.message = "changed"  # type: ignore[misc]


class TestMemoryEventPublisher:
    """Tests for the in-memory publisher."""

    def test_satisfies_protocol(self) -> None:
        """Test that the publisher implements EventPublisher."""
        assert isinstance(MemoryEventPublisher(), EventPublisher)
        assert isinstance(LogEventPublisher(), EventPublisher)

    def test_collects_in_order(self) -> None:
        """Test that events are kept in publication order."""
        publisher = MemoryEventPublisher()
        first = _event()
        second = _event("buildcfg.other.run:completed")

        publisher.publish(first)
        publisher.publish(second)

        assert publisher.events == [first, second]

    def test_clear(self) -> None:
        """Test that clear drops collected events."""
        publisher = MemoryEventPublisher()
        publisher.publish(_event())

        publisher.clear()

        assert publisher.events == []


class TestLogEventPublisher:
    """Tests for the structured-log publisher."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self) -> Generator[None, None, None]:
        """Restore structlog defaults after each test."""
        yield
        structlog.reset_defaults()

    def test_mixed_key_types_are_logged(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a document with boolean keys renders as sorted JSON."""
        output = io.StringIO()
        configure_logging(output=output)
        monkeypatch.setattr(
            "buildcfg.features.instrumentation.publishers.logger",
            structlog.get_logger(),
        )
        event = InstrumentationEvent(
            event="buildcfg.fetch_config.run:completed",
            message="FetchConfigService#run:completed {}",
            result={"deploy": {"provider": "releases", True: {"tags": True}}},
        )

        LogEventPublisher().publish(event)

        record = json.loads(output.getvalue())
        assert record["event"] == "instrumentation_event"
        assert record["event_name"] == "buildcfg.fetch_config.run:completed"
        assert record["result"] == {
            "deploy": {"provider": "releases", "true": {"tags": True}}
        }
