"""Instrumentation event model."""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import Field

from buildcfg.data_model.frozen import FrozenModel


COMPLETED_MARKER = "completed"


class InstrumentationEvent(FrozenModel):
    """One instrumentation event emitted after a service run.

    ``event`` is a dotted name ending in ``:<marker>``, for example
    ``buildcfg.fetch_config.run:completed``.
    """

    event: Annotated[str, Field(min_length=1, pattern=r"^[\w.]+:\w+$")]
    message: Annotated[str, Field(min_length=1)]
    result: Any = None
    data: dict[str, Any] = Field(default_factory=dict)
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def marker(self) -> str:
        """Return the trailing status marker of the event name."""
        return self.event.rsplit(":", 1)[1]
