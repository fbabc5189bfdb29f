"""Immutable base for request, fetch, and analytics value types."""

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Frozen value object.

    Unknown fields are rejected, and validation errors do not echo the
    offending input, which may hold provider credentials.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", hide_input_in_errors=True)
