"""Data models for build configuration retrieval."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import Field

from buildcfg.data_model.frozen import FrozenModel


ParsedConfig = dict[str, Any]


class ConfigOutcome(str, Enum):
    """Outcome tag attached to every fetch attempt.

    - CONFIGURED: Document fetched and parsed
    - NOT_FOUND: Provider returned 404
    - SERVER_ERROR: Any other provider or transport failure
    - PARSE_ERROR: Document is not valid YAML
    """

    CONFIGURED = "configured"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    PARSE_ERROR = "parse_error"


class RawConfig(FrozenModel):
    """Base64 payload returned by the provider."""

    content: str = Field(description="Base64-encoded document body")
    url: Annotated[str, Field(min_length=1, description="URL the body came from")]


class FetchFailure(FrozenModel):
    """Provider-classified retrieval failure."""

    outcome: Literal[ConfigOutcome.NOT_FOUND, ConfigOutcome.SERVER_ERROR]
    message: Annotated[str, Field(min_length=1)]
    status_code: int | None = Field(
        default=None, description="HTTP status code if a response was received"
    )


class DecodeFailure(FrozenModel):
    """Structural failure while decoding or parsing a document."""

    message: Annotated[str, Field(min_length=1)]


class FetchConfigParams(FrozenModel):
    """Parameters identifying the document to retrieve."""

    path: Annotated[str, Field(min_length=1)]
    ref: Annotated[str, Field(min_length=1)]
    repository_name: Annotated[str, Field(min_length=1)]
    project_key: Annotated[str, Field(min_length=1, description="Owning account")]
