"""Domain models for repositories and build requests."""

from typing import Annotated, Any

from pydantic import Field

from buildcfg.data_model.frozen import FrozenModel


class Repository(FrozenModel):
    """A repository hosted on the source hosting provider."""

    id: Annotated[int, Field(ge=1, description="Internal repository identifier")]
    owner_name: Annotated[str, Field(min_length=1)]
    name: Annotated[str, Field(min_length=1)]
    github_id: int | None = Field(
        default=None, description="Provider-side repository identifier"
    )

    @property
    def slug(self) -> str:
        """Return the ``owner/name`` slug."""
        return f"{self.owner_name}/{self.name}"


class BuildRequest(FrozenModel):
    """A build request triggered by an event on the hosting platform.

    ``config`` holds the persisted build configuration (the normalized
    document produced by the fetch stage) and ``payload`` the raw event
    payload reported by the platform.
    """

    id: Annotated[int, Field(ge=1)]
    repository: Repository
    commit: Annotated[str, Field(min_length=1, description="Git ref to read")]
    config: dict[str, Any] = Field(default_factory=dict)
    payload: dict[str, Any] = Field(default_factory=dict)
    config_path: str | None = Field(
        default=None, description="Overrides the configured document path"
    )

    @property
    def repository_id(self) -> int:
        """Return the owning repository's identifier."""
        return self.repository.id
