"""Language-version variants resolved during extraction."""

from typing import Annotated, Any, Literal

from pydantic import Field

from buildcfg.data_model.frozen import FrozenModel
from buildcfg.features.stats.constants import INVALID_VALUE


AnalyticsPayload = dict[str, Any]


class VersionList(FrozenModel):
    """Versions declared as a string or a sequence, sorted ascending."""

    kind: Literal["versions"] = "versions"
    values: tuple[str, ...]

    def to_payload(self) -> list[str]:
        return list(self.values)


class InvalidVersion(FrozenModel):
    """Versions declared with an unexpected type."""

    kind: Literal["invalid"] = "invalid"

    def to_payload(self) -> list[str]:
        return [INVALID_VALUE]


LanguageVersion = Annotated[VersionList | InvalidVersion, Field(discriminator="kind")]


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_language_version(value: Any) -> LanguageVersion:
    """Resolve a language-version value from the configuration.

    Args:
        value: Raw value of a language-version key.

    Returns:
        VersionList for a string or sequence, InvalidVersion otherwise.
    """
    if isinstance(value, str):
        items: list[Any] = [value]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        return InvalidVersion()
    return VersionList(values=tuple(sorted(_to_string(item) for item in items)))
