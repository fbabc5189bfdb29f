"""Protocol interface for feature gate lookups."""

from typing import Protocol, runtime_checkable

from buildcfg.features.requests.models import Repository


@runtime_checkable
class FeatureGateStore(Protocol):
    """Protocol for per-repository feature switches."""

    def is_active(self, feature: str, repository: Repository) -> bool:
        """Check whether a feature is enabled for a repository.

        Args:
            feature: Feature name.
            repository: Repository the lookup is scoped to.

        Returns:
            True if the feature is active for the repository.
        """
        ...
