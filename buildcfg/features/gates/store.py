"""In-memory feature gate store."""

import threading

import structlog

from buildcfg.features.requests.models import Repository


logger = structlog.get_logger()


class InMemoryFeatureGates:
    """Feature gates held in process memory.

    A feature is active for a repository when it was activated for that
    repository, for the repository's owner, or globally. A repository-level
    deactivation wins over owner and global activation.
    """

    def __init__(self) -> None:
        """Initialize an empty gate store."""
        self._lock = threading.Lock()
        self._global: set[str] = set()
        self._owners: dict[str, set[str]] = {}
        self._repositories: dict[str, set[int]] = {}
        self._disabled: dict[str, set[int]] = {}
        self._log = logger.bind(component="gates")

    def activate_repository(self, feature: str, repository: Repository) -> None:
        """Enable a feature for a single repository."""
        with self._lock:
            self._repositories.setdefault(feature, set()).add(repository.id)
            self._disabled.get(feature, set()).discard(repository.id)
        self._log.info(
            "feature_activated", feature=feature, repository=repository.slug
        )

    def deactivate_repository(self, feature: str, repository: Repository) -> None:
        """Disable a feature for a single repository."""
        with self._lock:
            self._repositories.get(feature, set()).discard(repository.id)
            self._disabled.setdefault(feature, set()).add(repository.id)
        self._log.info(
            "feature_deactivated", feature=feature, repository=repository.slug
        )

    def activate_owner(self, feature: str, owner_name: str) -> None:
        """Enable a feature for every repository of an owner."""
        with self._lock:
            self._owners.setdefault(feature, set()).add(owner_name)

    def enable_globally(self, feature: str) -> None:
        """Enable a feature for all repositories."""
        with self._lock:
            self._global.add(feature)

    def disable_globally(self, feature: str) -> None:
        """Remove global enablement of a feature."""
        with self._lock:
            self._global.discard(feature)

    def is_active(self, feature: str, repository: Repository) -> bool:
        """Check whether a feature is enabled for a repository.

        Args:
            feature: Feature name.
            repository: Repository the lookup is scoped to.

        Returns:
            True if the feature is active for the repository.
        """
        with self._lock:
            if repository.id in self._disabled.get(feature, set()):
                return False
            return (
                repository.id in self._repositories.get(feature, set())
                or repository.owner_name in self._owners.get(feature, set())
                or feature in self._global
            )
