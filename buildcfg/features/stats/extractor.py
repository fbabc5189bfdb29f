"""Usage-analytics extraction from a request's build configuration."""

import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

import structlog

from buildcfg.features.requests.models import BuildRequest
from buildcfg.features.stats.constants import (
    COMMAND_PHASES,
    DEFAULT_LANGUAGE,
    FIELD_GITHUB_LANGUAGE,
    FIELD_LANGUAGE,
    FIELD_LANGUAGE_VERSION,
    FIELD_REPOSITORY_ID,
    FIELD_USES_APT_GET,
    FIELD_USES_SUDO,
    INVALID_VALUE,
    LANGUAGE_KEY,
    LANGUAGE_VERSION_KEYS,
)
from buildcfg.features.stats.models import AnalyticsPayload, resolve_language_version
from buildcfg.features.stats.publisher import PayloadPublisher


logger = structlog.get_logger()

SUDO_PATTERN = re.compile(r"\bsudo\b")
APT_GET_PATTERN = re.compile(r"\bapt-get\b")


def _flatten(value: Any) -> Iterator[Any]:
    if isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(item)
    elif value is not None and not isinstance(value, Mapping):
        yield value


def collect_commands(config: dict[str, Any]) -> list[str]:
    """Flatten the command phases of a configuration.

    Args:
        config: Build configuration.

    Returns:
        Commands of all phases in execution order; absent phases, null
        entries, and mappings contribute nothing.
    """
    return [
        command if isinstance(command, str) else str(command)
        for phase in COMMAND_PHASES
        for command in _flatten(config.get(phase))
    ]


class StatsExtractor:
    """Builds the analytics payload for one request and publishes it."""

    def __init__(self, request: BuildRequest, publisher: PayloadPublisher) -> None:
        """Initialize the extractor.

        Args:
            request: Request whose persisted configuration is analyzed.
            publisher: Publisher receiving the payload.
        """
        self._request = request
        self._publisher = publisher
        self._payload: AnalyticsPayload = {}

    @property
    def config(self) -> dict[str, Any]:
        """Get the request's configuration."""
        return self._request.config

    def store_stats(self) -> None:
        """Build the payload and hand it to the publisher.

        Returns without waiting for delivery.
        """
        payload = self.build_payload()
        language = payload[FIELD_LANGUAGE]
        self._publisher.enqueue(payload)
        self._payload = {}
        logger.info(
            "stats_enqueued",
            component="stats",
            request_id=self._request.id,
            repository_id=self._request.repository_id,
            language=language,
        )

    def build_payload(self) -> AnalyticsPayload:
        """Build the analytics payload.

        Returns:
            Nested payload keyed by field name.
        """
        self._payload = {}
        self._set_basic_info()
        self._set_language()
        self._set_language_version()
        self._set_uses_sudo()
        self._set_uses_apt_get()
        return self._payload

    def _set(self, path: str | Sequence[str], value: Any) -> None:
        keys = [path] if isinstance(path, str) else list(path)
        node = self._payload
        for key in keys[:-1]:
            node = node.setdefault(key, {})
        node[keys[-1]] = value

    def _set_basic_info(self) -> None:
        self._set(FIELD_REPOSITORY_ID, self._request.repository_id)

    def _set_language(self) -> None:
        self._set(FIELD_LANGUAGE, self._config_language())
        self._set(FIELD_GITHUB_LANGUAGE, self._github_language())

    def _set_language_version(self) -> None:
        for key in LANGUAGE_VERSION_KEYS:
            if key in self.config:
                version = resolve_language_version(self.config[key])
                self._set([FIELD_LANGUAGE_VERSION, key], version.to_payload())

    def _set_uses_sudo(self) -> None:
        self._set(FIELD_USES_SUDO, self._any_command_matches(SUDO_PATTERN))

    def _set_uses_apt_get(self) -> None:
        self._set(FIELD_USES_APT_GET, self._any_command_matches(APT_GET_PATTERN))

    def _any_command_matches(self, pattern: re.Pattern[str]) -> bool:
        return any(pattern.search(command) for command in collect_commands(self.config))

    def _config_language(self) -> str:
        language = self.config.get(LANGUAGE_KEY)
        if isinstance(language, str):
            return language
        if language is None:
            return DEFAULT_LANGUAGE
        return INVALID_VALUE

    def _github_language(self) -> str | None:
        repository = self._request.payload.get("repository")
        if not isinstance(repository, dict):
            return None
        language = repository.get("language")
        return language if isinstance(language, str) else None


def extract_and_publish(request: BuildRequest, publisher: PayloadPublisher) -> None:
    """Extract usage analytics for a request and enqueue them.

    Args:
        request: Request whose persisted configuration is analyzed.
        publisher: Publisher receiving the payload.
    """
    StatsExtractor(request, publisher).store_stats()
