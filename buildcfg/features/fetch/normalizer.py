"""Outcome tagging and feature gating of fetched documents."""

import structlog

from buildcfg.features.fetch.constants import (
    GATED_KEYS,
    RESULT_KEY,
    RESULT_MESSAGE_KEY,
)
from buildcfg.features.fetch.models import (
    ConfigOutcome,
    DecodeFailure,
    FetchFailure,
    ParsedConfig,
)
from buildcfg.features.gates.constants import TEMPLATE_SELECTION
from buildcfg.features.gates.protocols import FeatureGateStore
from buildcfg.features.requests.models import Repository


logger = structlog.get_logger()


class ConfigNormalizer:
    """Merges the outcome tag into the document and applies gating.

    Every input maps to a document carrying ``.result``:

    - FetchFailure -> ``{".result": "not_found" | "server_error"}``
    - DecodeFailure -> ``{".result": "parse_error", ".result_message": msg}``
    - mapping -> the mapping plus ``{".result": "configured"}``, with
      ``group`` and ``dist`` removed unless template_selection is active
    """

    def __init__(self, feature_gates: FeatureGateStore) -> None:
        """Initialize the normalizer.

        Args:
            feature_gates: Store resolving per-repository feature gates.
        """
        self._feature_gates = feature_gates
        self._log = logger.bind(component="normalize")

    def normalize(
        self,
        result: ParsedConfig | FetchFailure | DecodeFailure,
        repository: Repository,
    ) -> ParsedConfig:
        """Build the final document for a fetch attempt.

        Args:
            result: Parsed mapping or the failure that replaced it.
            repository: Repository the document belongs to.

        Returns:
            Normalized document.
        """
        if isinstance(result, FetchFailure):
            return {RESULT_KEY: result.outcome.value}

        if isinstance(result, DecodeFailure):
            return {
                RESULT_KEY: ConfigOutcome.PARSE_ERROR.value,
                RESULT_MESSAGE_KEY: result.message,
            }

        config: ParsedConfig = {**result, RESULT_KEY: ConfigOutcome.CONFIGURED.value}
        config.pop(RESULT_MESSAGE_KEY, None)

        if not self._gate_active(TEMPLATE_SELECTION, repository):
            stripped = [key for key in GATED_KEYS if key in config]
            for key in stripped:
                del config[key]
            if stripped:
                self._log.debug(
                    "gated_keys_stripped",
                    repository=repository.slug,
                    keys=stripped,
                )

        return config

    def _gate_active(self, feature: str, repository: Repository) -> bool:
        """Resolve a feature gate, treating lookup failures as inactive."""
        try:
            return self._feature_gates.is_active(feature, repository)
        except Exception as e:  # noqa: BLE001
            self._log.warning(
                "feature_gate_lookup_failed",
                feature=feature,
                repository=repository.slug,
                error=str(e),
            )
            return False
