"""Fetch-config service orchestrating retrieval, decoding, and normalization."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import structlog

from buildcfg.features.fetch.client import ConfigFetcher
from buildcfg.features.fetch.constants import (
    FETCH_CONFIG_EVENT,
    FETCH_CONFIG_PARAMS_KEY,
    FETCH_CONFIG_SOURCE,
    RESULT_KEY,
)
from buildcfg.features.fetch.decoder import ConfigDecoder
from buildcfg.features.fetch.metrics import FetchConfigMetrics
from buildcfg.features.fetch.models import (
    ConfigOutcome,
    FetchConfigParams,
    FetchFailure,
    ParsedConfig,
)
from buildcfg.features.fetch.normalizer import ConfigNormalizer
from buildcfg.features.fetch.redact import format_params, redact_params
from buildcfg.features.gates.protocols import FeatureGateStore
from buildcfg.features.instrumentation.models import (
    COMPLETED_MARKER,
    InstrumentationEvent,
)
from buildcfg.features.instrumentation.protocols import EventPublisher
from buildcfg.features.requests.models import BuildRequest


if TYPE_CHECKING:
    from buildcfg.settings.app import AppSettings


logger = structlog.get_logger()


class FetchConfigService:
    """Retrieves the build configuration for a request.

    Runs fetch -> decode -> normalize and emits exactly one
    instrumentation event per run. Provider and parser failures end in
    an outcome tag on the returned document; they are never raised.
    """

    def __init__(  # noqa: PLR0913
        self,
        fetcher: ConfigFetcher,
        decoder: ConfigDecoder,
        normalizer: ConfigNormalizer,
        events: EventPublisher,
        default_path: str,
        sensitive_keys: Iterable[str] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            fetcher: Provider client.
            decoder: Document decoder.
            normalizer: Outcome and gating normalizer.
            events: Instrumentation sink.
            default_path: Document path used when the request sets none.
            sensitive_keys: Redaction deny-list for instrumentation.
        """
        self._fetcher = fetcher
        self._decoder = decoder
        self._normalizer = normalizer
        self._events = events
        self._default_path = default_path
        self._sensitive_keys = sensitive_keys
        self._metrics = FetchConfigMetrics.get_instance()

    @classmethod
    def from_settings(
        cls,
        settings: "AppSettings",
        feature_gates: FeatureGateStore,
        events: EventPublisher,
    ) -> "FetchConfigService":
        """Wire a service from application settings.

        Args:
            settings: Application settings.
            feature_gates: Feature gate store.
            events: Instrumentation sink.

        Returns:
            Configured FetchConfigService.
        """
        fetcher = ConfigFetcher(
            api_url=settings.github_api_url,
            token=settings.github_token,
            timeout=settings.fetch_timeout_seconds,
            user_agent=settings.user_agent,
        )
        return cls(
            fetcher=fetcher,
            decoder=ConfigDecoder(),
            normalizer=ConfigNormalizer(feature_gates),
            events=events,
            default_path=settings.config_path,
            sensitive_keys=settings.sensitive_param_keys,
        )

    def fetch_config_params(self, request: BuildRequest) -> dict[str, Any]:
        """Build the retrieval parameters for a request.

        Args:
            request: Build request.

        Returns:
            Ordered mapping of path, ref, repository_name, project_key.
        """
        params = FetchConfigParams(
            path=request.config_path or self._default_path,
            ref=request.commit,
            repository_name=request.repository.name,
            project_key=request.repository.owner_name,
        )
        return params.model_dump()

    def run(self, request: BuildRequest) -> ParsedConfig:
        """Retrieve and normalize the configuration for a request.

        Args:
            request: Build request.

        Returns:
            Normalized document; always carries ``.result``.
        """
        params = self.fetch_config_params(request)
        log = logger.bind(
            component="fetch_config",
            request_id=request.id,
            repository=request.repository.slug,
        )

        raw = self._fetcher.fetch(request.repository, params["ref"], params["path"])
        decoded = raw if isinstance(raw, FetchFailure) else self._decoder.decode(raw)
        config = self._normalizer.normalize(decoded, request.repository)

        outcome = ConfigOutcome(config[RESULT_KEY])
        self._metrics.record_outcome(outcome)
        log.info("fetch_config_complete", outcome=outcome.value)

        self._instrument(params, config)
        return config

    def _instrument(self, params: dict[str, Any], config: ParsedConfig) -> None:
        """Publish the completion event with redacted parameters.

        Args:
            params: Retrieval parameters, possibly holding credentials.
            config: Final document.
        """
        rendered = format_params(redact_params(params, self._sensitive_keys))
        self._events.publish(
            InstrumentationEvent(
                event=f"{FETCH_CONFIG_EVENT}:{COMPLETED_MARKER}",
                message=f"{FETCH_CONFIG_SOURCE}:{COMPLETED_MARKER} {rendered}",
                result=dict(config),
                data={FETCH_CONFIG_PARAMS_KEY: rendered},
            )
        )
