"""Build configuration retrieval and normalization.

This module provides the fetch stage of the pipeline:
- Contents API retrieval with not_found/server_error classification
- Base64 decoding and YAML parsing with position-bearing parse errors
- Outcome tagging under the reserved ``.result`` keys
- Feature-gated stripping of ``group`` and ``dist``
- Parameter redaction for instrumentation
"""

from buildcfg.features.fetch.client import ConfigFetcher
from buildcfg.features.fetch.constants import (
    DEFAULT_CONFIG_PATH,
    GATED_KEYS,
    RESULT_KEY,
    RESULT_MESSAGE_KEY,
)
from buildcfg.features.fetch.decoder import ConfigDecoder, format_yaml_error
from buildcfg.features.fetch.metrics import FetchConfigMetrics
from buildcfg.features.fetch.models import (
    ConfigOutcome,
    DecodeFailure,
    FetchConfigParams,
    FetchFailure,
    ParsedConfig,
    RawConfig,
)
from buildcfg.features.fetch.normalizer import ConfigNormalizer
from buildcfg.features.fetch.redact import (
    DEFAULT_SENSITIVE_PARAMS,
    REDACTED_VALUE,
    format_params,
    is_sensitive_param,
    redact_params,
)
from buildcfg.features.fetch.service import FetchConfigService


__all__ = [
    # Pipeline
    "ConfigFetcher",
    "ConfigDecoder",
    "ConfigNormalizer",
    "FetchConfigService",
    # Models
    "ConfigOutcome",
    "DecodeFailure",
    "FetchConfigParams",
    "FetchFailure",
    "ParsedConfig",
    "RawConfig",
    # Constants
    "DEFAULT_CONFIG_PATH",
    "GATED_KEYS",
    "RESULT_KEY",
    "RESULT_MESSAGE_KEY",
    # Metrics
    "FetchConfigMetrics",
    # Redaction
    "DEFAULT_SENSITIVE_PARAMS",
    "REDACTED_VALUE",
    "format_params",
    "format_yaml_error",
    "is_sensitive_param",
    "redact_params",
]
