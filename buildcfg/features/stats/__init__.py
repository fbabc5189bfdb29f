"""Usage analytics for build configurations.

This module provides the stats stage of the pipeline:
- Extraction of language, language versions, and command usage
- Fire-and-forget publishing onto the analytics queue
- A delivery worker posting queued payloads to the collection service
"""

from buildcfg.features.stats.client import AnalyticsClient
from buildcfg.features.stats.constants import (
    ANALYTICS_EVENT_STREAM,
    ANALYTICS_QUEUE,
    COMMAND_PHASES,
    LANGUAGE_VERSION_KEYS,
)
from buildcfg.features.stats.errors import (
    AnalyticsDeliveryError,
    AnalyticsError,
    QueueUnavailableError,
)
from buildcfg.features.stats.extractor import (
    StatsExtractor,
    collect_commands,
    extract_and_publish,
)
from buildcfg.features.stats.job_queue import InMemoryJobQueue, JobQueue
from buildcfg.features.stats.metrics import StatsMetrics
from buildcfg.features.stats.models import (
    AnalyticsPayload,
    InvalidVersion,
    LanguageVersion,
    VersionList,
    resolve_language_version,
)
from buildcfg.features.stats.publisher import PayloadPublisher, StatsPublisher
from buildcfg.features.stats.worker import AnalyticsDeliveryWorker


__all__ = [
    # Extraction
    "StatsExtractor",
    "collect_commands",
    "extract_and_publish",
    # Models
    "AnalyticsPayload",
    "InvalidVersion",
    "LanguageVersion",
    "VersionList",
    "resolve_language_version",
    # Delivery
    "AnalyticsClient",
    "AnalyticsDeliveryWorker",
    "InMemoryJobQueue",
    "JobQueue",
    "PayloadPublisher",
    "StatsPublisher",
    # Errors
    "AnalyticsDeliveryError",
    "AnalyticsError",
    "QueueUnavailableError",
    # Constants
    "ANALYTICS_EVENT_STREAM",
    "ANALYTICS_QUEUE",
    "COMMAND_PHASES",
    "LANGUAGE_VERSION_KEYS",
    # Metrics
    "StatsMetrics",
]
