"""Analytics collection service client."""

from typing import TYPE_CHECKING

import httpx
import structlog

from buildcfg.features.stats.constants import (
    DEFAULT_ANALYTICS_URL,
    DEFAULT_DELIVERY_TIMEOUT_SECONDS,
)
from buildcfg.features.stats.errors import AnalyticsDeliveryError
from buildcfg.features.stats.models import AnalyticsPayload


if TYPE_CHECKING:
    from buildcfg.settings.app import AppSettings

logger = structlog.get_logger()

_HTTP_STATUS_OK_MIN = 200
_HTTP_STATUS_OK_MAX = 300


class AnalyticsClient:
    """Client posting events to a Keen-compatible collection API.

    Events are sent to ``{base_url}/projects/{project_id}/events/{stream}``
    with the write key as the Authorization header.
    """

    def __init__(
        self,
        project_id: str,
        write_key: str,
        base_url: str = DEFAULT_ANALYTICS_URL,
        timeout: float = DEFAULT_DELIVERY_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the client.

        Args:
            project_id: Collection service project identifier.
            write_key: Key authorizing event writes.
            base_url: Base URL of the collection API.
            timeout: Request timeout in seconds.
        """
        self._project_id = project_id
        self._write_key = write_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._log = logger.bind(component="stats", subcomponent="client")

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "AnalyticsClient":
        """Create a client from application settings.

        Raises:
            AnalyticsDeliveryError: If project id or write key is missing.
        """
        if not settings.analytics_project_id or not settings.analytics_write_key:
            msg = "ANALYTICS_PROJECT_ID and ANALYTICS_WRITE_KEY must be set"
            raise AnalyticsDeliveryError(msg)
        return cls(
            project_id=settings.analytics_project_id,
            write_key=settings.analytics_write_key,
            base_url=settings.analytics_url,
        )

    def event_url(self, stream: str) -> str:
        """Build the collection URL for an event stream."""
        return f"{self._base_url}/projects/{self._project_id}/events/{stream}"

    def publish(self, stream: str, payload: AnalyticsPayload) -> None:
        """Publish one event to a stream.

        Args:
            stream: Event stream (collection) name.
            payload: Event body.

        Raises:
            AnalyticsDeliveryError: On network errors or non-2xx responses.
        """
        try:
            response = httpx.post(
                self.event_url(stream),
                headers={
                    "Authorization": self._write_key,
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            msg = f"Analytics publish failed: {exc}"
            raise AnalyticsDeliveryError(msg) from exc

        if not _HTTP_STATUS_OK_MIN <= response.status_code < _HTTP_STATUS_OK_MAX:
            msg = f"Analytics service returned {response.status_code}"
            raise AnalyticsDeliveryError(msg, status_code=response.status_code)

        self._log.debug("analytics_event_published", stream=stream)
