"""Provider client for retrieving build configuration documents."""

import time
from urllib.parse import quote

import httpx
import structlog

from buildcfg.features.fetch.constants import (
    CONTENT_FIELD,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_USER_AGENT,
    GITHUB_ACCEPT_HEADER,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
)
from buildcfg.features.fetch.metrics import FetchConfigMetrics
from buildcfg.features.fetch.models import ConfigOutcome, FetchFailure, RawConfig
from buildcfg.features.requests.models import Repository


logger = structlog.get_logger()


class ConfigFetcher:
    """Retrieves a file from the GitHub contents API.

    One request per call, no retries. A 404 is classified as
    ``not_found``; every other failure, including timeouts and
    malformed response bodies, as ``server_error``.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_GITHUB_API_URL,
        token: str | None = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            api_url: Base URL of the provider API.
            token: Optional access token sent with each request.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header value.
            transport: Optional transport, used to stub the provider.
        """
        self._api_url = api_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport
        self._metrics = FetchConfigMetrics.get_instance()
        self._log = logger.bind(component="fetch")

    def content_url(self, repository: Repository, path: str) -> str:
        """Build the contents API URL for a file in a repository.

        Args:
            repository: Repository holding the file.
            path: File path relative to the repository root.

        Returns:
            Contents API URL without the ref query parameter.
        """
        owner = quote(repository.owner_name, safe="")
        name = quote(repository.name, safe="")
        file_path = quote(path.lstrip("/"), safe="/")
        return f"{self._api_url}/repos/{owner}/{name}/contents/{file_path}"

    def fetch(
        self,
        repository: Repository,
        ref: str,
        path: str,
    ) -> RawConfig | FetchFailure:
        """Fetch a file at a given ref.

        Args:
            repository: Repository holding the file.
            ref: Git ref (commit SHA, branch, or tag).
            path: File path relative to the repository root.

        Returns:
            RawConfig with the base64 body, or a classified FetchFailure.
        """
        url = self.content_url(repository, path)
        log = self._log.bind(repository=repository.slug, ref=ref, path=path)
        start_time_ns = time.perf_counter_ns()

        result = self._request(url, ref, log)

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_duration(duration_ms)
        if isinstance(result, FetchFailure):
            log.info(
                "config_fetch_complete",
                outcome=result.outcome.value,
                status_code=result.status_code,
                duration_ms=round(duration_ms, 2),
            )
        else:
            log.info(
                "config_fetch_complete",
                outcome=ConfigOutcome.CONFIGURED.value,
                bytes=len(result.content),
                duration_ms=round(duration_ms, 2),
            )
        return result

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": GITHUB_ACCEPT_HEADER,
            "User-Agent": self._user_agent,
        }
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    def _request(
        self,
        url: str,
        ref: str,
        log: structlog.stdlib.BoundLogger,
    ) -> RawConfig | FetchFailure:
        """Execute the request and classify the response.

        Args:
            url: Contents API URL.
            ref: Git ref sent as query parameter.
            log: Bound logger.

        Returns:
            RawConfig or FetchFailure.
        """
        try:
            with httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url, params={"ref": ref}, headers=self._headers())
                self._metrics.record_request(response.status_code)
                return self._classify_response(response, url)

        except httpx.TimeoutException as e:
            self._metrics.record_transport_error()
            log.warning("config_fetch_timeout", error=str(e))
            return FetchFailure(
                outcome=ConfigOutcome.SERVER_ERROR,
                message=f"Request timed out: {e}",
            )

        except httpx.HTTPError as e:
            self._metrics.record_transport_error()
            log.warning("config_fetch_transport_error", error=str(e))
            return FetchFailure(
                outcome=ConfigOutcome.SERVER_ERROR,
                message=f"Request failed: {e}",
            )

        except Exception as e:  # noqa: BLE001
            self._metrics.record_transport_error()
            log.warning("config_fetch_unexpected_error", error=str(e))
            return FetchFailure(
                outcome=ConfigOutcome.SERVER_ERROR,
                message=f"Unexpected error: {e}",
            )

    def _classify_response(
        self, response: httpx.Response, url: str
    ) -> RawConfig | FetchFailure:
        """Classify a provider response.

        Args:
            response: HTTP response.
            url: Requested URL.

        Returns:
            RawConfig for a 2xx response carrying content, else FetchFailure.
        """
        status_code = response.status_code

        if status_code == HTTP_STATUS_NOT_FOUND:
            return FetchFailure(
                outcome=ConfigOutcome.NOT_FOUND,
                message="Configuration file not found (404)",
                status_code=status_code,
            )

        if not HTTP_STATUS_OK_MIN <= status_code < HTTP_STATUS_OK_MAX:
            return FetchFailure(
                outcome=ConfigOutcome.SERVER_ERROR,
                message=f"Provider error ({status_code})",
                status_code=status_code,
            )

        try:
            body = response.json()
        except ValueError:
            return FetchFailure(
                outcome=ConfigOutcome.SERVER_ERROR,
                message="Provider returned a non-JSON body",
                status_code=status_code,
            )

        content = body.get(CONTENT_FIELD) if isinstance(body, dict) else None
        if not isinstance(content, str):
            return FetchFailure(
                outcome=ConfigOutcome.SERVER_ERROR,
                message=f"Provider response has no '{CONTENT_FIELD}' field",
                status_code=status_code,
            )

        return RawConfig(content=content, url=url)
