"""Application settings powered by Pydantic BaseSettings."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from buildcfg.features.fetch.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_USER_AGENT,
)
from buildcfg.features.fetch.redact import DEFAULT_SENSITIVE_PARAMS
from buildcfg.features.stats.constants import (
    ANALYTICS_EVENT_STREAM,
    ANALYTICS_QUEUE,
    DEFAULT_ANALYTICS_URL,
)


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    github_api_url: str = Field(
        default=DEFAULT_GITHUB_API_URL, validation_alias="GITHUB_API_URL"
    )
    github_token: str | None = Field(default=None, validation_alias="GITHUB_TOKEN")
    config_path: str = Field(default=DEFAULT_CONFIG_PATH, validation_alias="CONFIG_PATH")
    fetch_timeout_seconds: Annotated[float, Field(gt=0.0, le=60.0)] = Field(
        default=DEFAULT_FETCH_TIMEOUT_SECONDS,
        validation_alias="FETCH_TIMEOUT_SECONDS",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="USER_AGENT")

    analytics_url: str = Field(
        default=DEFAULT_ANALYTICS_URL, validation_alias="ANALYTICS_URL"
    )
    analytics_project_id: str | None = Field(
        default=None, validation_alias="ANALYTICS_PROJECT_ID"
    )
    analytics_write_key: str | None = Field(
        default=None, validation_alias="ANALYTICS_WRITE_KEY"
    )
    analytics_queue: str = Field(
        default=ANALYTICS_QUEUE, validation_alias="ANALYTICS_QUEUE"
    )
    analytics_event_stream: str = Field(
        default=ANALYTICS_EVENT_STREAM, validation_alias="ANALYTICS_EVENT_STREAM"
    )

    redact_param_keys: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_SENSITIVE_PARAMS),
        validation_alias="REDACT_PARAM_KEYS",
    )

    @property
    def sensitive_param_keys(self) -> frozenset[str]:
        """Return the redaction deny-list, lower-cased."""
        return frozenset(key.lower() for key in self.redact_param_keys)


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
