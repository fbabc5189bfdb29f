"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from buildcfg.settings import AppSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove settings variables from the environment."""
    for name in (
        "GITHUB_API_URL",
        "GITHUB_TOKEN",
        "CONFIG_PATH",
        "FETCH_TIMEOUT_SECONDS",
        "ANALYTICS_QUEUE",
        "REDACT_PARAM_KEYS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self) -> None:
        """Test default values without environment variables."""
        settings = AppSettings(_env_file=None)

        assert settings.github_api_url == "https://api.github.com"
        assert settings.github_token is None
        assert settings.config_path == ".travis.yml"
        assert settings.fetch_timeout_seconds == 5.0
        assert settings.analytics_queue == "analytics_events"
        assert settings.analytics_event_stream == "requests"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
        monkeypatch.setenv("CONFIG_PATH", ".ci.yml")
        monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "2.5")

        settings = get_settings()

        assert settings.github_token == "gh-token"  # noqa: S105
        assert settings.config_path == ".ci.yml"
        assert settings.fetch_timeout_seconds == 2.5

    @pytest.mark.parametrize("value", ["0", "-1", "61"])
    def test_timeout_bounds(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Test that out-of-range timeouts are rejected."""
        monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", value)

        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_default_sensitive_keys(self) -> None:
        """Test that the default deny-list covers OAuth credentials."""
        keys = AppSettings(_env_file=None).sensitive_param_keys

        assert "access_token" in keys
        assert "client_secret" in keys

    def test_sensitive_keys_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the deny-list is read as JSON and lower-cased."""
        monkeypatch.setenv("REDACT_PARAM_KEYS", '["Deploy_Key", "access_token"]')

        keys = AppSettings(_env_file=None).sensitive_param_keys

        assert keys == frozenset({"deploy_key", "access_token"})
