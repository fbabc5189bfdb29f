"""Parameter redaction utilities for instrumentation."""

from collections.abc import Iterable, Mapping
from typing import Any


# Parameter names whose values must never appear in instrumentation
DEFAULT_SENSITIVE_PARAMS = frozenset(
    {
        "access_token",
        "client_secret",
        "client_id_secret",
        "secret",
        "token",
        "password",
        "api_key",
        "private_key",
    }
)

REDACTED_VALUE = "[secure]"


def _deny_list(sensitive_keys: Iterable[str] | None) -> frozenset[str]:
    keys = DEFAULT_SENSITIVE_PARAMS if sensitive_keys is None else sensitive_keys
    return frozenset(key.lower() for key in keys)


def is_sensitive_param(
    name: str, sensitive_keys: Iterable[str] | None = None
) -> bool:
    """Check if a parameter name is sensitive.

    Args:
        name: The parameter name to check.
        sensitive_keys: Deny-list to use instead of the default one.

    Returns:
        True if the parameter should be redacted.
    """
    return name.lower() in _deny_list(sensitive_keys)


def redact_params(
    params: Mapping[str, Any], sensitive_keys: Iterable[str] | None = None
) -> dict[str, Any]:
    """Redact sensitive parameters for instrumentation.

    Replaces the values of access tokens, client secrets, and other
    credential fields with [secure]. Key order and all other entries
    are preserved.

    Args:
        params: Original parameters.
        sensitive_keys: Deny-list to use instead of the default one.

    Returns:
        New dictionary with sensitive values redacted.
    """
    keys = _deny_list(sensitive_keys)
    result: dict[str, Any] = {}
    for key, value in params.items():
        if key.lower() in keys:
            result[key] = REDACTED_VALUE
        else:
            result[key] = value
    return result


def format_params(params: Mapping[str, Any]) -> str:
    """Render parameters for a human-readable message.

    Args:
        params: Parameters, usually already redacted.

    Returns:
        String such as ``{path: '.travis.yml', ref: 'abc123'}``.
    """
    pairs = ", ".join(f"{key}: {value!r}" for key, value in params.items())
    return "{" + pairs + "}"
