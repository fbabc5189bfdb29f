"""JSON-safe rendering of parsed configuration documents."""

from typing import Any


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def json_safe(value: Any) -> Any:
    """Convert a parsed document into a structure JSON can sort and encode.

    Mapping keys that are not strings, such as the ``True`` that YAML 1.1
    resolves ``on`` to, are rendered the way JSON encodes the scalar.
    Values are left as they are.

    Args:
        value: Parsed document or any nested part of it.

    Returns:
        Equivalent structure whose mapping keys are all strings.
    """
    if isinstance(value, dict):
        return {_json_key(key): json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value
