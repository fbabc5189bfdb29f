"""Decoding and YAML parsing of fetched configuration documents."""

import base64

import structlog
import yaml

from buildcfg.features.fetch.constants import NON_BREAKING_SPACE
from buildcfg.features.fetch.models import DecodeFailure, ParsedConfig, RawConfig


logger = structlog.get_logger()


def format_yaml_error(error: yaml.YAMLError) -> str:
    """Format a YAML error with a ``line N column M`` position.

    The message is rebuilt on one line from the problem and context
    text, followed by the problem mark (1-based).

    Args:
        error: The error raised by the parser.

    Returns:
        Single-line message.
    """
    if not isinstance(error, yaml.MarkedYAMLError):
        return str(error).strip() or error.__class__.__name__

    parts = [part for part in (error.problem, error.context) if part]
    message = " ".join(parts) or error.__class__.__name__
    mark = error.problem_mark or error.context_mark
    if mark is not None:
        message = f"{message} at line {mark.line + 1} column {mark.column + 1}"
    return message


class ConfigDecoder:
    """Turns the provider's base64 body into a configuration mapping."""

    def __init__(self) -> None:
        self._log = logger.bind(component="decode")

    def decode(self, raw: RawConfig | str | bytes) -> ParsedConfig | DecodeFailure:
        """Decode and parse a document.

        Args:
            raw: Base64 payload, either wrapped in RawConfig or bare.

        Returns:
            The parsed mapping, or DecodeFailure with the parser message.
        """
        content = raw.content if isinstance(raw, RawConfig) else raw

        try:
            text = base64.b64decode(content).decode("utf-8")
        except ValueError as e:
            self._log.warning("config_decode_failed", error=str(e))
            return DecodeFailure(message=f"Invalid document encoding: {e}")

        return self.parse(text)

    def parse(self, text: str) -> ParsedConfig | DecodeFailure:
        """Parse YAML text into a mapping.

        Args:
            text: Document text.

        Returns:
            The parsed mapping, or DecodeFailure with the parser message.
        """
        text = text.replace(NON_BREAKING_SPACE, " ")

        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as e:
            message = format_yaml_error(e)
            self._log.info("config_parse_failed", error=message)
            return DecodeFailure(message=message)

        if parsed is None:
            return {}

        if not isinstance(parsed, dict):
            message = (
                "expected a mapping at the document root, "
                f"found {type(parsed).__name__}"
            )
            self._log.info("config_parse_failed", error=message)
            return DecodeFailure(message=message)

        return parsed
