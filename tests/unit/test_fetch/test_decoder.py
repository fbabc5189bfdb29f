"""Unit tests for configuration decoding and parsing."""

import base64

import pytest
import yaml

from buildcfg.features.fetch.decoder import ConfigDecoder, format_yaml_error
from buildcfg.features.fetch.models import DecodeFailure, RawConfig


def _encode(text: str) -> str:
    return base64.encodebytes(text.encode("utf-8")).decode("ascii")


@pytest.fixture
def decoder() -> ConfigDecoder:
    """Create a decoder."""
    return ConfigDecoder()


class TestDecode:
    """Tests for ConfigDecoder.decode."""

    def test_parses_mapping(self, decoder: ConfigDecoder) -> None:
        """Test that a base64 YAML body decodes into a mapping."""
        result = decoder.decode(_encode("foo: Foo"))

        assert result == {"foo": "Foo"}

    def test_accepts_raw_config(self, decoder: ConfigDecoder) -> None:
        """Test decoding a RawConfig wrapper."""
        raw = RawConfig(content=_encode("language: ruby"), url="https://example.com")

        assert decoder.decode(raw) == {"language": "ruby"}

    def test_tab_before_key_is_parse_error(self, decoder: ConfigDecoder) -> None:
        """Test that a leading tab yields a position-bearing failure."""
        result = decoder.decode(_encode("\tfoo: Foo"))

        assert isinstance(result, DecodeFailure)
        assert "line 1 column 1" in result.message

    def test_non_breaking_space_indentation(self, decoder: ConfigDecoder) -> None:
        """Test that U+00A0 indentation parses like ordinary spaces."""
        with_nbsp = decoder.decode(_encode("foo:\n\u00a0\u00a0bar: Foobar"))
        with_spaces = decoder.decode(_encode("foo:\n  bar: Foobar"))

        assert with_nbsp == {"foo": {"bar": "Foobar"}}
        assert with_nbsp == with_spaces

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", "# only a comment\n"])
    def test_empty_document_is_empty_mapping(
        self, decoder: ConfigDecoder, text: str
    ) -> None:
        """Test that empty documents decode to {}."""
        assert decoder.decode(_encode(text)) == {}

    def test_non_mapping_root_is_parse_error(self, decoder: ConfigDecoder) -> None:
        """Test that a list at the root cannot be used as a configuration."""
        result = decoder.decode(_encode("- one\n- two"))

        assert isinstance(result, DecodeFailure)
        assert "mapping" in result.message

    def test_invalid_utf8_is_failure(self, decoder: ConfigDecoder) -> None:
        """Test that undecodable bytes become a DecodeFailure."""
        content = base64.b64encode(b"foo: \xff\xfe").decode("ascii")

        result = decoder.decode(content)

        assert isinstance(result, DecodeFailure)

    def test_invalid_base64_is_failure(self, decoder: ConfigDecoder) -> None:
        """Test that a truncated base64 body becomes a DecodeFailure."""
        result = decoder.decode("Zm9vOiBGb28")

        assert isinstance(result, DecodeFailure)

    def test_non_ascii_content_is_failure(self, decoder: ConfigDecoder) -> None:
        """Test that a body with non-ASCII characters becomes a DecodeFailure."""
        result = decoder.decode("Zm9v\u00e9")

        assert isinstance(result, DecodeFailure)
        assert "encoding" in result.message


class TestFormatYamlError:
    """Tests for YAML error message formatting."""

    def test_position_uses_line_column_form(self) -> None:
        """Test that the message carries 'line N column M' (1-based)."""
        with pytest.raises(yaml.YAMLError) as exc_info:
            yaml.safe_load("foo: bar\nbaz: [1, 2")

        message = format_yaml_error(exc_info.value)

        assert "line " in message
        assert " column " in message
        assert ", column" not in message

    def test_unmarked_error_uses_str(self) -> None:
        """Test that errors without a mark fall back to their text."""
        assert format_yaml_error(yaml.YAMLError("boom")) == "boom"
