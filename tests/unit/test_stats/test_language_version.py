"""Unit tests for language-version resolution."""

import pytest
from pydantic import TypeAdapter, ValidationError

from buildcfg.features.stats.models import (
    InvalidVersion,
    LanguageVersion,
    VersionList,
    resolve_language_version,
)


class TestResolveLanguageVersion:
    """Tests for resolve_language_version."""

    def test_string(self) -> None:
        """Test that a string resolves to a one-element list."""
        version = resolve_language_version("2.7")

        assert isinstance(version, VersionList)
        assert version.to_payload() == ["2.7"]

    def test_sequence_sorted(self) -> None:
        """Test that sequences are stringified and sorted."""
        version = resolve_language_version(["3.2", "2.7", "3.10"])

        assert version.to_payload() == ["2.7", "3.10", "3.2"]

    def test_tuple_accepted(self) -> None:
        """Test that tuples resolve like lists."""
        assert resolve_language_version(("b", "a")).to_payload() == ["a", "b"]

    def test_empty_sequence(self) -> None:
        """Test that an empty list resolves to an empty list."""
        assert resolve_language_version([]).to_payload() == []

    def test_null_and_bool_items(self) -> None:
        """Test stringification of null and boolean items."""
        version = resolve_language_version([None, True, False])

        assert version.to_payload() == ["", "false", "true"]

    @pytest.mark.parametrize("value", [1.9, 2, None, {"a": 1}])
    def test_other_types_invalid(self, value: object) -> None:
        """Test that non-string, non-sequence values are invalid."""
        version = resolve_language_version(value)

        assert isinstance(version, InvalidVersion)
        assert version.to_payload() == ["invalid"]


class TestLanguageVersionModel:
    """Tests for the discriminated union."""

    def test_discriminator_selects_variant(self) -> None:
        """Test that kind selects the variant on validation."""
        adapter = TypeAdapter(LanguageVersion)

        assert isinstance(adapter.validate_python({"kind": "invalid"}), InvalidVersion)
        parsed = adapter.validate_python({"kind": "versions", "values": ["1.0"]})
        assert isinstance(parsed, VersionList)
        assert parsed.values == ("1.0",)

    def test_models_are_frozen(self) -> None:
        """Test that resolved versions cannot be mutated."""
        version = VersionList(values=("1.0",))

        with pytest.raises(ValidationError):
            version.values = ("2.0",)  # type: ignore[misc]
