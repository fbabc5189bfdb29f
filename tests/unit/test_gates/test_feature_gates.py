"""Unit tests for the in-memory feature gate store."""

from buildcfg.features.gates.constants import TEMPLATE_SELECTION
from buildcfg.features.gates.protocols import FeatureGateStore
from buildcfg.features.gates.store import InMemoryFeatureGates
from tests.helpers.factories import make_repository


class TestInMemoryFeatureGates:
    """Tests for InMemoryFeatureGates."""

    def test_satisfies_protocol(self) -> None:
        """Test that the store implements FeatureGateStore."""
        assert isinstance(InMemoryFeatureGates(), FeatureGateStore)

    def test_inactive_by_default(self) -> None:
        """Test that no feature is active initially."""
        gates = InMemoryFeatureGates()

        assert gates.is_active(TEMPLATE_SELECTION, make_repository()) is False

    def test_activate_repository(self) -> None:
        """Test repository-level activation."""
        gates = InMemoryFeatureGates()
        repository = make_repository()

        gates.activate_repository(TEMPLATE_SELECTION, repository)

        assert gates.is_active(TEMPLATE_SELECTION, repository) is True
        assert gates.is_active("other_feature", repository) is False

    def test_activate_owner(self) -> None:
        """Test that owner-level activation covers all owner repositories."""
        gates = InMemoryFeatureGates()
        gates.activate_owner(TEMPLATE_SELECTION, "travis-ci")

        assert gates.is_active(TEMPLATE_SELECTION, make_repository(name="a")) is True
        assert (
            gates.is_active(TEMPLATE_SELECTION, make_repository(owner_name="x"))
            is False
        )

    def test_global_enablement(self) -> None:
        """Test that global enablement covers every repository."""
        gates = InMemoryFeatureGates()
        gates.enable_globally(TEMPLATE_SELECTION)

        assert gates.is_active(TEMPLATE_SELECTION, make_repository(owner_name="x"))

        gates.disable_globally(TEMPLATE_SELECTION)

        assert not gates.is_active(TEMPLATE_SELECTION, make_repository(owner_name="x"))

    def test_repository_deactivation_wins(self) -> None:
        """Test that a repository opt-out overrides global enablement."""
        gates = InMemoryFeatureGates()
        repository = make_repository()
        gates.enable_globally(TEMPLATE_SELECTION)

        gates.deactivate_repository(TEMPLATE_SELECTION, repository)

        assert gates.is_active(TEMPLATE_SELECTION, repository) is False

    def test_reactivation_after_deactivation(self) -> None:
        """Test that activating again clears a previous opt-out."""
        gates = InMemoryFeatureGates()
        repository = make_repository()
        gates.deactivate_repository(TEMPLATE_SELECTION, repository)

        gates.activate_repository(TEMPLATE_SELECTION, repository)

        assert gates.is_active(TEMPLATE_SELECTION, repository) is True
