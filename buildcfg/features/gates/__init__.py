"""Per-repository feature gates."""

from buildcfg.features.gates.constants import TEMPLATE_SELECTION
from buildcfg.features.gates.protocols import FeatureGateStore
from buildcfg.features.gates.store import InMemoryFeatureGates


__all__ = [
    "TEMPLATE_SELECTION",
    "FeatureGateStore",
    "InMemoryFeatureGates",
]
