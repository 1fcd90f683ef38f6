# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime models for registries, discovery and configuration."""

from fleet_dispatch.runtime.models.model_capability_tag import ModelCapabilityTag
from fleet_dispatch.runtime.models.model_discovered_mapping import (
    ModelDiscoveredMapping,
)
from fleet_dispatch.runtime.models.model_discovery_skip import ModelDiscoverySkip
from fleet_dispatch.runtime.models.model_discovery_summary import (
    ModelDiscoverySummary,
)
from fleet_dispatch.runtime.models.model_dispatch_config import (
    VALID_LOG_LEVELS,
    ModelDispatchConfig,
)
from fleet_dispatch.runtime.models.model_registry_entry import ModelRegistryEntry

__all__ = [
    "VALID_LOG_LEVELS",
    "ModelCapabilityTag",
    "ModelDiscoveredMapping",
    "ModelDiscoverySkip",
    "ModelDiscoverySummary",
    "ModelDispatchConfig",
    "ModelRegistryEntry",
]
