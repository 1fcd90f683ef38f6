# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fleet Dispatch Runtime Module.

Generic plugin mechanics shared by every dispatch domain:

Exports:
    RegistryCapability: Typed key-to-resolver registry with lazy defaults
    CapabilityDiscovery: Source-tree scanner building key-to-class mappings
    ServiceContainer: Instance bindings plus constructor autowiring
    capability_tag: Builder for domain tag decorators
    configure_logging: Root logging setup
    load_dispatch_config: YAML / environment configuration loading

Container wiring lives in ``fleet_dispatch.runtime.container_wiring`` and is
not re-exported here, since it imports the domain packages.
"""

from fleet_dispatch.runtime.capability_discovery import CapabilityDiscovery
from fleet_dispatch.runtime.capability_tag import (
    attach_capability_tag,
    capability_tag,
    read_capability_tag,
)
from fleet_dispatch.runtime.dispatch_config_loader import load_dispatch_config
from fleet_dispatch.runtime.registry_capability import RegistryCapability
from fleet_dispatch.runtime.service_container import ServiceContainer
from fleet_dispatch.runtime.util_logging import configure_logging

__all__ = [
    "CapabilityDiscovery",
    "RegistryCapability",
    "ServiceContainer",
    "attach_capability_tag",
    "capability_tag",
    "configure_logging",
    "load_dispatch_config",
    "read_capability_tag",
]
