# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance factory registry.

Maps issue types to MaintenanceRequestFactory resolvers. The engine, tires
and electrical factories are seeded on the first lookup miss.

Example:
    >>> registry = RegistryMaintenance(container)
    >>> registry.get("tires").handle_request({"vehicle_id": 42}).status
    'pending'
"""

from __future__ import annotations

from collections.abc import Mapping

from fleet_dispatch.enums import EnumRegistryDomain
from fleet_dispatch.maintenance.maintenance_factories import (
    ElectricalMaintenanceFactory,
    EngineMaintenanceFactory,
    MaintenanceRequestFactory,
    TiresMaintenanceFactory,
)
from fleet_dispatch.runtime.registry_capability import RegistryCapability, Resolver


class RegistryMaintenance(RegistryCapability[MaintenanceRequestFactory]):
    """Registry of maintenance request factories keyed by issue type."""

    expected_capability = MaintenanceRequestFactory
    domain = EnumRegistryDomain.MAINTENANCE

    def _default_resolvers(self) -> Mapping[str, Resolver]:
        return {
            "engine": EngineMaintenanceFactory,
            "tires": TiresMaintenanceFactory,
            "electrical": ElectricalMaintenanceFactory,
        }


__all__ = ["RegistryMaintenance"]
