# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance request domain."""

from fleet_dispatch.maintenance.maintenance_factories import (
    ElectricalMaintenanceFactory,
    EngineMaintenanceFactory,
    MaintenanceRequestFactory,
    TiresMaintenanceFactory,
)
from fleet_dispatch.maintenance.maintenance_types import (
    ElectricalMaintenance,
    EngineMaintenance,
    MaintenanceType,
    TiresMaintenance,
)
from fleet_dispatch.maintenance.model_maintenance_outcome import (
    ModelMaintenanceOutcome,
)
from fleet_dispatch.maintenance.model_maintenance_request import (
    ModelMaintenanceRequest,
)
from fleet_dispatch.maintenance.registry_maintenance import RegistryMaintenance
from fleet_dispatch.maintenance.service_maintenance import ServiceMaintenance

__all__ = [
    "ElectricalMaintenance",
    "ElectricalMaintenanceFactory",
    "EngineMaintenance",
    "EngineMaintenanceFactory",
    "MaintenanceRequestFactory",
    "MaintenanceType",
    "ModelMaintenanceOutcome",
    "ModelMaintenanceRequest",
    "RegistryMaintenance",
    "ServiceMaintenance",
    "TiresMaintenance",
    "TiresMaintenanceFactory",
]
