# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance request factories.

A factory creates the MaintenanceType for its issue and runs it through the
``handle_request`` template method. Factories are what the maintenance
registry resolves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Union

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


class MaintenanceRequestFactory(ABC):
    """Creates the maintenance type that handles a request."""

    @abstractmethod
    def create_maintenance_request(self) -> MaintenanceType:
        """Return a fresh maintenance type instance."""

    def handle_request(
        self, request: Union[ModelMaintenanceRequest, Mapping[str, object]]
    ) -> ModelMaintenanceOutcome:
        """Create the maintenance type and let it handle ``request``.

        A mapping payload without ``issue_type`` is taken to be of this
        factory's type.

        Raises:
            pydantic.ValidationError: If a mapping payload is invalid.
        """
        maintenance = self.create_maintenance_request()
        if not isinstance(request, ModelMaintenanceRequest):
            payload = dict(request)
            payload.setdefault("issue_type", maintenance.issue_type)
            request = ModelMaintenanceRequest.model_validate(payload)
        return maintenance.handle(request)


class EngineMaintenanceFactory(MaintenanceRequestFactory):
    def create_maintenance_request(self) -> MaintenanceType:
        return EngineMaintenance()


class TiresMaintenanceFactory(MaintenanceRequestFactory):
    def create_maintenance_request(self) -> MaintenanceType:
        return TiresMaintenance()


class ElectricalMaintenanceFactory(MaintenanceRequestFactory):
    def create_maintenance_request(self) -> MaintenanceType:
        return ElectricalMaintenance()


__all__ = [
    "ElectricalMaintenanceFactory",
    "EngineMaintenanceFactory",
    "MaintenanceRequestFactory",
    "TiresMaintenanceFactory",
]
