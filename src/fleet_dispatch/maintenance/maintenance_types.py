# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance types: the products created by maintenance factories.

Each type routes a request to the party responsible for that kind of issue.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from fleet_dispatch.maintenance.model_maintenance_outcome import (
    MaintenancePriority,
    ModelMaintenanceOutcome,
)
from fleet_dispatch.maintenance.model_maintenance_request import (
    ModelMaintenanceRequest,
)

_CRITICAL_KEYWORDS = ("critical", "failure")
_HIGH_KEYWORDS = ("overheat", "noise", "leak")


class MaintenanceType(ABC):
    """Handles one kind of maintenance request."""

    issue_type: ClassVar[str]

    @abstractmethod
    def handle(self, request: ModelMaintenanceRequest) -> ModelMaintenanceOutcome:
        """Route ``request`` and report where it went."""


class EngineMaintenance(MaintenanceType):
    """Engine work waits for the head mechanic's approval."""

    issue_type = "engine"

    def handle(self, request: ModelMaintenanceRequest) -> ModelMaintenanceOutcome:
        priority = engine_priority(request.description)
        return ModelMaintenanceOutcome(
            vehicle_id=request.vehicle_id,
            issue_type=self.issue_type,
            status="pending_approval",
            assigned_to="Head Mechanic",
            message=(
                f"Engine maintenance for vehicle {request.vehicle_id} "
                f"awaits Head Mechanic approval ({priority} priority)"
            ),
            priority=priority,
        )


class TiresMaintenance(MaintenanceType):
    """Tire requests go to the warehouse after an inventory check."""

    issue_type = "tires"

    def handle(self, request: ModelMaintenanceRequest) -> ModelMaintenanceOutcome:
        return ModelMaintenanceOutcome(
            vehicle_id=request.vehicle_id,
            issue_type=self.issue_type,
            status="pending",
            assigned_to="Tires Warehouse",
            message=(
                f"Tire request for vehicle {request.vehicle_id} "
                "forwarded to the Tires Warehouse"
            ),
            inventory_checked=True,
        )


class ElectricalMaintenance(MaintenanceType):
    """Electrical work is outsourced."""

    issue_type = "electrical"
    estimated_time = "3-5 business days"

    def handle(self, request: ModelMaintenanceRequest) -> ModelMaintenanceOutcome:
        return ModelMaintenanceOutcome(
            vehicle_id=request.vehicle_id,
            issue_type=self.issue_type,
            status="sent_to_workshop",
            assigned_to="External Workshop",
            message=(
                f"Vehicle {request.vehicle_id} sent to the External Workshop "
                "for electrical repair"
            ),
            estimated_time=self.estimated_time,
        )


def engine_priority(description: str | None) -> MaintenancePriority:
    """Classify an engine issue by keywords in its description."""
    text = (description or "").lower()
    if any(keyword in text for keyword in _CRITICAL_KEYWORDS):
        return "critical"
    if any(keyword in text for keyword in _HIGH_KEYWORDS):
        return "high"
    return "medium"


__all__ = [
    "ElectricalMaintenance",
    "EngineMaintenance",
    "MaintenanceType",
    "TiresMaintenance",
    "engine_priority",
]
