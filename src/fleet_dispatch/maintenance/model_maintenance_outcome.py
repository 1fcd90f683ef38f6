# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance Outcome Model."""

from __future__ import annotations

from typing import Literal, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

MaintenancePriority = Literal["low", "medium", "high", "critical"]


class ModelMaintenanceOutcome(BaseModel):
    """Result of routing a maintenance request.

    Attributes:
        success: Whether the request was accepted.
        request_id: Fresh identifier for every handled request.
        vehicle_id: Vehicle the request is for.
        issue_type: Maintenance type that handled the request.
        status: Workflow status after routing.
        assigned_to: Team or party now responsible.
        message: Human-readable summary.
        priority: Engine requests only.
        inventory_checked: Tire requests only.
        estimated_time: Electrical requests only.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool = True
    request_id: UUID = Field(default_factory=uuid4)
    vehicle_id: int
    issue_type: str
    status: str
    assigned_to: str
    message: str
    priority: Optional[MaintenancePriority] = None
    inventory_checked: Optional[bool] = None
    estimated_time: Optional[str] = None

    def to_payload(self) -> dict[str, object]:
        """JSON-ready dict without the fields other types do not set."""
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["MaintenancePriority", "ModelMaintenanceOutcome"]
