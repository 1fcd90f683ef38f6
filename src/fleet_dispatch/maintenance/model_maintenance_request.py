# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance Request Model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_DESCRIPTION_LENGTH = 1000


class ModelMaintenanceRequest(BaseModel):
    """Validated maintenance request.

    The issue type is any key the maintenance registry knows; unknown types
    surface as UnknownKeyError at dispatch.

    Attributes:
        vehicle_id: Vehicle the request is for.
        issue_type: Maintenance registry key, lower-cased.
        description: Free-text description, at most 1000 characters.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    vehicle_id: int = Field(..., description="Vehicle the request is for")
    issue_type: str = Field(..., min_length=1, description="Maintenance type key")
    description: Optional[str] = Field(
        default=None,
        max_length=MAX_DESCRIPTION_LENGTH,
        description="Free-text description",
    )

    @field_validator("vehicle_id", mode="before")
    @classmethod
    def _reject_bool_vehicle_id(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("vehicle_id must be a valid integer")
        return value

    @field_validator("issue_type")
    @classmethod
    def _normalize_issue_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("issue_type must not be blank")
        return normalized


__all__ = ["MAX_DESCRIPTION_LENGTH", "ModelMaintenanceRequest"]
