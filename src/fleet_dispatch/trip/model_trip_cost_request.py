# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip Cost Request Model.

The trip type is not restricted to a fixed list: any key the strategy
discovery knows is valid, and unknown keys surface as UnknownKeyError.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_DISTANCE_KM = 50000.0
MAX_DURATION_HOURS = 168.0


class ModelTripCostRequest(BaseModel):
    """Validated input for a trip cost calculation.

    Attributes:
        trip_type: Strategy key (``type`` in payloads).
        distance_km: Trip distance, 0 to 50000 km.
        duration_hours: Trip duration, 0 to 168 hours.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    trip_type: str = Field(..., alias="type", min_length=1)
    distance_km: float = Field(..., ge=0.0, le=MAX_DISTANCE_KM)
    duration_hours: float = Field(..., ge=0.0, le=MAX_DURATION_HOURS)

    @field_validator("trip_type")
    @classmethod
    def _normalize_trip_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("type must not be blank")
        return normalized


__all__ = ["MAX_DISTANCE_KM", "MAX_DURATION_HOURS", "ModelTripCostRequest"]
