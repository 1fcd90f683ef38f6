# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip Cost Model."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# Monetary values are reported with two decimals
COST_PRECISION = 2


class ModelTripCost(BaseModel):
    """Priced trip: total plus named cost components.

    Attributes:
        total_cost: Sum of the unrounded components, rounded to two decimals.
        details: Component name to cost, each rounded to two decimals.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_cost: float = Field(..., ge=0.0, description="Total trip cost")
    details: dict[str, float] = Field(
        default_factory=dict,
        description="Component name to cost",
    )

    @classmethod
    def from_components(cls, components: Mapping[str, float]) -> ModelTripCost:
        """Build a cost from raw component values.

        The total is rounded once from the raw sum, not summed from rounded
        components.
        """
        return cls(
            total_cost=round(sum(components.values()), COST_PRECISION),
            details={
                name: round(value, COST_PRECISION) for name, value in components.items()
            },
        )


__all__ = ["COST_PRECISION", "ModelTripCost"]
