# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""International trip pricing.

total = fuel + max(customs minimum, 20% of fuel) + insurance + border crossing
"""

from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import trip_strategy

FUEL_PRICE_PER_KM = 1.2
CUSTOMS_FEE_MINIMUM = 2000.0
CUSTOMS_FEE_RATE = 0.2
INSURANCE_PER_HOUR = 150.0
BORDER_CROSSING_FEE = 500.0


@trip_strategy("international")
class InternationalTripCostStrategy(TripCostStrategy):
    """Cross-border trips: customs, insurance and a flat border fee on top of fuel."""

    def calculate(self, distance_km: float, duration_hours: float) -> ModelTripCost:
        fuel_cost = distance_km * FUEL_PRICE_PER_KM
        return ModelTripCost.from_components(
            {
                "base_fuel_cost": fuel_cost,
                "custom_fees": max(CUSTOMS_FEE_MINIMUM, fuel_cost * CUSTOMS_FEE_RATE),
                "insurance": duration_hours * INSURANCE_PER_HOUR,
                "border_crossing": BORDER_CROSSING_FEE,
            }
        )


__all__ = ["InternationalTripCostStrategy"]
