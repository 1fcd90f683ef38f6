# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Local trip pricing."""

from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import trip_strategy

PRICE_PER_KM = 2.5
PRICE_PER_HOUR = 15.0


@trip_strategy("local")
class LocalTripCostStrategy(TripCostStrategy):
    """Distance plus time, at city rates."""

    def calculate(self, distance_km: float, duration_hours: float) -> ModelTripCost:
        return ModelTripCost.from_components(
            {
                "distance_cost": distance_km * PRICE_PER_KM,
                "time_cost": duration_hours * PRICE_PER_HOUR,
            }
        )


__all__ = ["LocalTripCostStrategy"]
