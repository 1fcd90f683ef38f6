# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Intercity trip pricing."""

from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import trip_strategy

FUEL_PRICE_PER_KM = 0.8
CONSUMPTION_PER_KM = 1.2
DRIVER_ALLOWANCE_PER_HOUR = 25.0


@trip_strategy("intercity")
class InterCityTripCostStrategy(TripCostStrategy):
    """Fuel and vehicle wear per km, plus a driver allowance per hour."""

    def calculate(self, distance_km: float, duration_hours: float) -> ModelTripCost:
        return ModelTripCost.from_components(
            {
                "fuel_cost": distance_km * FUEL_PRICE_PER_KM,
                "vehicle_consumption": distance_km * CONSUMPTION_PER_KM,
                "driver_allowance": duration_hours * DRIVER_ALLOWANCE_PER_HOUR,
            }
        )


__all__ = ["InterCityTripCostStrategy"]
