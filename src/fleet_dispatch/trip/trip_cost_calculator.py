# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip cost calculator bound to a single strategy."""

from __future__ import annotations

from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy


class TripCostCalculator:
    """Delegates pricing to the strategy it was built with."""

    def __init__(self, strategy: TripCostStrategy) -> None:
        if not isinstance(strategy, TripCostStrategy):
            raise TypeError(
                f"TripCostCalculator requires a TripCostStrategy, got {type(strategy).__name__}"
            )
        self._strategy = strategy

    @property
    def strategy(self) -> TripCostStrategy:
        return self._strategy

    def calculate_cost(self, distance_km: float, duration_hours: float) -> ModelTripCost:
        return self._strategy.calculate(distance_km, duration_hours)


__all__ = ["TripCostCalculator"]
