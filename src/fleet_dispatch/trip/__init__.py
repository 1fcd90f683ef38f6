# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip pricing domain.

Strategies are not imported here; they are found by TripStrategyDiscovery
scanning the ``strategies`` directory (or a configured root).
"""

from fleet_dispatch.trip.discovery_trip_strategy import (
    DEFAULT_STRATEGY_ROOT,
    TripStrategyDiscovery,
)
from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.model_trip_cost_request import ModelTripCostRequest
from fleet_dispatch.trip.service_trip_cost import ServiceTripCost
from fleet_dispatch.trip.trip_cost_calculator import TripCostCalculator
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import trip_strategy

__all__ = [
    "DEFAULT_STRATEGY_ROOT",
    "ModelTripCost",
    "ModelTripCostRequest",
    "ServiceTripCost",
    "TripCostCalculator",
    "TripCostStrategy",
    "TripStrategyDiscovery",
    "trip_strategy",
]
