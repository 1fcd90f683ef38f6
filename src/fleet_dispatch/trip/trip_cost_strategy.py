# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip cost strategy contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fleet_dispatch.trip.model_trip_cost import ModelTripCost


class TripCostStrategy(ABC):
    """Prices a trip from its distance and duration.

    Concrete strategies tagged with ``@trip_strategy("<key>")`` and placed
    under a scanned directory are picked up by TripStrategyDiscovery.
    """

    @abstractmethod
    def calculate(self, distance_km: float, duration_hours: float) -> ModelTripCost:
        """Return the total cost and its component breakdown."""


__all__ = ["TripCostStrategy"]
