# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""The ``@trip_strategy`` decorator.

Example:
    >>> @trip_strategy("local")
    ... class LocalTripCostStrategy(TripCostStrategy):
    ...     def calculate(self, distance_km, duration_hours): ...
"""

from fleet_dispatch.runtime.capability_tag import capability_tag

TRIP_STRATEGY_TAG_ATTRIBUTE = "__trip_strategy__"

# Name the discovery pre-filter looks for in candidate source files
TRIP_STRATEGY_MARKER = "trip_strategy"

trip_strategy = capability_tag(TRIP_STRATEGY_TAG_ATTRIBUTE)

__all__ = ["TRIP_STRATEGY_MARKER", "TRIP_STRATEGY_TAG_ATTRIBUTE", "trip_strategy"]
