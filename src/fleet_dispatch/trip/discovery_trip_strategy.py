# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip strategy discovery.

Binds the generic CapabilityDiscovery to the trip pricing domain: classes
under the scanned root that extend TripCostStrategy and are decorated with
``@trip_strategy("<key>")`` become dispatchable by that key.

Example:
    >>> discovery = TripStrategyDiscovery()
    >>> sorted(discovery.get_mapping())
    ['intercity', 'international', 'local']
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, cast

from fleet_dispatch.enums import EnumRegistryDomain
from fleet_dispatch.runtime.capability_discovery import CapabilityDiscovery
from fleet_dispatch.runtime.service_container import ServiceContainer
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import (
    TRIP_STRATEGY_MARKER,
    TRIP_STRATEGY_TAG_ATTRIBUTE,
)

DEFAULT_STRATEGY_ROOT = Path(__file__).resolve().parent / "strategies"


class TripStrategyDiscovery(CapabilityDiscovery):
    """Discovers tagged TripCostStrategy classes.

    Args:
        root: Directory scanned when the cache is empty. Defaults to the
            packaged ``fleet_dispatch/trip/strategies`` directory.
    """

    def __init__(self, root: Optional[Path] = None) -> None:
        super().__init__(
            capability=TripCostStrategy,
            tag_attribute=TRIP_STRATEGY_TAG_ATTRIBUTE,
            tag_marker=TRIP_STRATEGY_MARKER,
            default_root=DEFAULT_STRATEGY_ROOT,
            domain=EnumRegistryDomain.TRIP_PRICING,
            root=root,
        )

    def resolve(self, key: str, container: ServiceContainer) -> TripCostStrategy:
        return cast(TripCostStrategy, super().resolve(key, container))


__all__ = ["DEFAULT_STRATEGY_ROOT", "TripStrategyDiscovery"]
