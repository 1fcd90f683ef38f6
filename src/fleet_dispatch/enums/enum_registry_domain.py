# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry Domain Enumeration.

Identifies the dispatch domain a registry or discovery scanner serves. Used in
error context and structured log extras so that failures in one domain can be
told apart from failures in another.
"""

from enum import Enum


class EnumRegistryDomain(str, Enum):
    """Dispatch domains that own a capability registry.

    Attributes:
        TRIP_PRICING: Trip cost strategies, populated by discovery.
        MAINTENANCE: Maintenance request factories, populated by registration.
        CONTENT_GENERATION: AI content model factories, populated by registration.
    """

    TRIP_PRICING = "trip_pricing"
    MAINTENANCE = "maintenance"
    CONTENT_GENERATION = "content_generation"


__all__ = ["EnumRegistryDomain"]
