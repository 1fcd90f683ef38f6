# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fleet Dispatch Enumerations Module.

Exports:
    EnumDiscoverySkipReason: Why the discovery scanner skipped a file or class
    EnumRegistryDomain: Dispatch domain served by a registry or scanner
    EnumResolverKind: Class reference vs. factory resolvers
"""

from fleet_dispatch.enums.enum_discovery_skip_reason import EnumDiscoverySkipReason
from fleet_dispatch.enums.enum_registry_domain import EnumRegistryDomain
from fleet_dispatch.enums.enum_resolver_kind import EnumResolverKind

__all__ = [
    "EnumDiscoverySkipReason",
    "EnumRegistryDomain",
    "EnumResolverKind",
]
