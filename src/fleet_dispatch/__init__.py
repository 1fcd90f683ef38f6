# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fleet dispatch: run-time selection of trip pricing strategies, maintenance
factories and content models by key.

Subpackages:
    runtime: Generic registry, discovery scanner, container and configuration
    trip: Trip pricing strategies, discovered by scanning
    maintenance: Maintenance request factories, registered with defaults
    content: Content generation model factories, registered with defaults
    cli: ``fleet-dispatch`` command line interface
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
