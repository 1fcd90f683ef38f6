# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fleet Dispatch Errors Module.

Exports:
    DispatchError: Base error with structured context
    RegistryError: Base error for registry operations
    InvalidResolverError: Resolver does not yield a valid capability instance
    UnknownKeyError: No resolver for a key after bootstrap or scan
    DependencyResolutionError: Service container cannot build a class
    DiscoveryConfigurationError: Discovery root missing or not a directory
    ConfigurationError: Dispatch configuration unreadable or invalid
    RequestValidationError: Dispatcher input failed validation
    ModelRegistryErrorContext: Bundled structured error fields
"""

from fleet_dispatch.errors.dispatch_errors import (
    ConfigurationError,
    DependencyResolutionError,
    DiscoveryConfigurationError,
    DispatchError,
    InvalidResolverError,
    RegistryError,
    RequestValidationError,
    UnknownKeyError,
)
from fleet_dispatch.errors.model_registry_error_context import (
    ModelRegistryErrorContext,
)

__all__ = [
    "ConfigurationError",
    "DependencyResolutionError",
    "DiscoveryConfigurationError",
    "DispatchError",
    "InvalidResolverError",
    "ModelRegistryErrorContext",
    "RegistryError",
    "RequestValidationError",
    "UnknownKeyError",
]
