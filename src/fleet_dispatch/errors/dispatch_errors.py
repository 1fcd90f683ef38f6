# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch Error Classes.

Error Hierarchy:
    DispatchError (base error, structured context)
    ├── RegistryError
    │   ├── InvalidResolverError
    │   └── UnknownKeyError
    ├── DependencyResolutionError
    ├── DiscoveryConfigurationError
    ├── ConfigurationError
    └── RequestValidationError

All errors:
    - Accept a ModelRegistryErrorContext for bundled context parameters
    - Accept arbitrary keyword arguments as extra structured context
    - Support proper error chaining with `raise ... from e`
"""

from typing import Optional
from uuid import UUID

from fleet_dispatch.errors.model_registry_error_context import (
    ModelRegistryErrorContext,
)


class DispatchError(Exception):
    """Base error class for capability dispatch.

    Structured Fields (via ModelRegistryErrorContext):
        domain: Dispatch domain (trip_pricing, maintenance, ...)
        operation: Operation being performed
        key: Dispatch key involved
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelRegistryErrorContext(operation="get", key="engine")
        >>> raise DispatchError("Operation failed", context=context, attempt=2)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelRegistryErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize DispatchError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled dispatch context (domain, operation, key, ...)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or ModelRegistryErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self.context.correlation_id

    def to_dict(self) -> dict[str, object]:
        """Serialize the error for logs and CLI output."""
        payload: dict[str, object] = {
            "error_type": type(self).__name__,
            "message": self.message,
        }
        payload.update(self.context.model_dump(mode="json", exclude_none=True))
        payload.update(self.extra_context)
        return payload

    def __str__(self) -> str:
        return self.message


class RegistryError(DispatchError):
    """Base error for registry operations (register, get)."""


class InvalidResolverError(RegistryError):
    """Raised when a resolver cannot yield a valid capability instance.

    Used for:
    - A class resolver that is not a class or does not subclass the capability
    - A resolver that is neither a class nor a callable
    - An empty dispatch key
    - A factory whose product fails the capability check at resolution time

    Example:
        >>> raise InvalidResolverError(
        ...     "Factory class must extend MaintenanceRequestFactory",
        ...     context=context,
        ...     resolver="builtins.dict",
        ... )
    """


class UnknownKeyError(RegistryError):
    """Raised when no resolver exists for a key after bootstrap or scan.

    Dispatchers translate this into a domain-specific response
    ("no handler for this request type") rather than a crash.
    """


class DependencyResolutionError(DispatchError):
    """Raised when the service container cannot build a requested class.

    Covers unresolvable constructor parameters, dependency cycles and
    constructors that raise during instantiation.
    """


class DiscoveryConfigurationError(DispatchError):
    """Raised when a discovery scan root is missing or not a directory."""


class ConfigurationError(DispatchError):
    """Raised when the dispatch configuration cannot be read or validated."""


class RequestValidationError(DispatchError):
    """Raised when dispatcher input fails validation.

    The ``validation_errors`` extra context carries the flattened pydantic
    error list (``"field: message"`` strings).
    """


__all__ = [
    "ConfigurationError",
    "DependencyResolutionError",
    "DiscoveryConfigurationError",
    "DispatchError",
    "InvalidResolverError",
    "RegistryError",
    "RequestValidationError",
    "UnknownKeyError",
]
