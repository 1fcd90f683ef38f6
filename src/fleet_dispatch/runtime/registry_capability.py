# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Capability Registry - typed key-to-resolver registration with lazy defaults.

This module provides the RegistryCapability generic class. Each dispatch
domain subclasses it, fixing the capability base class it accepts and the
closed list of defaults it seeds on first miss.

Resolvers:
    - A class that subclasses the capability. Checked at registration,
      instantiated through the ServiceContainer on every ``get``.
    - A dotted path string naming such a class, imported at registration.
    - A callable factory taking no arguments. Its product is checked at
      resolution time.

Lookup Rules:
    - Keys are case-insensitive and stored lower-cased
    - ``register`` overwrites an existing key silently
    - ``get`` on a missing key seeds the defaults at most once, then fails
      with UnknownKeyError
    - ``has`` and ``keys`` never seed defaults

Example Usage:
    ```python
    from fleet_dispatch.maintenance import RegistryMaintenance

    registry = RegistryMaintenance(container)
    registry.register("brakes", BrakesMaintenanceFactory)

    factory = registry.get("TIRES")  # defaults seeded on this first miss
    outcome = factory.handle_request({"vehicle_id": 42})
    ```

Thread Safety:
    Entry reads and writes hold ``_lock``. Resolution runs outside the lock.
    Defaults are validated before the lock is taken and merged in one step,
    so readers never observe a partially seeded registry.
"""

from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Callable, Mapping
from typing import ClassVar, Generic, Optional, TypeVar, Union

from fleet_dispatch.enums import EnumRegistryDomain, EnumResolverKind
from fleet_dispatch.errors import (
    InvalidResolverError,
    ModelRegistryErrorContext,
    UnknownKeyError,
)
from fleet_dispatch.runtime.models import ModelRegistryEntry
from fleet_dispatch.runtime.service_container import ServiceContainer

logger = logging.getLogger(__name__)

CapabilityT = TypeVar("CapabilityT")

Resolver = Union[type, str, Callable[[], object]]


class RegistryCapability(Generic[CapabilityT]):
    """Thread-safe registry mapping dispatch keys to capability resolvers.

    Subclasses set ``expected_capability`` and ``domain`` and override
    ``_default_resolvers``. The base class carries no defaults.

    Attributes:
        expected_capability: Base class every resolved instance must be.
        domain: Dispatch domain used in logs and error context.
        _container: Container used to build class resolvers.
        _entries: Lower-cased key to registry entry.
        _bootstrapped: Whether defaults have been seeded.
        _lock: Guards ``_entries`` and ``_bootstrapped``.
    """

    expected_capability: ClassVar[Optional[type]] = None
    domain: ClassVar[Optional[EnumRegistryDomain]] = None

    def __init__(
        self,
        container: Optional[ServiceContainer] = None,
        expected_capability: Optional[type] = None,
    ) -> None:
        capability = expected_capability or type(self).expected_capability
        if capability is None or not isinstance(capability, type):
            raise TypeError(
                f"{type(self).__name__} requires an expected capability class"
            )
        self._capability: type = capability
        self._container = container or ServiceContainer()
        self._entries: dict[str, ModelRegistryEntry] = {}
        self._bootstrapped = False
        self._lock = threading.Lock()

    @property
    def capability(self) -> type:
        return self._capability

    @property
    def is_bootstrapped(self) -> bool:
        with self._lock:
            return self._bootstrapped

    def register(self, key: str, resolver: Resolver) -> None:
        """Bind ``key`` to ``resolver``, replacing any existing binding.

        Args:
            key: Dispatch key, matched case-insensitively.
            resolver: Capability subclass, dotted path to one, or a
                zero-argument factory callable.

        Raises:
            InvalidResolverError: If the key is blank or the resolver cannot
                produce a capability instance.
        """
        entry = self._build_entry(key, resolver)
        with self._lock:
            self._entries[entry.key] = entry
        logger.debug(
            "Registered %s resolver %s for key %r",
            entry.resolver_kind.value,
            entry.resolver_name,
            entry.key,
            extra={
                "domain": self._domain_value(),
                "key": entry.key,
                "resolver": entry.resolver_name,
            },
        )

    def has(self, key: str) -> bool:
        """Case-insensitive presence check. Never seeds defaults."""
        normalized = self._normalize_key(key, "has")
        with self._lock:
            return normalized in self._entries

    def keys(self) -> set[str]:
        """Snapshot of the registered keys. Never seeds defaults."""
        with self._lock:
            return set(self._entries)

    def entry(self, key: str) -> Optional[ModelRegistryEntry]:
        """Return the entry for ``key`` without resolving it."""
        normalized = self._normalize_key(key, "entry")
        with self._lock:
            return self._entries.get(normalized)

    def get(self, key: str) -> CapabilityT:
        """Resolve ``key`` to a fresh capability instance.

        Raises:
            UnknownKeyError: If no resolver is registered for ``key`` after
                defaults were seeded.
            InvalidResolverError: If ``key`` is not a string, or the resolver
                yields a value that is not an instance of the capability.
            DependencyResolutionError: If the container cannot build a class
                resolver.
        """
        normalized = self._normalize_key(key, "get")
        entry = self.entry(normalized)
        if entry is None and not self.is_bootstrapped:
            self.bootstrap_defaults()
            entry = self.entry(normalized)
        if entry is None:
            raise UnknownKeyError(
                f"No {self._domain_label()} resolver registered for key {key!r}",
                context=self._context("get", normalized),
                registered_keys=sorted(self.keys()),
            )

        if entry.resolver_kind is EnumResolverKind.CLASS_REFERENCE:
            instance = self._container.make(entry.resolver)
        else:
            instance = entry.resolver()

        if not isinstance(instance, self._capability):
            raise InvalidResolverError(
                f"Resolver {entry.resolver_name} for key {normalized!r} produced "
                f"{type(instance).__name__}, expected {self._capability.__name__}",
                context=self._context("get", normalized),
                resolver=entry.resolver_name,
            )
        return instance

    def bootstrap_defaults(self) -> None:
        """Seed the domain's default resolvers.

        Idempotent. Keys registered explicitly beforehand are kept.
        """
        defaults = [
            self._build_entry(key, resolver)
            for key, resolver in self._default_resolvers().items()
        ]
        with self._lock:
            added = 0
            for entry in defaults:
                if entry.key not in self._entries:
                    self._entries[entry.key] = entry
                    added += 1
            self._bootstrapped = True
        logger.info(
            "Bootstrapped %d default %s resolvers",
            added,
            self._domain_label(),
            extra={
                "domain": self._domain_value(),
                "default_count": len(defaults),
                "added_count": added,
            },
        )

    def clear(self) -> None:
        """Remove every entry and reset the bootstrapped flag."""
        with self._lock:
            self._entries.clear()
            self._bootstrapped = False

    def _default_resolvers(self) -> Mapping[str, Resolver]:
        """Closed list of defaults for this domain. Override in subclasses."""
        return {}

    def _build_entry(self, key: object, resolver: object) -> ModelRegistryEntry:
        normalized = self._normalize_key(key, "register")
        if not normalized:
            raise InvalidResolverError(
                f"Dispatch key must be a non-empty string, got {key!r}",
                context=self._context("register"),
            )

        if isinstance(resolver, str):
            resolver = self._import_class(normalized, resolver)

        if isinstance(resolver, type):
            if not issubclass(resolver, self._capability):
                raise InvalidResolverError(
                    f"Resolver class {resolver.__qualname__} must extend "
                    f"{self._capability.__name__}",
                    context=self._context("register", normalized),
                    resolver=f"{resolver.__module__}.{resolver.__qualname__}",
                )
            kind = EnumResolverKind.CLASS_REFERENCE
        elif callable(resolver):
            kind = EnumResolverKind.FACTORY
        else:
            raise InvalidResolverError(
                f"Resolver for key {normalized!r} must be a class or a callable, "
                f"got {type(resolver).__name__}",
                context=self._context("register", normalized),
            )

        return ModelRegistryEntry(key=normalized, resolver=resolver, resolver_kind=kind)

    def _normalize_key(self, key: object, operation: str) -> str:
        """Case-fold ``key`` for lookup. Blank keys pass through as ``""``."""
        if not isinstance(key, str):
            raise InvalidResolverError(
                f"Dispatch key must be a non-empty string, got {key!r}",
                context=self._context(operation),
            )
        return key.strip().lower()

    def _import_class(self, key: str, dotted_path: str) -> type:
        module_name, _, attribute = dotted_path.strip().rpartition(".")
        if not module_name or not attribute:
            raise InvalidResolverError(
                f"Resolver class {dotted_path!r} does not exist",
                context=self._context("register", key),
                resolver=dotted_path,
            )
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise InvalidResolverError(
                f"Resolver class {dotted_path!r} does not exist",
                context=self._context("register", key),
                resolver=dotted_path,
            ) from e
        except Exception as e:
            # Module exists but failed while executing
            raise InvalidResolverError(
                f"Resolver class {dotted_path!r} could not be imported: "
                f"{type(e).__name__}: {e}",
                context=self._context("register", key),
                resolver=dotted_path,
            ) from e
        resolved = getattr(module, attribute, None)
        if not isinstance(resolved, type):
            raise InvalidResolverError(
                f"Resolver class {dotted_path!r} does not exist",
                context=self._context("register", key),
                resolver=dotted_path,
            )
        return resolved

    def _context(
        self, operation: str, key: Optional[str] = None
    ) -> ModelRegistryErrorContext:
        return ModelRegistryErrorContext(
            domain=type(self).domain,
            operation=operation,
            key=key,
        )

    def _domain_value(self) -> Optional[str]:
        domain = type(self).domain
        return domain.value if domain is not None else None

    def _domain_label(self) -> str:
        return (self._domain_value() or self._capability.__name__).replace("_", " ")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capability={self._capability.__name__}, "
            f"keys={sorted(self.keys())})"
        )


__all__ = ["RegistryCapability", "Resolver"]
