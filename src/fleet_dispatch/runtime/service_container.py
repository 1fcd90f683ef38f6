# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service Container - dependency resolution for dispatch components.

The container holds process-wide service instances (registries, discovery
scanners, dispatch services) and builds classes on demand by autowiring their
constructor parameters from type hints.

Resolution order for ``make(cls)``:
    1. A registered instance for ``cls``
    2. A registered factory for ``cls``
    3. Autowiring: each required constructor parameter annotated with a class
       is resolved recursively; a parameter with a default is injected only
       when its type is bound, otherwise the default is kept

Example:
    >>> container = ServiceContainer()
    >>> container.register_instance(RegistryMaintenance, RegistryMaintenance(container))
    >>> service = container.make(ServiceMaintenance)  # receives the registry

Thread Safety:
    Binding tables are guarded by a lock. Factories and constructors run
    outside the lock, so a factory may itself resolve services.
"""

from __future__ import annotations

import builtins
import inspect
import logging
import threading
import typing
from collections.abc import Callable
from typing import TypeVar, cast

from fleet_dispatch.errors import DependencyResolutionError, ModelRegistryErrorContext

logger = logging.getLogger(__name__)

ServiceT = TypeVar("ServiceT")

_SKIPPED_PARAMETER_KINDS = frozenset(
    {inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD}
)


class ServiceContainer:
    """Instance bindings plus constructor autowiring.

    Attributes:
        _instances: Interface type to registered singleton instance
        _factories: Interface type to zero-argument factory
        _lock: Guards both binding tables
    """

    def __init__(self) -> None:
        self._instances: dict[type, object] = {}
        self._factories: dict[type, Callable[[], object]] = {}
        self._lock = threading.Lock()

    def register_instance(self, interface: type, instance: object) -> None:
        """Bind ``interface`` to an existing instance.

        Raises:
            DependencyResolutionError: If ``instance`` is not an instance of
                ``interface``.
        """
        if not isinstance(instance, interface):
            raise DependencyResolutionError(
                f"Instance of {type(instance).__name__} does not satisfy "
                f"{interface.__name__}",
                context=ModelRegistryErrorContext(operation="register_instance"),
                interface=interface.__qualname__,
            )
        with self._lock:
            self._instances[interface] = instance
            self._factories.pop(interface, None)

    def register_factory(
        self, interface: type, factory: Callable[[], object]
    ) -> None:
        """Bind ``interface`` to a factory called on every resolution."""
        with self._lock:
            self._factories[interface] = factory
            self._instances.pop(interface, None)

    def is_registered(self, interface: type) -> bool:
        with self._lock:
            return interface in self._instances or interface in self._factories

    def resolve_service(self, interface: type[ServiceT]) -> ServiceT:
        """Return the bound service for ``interface``.

        Unlike ``make``, this never autowires.

        Raises:
            DependencyResolutionError: If nothing is bound to ``interface``.
        """
        with self._lock:
            if interface in self._instances:
                return cast(ServiceT, self._instances[interface])
            factory = self._factories.get(interface)
        if factory is None:
            raise DependencyResolutionError(
                f"No service registered for {interface.__qualname__}",
                context=ModelRegistryErrorContext(operation="resolve_service"),
                interface=interface.__qualname__,
            )
        return cast(ServiceT, factory())

    def make(self, cls: type[ServiceT]) -> ServiceT:
        """Return an instance of ``cls``, autowiring its constructor.

        Raises:
            DependencyResolutionError: If a required parameter cannot be
                resolved, a dependency cycle is found, or the constructor
                raises.
        """
        return self._make(cls, ())

    def _make(self, cls: type[ServiceT], chain: tuple[type, ...]) -> ServiceT:
        if self.is_registered(cls):
            return self.resolve_service(cls)

        if cls in chain:
            cycle = " -> ".join(c.__qualname__ for c in (*chain, cls))
            raise DependencyResolutionError(
                f"Dependency cycle while building {cls.__qualname__}: {cycle}",
                context=ModelRegistryErrorContext(operation="make"),
                chain=[c.__qualname__ for c in chain],
            )

        if inspect.isabstract(cls):
            raise DependencyResolutionError(
                f"Cannot instantiate abstract class {cls.__qualname__}",
                context=ModelRegistryErrorContext(operation="make"),
                class_name=cls.__qualname__,
            )

        kwargs = self._build_arguments(cls, (*chain, cls))
        try:
            instance = cls(**kwargs)
        except DependencyResolutionError:
            raise
        except Exception as e:
            raise DependencyResolutionError(
                f"Constructor of {cls.__qualname__} failed: {e}",
                context=ModelRegistryErrorContext(operation="make"),
                class_name=cls.__qualname__,
            ) from e

        logger.debug(
            "Built %s with %d injected dependencies",
            cls.__qualname__,
            len(kwargs),
            extra={"class_name": cls.__qualname__, "dependencies": sorted(kwargs)},
        )
        return instance

    def _build_arguments(
        self, cls: type, chain: tuple[type, ...]
    ) -> dict[str, object]:
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            # Builtins without an introspectable signature take no arguments here
            return {}

        parameters = [
            p for p in signature.parameters.values() if p.kind not in _SKIPPED_PARAMETER_KINDS
        ]
        if not parameters:
            return {}

        try:
            hints = typing.get_type_hints(cls.__init__)
        except Exception:
            # Unresolvable forward references: fall back to defaults only
            hints = {}

        kwargs: dict[str, object] = {}
        for parameter in parameters:
            dependency = _injectable_type(hints.get(parameter.name))
            if dependency is not None:
                # Optional parameters are only injected from explicit bindings
                if parameter.default is inspect.Parameter.empty or self.is_registered(
                    dependency
                ):
                    kwargs[parameter.name] = self._make(dependency, chain)
                continue
            if parameter.default is inspect.Parameter.empty:
                raise DependencyResolutionError(
                    f"Cannot resolve parameter {parameter.name!r} of "
                    f"{cls.__qualname__}: no injectable type annotation",
                    context=ModelRegistryErrorContext(operation="make"),
                    class_name=cls.__qualname__,
                    parameter=parameter.name,
                )
        return kwargs


def _injectable_type(annotation: object) -> type | None:
    """Return the class to inject for an annotation, or ``None``.

    ``Optional[X]`` / ``X | None`` inject ``X``. Builtin scalar and container
    types are never injected.
    """
    if annotation is None:
        return None
    args = typing.get_args(annotation)
    if args and type(None) in args:
        candidates = [a for a in args if a is not type(None)]
        if len(candidates) != 1:
            return None
        annotation = candidates[0]
    if not isinstance(annotation, type):
        return None
    if annotation.__module__ == builtins.__name__:
        return None
    return annotation


__all__ = ["ServiceContainer"]
