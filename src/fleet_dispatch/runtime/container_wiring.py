# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Container wiring for fleet dispatch services.

Registers the domain registries, the trip strategy discovery and the
dispatch services with a ServiceContainer. Each container gets its own
instances, so tests build a fresh container instead of sharing state.

Service Keys:
    - ServiceContainer: the container itself, for services that resolve lazily
    - TripStrategyDiscovery, RegistryMaintenance, RegistryContentModel
    - ServiceTripCost, ServiceMaintenance, ServiceContentGeneration

Example Usage:
    ```python
    container = ServiceContainer()
    summary = wire_dispatch_services(container, load_dispatch_config())
    service = container.resolve_service(ServiceMaintenance)
    outcome = service.submit({"vehicle_id": 42, "issue_type": "tires"})
    ```
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from fleet_dispatch.content import RegistryContentModel, ServiceContentGeneration
from fleet_dispatch.maintenance import RegistryMaintenance, ServiceMaintenance
from fleet_dispatch.runtime.models import ModelDispatchConfig
from fleet_dispatch.runtime.service_container import ServiceContainer
from fleet_dispatch.trip import ServiceTripCost, TripStrategyDiscovery

logger = logging.getLogger(__name__)


def wire_dispatch_services(
    container: ServiceContainer,
    config: Optional[ModelDispatchConfig] = None,
) -> dict[str, list[str]]:
    """Register dispatch services with ``container``.

    With ``config.eager_bootstrap`` set, registries are seeded and the trip
    strategy root is scanned here, so a missing root fails at startup.

    Returns:
        Summary dict with ``services``: registered service class names.

    Raises:
        DiscoveryConfigurationError: If eager bootstrap scans a missing root.
    """
    config = config or ModelDispatchConfig()
    services_registered: list[str] = []

    container.register_instance(ServiceContainer, container)

    discovery = TripStrategyDiscovery(root=config.trip_strategy_root)
    maintenance_registry = RegistryMaintenance(container)
    content_registry = RegistryContentModel(container)

    for interface, instance in (
        (TripStrategyDiscovery, discovery),
        (RegistryMaintenance, maintenance_registry),
        (RegistryContentModel, content_registry),
    ):
        container.register_instance(interface, instance)
        services_registered.append(interface.__name__)
        logger.debug("Registered %s in container", interface.__name__)

    for service_cls in (ServiceTripCost, ServiceMaintenance, ServiceContentGeneration):
        container.register_instance(service_cls, container.make(service_cls))
        services_registered.append(service_cls.__name__)
        logger.debug("Registered %s in container", service_cls.__name__)

    if config.eager_bootstrap:
        maintenance_registry.bootstrap_defaults()
        content_registry.bootstrap_defaults()
        discovery.scan(discovery.root)

    logger.info(
        "Dispatch services wired successfully",
        extra={
            "service_count": len(services_registered),
            "services": services_registered,
            "eager_bootstrap": config.eager_bootstrap,
        },
    )
    return {"services": services_registered}


# Module-level default container (lazy initialized), used by the CLI
_default_container: Optional[ServiceContainer] = None
_singleton_lock: threading.Lock = threading.Lock()


def get_default_container(
    config: Optional[ModelDispatchConfig] = None,
) -> ServiceContainer:
    """Return the process-wide wired container, creating it on first call.

    ``config`` only applies to the call that creates the container.
    """
    global _default_container
    if _default_container is None:
        with _singleton_lock:
            # Double-check locking pattern
            if _default_container is None:
                container = ServiceContainer()
                wire_dispatch_services(container, config)
                _default_container = container
    return _default_container


def reset_default_container() -> None:
    """Drop the default container. Test support."""
    global _default_container
    with _singleton_lock:
        _default_container = None


__all__ = [
    "get_default_container",
    "reset_default_container",
    "wire_dispatch_services",
]
