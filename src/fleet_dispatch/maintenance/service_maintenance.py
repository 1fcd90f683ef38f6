# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maintenance dispatch service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Union

from pydantic import ValidationError

from fleet_dispatch.enums import EnumRegistryDomain
from fleet_dispatch.errors import ModelRegistryErrorContext, RequestValidationError
from fleet_dispatch.maintenance.model_maintenance_outcome import (
    ModelMaintenanceOutcome,
)
from fleet_dispatch.maintenance.model_maintenance_request import (
    ModelMaintenanceRequest,
)
from fleet_dispatch.maintenance.registry_maintenance import RegistryMaintenance

logger = logging.getLogger(__name__)


class ServiceMaintenance:
    """Routes maintenance requests to the factory registered for their issue type."""

    def __init__(self, registry: RegistryMaintenance) -> None:
        self._registry = registry

    def submit(
        self, request: Union[ModelMaintenanceRequest, Mapping[str, object]]
    ) -> ModelMaintenanceOutcome:
        """Validate and route ``request``.

        Raises:
            RequestValidationError: If a mapping payload fails validation.
            UnknownKeyError: If no factory is registered for the issue type.
        """
        if not isinstance(request, ModelMaintenanceRequest):
            request = _validate_request(request)

        factory = self._registry.get(request.issue_type)
        outcome = factory.handle_request(request)
        logger.info(
            "Maintenance request %s for vehicle %d assigned to %s",
            outcome.request_id,
            outcome.vehicle_id,
            outcome.assigned_to,
            extra={
                "key": request.issue_type,
                "request_id": str(outcome.request_id),
                "status": outcome.status,
            },
        )
        return outcome


def _validate_request(payload: Mapping[str, object]) -> ModelMaintenanceRequest:
    try:
        return ModelMaintenanceRequest.model_validate(dict(payload))
    except ValidationError as e:
        validation_errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise RequestValidationError(
            f"Invalid maintenance request: {'; '.join(validation_errors)}",
            context=ModelRegistryErrorContext(
                domain=EnumRegistryDomain.MAINTENANCE, operation="submit"
            ),
            validation_errors=validation_errors,
        ) from e


__all__ = ["ServiceMaintenance"]
