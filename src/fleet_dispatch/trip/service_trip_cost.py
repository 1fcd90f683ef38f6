# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Trip cost dispatch service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Union

from pydantic import ValidationError

from fleet_dispatch.enums import EnumRegistryDomain
from fleet_dispatch.errors import ModelRegistryErrorContext, RequestValidationError
from fleet_dispatch.runtime.service_container import ServiceContainer
from fleet_dispatch.trip.discovery_trip_strategy import TripStrategyDiscovery
from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.model_trip_cost_request import ModelTripCostRequest
from fleet_dispatch.trip.trip_cost_calculator import TripCostCalculator

logger = logging.getLogger(__name__)


class ServiceTripCost:
    """Prices trips with the strategy discovered for the trip type.

    Example:
        >>> service = container.make(ServiceTripCost)
        >>> service.calculate({"type": "local", "distance_km": 100, "duration_hours": 2})
        ModelTripCost(total_cost=280.0, details={'distance_cost': 250.0, 'time_cost': 30.0})
    """

    def __init__(
        self, discovery: TripStrategyDiscovery, container: ServiceContainer
    ) -> None:
        self._discovery = discovery
        self._container = container

    def available_types(self) -> list[str]:
        return sorted(self._discovery.keys())

    def calculate(
        self, request: Union[ModelTripCostRequest, Mapping[str, object]]
    ) -> ModelTripCost:
        """Validate ``request`` and price it.

        Raises:
            RequestValidationError: If a mapping payload fails validation.
            UnknownKeyError: If no strategy is discovered for the trip type.
        """
        if not isinstance(request, ModelTripCostRequest):
            request = _validate_request(request)

        strategy = self._discovery.resolve(request.trip_type, self._container)
        cost = TripCostCalculator(strategy).calculate_cost(
            request.distance_km, request.duration_hours
        )
        logger.debug(
            "Priced %s trip at %.2f",
            request.trip_type,
            cost.total_cost,
            extra={
                "key": request.trip_type,
                "strategy": type(strategy).__qualname__,
                "total_cost": cost.total_cost,
            },
        )
        return cost


def _validate_request(payload: Mapping[str, object]) -> ModelTripCostRequest:
    try:
        return ModelTripCostRequest.model_validate(dict(payload))
    except ValidationError as e:
        validation_errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise RequestValidationError(
            f"Invalid trip cost request: {'; '.join(validation_errors)}",
            context=ModelRegistryErrorContext(
                domain=EnumRegistryDomain.TRIP_PRICING, operation="calculate"
            ),
            validation_errors=validation_errors,
        ) from e


__all__ = ["ServiceTripCost"]
