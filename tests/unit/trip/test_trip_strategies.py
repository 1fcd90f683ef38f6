# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the built-in trip pricing strategies and calculator."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleet_dispatch.runtime.capability_tag import read_capability_tag
from fleet_dispatch.trip import ModelTripCost, TripCostCalculator, TripCostStrategy
from fleet_dispatch.trip.strategies.strategy_intercity import InterCityTripCostStrategy
from fleet_dispatch.trip.strategies.strategy_international import (
    InternationalTripCostStrategy,
)
from fleet_dispatch.trip.strategies.strategy_local import LocalTripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import TRIP_STRATEGY_TAG_ATTRIBUTE

pytestmark = [pytest.mark.unit]


class TestLocalStrategy:
    @pytest.mark.parametrize(
        ("distance", "duration", "expected_total", "expected_details"),
        [
            (100, 2, 280.0, {"distance_cost": 250.0, "time_cost": 30.0}),
            (0, 2, 30.0, {"distance_cost": 0.0, "time_cost": 30.0}),
            (100, 0, 250.0, {"distance_cost": 250.0, "time_cost": 0.0}),
            (10.5, 1.5, 48.75, {"distance_cost": 26.25, "time_cost": 22.5}),
        ],
    )
    def test_pricing(
        self,
        distance: float,
        duration: float,
        expected_total: float,
        expected_details: dict[str, float],
    ) -> None:
        cost = LocalTripCostStrategy().calculate(distance, duration)

        assert cost.total_cost == pytest.approx(expected_total)
        assert cost.details == pytest.approx(expected_details)


class TestInterCityStrategy:
    def test_pricing(self) -> None:
        cost = InterCityTripCostStrategy().calculate(200, 4)

        assert cost.total_cost == pytest.approx(500.0)
        assert set(cost.details) == {"fuel_cost", "vehicle_consumption", "driver_allowance"}

    def test_breakdown(self) -> None:
        cost = InterCityTripCostStrategy().calculate(150, 3)

        assert cost.details == pytest.approx(
            {"fuel_cost": 120.0, "vehicle_consumption": 180.0, "driver_allowance": 75.0}
        )
        assert cost.total_cost == pytest.approx(375.0)


class TestInternationalStrategy:
    def test_customs_minimum_applies(self) -> None:
        cost = InternationalTripCostStrategy().calculate(800, 10)

        assert cost.details == pytest.approx(
            {
                "base_fuel_cost": 960.0,
                "custom_fees": 2000.0,
                "insurance": 1500.0,
                "border_crossing": 500.0,
            }
        )
        assert cost.total_cost == pytest.approx(4960.0)

    def test_customs_percentage_above_minimum(self) -> None:
        cost = InternationalTripCostStrategy().calculate(20000, 5)

        assert cost.details["base_fuel_cost"] == pytest.approx(24000.0)
        assert cost.details["custom_fees"] == pytest.approx(4800.0)
        assert cost.total_cost == pytest.approx(24000.0 + 4800.0 + 750.0 + 500.0)

    def test_zero_trip_still_pays_fixed_fees(self) -> None:
        cost = InternationalTripCostStrategy().calculate(0, 0)
        assert cost.total_cost == pytest.approx(2500.0)


class TestStrategyTags:
    @pytest.mark.parametrize(
        ("strategy_cls", "key"),
        [
            (LocalTripCostStrategy, "local"),
            (InterCityTripCostStrategy, "intercity"),
            (InternationalTripCostStrategy, "international"),
        ],
    )
    def test_builtin_strategies_are_tagged(
        self, strategy_cls: type[TripCostStrategy], key: str
    ) -> None:
        tag = read_capability_tag(strategy_cls, TRIP_STRATEGY_TAG_ATTRIBUTE)
        assert tag is not None
        assert tag.key == key


class TestModelTripCost:
    def test_total_rounds_raw_sum(self) -> None:
        cost = ModelTripCost.from_components({"a": 0.004, "b": 0.004})

        assert cost.details == {"a": 0.0, "b": 0.0}
        assert cost.total_cost == pytest.approx(0.01)

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelTripCost(total_cost=-1.0)


class TestTripCostCalculator:
    def test_delegates_to_strategy(self) -> None:
        strategy = LocalTripCostStrategy()
        calculator = TripCostCalculator(strategy)

        assert calculator.strategy is strategy
        assert calculator.calculate_cost(100, 2).total_cost == pytest.approx(280.0)

    @pytest.mark.parametrize("strategy", [None, "local", object()])
    def test_rejects_non_strategy(self, strategy: object) -> None:
        with pytest.raises(TypeError, match="requires a TripCostStrategy"):
            TripCostCalculator(strategy)  # type: ignore[arg-type]
