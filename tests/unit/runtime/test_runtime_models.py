# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for runtime models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleet_dispatch.enums import EnumResolverKind
from fleet_dispatch.runtime.models import ModelDiscoveredMapping, ModelRegistryEntry

pytestmark = [pytest.mark.unit]


class Sample:
    pass


class TestModelRegistryEntry:
    def test_key_is_normalized(self) -> None:
        entry = ModelRegistryEntry(
            key=" Engine ", resolver=Sample, resolver_kind=EnumResolverKind.CLASS_REFERENCE
        )

        assert entry.key == "engine"
        assert entry.resolver_name == f"{__name__}.Sample"

    def test_blank_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelRegistryEntry(
                key="  ", resolver=Sample, resolver_kind=EnumResolverKind.FACTORY
            )

    def test_non_callable_resolver_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelRegistryEntry(
                key="x", resolver=42, resolver_kind=EnumResolverKind.FACTORY
            )


class TestModelDiscoveredMapping:
    def test_empty_by_default(self) -> None:
        mapping = ModelDiscoveredMapping()

        assert mapping.is_empty()
        assert mapping.get("local") is None

    def test_get_is_case_insensitive(self) -> None:
        mapping = ModelDiscoveredMapping(entries={"local": Sample})

        assert not mapping.is_empty()
        assert mapping.get(" LOCAL ") is Sample
