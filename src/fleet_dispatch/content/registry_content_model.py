# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Content model registry: model name to AIModelFactory."""

from __future__ import annotations

from collections.abc import Mapping

from fleet_dispatch.content.content_factories import (
    AIModelFactory,
    ClaudeFactory,
    GPTFactory,
)
from fleet_dispatch.enums import EnumRegistryDomain
from fleet_dispatch.runtime.registry_capability import RegistryCapability, Resolver


class RegistryContentModel(RegistryCapability[AIModelFactory]):
    """Registry of model factories keyed by model name (``gpt``, ``claude``)."""

    expected_capability = AIModelFactory
    domain = EnumRegistryDomain.CONTENT_GENERATION

    def _default_resolvers(self) -> Mapping[str, Resolver]:
        return {
            "gpt": GPTFactory,
            "claude": ClaudeFactory,
        }


__all__ = ["RegistryContentModel"]
