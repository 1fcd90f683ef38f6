# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Content generation domain."""

from fleet_dispatch.content.content_factories import (
    AIModelFactory,
    ClaudeFactory,
    GPTFactory,
)
from fleet_dispatch.content.content_generators import ImageGenerator, TextGenerator
from fleet_dispatch.content.registry_content_model import RegistryContentModel
from fleet_dispatch.content.service_content import (
    DEFAULT_MODEL,
    ServiceContentGeneration,
)

__all__ = [
    "DEFAULT_MODEL",
    "AIModelFactory",
    "ClaudeFactory",
    "GPTFactory",
    "ImageGenerator",
    "RegistryContentModel",
    "ServiceContentGeneration",
    "TextGenerator",
]
