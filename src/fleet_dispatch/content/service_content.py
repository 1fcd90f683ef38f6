# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Content generation dispatch service."""

from __future__ import annotations

import logging

from fleet_dispatch.content.content_factories import AIModelFactory
from fleet_dispatch.content.registry_content_model import RegistryContentModel
from fleet_dispatch.enums import EnumRegistryDomain
from fleet_dispatch.errors import ModelRegistryErrorContext, RequestValidationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt"


class ServiceContentGeneration:
    """Generates text or images with the factory registered for a model name.

    Example:
        >>> service = container.make(ServiceContentGeneration)
        >>> service.generate_text("Write a haiku", model="claude")
        'Claude generated text based on: Write a haiku'
    """

    def __init__(self, registry: RegistryContentModel) -> None:
        self._registry = registry

    def generate_text(self, prompt: str, model: str = DEFAULT_MODEL) -> str:
        """Raises RequestValidationError on a blank prompt, UnknownKeyError on an unknown model."""
        factory = self._factory_for(model, prompt, "generate_text")
        return factory.create_text_generator().generate(prompt)

    def generate_image(self, description: str, model: str = DEFAULT_MODEL) -> str:
        """Raises RequestValidationError on a blank description, UnknownKeyError on an unknown model."""
        factory = self._factory_for(model, description, "generate_image")
        return factory.create_image_generator().generate(description)

    def _factory_for(self, model: str, prompt: str, operation: str) -> AIModelFactory:
        if not prompt or not prompt.strip():
            raise RequestValidationError(
                "Prompt is required",
                context=ModelRegistryErrorContext(
                    domain=EnumRegistryDomain.CONTENT_GENERATION,
                    operation=operation,
                    key=model,
                ),
                validation_errors=["prompt: must not be blank"],
            )
        logger.debug(
            "Dispatching %s to model %r",
            operation,
            model,
            extra={"key": model, "operation": operation},
        )
        return self._registry.get(model)


__all__ = ["DEFAULT_MODEL", "ServiceContentGeneration"]
