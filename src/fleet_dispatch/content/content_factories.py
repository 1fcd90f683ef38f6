# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model factories: one per model family, each producing a matched pair of
text and image generators."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fleet_dispatch.content.content_generators import (
    ClaudeImageGenerator,
    ClaudeTextGenerator,
    GPTImageGenerator,
    GPTTextGenerator,
    ImageGenerator,
    TextGenerator,
)


class AIModelFactory(ABC):
    """Abstract factory for a model family's generators."""

    @abstractmethod
    def create_text_generator(self) -> TextGenerator: ...

    @abstractmethod
    def create_image_generator(self) -> ImageGenerator: ...


class GPTFactory(AIModelFactory):
    def create_text_generator(self) -> TextGenerator:
        return GPTTextGenerator()

    def create_image_generator(self) -> ImageGenerator:
        return GPTImageGenerator()


class ClaudeFactory(AIModelFactory):
    def create_text_generator(self) -> TextGenerator:
        return ClaudeTextGenerator()

    def create_image_generator(self) -> ImageGenerator:
        return ClaudeImageGenerator()


__all__ = ["AIModelFactory", "ClaudeFactory", "GPTFactory"]
