# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Text and image generators for each supported model family."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class TextGenerator(ABC):
    @abstractmethod
    def generate(self, prompt: str) -> str: ...


class ImageGenerator(ABC):
    @abstractmethod
    def generate(self, description: str) -> str: ...


class _LabelledTextGenerator(TextGenerator):
    model_label: ClassVar[str]

    def generate(self, prompt: str) -> str:
        return f"{self.model_label} generated text based on: {prompt}"


class _LabelledImageGenerator(ImageGenerator):
    model_label: ClassVar[str]

    def generate(self, description: str) -> str:
        return f"{self.model_label} generated image based on: {description}"


class GPTTextGenerator(_LabelledTextGenerator):
    model_label = "GPT"


class GPTImageGenerator(_LabelledImageGenerator):
    model_label = "GPT"


class ClaudeTextGenerator(_LabelledTextGenerator):
    model_label = "Claude"


class ClaudeImageGenerator(_LabelledImageGenerator):
    model_label = "Claude"


__all__ = [
    "ClaudeImageGenerator",
    "ClaudeTextGenerator",
    "GPTImageGenerator",
    "GPTTextGenerator",
    "ImageGenerator",
    "TextGenerator",
]
