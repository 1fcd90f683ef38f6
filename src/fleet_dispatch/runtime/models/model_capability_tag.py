# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Capability Tag Model.

The declarative metadata attached to a capability class by a tag decorator.
It carries a single payload, the dispatch key the discovery scanner maps to
the class.
"""

from pydantic import BaseModel, ConfigDict, Field


class ModelCapabilityTag(BaseModel):
    """Single-value metadata tag carrying a dispatch key.

    Attributes:
        key: Dispatch key as written on the class. The scanner lower-cases it
            when building a mapping.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(..., min_length=1, description="Dispatch key")


__all__ = ["ModelCapabilityTag"]
