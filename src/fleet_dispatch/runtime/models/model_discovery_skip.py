# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovery Skip Model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fleet_dispatch.enums import EnumDiscoverySkipReason


class ModelDiscoverySkip(BaseModel):
    """A file or class the scanner passed over, and why.

    Attributes:
        path: Source file being inspected.
        reason: Skip classification.
        class_name: Class involved, when the skip happened at class level.
        detail: Error text for read, parse and import failures.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path = Field(..., description="Source file being inspected")
    reason: EnumDiscoverySkipReason = Field(..., description="Skip classification")
    class_name: Optional[str] = Field(default=None, description="Class involved")
    detail: Optional[str] = Field(default=None, description="Error text")


__all__ = ["ModelDiscoverySkip"]
