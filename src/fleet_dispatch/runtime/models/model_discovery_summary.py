# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovery Summary Model.

Structured record of one scan for observability: how many files were walked,
how many classes were registered, and why the rest were skipped.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fleet_dispatch.enums import EnumRegistryDomain


class ModelDiscoverySummary(BaseModel):
    """Summary of a single discovery scan.

    Attributes:
        domain: Dispatch domain the scanner serves.
        source_root: Directory that was walked.
        total_files: Source files enumerated under the root.
        total_registered: Keys present in the resulting mapping.
        skip_counts: Number of skips per skip reason value.
        registered: Key to dotted class name for every mapped key.
        duration_seconds: Wall-clock scan time.
        correlation_id: Correlation ID of the scan.
        completed_at: When the scan finished.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    domain: Optional[EnumRegistryDomain] = Field(default=None)
    source_root: Path
    total_files: int = Field(..., ge=0)
    total_registered: int = Field(..., ge=0)
    skip_counts: dict[str, int] = Field(default_factory=dict)
    registered: dict[str, str] = Field(default_factory=dict)
    duration_seconds: float = Field(..., ge=0.0)
    correlation_id: UUID
    completed_at: datetime


__all__ = ["ModelDiscoverySummary"]
