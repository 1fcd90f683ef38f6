# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovered Mapping Model.

The product of one discovery scan: dispatch key to class. A mapping is built
completely before it is published, and a later scan replaces it wholesale.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fleet_dispatch.runtime.models.model_discovery_skip import ModelDiscoverySkip


class ModelDiscoveredMapping(BaseModel):
    """Key-to-class mapping built by a single discovery scan.

    Attributes:
        entries: Lower-cased dispatch key to the tagged capability class.
        source_root: Directory the scan walked.
        skipped: Files and classes passed over during the scan.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: dict[str, type] = Field(
        default_factory=dict,
        description="Dispatch key to capability class",
    )
    source_root: Optional[Path] = Field(
        default=None,
        description="Directory the scan walked",
    )
    skipped: tuple[ModelDiscoverySkip, ...] = Field(
        default=(),
        description="Files and classes passed over during the scan",
    )

    def is_empty(self) -> bool:
        return not self.entries

    def get(self, key: str) -> Optional[type]:
        """Case-insensitive lookup."""
        return self.entries.get(key.strip().lower())


__all__ = ["ModelDiscoveredMapping"]
