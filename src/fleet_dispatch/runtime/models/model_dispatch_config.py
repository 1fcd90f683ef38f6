# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch Configuration Model.

Settings for composing the dispatch services: where trip strategies are
discovered, whether registries are seeded at startup, and the log level.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ModelDispatchConfig(BaseModel):
    """Configuration for the dispatch service composition.

    Attributes:
        trip_strategy_root: Directory scanned for trip strategies. ``None``
            uses the packaged strategies directory.
        eager_bootstrap: Seed registries and run discovery while wiring, so
            configuration errors surface at startup instead of first request.
        log_level: Root log level name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    trip_strategy_root: Optional[Path] = Field(
        default=None,
        description="Directory scanned for trip strategies",
    )
    eager_bootstrap: bool = Field(
        default=False,
        description="Seed registries and run discovery while wiring",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level


__all__ = ["VALID_LOG_LEVELS", "ModelDispatchConfig"]
