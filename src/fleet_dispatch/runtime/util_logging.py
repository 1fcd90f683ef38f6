# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging setup for fleet dispatch entry points."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from fleet_dispatch.runtime.models import VALID_LOG_LEVELS

ENV_LOG_LEVEL = "FLEET_DISPATCH_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the dispatch log format.

    The level comes from ``level`` when given, otherwise from the
    FLEET_DISPATCH_LOG_LEVEL environment variable (default: INFO). An invalid
    level falls back to INFO with a warning on stderr, since logging is not
    configured yet at that point.

    Log Format Example:
        2025-01-15 10:30:45 [INFO] fleet_dispatch.runtime.capability_discovery: Discovery scan complete: ...

    Example:
        >>> configure_logging()
        >>> logger.info("Scan finished", extra={"duration_seconds": 0.004})
    """
    log_level = (level or os.getenv(ENV_LOG_LEVEL, "INFO")).strip().upper()

    if log_level not in VALID_LOG_LEVELS:
        print(
            f"Warning: Invalid {ENV_LOG_LEVEL} '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


__all__ = ["ENV_LOG_LEVEL", "configure_logging"]
