# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch configuration loading.

Configuration Loading Process:
    1. Resolve the config path (argument, FLEET_DISPATCH_CONFIG, or
       ./fleet_dispatch.yaml)
    2. If the file exists, parse YAML and validate against ModelDispatchConfig
    3. Otherwise build the config from environment variables and defaults

Example config file:
    ```yaml
    trip_strategy_root: /opt/fleet/strategies
    eager_bootstrap: true
    log_level: DEBUG
    ```
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional
from uuid import uuid4

import yaml
from pydantic import ValidationError

from fleet_dispatch.errors import ConfigurationError, ModelRegistryErrorContext
from fleet_dispatch.runtime.models import ModelDispatchConfig

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = "FLEET_DISPATCH_CONFIG"
ENV_TRIP_STRATEGY_ROOT = "FLEET_DISPATCH_TRIP_STRATEGY_ROOT"
ENV_EAGER_BOOTSTRAP = "FLEET_DISPATCH_EAGER_BOOTSTRAP"
ENV_LOG_LEVEL = "FLEET_DISPATCH_LOG_LEVEL"

DEFAULT_CONFIG_FILE = "fleet_dispatch.yaml"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def default_config_path() -> Path:
    return Path(os.getenv(ENV_CONFIG_PATH, DEFAULT_CONFIG_FILE))


def load_dispatch_config(config_path: Optional[Path] = None) -> ModelDispatchConfig:
    """Load the dispatch configuration from YAML or the environment.

    File-based config takes precedence; environment variables are only read
    when no config file exists.

    Args:
        config_path: Config file location. Defaults to ``default_config_path()``.

    Returns:
        Validated dispatch configuration.

    Raises:
        ConfigurationError: If the file exists but cannot be read, parsed or
            validated, or the environment holds invalid values.
    """
    config_path = Path(config_path) if config_path is not None else default_config_path()
    correlation_id = uuid4()
    context = ModelRegistryErrorContext(
        operation="load_config",
        correlation_id=correlation_id,
    )

    if config_path.exists():
        logger.info(
            "Loading dispatch config from %s (correlation_id=%s)",
            config_path,
            correlation_id,
        )
        try:
            with open(config_path, encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}
            if not isinstance(raw_config, dict):
                raise ConfigurationError(
                    f"Dispatch config at {config_path} must be a mapping, "
                    f"got {type(raw_config).__name__}",
                    context=context,
                    config_path=str(config_path),
                )
            config = ModelDispatchConfig.model_validate(raw_config)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse dispatch config YAML at {config_path}: {e}",
                context=context,
                config_path=str(config_path),
                error_details=str(e),
            ) from e
        except ValidationError as e:
            raise _validation_failure(e, config_path, context) from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(
                f"Dispatch config file contains binary or non-UTF-8 content: {config_path}",
                context=context,
                config_path=str(config_path),
                error_details=f"Encoding error at position {e.start}-{e.end}: {e.reason}",
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read dispatch config at {config_path}: {e}",
                context=context,
                config_path=str(config_path),
                error_details=str(e),
            ) from e

        logger.debug(
            "Dispatch config loaded (correlation_id=%s)",
            correlation_id,
            extra=config.model_dump(mode="json"),
        )
        return config

    logger.info(
        "No dispatch config found at %s, using environment/defaults (correlation_id=%s)",
        config_path,
        correlation_id,
    )
    raw_env: dict[str, object] = {}
    if root := os.getenv(ENV_TRIP_STRATEGY_ROOT):
        raw_env["trip_strategy_root"] = root
    if eager := os.getenv(ENV_EAGER_BOOTSTRAP):
        raw_env["eager_bootstrap"] = eager.strip().lower() in _TRUE_VALUES
    if level := os.getenv(ENV_LOG_LEVEL):
        raw_env["log_level"] = level

    try:
        return ModelDispatchConfig.model_validate(raw_env)
    except ValidationError as e:
        raise _validation_failure(e, config_path, context) from e


def _validation_failure(
    error: ValidationError,
    config_path: Path,
    context: ModelRegistryErrorContext,
) -> ConfigurationError:
    validation_errors = [
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in error.errors()
    ]
    return ConfigurationError(
        f"Dispatch config validation failed at {config_path}: "
        f"{error.error_count()} error(s). First errors: "
        f"{'; '.join(validation_errors[:3])}",
        context=context,
        config_path=str(config_path),
        validation_errors=validation_errors,
        error_count=error.error_count(),
    )


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ENV_CONFIG_PATH",
    "ENV_EAGER_BOOTSTRAP",
    "ENV_TRIP_STRATEGY_ROOT",
    "default_config_path",
    "load_dispatch_config",
]
