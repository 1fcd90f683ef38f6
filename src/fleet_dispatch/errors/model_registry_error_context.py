# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry Error Context Model.

Bundles the structured fields shared by every dispatch error so that error
constructors keep a short parameter list while staying strongly typed.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fleet_dispatch.enums import EnumRegistryDomain


class ModelRegistryErrorContext(BaseModel):
    """Structured context attached to dispatch errors.

    Attributes:
        domain: Dispatch domain the failing registry or scanner serves
        operation: Operation being performed (register, get, scan, ...)
        key: Dispatch key involved, already case-normalized where applicable
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelRegistryErrorContext(
        ...     domain=EnumRegistryDomain.MAINTENANCE,
        ...     operation="get",
        ...     key="engine",
        ... )
        >>> raise UnknownKeyError("Unknown factory key: engine", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    domain: Optional[EnumRegistryDomain] = Field(
        default=None,
        description="Dispatch domain the failing registry or scanner serves",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (register, get, scan, ...)",
    )
    key: Optional[str] = Field(
        default=None,
        description="Dispatch key involved in the failure",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )


__all__ = ["ModelRegistryErrorContext"]
