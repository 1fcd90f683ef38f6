# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry Entry Model.

One dispatch key bound to one resolver. Entries are immutable; re-registering
a key replaces the whole entry.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fleet_dispatch.enums import EnumResolverKind


class ModelRegistryEntry(BaseModel):
    """A dispatch key and the resolver that produces its capability instance.

    Attributes:
        key: Case-normalized, non-empty dispatch key.
        resolver: Class (instantiated through the service container) or
            zero-argument factory callable.
        resolver_kind: Whether ``resolver`` is a class reference or a factory.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    key: str = Field(
        ...,
        min_length=1,
        description="Case-normalized dispatch key",
    )
    resolver: Callable[..., object] = Field(
        ...,
        description="Class reference or zero-argument factory",
    )
    resolver_kind: EnumResolverKind = Field(
        ...,
        description="How the resolver produces an instance",
    )

    @field_validator("key")
    @classmethod
    def _normalize_key(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("key must not be blank")
        return normalized

    @property
    def resolver_name(self) -> str:
        """Dotted name of the resolver, for logs and listings."""
        module = getattr(self.resolver, "__module__", None) or "<unknown>"
        qualname = getattr(self.resolver, "__qualname__", None) or repr(
            self.resolver
        )
        return f"{module}.{qualname}"


__all__ = ["ModelRegistryEntry"]
