# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Declarative capability tags.

A tag is a ``ModelCapabilityTag`` stored under a domain-specific attribute on
a class. Domain packages wrap ``capability_tag`` into a named decorator, for
example ``@trip_strategy("local")``; the discovery scanner reads the tag back
with ``read_capability_tag``.

Tags are read from the class's own namespace only. A subclass of a tagged
class is untagged until it is decorated itself, so two classes never claim
the same key by inheritance.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, TypeVar

from fleet_dispatch.runtime.models import ModelCapabilityTag

ClassT = TypeVar("ClassT", bound=type)


def attach_capability_tag(cls: ClassT, attribute: str, key: str) -> ClassT:
    """Store a tag carrying ``key`` on ``cls`` under ``attribute``.

    Raises:
        TypeError: If ``cls`` is not a class.
        pydantic.ValidationError: If ``key`` is empty.
    """
    if not isinstance(cls, type):
        raise TypeError(
            f"Capability tags can only be attached to classes, got {cls!r}"
        )
    setattr(cls, attribute, ModelCapabilityTag(key=key))
    return cls


def capability_tag(attribute: str) -> Callable[[str], Callable[[ClassT], ClassT]]:
    """Build a class decorator factory that tags classes under ``attribute``.

    Example:
        >>> trip_strategy = capability_tag("__trip_strategy__")
        >>> @trip_strategy("local")
        ... class LocalTripCostStrategy(TripCostStrategy):
        ...     ...
    """

    def decorator_factory(key: str) -> Callable[[ClassT], ClassT]:
        def decorator(cls: ClassT) -> ClassT:
            return attach_capability_tag(cls, attribute, key)

        return decorator

    return decorator_factory


def read_capability_tag(cls: type, attribute: str) -> Optional[ModelCapabilityTag]:
    """Return the tag declared directly on ``cls``, or ``None``."""
    value = vars(cls).get(attribute)
    if isinstance(value, ModelCapabilityTag):
        return value
    return None


__all__ = [
    "attach_capability_tag",
    "capability_tag",
    "read_capability_tag",
]
