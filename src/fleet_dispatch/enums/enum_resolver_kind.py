# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolver Kind Enumeration."""

from enum import Enum


class EnumResolverKind(str, Enum):
    """How a registry entry produces its capability instance.

    Attributes:
        CLASS_REFERENCE: The resolver is a class, instantiated through the
            service container. Checked against the capability at registration.
        FACTORY: The resolver is a zero-argument callable. Its product can only
            be checked at resolution time.
    """

    CLASS_REFERENCE = "class_reference"
    FACTORY = "factory"


__all__ = ["EnumResolverKind"]
