# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Discovery Skip Reason Enumeration.

Classifies why the discovery scanner passed over a source file or a class.
Skips are expected during a scan (most files in a tree are not candidates),
so these values feed observability only and never surface as errors.
"""

from enum import Enum


class EnumDiscoverySkipReason(str, Enum):
    """Reasons a file or class was skipped during a discovery scan.

    Attributes:
        UNREADABLE: The file could not be read or decoded.
        NO_TAG_REFERENCE: Textual pre-filter found no mention of the tag decorator.
        SYNTAX_ERROR: The file could not be parsed.
        NO_CLASS_DECLARATION: The file declares no top-level class.
        NOT_IMPORTABLE: No dotted module name could be derived, or import failed.
        CLASS_NOT_FOUND: A declared class was missing from the imported module.
        ABSTRACT: The class cannot be instantiated.
        NOT_CONFORMING: The class does not subclass the capability contract.
        UNTAGGED: The class carries no metadata tag.
    """

    UNREADABLE = "unreadable"
    NO_TAG_REFERENCE = "no_tag_reference"
    SYNTAX_ERROR = "syntax_error"
    NO_CLASS_DECLARATION = "no_class_declaration"
    NOT_IMPORTABLE = "not_importable"
    CLASS_NOT_FOUND = "class_not_found"
    ABSTRACT = "abstract"
    NOT_CONFORMING = "not_conforming"
    UNTAGGED = "untagged"


__all__ = ["EnumDiscoverySkipReason"]
