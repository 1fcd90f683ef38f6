# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Capability Discovery - build a key-to-class mapping by scanning source files.

CapabilityDiscovery walks a directory of Python source files, finds concrete
classes that implement a capability contract and carry a capability tag, and
maps each tag key to its class. Nothing has to be registered by hand: adding
a tagged class to the scanned tree is enough for it to be dispatchable.

Scan Pipeline (per file, in sorted path order):
    1. Read the source text
    2. Pre-filter: skip files that never mention the tag decorator
    3. Parse with ``ast`` and collect top-level class declarations
    4. Derive the dotted module name from the ``__init__.py`` chain
    5. Import the module by that name when it resolves to this very file,
       otherwise load the file by location (roots outside ``sys.path``, or a
       second tree reusing module names already imported)
    6. Keep classes that are concrete, subclass the capability and carry a tag

A file that fails any step is skipped and recorded; it never aborts the
scan. Within one scan the last file processed wins for a duplicated key.

Example Usage:
    ```python
    discovery = CapabilityDiscovery(
        capability=TripCostStrategy,
        tag_attribute="__trip_strategy__",
        tag_marker="trip_strategy",
        default_root=Path("src/fleet_dispatch/trip/strategies"),
    )
    mapping = discovery.get_mapping()  # scans the default root on first call
    strategy_cls = mapping["local"]
    ```

Thread Safety:
    A scan builds its mapping locally and publishes it with a single
    reference swap under ``_lock``. Two first callers racing on an empty
    cache may both scan; the results are equivalent.
"""

from __future__ import annotations

import ast
import hashlib
import importlib
import importlib.util
import inspect
import logging
import sys
import threading
import time
from collections import Counter
from datetime import UTC, datetime
from pathlib import Path
from types import ModuleType
from typing import Optional
from uuid import UUID, uuid4

from fleet_dispatch.enums import EnumDiscoverySkipReason, EnumRegistryDomain
from fleet_dispatch.errors import (
    DiscoveryConfigurationError,
    ModelRegistryErrorContext,
    UnknownKeyError,
)
from fleet_dispatch.runtime.capability_tag import read_capability_tag
from fleet_dispatch.runtime.models import (
    ModelDiscoveredMapping,
    ModelDiscoverySkip,
    ModelDiscoverySummary,
)
from fleet_dispatch.runtime.service_container import ServiceContainer

logger = logging.getLogger(__name__)

# Source files considered by a scan
SOURCE_FILE_PATTERN = "*.py"

PACKAGE_MARKER = "__init__.py"

# Prefix of module names given to files loaded by location
DETACHED_MODULE_PREFIX = "_fleet_dispatch_discovered"


class CapabilityDiscovery:
    """Discovers tagged capability classes under a directory tree.

    Attributes:
        capability: Contract base class discovered classes must subclass.
        tag_attribute: Class attribute holding the capability tag.
        tag_marker: Text every candidate file must contain (the decorator name).
        default_root: Directory scanned when no root was configured.
        domain: Dispatch domain used in logs and error context.
    """

    def __init__(
        self,
        capability: type,
        tag_attribute: str,
        tag_marker: str,
        default_root: Path,
        domain: Optional[EnumRegistryDomain] = None,
        root: Optional[Path] = None,
    ) -> None:
        self.capability = capability
        self.tag_attribute = tag_attribute
        self.tag_marker = tag_marker
        self.default_root = Path(default_root)
        self.domain = domain
        self._configured_root = Path(root) if root is not None else None
        self._mapping = ModelDiscoveredMapping()
        self._last_summary: Optional[ModelDiscoverySummary] = None
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        """Root scanned by ``get_mapping`` when the cache is empty."""
        return self._configured_root or self.default_root

    @property
    def last_summary(self) -> Optional[ModelDiscoverySummary]:
        with self._lock:
            return self._last_summary

    def scan(
        self, root: Path, correlation_id: Optional[UUID] = None
    ) -> ModelDiscoveredMapping:
        """Scan ``root`` and replace the cached mapping with the result.

        Args:
            root: Directory to walk recursively.
            correlation_id: Correlation ID for logs. Generated when omitted.

        Returns:
            The freshly built mapping, also published as the cache.

        Raises:
            DiscoveryConfigurationError: If ``root`` does not exist or is not
                a directory.
        """
        correlation_id = correlation_id or uuid4()
        start_time = time.perf_counter()
        root = Path(root)

        if not root.exists():
            raise DiscoveryConfigurationError(
                f"Discovery root not found: {root}",
                context=self._context("scan", correlation_id),
                root=str(root),
            )
        if not root.is_dir():
            raise DiscoveryConfigurationError(
                f"Discovery root is not a directory: {root}",
                context=self._context("scan", correlation_id),
                root=str(root),
            )

        logger.debug(
            "Scanning %s for %s classes",
            root,
            self.capability.__name__,
            extra={
                "root": str(root),
                "capability": self.capability.__name__,
                "correlation_id": str(correlation_id),
            },
        )

        source_files = sorted(p for p in root.rglob(SOURCE_FILE_PATTERN) if p.is_file())
        # Files may have been added since the import system cached directory listings
        importlib.invalidate_caches()
        entries: dict[str, type] = {}
        skipped: list[ModelDiscoverySkip] = []

        for path in source_files:
            for key, cls in self._inspect_file(path, skipped):
                previous = entries.get(key)
                if previous is not None and previous is not cls:
                    logger.debug(
                        "Key %r from %s overrides %s",
                        key,
                        cls.__qualname__,
                        previous.__qualname__,
                        extra={"key": key, "path": str(path)},
                    )
                entries[key] = cls

        mapping = ModelDiscoveredMapping(
            entries=entries,
            source_root=root,
            skipped=tuple(skipped),
        )
        summary = self._log_scan_summary(
            mapping,
            total_files=len(source_files),
            duration_seconds=time.perf_counter() - start_time,
            correlation_id=correlation_id,
        )
        with self._lock:
            self._mapping = mapping
            self._last_summary = summary
        return mapping

    def get_mapping(self) -> dict[str, type]:
        """Return a copy of the cached mapping, scanning first if it is empty."""
        with self._lock:
            mapping = self._mapping
        if mapping.is_empty():
            mapping = self.scan(self.root)
        return dict(mapping.entries)

    def keys(self) -> set[str]:
        return set(self.get_mapping())

    def resolve(self, key: str, container: ServiceContainer) -> object:
        """Instantiate the class discovered for ``key`` through ``container``.

        Raises:
            UnknownKeyError: If no discovered class carries ``key``.
        """
        normalized = key.strip().lower()
        mapping = self.get_mapping()
        cls = mapping.get(normalized)
        if cls is None:
            raise UnknownKeyError(
                f"No {self.capability.__name__} discovered for key {key!r}",
                context=ModelRegistryErrorContext(
                    domain=self.domain, operation="resolve", key=normalized
                ),
                available_keys=sorted(mapping),
            )
        return container.make(cls)

    def clear(self) -> None:
        """Drop the cached mapping so the next lookup rescans."""
        with self._lock:
            self._mapping = ModelDiscoveredMapping()
            self._last_summary = None

    def _inspect_file(
        self, path: Path, skipped: list[ModelDiscoverySkip]
    ) -> list[tuple[str, type]]:
        """Return the (key, class) pairs a single source file contributes."""

        def skip(
            reason: EnumDiscoverySkipReason,
            class_name: Optional[str] = None,
            detail: Optional[str] = None,
        ) -> None:
            skipped.append(
                ModelDiscoverySkip(
                    path=path, reason=reason, class_name=class_name, detail=detail
                )
            )
            logger.debug(
                "Skipping %s%s: %s",
                path,
                f" ({class_name})" if class_name else "",
                reason.value,
                extra={
                    "path": str(path),
                    "reason": reason.value,
                    "class_name": class_name,
                    "detail": detail,
                },
            )

        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            skip(EnumDiscoverySkipReason.UNREADABLE, detail=str(e))
            return []

        if self.tag_marker not in source:
            skip(EnumDiscoverySkipReason.NO_TAG_REFERENCE)
            return []

        try:
            tree = ast.parse(source, filename=str(path))
        except (SyntaxError, ValueError) as e:
            skip(EnumDiscoverySkipReason.SYNTAX_ERROR, detail=str(e))
            return []

        class_names = [
            node.name for node in tree.body if isinstance(node, ast.ClassDef)
        ]
        if not class_names:
            skip(EnumDiscoverySkipReason.NO_CLASS_DECLARATION)
            return []

        module_name = module_name_for(path)
        if module_name is None:
            skip(
                EnumDiscoverySkipReason.NOT_IMPORTABLE,
                detail="no valid dotted module name",
            )
            return []

        try:
            module = load_module_from_path(path, module_name)
        except Exception as e:
            # Any failure while executing foreign module code is a per-file skip
            skip(
                EnumDiscoverySkipReason.NOT_IMPORTABLE,
                detail=f"{type(e).__name__}: {e}",
            )
            return []

        found: list[tuple[str, type]] = []
        for class_name in class_names:
            cls = getattr(module, class_name, None)
            if not isinstance(cls, type):
                skip(EnumDiscoverySkipReason.CLASS_NOT_FOUND, class_name=class_name)
                continue
            if inspect.isabstract(cls):
                skip(EnumDiscoverySkipReason.ABSTRACT, class_name=class_name)
                continue
            if not issubclass(cls, self.capability):
                skip(EnumDiscoverySkipReason.NOT_CONFORMING, class_name=class_name)
                continue
            tag = read_capability_tag(cls, self.tag_attribute)
            if tag is None:
                skip(EnumDiscoverySkipReason.UNTAGGED, class_name=class_name)
                continue
            found.append((tag.key.strip().lower(), cls))
        return found

    def _log_scan_summary(
        self,
        mapping: ModelDiscoveredMapping,
        total_files: int,
        duration_seconds: float,
        correlation_id: UUID,
    ) -> ModelDiscoverySummary:
        """Log one line per scan plus the discovered classes.

        Logs at WARNING when any file failed to import, otherwise INFO.

        Example log output:
            Discovery scan complete: 3 TripCostStrategy classes in 4.12ms (source: .../strategies)
              - international -> fleet_dispatch.trip.strategies.strategy_international.InternationalTripCostStrategy
              ...
        """
        skip_counts = Counter(skip.reason.value for skip in mapping.skipped)
        registered = {
            key: f"{cls.__module__}.{cls.__qualname__}"
            for key, cls in sorted(mapping.entries.items())
        }
        summary = ModelDiscoverySummary(
            domain=self.domain,
            source_root=mapping.source_root or self.root,
            total_files=total_files,
            total_registered=len(registered),
            skip_counts=dict(skip_counts),
            registered=registered,
            duration_seconds=duration_seconds,
            correlation_id=correlation_id,
            completed_at=datetime.now(UTC),
        )

        if duration_seconds < 1.0:
            duration_str = f"{duration_seconds * 1000:.2f}ms"
        else:
            duration_str = f"{duration_seconds:.2f}s"

        import_failures = skip_counts.get(EnumDiscoverySkipReason.NOT_IMPORTABLE.value, 0)
        log_level = logging.WARNING if import_failures else logging.INFO

        lines = [f"  - {key} -> {name}" for key, name in registered.items()]
        message = (
            f"Discovery scan complete: {len(registered)} "
            f"{self.capability.__name__} classes in {duration_str} "
            f"(source: {summary.source_root})"
        )
        if import_failures:
            message += f" ({import_failures} files failed to import)"
        message += "\n" + ("\n".join(lines) if lines else "  (none)")

        logger.log(
            log_level,
            message,
            extra={
                "domain": self.domain.value if self.domain else None,
                "source": str(summary.source_root),
                "total_files": total_files,
                "total_registered": len(registered),
                "skip_counts": dict(skip_counts),
                "duration_seconds": duration_seconds,
                "correlation_id": str(correlation_id),
            },
        )
        return summary

    def _context(
        self, operation: str, correlation_id: Optional[UUID] = None
    ) -> ModelRegistryErrorContext:
        return ModelRegistryErrorContext(
            domain=self.domain,
            operation=operation,
            correlation_id=correlation_id,
        )


def module_name_for(path: Path) -> Optional[str]:
    """Derive the dotted module name of ``path`` from its package chain.

    Walks up while the parent directory holds an ``__init__.py``. A file
    outside any package maps to its bare stem, importable only when its
    directory is on ``sys.path``.

    Returns:
        The dotted module name, or ``None`` when a component is not a valid
        identifier.
    """
    path = path.resolve()
    parts = [] if path.name == PACKAGE_MARKER else [path.stem]
    directory = path.parent
    while (directory / PACKAGE_MARKER).is_file():
        parts.append(directory.name)
        if directory.parent == directory:
            break
        directory = directory.parent
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return ".".join(reversed(parts))


def load_module_from_path(path: Path, module_name: str) -> ModuleType:
    """Import the module defined by the source file at ``path``.

    The dotted ``module_name`` is used when the import system resolves it to
    ``path`` itself. Otherwise the file is loaded by location under a name
    derived from its absolute path, so two trees with identical package
    layouts never share modules.

    Raises:
        Exception: Whatever executing the module raises.
    """
    path = path.resolve()
    try:
        spec = importlib.util.find_spec(module_name)
    except (ImportError, ValueError):
        # Parent package not importable from sys.path
        spec = None
    if spec is not None and spec.origin and Path(spec.origin).resolve() == path:
        return importlib.import_module(module_name)

    digest = hashlib.sha256(str(path).encode("utf-8")).hexdigest()[:16]
    detached_name = f"{DETACHED_MODULE_PREFIX}_{digest}_{module_name.replace('.', '_')}"
    existing = sys.modules.get(detached_name)
    if existing is not None:
        return existing

    detached_spec = importlib.util.spec_from_file_location(detached_name, path)
    if detached_spec is None or detached_spec.loader is None:
        raise ImportError(f"Cannot create a module spec for {path}")
    module = importlib.util.module_from_spec(detached_spec)
    sys.modules[detached_name] = module
    try:
        detached_spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(detached_name, None)
        raise
    return module


__all__ = ["CapabilityDiscovery", "load_module_from_path", "module_name_for"]
