# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for fleet_dispatch tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable, Iterator
from pathlib import Path
from uuid import uuid4

import pytest

from fleet_dispatch.runtime.container_wiring import (
    reset_default_container,
    wire_dispatch_services,
)
from fleet_dispatch.runtime.service_container import ServiceContainer

# Header shared by generated strategy modules
STRATEGY_MODULE_HEADER = """\
from fleet_dispatch.trip.model_trip_cost import ModelTripCost
from fleet_dispatch.trip.trip_cost_strategy import TripCostStrategy
from fleet_dispatch.trip.trip_strategy_tag import trip_strategy
"""


class StrategyPackage:
    """A throwaway importable package under ``tmp_path`` for discovery tests.

    Every instance gets a unique package name, so modules imported by one
    test never leak into another through ``sys.modules``.
    """

    def __init__(self, base: Path, name: str | None = None) -> None:
        self.name = name or f"discovered_{uuid4().hex[:12]}"
        self.root = base / self.name
        self.root.mkdir(parents=True)
        (self.root / "__init__.py").write_text("", encoding="utf-8")

    def write(self, relative: str, body: str, *, header: bool = True) -> Path:
        """Write a module at ``relative`` (creating subpackages on the way)."""
        path = self.root / relative
        directory = path.parent
        while directory != self.root:
            directory.mkdir(parents=True, exist_ok=True)
            init = directory / "__init__.py"
            if not init.exists():
                init.write_text("", encoding="utf-8")
            directory = directory.parent
        source = textwrap.dedent(body)
        if header:
            source = STRATEGY_MODULE_HEADER + "\n" + source
        path.write_text(source, encoding="utf-8")
        return path

    def module(self, relative: str) -> str:
        parts = Path(relative).with_suffix("").parts
        return ".".join((self.name, *parts))


@pytest.fixture
def strategy_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> StrategyPackage:
    """Provide an empty importable package on ``sys.path``."""
    monkeypatch.syspath_prepend(str(tmp_path))
    return StrategyPackage(tmp_path)


@pytest.fixture
def detached_package(tmp_path: Path) -> Callable[..., StrategyPackage]:
    """Build packages under ``tmp_path`` subdirectories that are NOT on ``sys.path``.

    Passing the same ``name`` for two subdirectories yields two trees with
    identical dotted module names.
    """

    def build(subdir: str, name: str | None = None) -> StrategyPackage:
        return StrategyPackage(tmp_path / subdir, name)

    return build


@pytest.fixture
def container() -> ServiceContainer:
    """Provide a fresh, unwired ServiceContainer."""
    return ServiceContainer()


@pytest.fixture
def wired_container() -> ServiceContainer:
    """Provide a ServiceContainer with every dispatch service registered."""
    container = ServiceContainer()
    wire_dispatch_services(container)
    return container


@pytest.fixture
def fresh_default_container() -> Iterator[Callable[[], None]]:
    """Reset the process-wide default container before and after a test."""
    reset_default_container()
    yield reset_default_container
    reset_default_container()
