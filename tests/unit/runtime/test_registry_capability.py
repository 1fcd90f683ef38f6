# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RegistryCapability.

Tests cover:
- Registration (classes, dotted paths, factories) and overwrite semantics
- Case-insensitive lookup
- Lazy default bootstrap (at most once, explicit registrations kept)
- Type enforcement at registration and at resolution
- Key type validation shared by every lookup
- Thread safety of concurrent bootstrap and registration
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from uuid import uuid4

import pytest

from fleet_dispatch.enums import EnumRegistryDomain, EnumResolverKind
from fleet_dispatch.errors import (
    DependencyResolutionError,
    InvalidResolverError,
    UnknownKeyError,
)
from fleet_dispatch.runtime.registry_capability import RegistryCapability, Resolver
from fleet_dispatch.runtime.service_container import ServiceContainer

pytestmark = [pytest.mark.unit]


# =============================================================================
# Test Fixtures - Capabilities
# =============================================================================


class Greeter(ABC):
    @abstractmethod
    def greet(self) -> str: ...


class EnglishGreeter(Greeter):
    def greet(self) -> str:
        return "hello"


class FrenchGreeter(Greeter):
    def greet(self) -> str:
        return "bonjour"


class Salutation:
    def __init__(self, text: str = "hi") -> None:
        self.text = text


class PoliteGreeter(Greeter):
    """Needs a collaborator from the container."""

    def __init__(self, salutation: Salutation) -> None:
        self.salutation = salutation

    def greet(self) -> str:
        return self.salutation.text


class NotAGreeter:
    pass


class RegistryGreeter(RegistryCapability[Greeter]):
    expected_capability = Greeter
    domain = EnumRegistryDomain.CONTENT_GENERATION

    def __init__(self, container: ServiceContainer | None = None) -> None:
        super().__init__(container)
        self.bootstrap_calls = 0

    def _default_resolvers(self) -> Mapping[str, Resolver]:
        self.bootstrap_calls += 1
        return {"en": EnglishGreeter, "fr": FrenchGreeter}


@pytest.fixture
def registry() -> RegistryGreeter:
    """Provide a fresh registry with defaults for each test."""
    return RegistryGreeter()


@pytest.fixture
def bare_registry() -> RegistryCapability[Greeter]:
    """Provide a base-class registry, which has no defaults."""
    return RegistryCapability(expected_capability=Greeter)


# =============================================================================
# Tests
# =============================================================================


class TestConstruction:
    def test_base_registry_requires_capability(self) -> None:
        with pytest.raises(TypeError, match="expected capability"):
            RegistryCapability()

    def test_explicit_capability_overrides_class_attribute(self) -> None:
        registry = RegistryCapability(expected_capability=Salutation)
        assert registry.capability is Salutation

    def test_new_registry_is_empty_and_not_bootstrapped(
        self, registry: RegistryGreeter
    ) -> None:
        assert registry.keys() == set()
        assert registry.is_bootstrapped is False


class TestRegistration:
    def test_register_class_then_get_returns_instance(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", EnglishGreeter)

        greeter = bare_registry.get("en")

        assert isinstance(greeter, EnglishGreeter)
        assert greeter.greet() == "hello"

    def test_get_returns_fresh_instance_each_time(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", EnglishGreeter)
        assert bare_registry.get("en") is not bare_registry.get("en")

    def test_register_same_pair_twice_is_idempotent(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", EnglishGreeter)
        bare_registry.register("en", EnglishGreeter)

        assert bare_registry.keys() == {"en"}
        assert isinstance(bare_registry.get("en"), EnglishGreeter)

    def test_register_overwrites_silently(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("greeting", EnglishGreeter)
        bare_registry.register("greeting", FrenchGreeter)

        assert bare_registry.get("greeting").greet() == "bonjour"

    def test_register_records_resolver_kind(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", EnglishGreeter)
        bare_registry.register("fr", lambda: FrenchGreeter())

        en_entry = bare_registry.entry("en")
        fr_entry = bare_registry.entry("fr")
        assert en_entry is not None and fr_entry is not None
        assert en_entry.resolver_kind is EnumResolverKind.CLASS_REFERENCE
        assert fr_entry.resolver_kind is EnumResolverKind.FACTORY
        assert en_entry.resolver_name.endswith("EnglishGreeter")

    def test_register_dotted_path(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", f"{__name__}.EnglishGreeter")

        entry = bare_registry.entry("en")
        assert entry is not None
        assert entry.resolver is EnglishGreeter

    @pytest.mark.parametrize(
        "dotted_path",
        [
            "no_such_module_anywhere.Greeter",
            f"{__name__}.MissingGreeter",
            "EnglishGreeter",
        ],
    )
    def test_register_missing_dotted_path_fails(
        self, bare_registry: RegistryCapability[Greeter], dotted_path: str
    ) -> None:
        with pytest.raises(InvalidResolverError, match="does not exist"):
            bare_registry.register("en", dotted_path)
        assert bare_registry.keys() == set()

    @pytest.mark.parametrize(
        ("body", "error_name"),
        [
            ("class Greeter(:\n    pass\n", "SyntaxError"),
            ("undefined_name\n", "NameError"),
            ('raise RuntimeError("import-time failure")\n', "RuntimeError"),
        ],
    )
    def test_register_dotted_path_whose_module_fails_to_load(
        self,
        bare_registry: RegistryCapability[Greeter],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        body: str,
        error_name: str,
    ) -> None:
        module_name = f"greeters_{uuid4().hex[:12]}"
        (tmp_path / f"{module_name}.py").write_text(body, encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(InvalidResolverError, match="could not be imported") as exc_info:
            bare_registry.register("en", f"{module_name}.Greeter")

        assert error_name in str(exc_info.value)
        assert exc_info.value.__cause__ is not None
        assert exc_info.value.context.operation == "register"
        assert bare_registry.keys() == set()

    def test_register_non_conforming_class_fails(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        with pytest.raises(InvalidResolverError, match="must extend Greeter"):
            bare_registry.register("x", NotAGreeter)
        assert not bare_registry.has("x")

    @pytest.mark.parametrize("resolver", [42, None, EnglishGreeter()])
    def test_register_non_callable_fails(
        self, bare_registry: RegistryCapability[Greeter], resolver: object
    ) -> None:
        with pytest.raises(InvalidResolverError):
            bare_registry.register("x", resolver)  # type: ignore[arg-type]

    @pytest.mark.parametrize("key", ["", "   ", None, 7])
    def test_register_invalid_key_fails(
        self, bare_registry: RegistryCapability[Greeter], key: object
    ) -> None:
        with pytest.raises(InvalidResolverError, match="non-empty string"):
            bare_registry.register(key, EnglishGreeter)  # type: ignore[arg-type]

    @pytest.mark.parametrize("key", [None, 7, b"en"])
    @pytest.mark.parametrize("operation", ["has", "entry", "get"])
    def test_lookup_with_non_string_key_fails(
        self,
        bare_registry: RegistryCapability[Greeter],
        operation: str,
        key: object,
    ) -> None:
        bare_registry.register("en", EnglishGreeter)

        with pytest.raises(InvalidResolverError, match="non-empty string") as exc_info:
            getattr(bare_registry, operation)(key)

        assert exc_info.value.context.operation == operation
        assert bare_registry.is_bootstrapped is False

    def test_blank_lookup_is_a_miss(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        assert bare_registry.has("   ") is False
        assert bare_registry.entry("") is None
        with pytest.raises(UnknownKeyError):
            bare_registry.get("   ")


class TestCaseInsensitivity:
    @pytest.mark.parametrize("variant", ["engine", "ENGINE", "Engine", " eNgInE "])
    def test_lookup_ignores_case(
        self, bare_registry: RegistryCapability[Greeter], variant: str
    ) -> None:
        bare_registry.register("Engine", EnglishGreeter)

        assert bare_registry.has(variant)
        assert isinstance(bare_registry.get(variant), EnglishGreeter)

    def test_keys_are_stored_lower_cased(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("MiXeD", EnglishGreeter)
        assert bare_registry.keys() == {"mixed"}

    def test_keys_returns_copy(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", EnglishGreeter)
        keys = bare_registry.keys()
        keys.add("intruder")
        assert bare_registry.keys() == {"en"}


class TestGet:
    def test_unknown_key_fails_closed(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("en", EnglishGreeter)

        with pytest.raises(UnknownKeyError) as exc_info:
            bare_registry.get("de")

        assert exc_info.value.context.key == "de"
        assert exc_info.value.extra_context["registered_keys"] == ["en"]

    def test_unknown_key_on_empty_base_registry(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        with pytest.raises(UnknownKeyError):
            bare_registry.get("anything")
        assert bare_registry.is_bootstrapped is True

    def test_factory_is_called_with_no_arguments(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        calls: list[int] = []

        def factory() -> Greeter:
            calls.append(1)
            return FrenchGreeter()

        bare_registry.register("fr", factory)

        assert calls == []
        assert bare_registry.get("fr").greet() == "bonjour"
        assert calls == [1]

    def test_factory_returning_wrong_type_fails_at_resolution(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        bare_registry.register("bad", lambda: NotAGreeter())

        with pytest.raises(InvalidResolverError, match="expected Greeter"):
            bare_registry.get("bad")

    def test_class_resolver_is_autowired_through_container(self) -> None:
        container = ServiceContainer()
        container.register_instance(Salutation, Salutation("good day"))
        registry = RegistryCapability(container, expected_capability=Greeter)
        registry.register("polite", PoliteGreeter)

        assert registry.get("polite").greet() == "good day"

    def test_container_failure_propagates(
        self, bare_registry: RegistryCapability[Greeter]
    ) -> None:
        class Broken(Greeter):
            def __init__(self) -> None:
                raise RuntimeError("boom")

            def greet(self) -> str:
                return ""

        bare_registry.register("broken", Broken)

        with pytest.raises(DependencyResolutionError, match="boom"):
            bare_registry.get("broken")


class TestBootstrap:
    def test_get_bootstraps_defaults_on_first_miss(
        self, registry: RegistryGreeter
    ) -> None:
        assert registry.get("fr").greet() == "bonjour"
        assert registry.is_bootstrapped is True
        assert registry.keys() == {"en", "fr"}

    def test_has_and_keys_never_bootstrap(self, registry: RegistryGreeter) -> None:
        assert registry.has("en") is False
        assert registry.keys() == set()
        assert registry.bootstrap_calls == 0

    def test_bootstrap_runs_at_most_once_automatically(
        self, registry: RegistryGreeter
    ) -> None:
        registry.get("en")
        with pytest.raises(UnknownKeyError):
            registry.get("de")
        with pytest.raises(UnknownKeyError):
            registry.get("it")

        assert registry.bootstrap_calls == 1

    def test_hit_before_bootstrap_does_not_bootstrap(
        self, registry: RegistryGreeter
    ) -> None:
        registry.register("en", FrenchGreeter)

        registry.get("en")

        assert registry.bootstrap_calls == 0
        assert registry.is_bootstrapped is False

    def test_explicit_registration_survives_bootstrap(
        self, registry: RegistryGreeter
    ) -> None:
        registry.register("en", FrenchGreeter)

        registry.bootstrap_defaults()

        assert registry.get("en").greet() == "bonjour"
        assert registry.get("fr").greet() == "bonjour"

    def test_explicit_bootstrap_is_idempotent(self, registry: RegistryGreeter) -> None:
        registry.bootstrap_defaults()
        registry.bootstrap_defaults()

        assert registry.keys() == {"en", "fr"}

    def test_clear_resets_entries_and_flag(self, registry: RegistryGreeter) -> None:
        registry.bootstrap_defaults()
        registry.clear()

        assert registry.keys() == set()
        assert registry.is_bootstrapped is False
        assert registry.get("en").greet() == "hello"
        assert registry.bootstrap_calls == 2


class TestThreadSafety:
    def test_concurrent_first_gets_see_complete_defaults(self) -> None:
        registry = RegistryGreeter()

        def lookup(index: int) -> str:
            return registry.get("fr" if index % 2 else "en").greet()

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lookup, range(200)))

        assert set(results) == {"hello", "bonjour"}
        assert registry.keys() == {"en", "fr"}

    def test_concurrent_registration(self) -> None:
        registry: RegistryCapability[Greeter] = RegistryCapability(
            expected_capability=Greeter
        )

        def register(index: int) -> None:
            registry.register(f"key_{index}", EnglishGreeter)

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(register, range(100)))

        assert registry.keys() == {f"key_{i}" for i in range(100)}
