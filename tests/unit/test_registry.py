"""
Unit tests for PortRegistry.

Covers binding, lazy cached resolution, overrides, and every wiring error.
"""
import threading
import time

import pytest

from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.infrastructure.di import (
    CircularDependencyError,
    DuplicateRegistrationError,
    PortRegistry,
    ProviderConstructionError,
    RegistryError,
    RegistryFrozenError,
    UnregisteredPortError,
)
from booking_platform.infrastructure.repositories.in_memory import InMemoryBookingRepository


class StubStore:
    """Stand-in provider."""


@pytest.fixture
def registry():
    return PortRegistry(name="test")


class TestResolution:
    """Lazy construction and caching."""

    def test_same_instance_on_repeated_resolve(self, registry):
        registry.register("BookingStore", lambda r: StubStore())

        first = registry.resolve("BookingStore")
        second = registry.resolve("BookingStore")

        assert isinstance(first, StubStore)
        assert first is second

    def test_factory_is_lazy_and_called_once(self, registry):
        calls = []

        def factory(r):
            calls.append(1)
            return StubStore()

        registry.register("BookingStore", factory)
        assert calls == []

        for _ in range(5):
            registry.resolve("BookingStore")

        assert calls == [1]

    def test_factory_receives_registry(self, registry):
        registry.register("Dependency", lambda r: "dep")
        registry.register("Consumer", lambda r: ("consumer", r.resolve("Dependency")))

        assert registry.resolve("Consumer") == ("consumer", "dep")

    def test_resolution_order_does_not_change_instances(self):
        def build():
            reg = PortRegistry()
            reg.register("Dependency", lambda r: StubStore())
            reg.register("Consumer", lambda r: [r.resolve("Dependency")])
            return reg

        forward = build()
        consumer = forward.resolve("Consumer")
        assert consumer[0] is forward.resolve("Dependency")

        backward = build()
        dependency = backward.resolve("Dependency")
        assert backward.resolve("Consumer")[0] is dependency

    def test_interface_classes_as_ports(self, registry):
        registry.register(IBookingRepository, lambda r: InMemoryBookingRepository())

        repository = registry.resolve(IBookingRepository)

        assert isinstance(repository, IBookingRepository)
        assert registry.is_registered(IBookingRepository)

    def test_register_instance(self, registry):
        store = StubStore()
        registry.register_instance("BookingStore", store)

        assert registry.resolve("BookingStore") is store

    def test_concurrent_first_resolution_builds_once(self, registry):
        built = []

        def slow_factory(r):
            time.sleep(0.05)
            instance = StubStore()
            built.append(instance)
            return instance

        registry.register("BookingStore", slow_factory)
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(registry.resolve("BookingStore")))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(built) == 1
        assert all(result is built[0] for result in results)


class TestRegistration:
    """Duplicate and override semantics."""

    def test_duplicate_registration_fails(self, registry):
        registry.register("BookingStore", lambda r: StubStore())

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register("BookingStore", lambda r: StubStore())

        assert exc_info.value.port == "BookingStore"
        assert "BookingStore" in str(exc_info.value)

    def test_duplicate_does_not_replace_original(self, registry):
        original = StubStore()
        registry.register_instance("BookingStore", original)

        with pytest.raises(DuplicateRegistrationError):
            registry.register_instance("BookingStore", StubStore())

        assert registry.resolve("BookingStore") is original

    def test_override_supersedes_previous_binding(self, registry):
        registry.register("BookingStore", lambda r: "first")
        registry.register("BookingStore", lambda r: "second", override=True)

        assert registry.resolve("BookingStore") == "second"

    def test_override_discards_cached_instance(self, registry):
        registry.register("BookingStore", lambda r: StubStore())
        old = registry.resolve("BookingStore")

        replacement = StubStore()
        registry.register_instance("BookingStore", replacement, override=True)

        assert registry.resolve("BookingStore") is replacement
        assert registry.resolve("BookingStore") is not old

    def test_override_of_unbound_port_is_plain_registration(self, registry):
        registry.register("BookingStore", lambda r: "only", override=True)

        assert registry.resolve("BookingStore") == "only"

    def test_factory_must_be_callable(self, registry):
        with pytest.raises(TypeError):
            registry.register("BookingStore", StubStore())

    def test_registered_ports_keeps_order(self, registry):
        registry.register("A", lambda r: 1)
        registry.register("B", lambda r: 2)

        assert registry.registered_ports() == ["A", "B"]


class TestErrors:
    """Misconfiguration surfaces as RegistryError subclasses."""

    def test_unregistered_port(self, registry):
        with pytest.raises(UnregisteredPortError) as exc_info:
            registry.resolve("PaymentGateway")

        assert exc_info.value.ports == ["PaymentGateway"]

    def test_unregistered_port_is_registry_error(self, registry):
        with pytest.raises(RegistryError):
            registry.resolve(IBookingRepository)

    def test_circular_dependency(self, registry):
        registry.register("A", lambda r: r.resolve("B"))
        registry.register("B", lambda r: r.resolve("A"))

        with pytest.raises(CircularDependencyError) as exc_info:
            registry.resolve("A")

        assert exc_info.value.chain == ["A", "B", "A"]

    def test_failed_construction_is_wrapped_and_not_cached(self, registry):
        attempts = []

        def flaky(r):
            attempts.append(1)
            if len(attempts) == 1:
                raise ConnectionError("boom")
            return StubStore()

        registry.register("BookingStore", flaky)

        with pytest.raises(ProviderConstructionError) as exc_info:
            registry.resolve("BookingStore")
        assert isinstance(exc_info.value.cause, ConnectionError)

        assert isinstance(registry.resolve("BookingStore"), StubStore)

    def test_nested_unregistered_port_propagates_unwrapped(self, registry):
        registry.register("Consumer", lambda r: r.resolve("Missing"))

        with pytest.raises(UnregisteredPortError) as exc_info:
            registry.resolve("Consumer")

        assert exc_info.value.ports == ["Missing"]


class TestLifecycle:
    """verify, freeze, warm_up and reset."""

    def test_verify_lists_every_missing_port(self, registry):
        registry.register("A", lambda r: 1)

        with pytest.raises(UnregisteredPortError) as exc_info:
            registry.verify(["A", "B", "C"])

        assert exc_info.value.ports == ["B", "C"]

    def test_verify_passes_when_complete(self, registry):
        registry.register("A", lambda r: 1)
        registry.verify(["A"])

    def test_frozen_registry_rejects_registration(self, registry):
        registry.register("A", lambda r: 1)
        registry.freeze()

        assert registry.is_frozen
        with pytest.raises(RegistryFrozenError):
            registry.register("B", lambda r: 2)
        with pytest.raises(RegistryFrozenError):
            registry.register("A", lambda r: 3, override=True)

        assert registry.resolve("A") == 1

    def test_warm_up_builds_everything(self, registry):
        built = []
        registry.register("A", lambda r: built.append("A") or "a")
        registry.register("B", lambda r: built.append("B") or "b")

        registry.warm_up()

        assert built == ["A", "B"]

    def test_warm_up_surfaces_construction_errors(self, registry):
        registry.register("Broken", lambda r: 1 / 0)

        with pytest.raises(ProviderConstructionError):
            registry.warm_up()

    def test_reset(self, registry):
        registry.register("A", lambda r: 1)
        registry.freeze()

        registry.reset()

        assert not registry.is_frozen
        assert registry.registered_ports() == []
        registry.register("A", lambda r: 2)
        assert registry.resolve("A") == 2
