"""Port registry (Registry Pattern).

Associates each port (an abstract capability such as a repository interface,
or a plain string name) with exactly one factory, and hands out a single
lazily-built provider instance per port for the lifetime of the registry.
"""
import logging
import threading
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

from booking_platform.infrastructure.di.exceptions import (
    CircularDependencyError,
    DuplicateRegistrationError,
    ProviderConstructionError,
    RegistryError,
    RegistryFrozenError,
    UnregisteredPortError,
    describe_port,
)


Factory = Callable[["PortRegistry"], Any]


class PortRegistry:
    """
    Registry binding port identifiers to provider factories.

    Factories receive the registry so a provider can resolve its own
    dependencies. Each provider is constructed on first resolution and then
    cached, so the same port always yields the identical instance.

    The registry is populated once at startup, then frozen. Construction is
    serialised with a re-entrant lock; cached lookups are lock-free.
    """

    def __init__(self, name: str = "default"):
        """
        Initialize an empty registry.

        Args:
            name: Registry name used in log messages
        """
        self.name = name
        self._factories: Dict[Hashable, Factory] = {}
        self._instances: Dict[Hashable, Any] = {}
        self._resolving: List[Hashable] = []
        self._frozen = False
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    def register(self, port: Hashable, factory: Factory, override: bool = False) -> None:
        """
        Record how to construct the provider for a port.

        Args:
            port: Port identifier (interface class or string)
            factory: Callable receiving this registry and returning the provider
            override: Replace an existing binding instead of failing

        Raises:
            DuplicateRegistrationError: If the port is bound and override is False
            RegistryFrozenError: If the registry has been frozen
            TypeError: If factory is not callable
        """
        if not callable(factory):
            raise TypeError(f"Factory for '{describe_port(port)}' must be callable")

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(port)

            if port in self._factories:
                if not override:
                    raise DuplicateRegistrationError(port)
                self._logger.warning(
                    f"[{self.name}] Overriding binding for '{describe_port(port)}'"
                )
                # The old provider must not leak into later resolutions
                self._instances.pop(port, None)

            self._factories[port] = factory
            self._logger.debug(f"[{self.name}] Registered '{describe_port(port)}'")

    def register_instance(self, port: Hashable, instance: Any, override: bool = False) -> None:
        """
        Bind an already constructed provider to a port.

        Args:
            port: Port identifier
            instance: Provider instance
            override: Replace an existing binding instead of failing
        """
        self.register(port, lambda registry: instance, override=override)

    def resolve(self, port: Hashable) -> Any:
        """
        Return the provider bound to a port, constructing it on first use.

        Args:
            port: Port identifier

        Returns:
            The cached provider instance

        Raises:
            UnregisteredPortError: If nothing is bound to the port
            CircularDependencyError: If construction loops back to this port
            ProviderConstructionError: If the factory raises
        """
        try:
            return self._instances[port]
        except KeyError:
            pass

        with self._lock:
            if port in self._instances:
                return self._instances[port]

            factory = self._factories.get(port)
            if factory is None:
                raise UnregisteredPortError([port])

            if port in self._resolving:
                raise CircularDependencyError(self._resolving + [port])

            self._resolving.append(port)
            try:
                instance = factory(self)
            except RegistryError:
                raise
            except Exception as e:
                self._logger.error(
                    f"[{self.name}] Factory for '{describe_port(port)}' failed: {e}"
                )
                raise ProviderConstructionError(port, e) from e
            finally:
                self._resolving.pop()

            self._instances[port] = instance
            self._logger.info(
                f"[{self.name}] Resolved '{describe_port(port)}' -> "
                f"{type(instance).__name__}"
            )
            return instance

    def is_registered(self, port: Hashable) -> bool:
        """Check whether a port has a binding."""
        return port in self._factories

    def registered_ports(self) -> List[Hashable]:
        """Get all bound port identifiers in registration order."""
        return list(self._factories.keys())

    def verify(self, required_ports: Iterable[Hashable]) -> None:
        """
        Ensure every required port has a binding.

        Args:
            required_ports: Ports that must be bound

        Raises:
            UnregisteredPortError: Listing every missing port
        """
        missing = [port for port in required_ports if port not in self._factories]
        if missing:
            raise UnregisteredPortError(missing)

    def warm_up(self, ports: Optional[Iterable[Hashable]] = None) -> None:
        """
        Eagerly resolve ports so construction errors surface at startup.

        Args:
            ports: Ports to resolve (defaults to every registered port)
        """
        for port in list(ports if ports is not None else self._factories):
            self.resolve(port)

    def freeze(self) -> None:
        """Make the registry read-only; later registrations fail."""
        with self._lock:
            self._frozen = True
        self._logger.info(
            f"[{self.name}] Registry frozen with {len(self._factories)} binding(s)"
        )

    @property
    def is_frozen(self) -> bool:
        """Whether registration is closed."""
        return self._frozen

    def reset(self) -> None:
        """Drop all bindings and cached providers (useful for testing)."""
        with self._lock:
            self._factories.clear()
            self._instances.clear()
            self._resolving.clear()
            self._frozen = False
