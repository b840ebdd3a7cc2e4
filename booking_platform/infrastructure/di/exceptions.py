"""Errors raised by the port registry.

All of these signal a wiring mistake. They are fatal at startup and are never
recovered from at request time.
"""
from typing import Any, Iterable


def describe_port(port: Any) -> str:
    """Human readable name for a port identifier."""
    return getattr(port, "__name__", None) or str(port)


class RegistryError(Exception):
    """Base class for registry misconfiguration."""


class DuplicateRegistrationError(RegistryError):
    """Raised when a port is bound twice without an explicit override."""

    def __init__(self, port: Any):
        self.port = port
        super().__init__(
            f"Port '{describe_port(port)}' is already registered; "
            f"pass override=True to replace the binding"
        )


class UnregisteredPortError(RegistryError):
    """Raised when resolving (or verifying) ports that have no binding."""

    def __init__(self, ports: Iterable[Any]):
        self.ports = list(ports)
        names = ", ".join(describe_port(port) for port in self.ports)
        super().__init__(f"No provider registered for port(s): {names}")


class CircularDependencyError(RegistryError):
    """Raised when a factory transitively resolves the port it is building."""

    def __init__(self, chain: Iterable[Any]):
        self.chain = list(chain)
        path = " -> ".join(describe_port(port) for port in self.chain)
        super().__init__(f"Circular dependency detected: {path}")


class RegistryFrozenError(RegistryError):
    """Raised when registering after the bootstrap phase has finished."""

    def __init__(self, port: Any):
        self.port = port
        super().__init__(
            f"Cannot register '{describe_port(port)}': registry is frozen"
        )


class ProviderConstructionError(RegistryError):
    """Raised when a factory fails while building a provider."""

    def __init__(self, port: Any, cause: Exception):
        self.port = port
        self.cause = cause
        super().__init__(
            f"Failed to construct provider for '{describe_port(port)}': {cause}"
        )


class ConfigurationMismatchError(RegistryError):
    """Raised when a bootstrapped container is asked to wire a different config."""

    def __init__(self, bound: Any, requested: Any):
        self.bound = bound
        self.requested = requested
        super().__init__(
            f"Service container already bootstrapped with {describe_port(bound)}; "
            f"refusing to serve {describe_port(requested)} with those implementations"
        )
