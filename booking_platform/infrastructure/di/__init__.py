"""Dependency Injection (Infrastructure Layer).

Port registry, service container and wiring errors.
"""
from booking_platform.infrastructure.di.exceptions import (
    CircularDependencyError,
    ConfigurationMismatchError,
    DuplicateRegistrationError,
    ProviderConstructionError,
    RegistryError,
    RegistryFrozenError,
    UnregisteredPortError,
)
from booking_platform.infrastructure.di.registry import PortRegistry
from booking_platform.infrastructure.di.service_container import ServiceContainer

__all__ = [
    "CircularDependencyError",
    "ConfigurationMismatchError",
    "DuplicateRegistrationError",
    "ProviderConstructionError",
    "RegistryError",
    "RegistryFrozenError",
    "UnregisteredPortError",
    "PortRegistry",
    "ServiceContainer",
]
