"""Base class for per-module service providers (bootstrap step)."""
import logging
from abc import ABC, abstractmethod
from typing import Hashable, List

from booking_platform.config.settings import Config
from booking_platform.infrastructure.di.registry import PortRegistry


class ServiceProvider(ABC):
    """
    Binds the ports of one business module to concrete implementations.

    register() only records factories and must not resolve anything, since
    other modules may not be registered yet. boot() runs after every
    provider has registered.
    """

    name: str = "module"

    def __init__(self, config: type[Config] = Config):
        """
        Initialize provider.

        Args:
            config: Configuration class selecting implementations
        """
        self.config = config
        self._logger = logging.getLogger(__name__)

    @abstractmethod
    def register(self, registry: PortRegistry) -> None:
        """Record the module's bindings."""
        pass

    def boot(self, registry: PortRegistry) -> None:
        """Hook run once all providers have registered."""
        pass

    def provides(self) -> List[Hashable]:
        """Ports this provider is responsible for binding."""
        return []

    def requires(self) -> List[Hashable]:
        """Ports owned by other modules that this module depends on."""
        return []
