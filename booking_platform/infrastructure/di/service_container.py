"""Service container for dependency injection (IoC Container Pattern)."""
import logging
import threading
from typing import Any, Hashable, List, Optional, Sequence

from booking_platform.config.settings import Config, get_config
from booking_platform.infrastructure.di.exceptions import ConfigurationMismatchError, RegistryError
from booking_platform.infrastructure.di.registry import PortRegistry


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern and Dependency Inversion Principle. Owns the
    process-wide PortRegistry and runs the service providers of every
    module exactly once. Any missing or duplicate binding aborts bootstrap.
    """

    _instance: Optional["ServiceContainer"] = None
    _lock = threading.Lock()

    def __new__(cls):
        """Singleton pattern implementation."""
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._initialized = False
                cls._instance = instance
        return cls._instance

    def __init__(self):
        """Initialize service container (only the first time)."""
        if self._initialized:
            return
        self._logger = logging.getLogger(__name__)
        self.registry = PortRegistry(name="app")
        self.config: type[Config] = Config
        self._providers: List[Any] = []
        self._bootstrapped = False
        self._bootstrap_lock = threading.Lock()
        self._initialized = True

    @property
    def is_bootstrapped(self) -> bool:
        """Whether bootstrap() has completed."""
        return self._bootstrapped

    @property
    def providers(self) -> List[Any]:
        """Service providers that ran during bootstrap."""
        return list(self._providers)

    def bootstrap(
        self,
        config: Optional[type[Config]] = None,
        providers: Optional[Sequence[Any]] = None,
        warm_up: bool = True
    ) -> "ServiceContainer":
        """
        Register, boot and verify every module, then freeze the registry.

        Idempotent: later calls with the same (or no) config return immediately.

        Args:
            config: Configuration class (defaults to get_config())
            providers: Service providers (defaults to every business module)
            warm_up: Construct every provider now so failures surface at startup

        Returns:
            The container

        Raises:
            RegistryError: On any wiring mistake (startup-fatal)
            ConfigurationMismatchError: If already bootstrapped with another config
        """
        with self._bootstrap_lock:
            if self._bootstrapped:
                if config is not None and config is not self.config:
                    raise ConfigurationMismatchError(self.config, config)
                return self

            # Imported here: providers import the whole application graph
            from booking_platform.infrastructure.service_providers import default_providers

            self.config = config or get_config()
            providers = list(providers) if providers is not None else default_providers(self.config)

            try:
                for provider in providers:
                    provider.register(self.registry)
                    self._logger.info(f"Service provider '{provider.name}' registered")

                for provider in providers:
                    provider.boot(self.registry)

                required: List[Hashable] = []
                for provider in providers:
                    required.extend(provider.provides())
                    required.extend(provider.requires())
                self.registry.verify(required)
                self.registry.freeze()

                if warm_up:
                    self.registry.warm_up()
            except RegistryError as e:
                self._logger.critical(f"Service container bootstrap failed: {e}")
                # Leave nothing half-wired behind
                self.registry.reset()
                raise

            self._providers = providers
            self._bootstrapped = True
            self._logger.info(
                f"Service container ready with {len(self.registry.registered_ports())} bindings"
            )
            return self

    def resolve(self, port: Hashable) -> Any:
        """
        Get the provider bound to a port, bootstrapping on first use.

        Args:
            port: Port identifier (interface, use case class or name)

        Returns:
            Provider instance
        """
        if not self._bootstrapped:
            self._logger.debug("Service container used before bootstrap; bootstrapping now")
            self.bootstrap()
        return self.registry.resolve(port)

    @classmethod
    def reset(cls) -> None:
        """Reset the container and all service instances (useful for testing)."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.registry.reset()
            cls._instance = None
