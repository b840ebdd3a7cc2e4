"""Foundation module service provider (clock, ids, shared clients)."""
from typing import Hashable, List

from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.infrastructure.di.registry import PortRegistry
from booking_platform.infrastructure.foundation.system_clock import SystemClock
from booking_platform.infrastructure.foundation.uuid_id_generator import UuidIdGenerator
from booking_platform.infrastructure.redis_client import RedisClientFactory
from booking_platform.infrastructure.service_providers.base import ServiceProvider


CONFIG_PORT = "config"
REDIS_CLIENT_PORT = "redis.client"


def uses_redis(config) -> bool:
    """Whether the configured storage backend needs Redis."""
    return config.STORAGE_BACKEND.lower() == "redis"


class FoundationServiceProvider(ServiceProvider):
    """Binds cross-cutting ports every other module relies on."""

    name = "foundation"

    def register(self, registry: PortRegistry) -> None:
        config = self.config
        registry.register_instance(CONFIG_PORT, config)
        registry.register(IClock, lambda r: SystemClock())
        registry.register(IIdGenerator, lambda r: UuidIdGenerator())

        # Only bound when needed so memory-backed deployments never dial Redis
        if uses_redis(config):
            registry.register(
                REDIS_CLIENT_PORT,
                lambda r: RedisClientFactory.get_client(config.REDIS_URL),
            )

    def provides(self) -> List[Hashable]:
        ports: List[Hashable] = [CONFIG_PORT, IClock, IIdGenerator]
        if uses_redis(self.config):
            ports.append(REDIS_CLIENT_PORT)
        return ports
