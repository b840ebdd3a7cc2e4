"""Per-module service providers binding ports to implementations."""
from typing import List

from booking_platform.config.settings import Config
from booking_platform.infrastructure.service_providers.base import ServiceProvider
from booking_platform.infrastructure.service_providers.booking import BookingServiceProvider
from booking_platform.infrastructure.service_providers.foundation import (
    CONFIG_PORT,
    REDIS_CLIENT_PORT,
    FoundationServiceProvider,
)
from booking_platform.infrastructure.service_providers.payment import PaymentServiceProvider
from booking_platform.infrastructure.service_providers.user import UserServiceProvider


def default_providers(config: type[Config] = Config) -> List[ServiceProvider]:
    """Providers for every business module, Foundation first."""
    return [
        FoundationServiceProvider(config),
        UserServiceProvider(config),
        BookingServiceProvider(config),
        PaymentServiceProvider(config),
    ]


__all__ = [
    "CONFIG_PORT",
    "REDIS_CLIENT_PORT",
    "ServiceProvider",
    "FoundationServiceProvider",
    "UserServiceProvider",
    "BookingServiceProvider",
    "PaymentServiceProvider",
    "default_providers",
]
