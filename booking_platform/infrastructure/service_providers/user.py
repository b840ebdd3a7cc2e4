"""User module service provider."""
from typing import Hashable, List

from booking_platform.adapters.presenters.user_presenter import UserPresenter
from booking_platform.application.use_cases.register_user_use_case import (
    GetUserUseCase,
    RegisterUserUseCase,
)
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.presenter import IUserPresenter
from booking_platform.domain.interfaces.user_repository import IUserRepository
from booking_platform.infrastructure.di.registry import PortRegistry
from booking_platform.infrastructure.factories.adapter_factory import AdapterFactory
from booking_platform.infrastructure.service_providers.base import ServiceProvider
from booking_platform.infrastructure.service_providers.foundation import (
    REDIS_CLIENT_PORT,
    uses_redis,
)


class UserServiceProvider(ServiceProvider):
    """Binds user storage, presenter and use cases."""

    name = "user"

    def register(self, registry: PortRegistry) -> None:
        storage = self.config.STORAGE_BACKEND

        def user_repository(r: PortRegistry) -> IUserRepository:
            client = r.resolve(REDIS_CLIENT_PORT) if uses_redis(self.config) else None
            return AdapterFactory.create_user_repository(storage, client)

        registry.register(IUserRepository, user_repository)
        registry.register(IUserPresenter, lambda r: UserPresenter())
        registry.register(
            RegisterUserUseCase,
            lambda r: RegisterUserUseCase(
                user_repository=r.resolve(IUserRepository),
                clock=r.resolve(IClock),
                id_generator=r.resolve(IIdGenerator),
            ),
        )
        registry.register(GetUserUseCase, lambda r: GetUserUseCase(r.resolve(IUserRepository)))

    def provides(self) -> List[Hashable]:
        return [IUserRepository, IUserPresenter, RegisterUserUseCase, GetUserUseCase]

    def requires(self) -> List[Hashable]:
        return [IClock, IIdGenerator]
