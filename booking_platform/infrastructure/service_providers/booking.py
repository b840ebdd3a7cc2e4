"""Booking module service provider."""
from typing import Hashable, List

from booking_platform.adapters.presenters.booking_presenter import BookingPresenter
from booking_platform.application.use_cases.cancel_booking_use_case import CancelBookingUseCase
from booking_platform.application.use_cases.create_booking_use_case import CreateBookingUseCase
from booking_platform.application.use_cases.get_booking_use_case import (
    GetBookingUseCase,
    ListUserBookingsUseCase,
)
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.payment_gateway import IPaymentGateway
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository
from booking_platform.domain.interfaces.presenter import IBookingPresenter
from booking_platform.domain.interfaces.user_repository import IUserRepository
from booking_platform.infrastructure.di.registry import PortRegistry
from booking_platform.infrastructure.factories.adapter_factory import AdapterFactory
from booking_platform.infrastructure.service_providers.base import ServiceProvider
from booking_platform.infrastructure.service_providers.foundation import (
    REDIS_CLIENT_PORT,
    uses_redis,
)


class BookingServiceProvider(ServiceProvider):
    """Binds booking storage, presenter and use cases."""

    name = "booking"

    def register(self, registry: PortRegistry) -> None:
        storage = self.config.STORAGE_BACKEND
        currency = self.config.DEFAULT_CURRENCY

        def booking_repository(r: PortRegistry) -> IBookingRepository:
            client = r.resolve(REDIS_CLIENT_PORT) if uses_redis(self.config) else None
            return AdapterFactory.create_booking_repository(storage, client)

        registry.register(IBookingRepository, booking_repository)
        registry.register(IBookingPresenter, lambda r: BookingPresenter())
        registry.register(
            CreateBookingUseCase,
            lambda r: CreateBookingUseCase(
                booking_repository=r.resolve(IBookingRepository),
                user_repository=r.resolve(IUserRepository),
                clock=r.resolve(IClock),
                id_generator=r.resolve(IIdGenerator),
                default_currency=currency,
            ),
        )
        registry.register(GetBookingUseCase, lambda r: GetBookingUseCase(r.resolve(IBookingRepository)))
        registry.register(
            ListUserBookingsUseCase,
            lambda r: ListUserBookingsUseCase(r.resolve(IBookingRepository)),
        )
        registry.register(
            CancelBookingUseCase,
            lambda r: CancelBookingUseCase(
                booking_repository=r.resolve(IBookingRepository),
                payment_repository=r.resolve(IPaymentRepository),
                payment_gateway=r.resolve(IPaymentGateway),
                clock=r.resolve(IClock),
            ),
        )

    def boot(self, registry: PortRegistry) -> None:
        self._logger.info(f"Booking module ready (storage={self.config.STORAGE_BACKEND})")

    def provides(self) -> List[Hashable]:
        return [
            IBookingRepository,
            IBookingPresenter,
            CreateBookingUseCase,
            GetBookingUseCase,
            ListUserBookingsUseCase,
            CancelBookingUseCase,
        ]

    def requires(self) -> List[Hashable]:
        return [IUserRepository, IPaymentRepository, IPaymentGateway, IClock, IIdGenerator]
