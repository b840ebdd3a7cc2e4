"""Payment module service provider."""
from typing import Hashable, List

from booking_platform.adapters.presenters.payment_presenter import PaymentPresenter
from booking_platform.application.use_cases.pay_for_booking_use_case import (
    ListBookingPaymentsUseCase,
    PayForBookingUseCase,
)
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.payment_gateway import IPaymentGateway
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository
from booking_platform.domain.interfaces.presenter import IPaymentPresenter
from booking_platform.infrastructure.di.registry import PortRegistry
from booking_platform.infrastructure.factories.adapter_factory import AdapterFactory
from booking_platform.infrastructure.service_providers.base import ServiceProvider
from booking_platform.infrastructure.service_providers.foundation import (
    REDIS_CLIENT_PORT,
    uses_redis,
)


class PaymentServiceProvider(ServiceProvider):
    """Binds payment storage, gateway, presenter and use cases."""

    name = "payment"

    def register(self, registry: PortRegistry) -> None:
        config = self.config

        def payment_repository(r: PortRegistry) -> IPaymentRepository:
            client = r.resolve(REDIS_CLIENT_PORT) if uses_redis(config) else None
            return AdapterFactory.create_payment_repository(config.STORAGE_BACKEND, client)

        registry.register(IPaymentRepository, payment_repository)
        registry.register(
            IPaymentGateway,
            lambda r: AdapterFactory.create_payment_gateway(config.PAYMENT_GATEWAY, config),
        )
        registry.register(IPaymentPresenter, lambda r: PaymentPresenter())
        registry.register(
            PayForBookingUseCase,
            lambda r: PayForBookingUseCase(
                booking_repository=r.resolve(IBookingRepository),
                payment_repository=r.resolve(IPaymentRepository),
                payment_gateway=r.resolve(IPaymentGateway),
                clock=r.resolve(IClock),
                id_generator=r.resolve(IIdGenerator),
            ),
        )
        registry.register(
            ListBookingPaymentsUseCase,
            lambda r: ListBookingPaymentsUseCase(
                booking_repository=r.resolve(IBookingRepository),
                payment_repository=r.resolve(IPaymentRepository),
            ),
        )

    def boot(self, registry: PortRegistry) -> None:
        self._logger.info(f"Payment module ready (gateway={self.config.PAYMENT_GATEWAY})")

    def provides(self) -> List[Hashable]:
        return [
            IPaymentRepository,
            IPaymentGateway,
            IPaymentPresenter,
            PayForBookingUseCase,
            ListBookingPaymentsUseCase,
        ]

    def requires(self) -> List[Hashable]:
        return [IBookingRepository, IClock, IIdGenerator]
