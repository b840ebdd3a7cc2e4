"""
Unit tests for the Celery worker bootstrap hook.

The worker_process_init signal is sent in-process; no broker is involved.
"""
import pytest
from celery.signals import worker_process_init

from booking_platform.config.settings import TestingConfig
from booking_platform.domain.interfaces import IPaymentGateway
from booking_platform.infrastructure import celery_app
from booking_platform.infrastructure.di import UnregisteredPortError
from booking_platform.infrastructure.di.service_container import ServiceContainer
from booking_platform.infrastructure.service_providers import (
    BookingServiceProvider,
    FoundationServiceProvider,
    UserServiceProvider,
)


class UnknownGatewayConfig(TestingConfig):
    PAYMENT_GATEWAY = "carrier-pigeon"


@pytest.fixture
def worker_config(monkeypatch):
    """Point the worker hook at a chosen configuration class."""
    def use(config):
        monkeypatch.setattr(celery_app, "get_config", lambda: config)
    return use


class TestWorkerBootstrap:

    def test_worker_process_is_wired(self, worker_config):
        worker_config(TestingConfig)

        worker_process_init.send(sender=None)

        container = ServiceContainer()
        assert container.is_bootstrapped
        assert container.config is TestingConfig
        assert container.resolve(IPaymentGateway) is not None

    def test_missing_module_stops_the_worker(self, worker_config, monkeypatch):
        worker_config(TestingConfig)
        monkeypatch.setattr(
            "booking_platform.infrastructure.service_providers.default_providers",
            lambda config: [
                FoundationServiceProvider(config),
                UserServiceProvider(config),
                BookingServiceProvider(config),
            ],
        )

        with pytest.raises(SystemExit) as exc_info:
            worker_process_init.send(sender=None)

        assert exc_info.value.code == 1
        assert isinstance(exc_info.value.__cause__, UnregisteredPortError)
        assert not ServiceContainer().is_bootstrapped

    def test_invalid_config_stops_the_worker(self, worker_config):
        worker_config(UnknownGatewayConfig)

        with pytest.raises(SystemExit) as exc_info:
            worker_process_init.send(sender=None)

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert not ServiceContainer().is_bootstrapped
