"""Celery application factory following Factory Pattern."""
import logging

from celery import Celery
from celery.signals import worker_process_init

from booking_platform.config.settings import Config, get_config
from booking_platform.infrastructure.di.exceptions import RegistryError

logger = logging.getLogger(__name__)


def create_celery_app(config: type[Config] = Config, flask_app=None) -> Celery:
    """
    Create and configure Celery application.

    Args:
        config: Configuration class with broker settings
        flask_app: Optional Flask app instance

    Returns:
        Configured Celery instance
    """
    celery = Celery(
        "booking_platform",
        broker=config.CELERY_BROKER_URL,
        backend=config.CELERY_RESULT_BACKEND,
        include=["booking_platform.tasks.payment_tasks"]
    )

    celery.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        task_track_started=True,
        task_time_limit=120,
        task_soft_time_limit=90,
        worker_prefetch_multiplier=1,
        worker_max_tasks_per_child=1000,
        task_acks_late=True,
        task_reject_on_worker_lost=True,
        task_ignore_result=True,
        worker_log_format="[%(asctime)s: %(levelname)s/%(processName)s] %(message)s",
        worker_task_log_format="[%(asctime)s: %(levelname)s/%(processName)s][%(task_name)s(%(task_id)s)] %(message)s",
        worker_hijack_root_logger=False,
    )

    if flask_app is not None:
        celery.conf.update(flask_app.config)

    return celery


@worker_process_init.connect
def bootstrap_worker(**kwargs) -> None:
    """
    Wire every module before a worker process accepts tasks.

    Celery logs and swallows exceptions raised by signal receivers, so a
    wiring error is turned into SystemExit to stop the worker process.
    """
    from booking_platform.infrastructure.di.service_container import ServiceContainer

    config = get_config()
    try:
        config.validate()
        ServiceContainer().bootstrap(config=config)
    except (RegistryError, ValueError) as e:
        logger.critical(f"Refusing to start Celery worker: {e}")
        raise SystemExit(1) from e


# Create default Celery instance
celery_app = create_celery_app()
