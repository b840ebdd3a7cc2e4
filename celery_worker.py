"""Celery worker entry point.

Run with: celery -A celery_worker worker --loglevel=info
"""
import sys
import logging

# Configure logging BEFORE importing Celery so every log goes to stdout
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True
)

from booking_platform.infrastructure.celery_app import celery_app  # noqa: E402

if __name__ == "__main__":
    celery_app.start()
