"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Storage backend for repositories: "memory" or "redis"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory")

    # Payment gateway: "fake" or "http"
    PAYMENT_GATEWAY: str = os.getenv("PAYMENT_GATEWAY", "fake")
    PAYMENT_GATEWAY_URL: Optional[str] = os.getenv("PAYMENT_GATEWAY_URL")
    PAYMENT_GATEWAY_API_KEY: Optional[str] = os.getenv("PAYMENT_GATEWAY_API_KEY")
    PAYMENT_GATEWAY_TIMEOUT: int = int(os.getenv("PAYMENT_GATEWAY_TIMEOUT", "30"))
    FAKE_GATEWAY_DECLINE_ABOVE: Optional[float] = (
        float(os.getenv("FAKE_GATEWAY_DECLINE_ABOVE"))
        if os.getenv("FAKE_GATEWAY_DECLINE_ABOVE") else None
    )
    ASYNC_PAYMENTS: bool = os.getenv("ASYNC_PAYMENTS", "false").lower() == "true"

    # Booking defaults
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "USD")

    # Redis Configuration
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Celery Configuration
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/1")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")

    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    TESTING: bool = False
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        errors = []

        if cls.STORAGE_BACKEND.lower() not in ("memory", "redis"):
            errors.append(f"STORAGE_BACKEND must be 'memory' or 'redis', got '{cls.STORAGE_BACKEND}'")

        gateway = cls.PAYMENT_GATEWAY.lower()
        if gateway not in ("fake", "http"):
            errors.append(f"PAYMENT_GATEWAY must be 'fake' or 'http', got '{cls.PAYMENT_GATEWAY}'")
        elif gateway == "http":
            missing = [
                name for name, value in (
                    ("PAYMENT_GATEWAY_URL", cls.PAYMENT_GATEWAY_URL),
                    ("PAYMENT_GATEWAY_API_KEY", cls.PAYMENT_GATEWAY_API_KEY),
                ) if not value
            ]
            if missing:
                errors.append(f"Missing required environment variables: {', '.join(missing)}")

        if errors:
            raise ValueError("; ".join(errors))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    STORAGE_BACKEND = "memory"
    PAYMENT_GATEWAY = "fake"
    FAKE_GATEWAY_DECLINE_ABOVE = 10000.0
    ASYNC_PAYMENTS = False
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    SENTRY_DSN = None
    REDIS_URL = "redis://localhost:6379/15"  # Use different DB for tests


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
