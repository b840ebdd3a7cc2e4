"""Factories (Infrastructure Layer)."""
from booking_platform.infrastructure.factories.adapter_factory import AdapterFactory

__all__ = ["AdapterFactory"]
